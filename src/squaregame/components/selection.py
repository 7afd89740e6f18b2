from dataclasses import dataclass, field
from typing import List

@dataclass(slots=True)
class Selection:
    """Tiles revealed by the player and awaiting evaluation (at most two)."""
    tile_ids: List[int] = field(default_factory=list)

    def clear(self) -> None:
        self.tile_ids.clear()
