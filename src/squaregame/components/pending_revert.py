from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class PendingRevert:
    """One-shot deferred action that turns a mismatched pair face down.

    Only applied while the board ``generation`` it was scheduled for is still live.
    """
    tile_ids: Tuple[int, ...]
    remaining: float
    generation: int
