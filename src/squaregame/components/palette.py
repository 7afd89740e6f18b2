from dataclasses import dataclass
from typing import Dict, List, Tuple

@dataclass(slots=True)
class Palette:
    """Canonical tile colors stored on a single registry entity.

    Tiles carry only the color name; RGB lookup for rendering goes through here.
    """
    colors: Dict[str, Tuple[int, int, int]]

    def names(self) -> List[str]:
        return list(self.colors.keys())

    def rgb_for(self, name: str) -> Tuple[int, int, int]:
        return self.colors[name]

    def __len__(self) -> int:
        return len(self.colors)
