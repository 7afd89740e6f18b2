from dataclasses import dataclass

@dataclass(slots=True)
class Board:
    tile_count: int
    rows: int
    cols: int
