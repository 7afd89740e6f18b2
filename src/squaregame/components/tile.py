from dataclasses import dataclass

@dataclass(slots=True)
class Tile:
    """A single grid cell.

    ``tile_id`` is drawn from a monotonic id source and never repeats across grids,
    so a stale render can never address a tile from a newer board. ``filler`` marks
    the one partner-less padding tile of an odd-sized grid; it is never selectable.
    """
    tile_id: int
    color: str
    revealed: bool = False
    matched: bool = False
    filler: bool = False
