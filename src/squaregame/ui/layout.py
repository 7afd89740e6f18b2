from typing import Optional, Tuple

from squaregame.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    HUD_HEIGHT,
    MIN_TILE_SIZE,
)


def compute_board_geometry(window_width: int, window_height: int, rows: int, cols: int):
    """Return (tile_size, start_x, start_y) for a rows x cols board.

    Shared by the renderer and the input system so hit-testing always agrees with
    what is drawn. The board is centred horizontally between the bottom margin and
    the HUD strip.
    """
    rows = max(1, rows)
    cols = max(1, cols)
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - HUD_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / cols, max_board_h / rows))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_origin(row: int, rows: int, col: int, geometry) -> Tuple[float, float]:
    """Bottom-left corner of a cell; row 0 is drawn at the top."""
    tile_size, start_x, start_y = geometry
    return start_x + col * tile_size, start_y + (rows - 1 - row) * tile_size


def cell_at_point(x: float, y: float, rows: int, cols: int, geometry) -> Optional[Tuple[int, int]]:
    tile_size, start_x, start_y = geometry
    if x < start_x or x >= start_x + cols * tile_size:
        return None
    if y < start_y or y >= start_y + rows * tile_size:
        return None
    col = int((x - start_x) // tile_size)
    row_from_bottom = int((y - start_y) // tile_size)
    row = rows - 1 - row_from_bottom
    if 0 <= row < rows and 0 <= col < cols:
        return row, col
    return None
