from esper import World

from squaregame.components.board import Board
from squaregame.components.board_position import BoardPosition
from squaregame.components.tile import Tile
from squaregame.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TILE_TAP
from squaregame.ui.layout import cell_at_point, compute_board_geometry

LEFT_BUTTON = 1


class InputSystem:
    """Maps left clicks on the board to tile taps; everything else is dropped."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        if kwargs.get('button') != LEFT_BUTTON:
            return
        board = self._board()
        if board is None or board.tile_count == 0:
            return
        geometry = compute_board_geometry(self.window.width, self.window.height, board.rows, board.cols)
        cell = cell_at_point(x, y, board.rows, board.cols, geometry)
        if cell is None:
            return
        tile_id = self._tile_id_at(*cell)
        if tile_id is not None:
            self.event_bus.emit(EVENT_TILE_TAP, tile_id=tile_id)

    def _board(self):
        for _, board in self.world.get_component(Board):
            return board
        return None

    def _tile_id_at(self, row: int, col: int):
        for _, (tile, position) in self.world.get_components(Tile, BoardPosition):
            if position.row == row and position.col == col:
                return tile.tile_id
        return None
