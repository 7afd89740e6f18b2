import itertools
import math
import random
from typing import Iterator, List, Optional, Tuple

from esper import World

from squaregame.components.board import Board
from squaregame.components.board_position import BoardPosition
from squaregame.components.tile import Tile
from squaregame.events.bus import EventBus, EVENT_GRID_GENERATED
from squaregame.systems.deck import generate_deck
from squaregame.utils.game_state import get_game_state, get_palette, get_selection


def grid_shape(tile_count: int) -> Tuple[int, int]:
    """Return (rows, cols) for the most square layout holding ``tile_count`` tiles."""
    cols = max(1, math.ceil(math.sqrt(tile_count)))
    rows = math.ceil(tile_count / cols)
    return rows, cols


class BoardSystem:
    """Owns the tile entities of the live grid.

    Regenerating the grid deletes every tile entity, bumps the board generation so
    deferred actions aimed at the old tiles become inert, and empties the selection.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
        id_source: Iterator[int] | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        # Per-session ids so tiles of an old grid never share an id with the new one.
        self._id_source = id_source if id_source is not None else itertools.count(1)
        self.board_entity = self.world.create_entity(Board(tile_count=0, rows=0, cols=0))

    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def spawn_grid(self, tile_count: int, *, reason: str = "new_grid") -> List[int]:
        palette = get_palette(self.world)
        # Generate before clearing so a palette error leaves the old grid intact.
        deck = generate_deck(tile_count, palette.names(), rng=self._rng, id_source=self._id_source)
        self.clear_grid()
        rows, cols = grid_shape(tile_count)
        for index, tile in enumerate(deck):
            self.world.create_entity(tile, BoardPosition(row=index // cols, col=index % cols))
        board = self.board()
        board.tile_count = tile_count
        board.rows = rows
        board.cols = cols
        state = get_game_state(self.world)
        state.generation += 1
        state.grid_tile_count = tile_count
        get_selection(self.world).clear()
        tile_ids = [tile.tile_id for tile in deck]
        self.event_bus.emit(
            EVENT_GRID_GENERATED,
            tile_ids=tile_ids,
            tile_count=tile_count,
            generation=state.generation,
            reason=reason,
        )
        return tile_ids

    def clear_grid(self) -> None:
        for entity in [ent for ent, _ in self.world.get_component(Tile)]:
            self.world.delete_entity(entity, immediate=True)

    def tile_at(self, row: int, col: int) -> Optional[Tile]:
        for entity, position in self.world.get_component(BoardPosition):
            if position.row == row and position.col == col:
                return self.world.component_for_entity(entity, Tile)
        return None
