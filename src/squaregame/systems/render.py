from esper import World

from squaregame.constants import HUD_HEIGHT, TILE_PADDING
from squaregame.events.bus import EventBus, EVENT_STATE_CHANGED
from squaregame.ui.layout import cell_origin, compute_board_geometry
from squaregame.utils.game_state import get_palette
from squaregame.utils.snapshot import GameSnapshot

FACE_DOWN_COLOR = (60, 64, 72)
FILLER_COLOR = (30, 32, 36)
MATCHED_OUTLINE = (255, 215, 0)
TEXT_COLOR = (235, 235, 235)


class RenderSystem:
    """Draws the latest published snapshot; never reads mutable tile state."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.snapshot: GameSnapshot | None = None
        self.event_bus.subscribe(EVENT_STATE_CHANGED, self.on_state_changed)

    def on_state_changed(self, sender, **kwargs):
        self.snapshot = kwargs.get('snapshot')

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        snapshot = self.snapshot
        if snapshot is None:
            arcade.draw_text(
                "Press Enter to start",
                self.window.width / 2,
                self.window.height / 2,
                TEXT_COLOR,
                20,
                anchor_x="center",
            )
            return
        palette = get_palette(self.world)
        rows = max((view.row for view in snapshot.tiles), default=-1) + 1
        cols = max((view.col for view in snapshot.tiles), default=-1) + 1
        geometry = compute_board_geometry(self.window.width, self.window.height, rows, cols)
        tile_size = geometry[0]
        inner = tile_size - 2 * TILE_PADDING
        for view in snapshot.tiles:
            left, bottom = cell_origin(view.row, rows, view.col, geometry)
            if view.filler:
                color = FILLER_COLOR
            elif view.revealed or view.matched:
                color = palette.rgb_for(view.color)
            else:
                color = FACE_DOWN_COLOR
            arcade.draw_lbwh_rectangle_filled(left + TILE_PADDING, bottom + TILE_PADDING, inner, inner, color)
            if view.matched:
                arcade.draw_lbwh_rectangle_outline(
                    left + TILE_PADDING, bottom + TILE_PADDING, inner, inner, MATCHED_OUTLINE, 3
                )
        self._draw_hud(arcade, snapshot)

    def _draw_hud(self, arcade, snapshot: GameSnapshot):
        top = self.window.height - HUD_HEIGHT / 2
        arcade.draw_text(f"Score {snapshot.score}", 20, top, TEXT_COLOR, 16)
        arcade.draw_text(
            f"Level {snapshot.level}  Pairs {snapshot.matches_this_round}/{snapshot.match_goal}",
            self.window.width / 2,
            top,
            TEXT_COLOR,
            16,
            anchor_x="center",
        )
        arcade.draw_text(
            f"Time {snapshot.time_remaining}",
            self.window.width - 20,
            top,
            TEXT_COLOR,
            16,
            anchor_x="right",
        )
        if snapshot.message:
            arcade.draw_text(
                snapshot.message,
                self.window.width / 2,
                top - 26,
                TEXT_COLOR,
                13,
                anchor_x="center",
            )
