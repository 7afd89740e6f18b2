from __future__ import annotations

import random
from collections import defaultdict
from typing import Dict, List, Tuple

from squaregame.config import GameConfig
from squaregame.session import GameSession
from squaregame.utils.snapshot import GameSnapshot

SMALL_PALETTE = {
    'red': (255, 0, 0),
    'green': (0, 255, 0),
    'blue': (0, 0, 255),
}


def make_session(seed: int = 7, *, store=None, player_name: str = "Player", **overrides) -> GameSession:
    """Session on a small deterministic board; pass GameConfig fields to override."""
    settings = dict(start_tile_count=4, tile_count_step=2, palette=dict(SMALL_PALETTE))
    settings.update(overrides)
    return GameSession(
        GameConfig(**settings),
        rng=random.Random(seed),
        store=store,
        player_name=player_name,
    )


def tiles_by_color(snapshot: GameSnapshot) -> Dict[str, List[int]]:
    groups: Dict[str, List[int]] = defaultdict(list)
    for view in snapshot.tiles:
        if not view.filler and not view.matched:
            groups[view.color].append(view.tile_id)
    return dict(groups)


def matching_pair(snapshot: GameSnapshot) -> Tuple[int, int]:
    for ids in tiles_by_color(snapshot).values():
        if len(ids) >= 2:
            return ids[0], ids[1]
    raise AssertionError("no unmatched pair left on the board")


def mismatched_pair(snapshot: GameSnapshot) -> Tuple[int, int]:
    groups = list(tiles_by_color(snapshot).values())
    if len(groups) < 2:
        raise AssertionError("board needs two colors for a mismatch")
    return groups[0][0], groups[1][0]


def match_one_pair(session: GameSession) -> None:
    first, second = matching_pair(session.snapshot())
    session.tap(first)
    session.tap(second)


def clear_board(session: GameSession) -> None:
    generation_tiles = {view.tile_id for view in session.snapshot().tiles}
    while True:
        snapshot = session.snapshot()
        if {view.tile_id for view in snapshot.tiles} != generation_tiles:
            return
        if not tiles_by_color(snapshot):
            return
        match_one_pair(session)
