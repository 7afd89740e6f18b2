"""Tile deck generation.

A deck for ``tile_count`` tiles draws ``tile_count // 2`` distinct colors from the
palette and lays each down twice. Odd counts get one filler tile whose color wraps
around into the drawn colors; the filler is flagged so it never takes part in a
match. Tile ids come from the caller's id source; each board keeps its own
counter, so ids of an old grid never reappear on a new one. Standalone calls
fall back to a module counter.
"""
from __future__ import annotations

import itertools
import math
import random
from typing import Iterator, List, Sequence

from squaregame.components.tile import Tile
from squaregame.errors import InsufficientPaletteError

_default_rng = random.Random()
_tile_ids: Iterator[int] = itertools.count(1)


def required_colors(tile_count: int) -> int:
    return math.ceil(tile_count / 2)


def generate_deck(
    tile_count: int,
    palette: Sequence[str],
    *,
    rng: random.Random | None = None,
    id_source: Iterator[int] | None = None,
) -> List[Tile]:
    if tile_count < 2:
        raise ValueError(f"tile_count must be at least 2, got {tile_count}")
    colors = list(dict.fromkeys(palette))
    needed = required_colors(tile_count)
    if len(colors) < needed:
        raise InsufficientPaletteError(tile_count, needed, len(colors))
    rng = rng or _default_rng
    ids = id_source if id_source is not None else _tile_ids

    pair_count = tile_count // 2
    selected = rng.sample(colors, pair_count)
    faces: List[tuple[str, bool]] = []
    for color in selected:
        faces.append((color, False))
        faces.append((color, False))
    if tile_count % 2:
        faces.append((selected[tile_count % pair_count], True))
    rng.shuffle(faces)
    return [Tile(tile_id=next(ids), color=color, filler=filler) for color, filler in faces]
