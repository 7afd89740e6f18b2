import itertools

from squaregame.components.tile import Tile
from squaregame.systems.match import MatchResult, MatchSystem, evaluate

COLORS = ["red", "green", "blue"]


def _tile(tile_id, color, **flags):
    return Tile(tile_id=tile_id, color=color, **flags)


def test_equal_colors_match():
    assert evaluate(_tile(1, "red"), _tile(2, "red")) is MatchResult.MATCHED


def test_different_colors_mismatch():
    assert evaluate(_tile(1, "red"), _tile(2, "blue")) is MatchResult.MISMATCHED


def test_evaluate_is_symmetric_and_deterministic():
    for a, b in itertools.product(COLORS, repeat=2):
        first, second = _tile(1, a), _tile(2, b)
        assert evaluate(first, second) is evaluate(second, first)
        assert evaluate(first, second) is evaluate(_tile(3, a), _tile(4, b))


def test_evaluate_ignores_reveal_flags():
    assert evaluate(_tile(1, "red", revealed=True), _tile(2, "red")) is MatchResult.MATCHED


def test_resolve_marks_matched_tiles():
    first, second = _tile(1, "red", revealed=True), _tile(2, "red", revealed=True)

    assert MatchSystem.resolve(first, second) is MatchResult.MATCHED
    assert first.matched and second.matched
    assert first.revealed and second.revealed


def test_resolve_leaves_mismatched_tiles_unmatched():
    first, second = _tile(1, "red", revealed=True), _tile(2, "blue", revealed=True)

    assert MatchSystem.resolve(first, second) is MatchResult.MISMATCHED
    assert not first.matched and not second.matched
    assert first.revealed and second.revealed
