"""Board arrangement, move, and solved-predicate tests."""

from __future__ import annotations

import itertools

import pytest

from mosaic.models.board import SOLUTION, Board, is_solved
from mosaic.models.errors import InvalidIndexError
from mosaic.models.tile import Tile

SCRAMBLED = [3, 1, 2, 5, 4, 6, 9, 7, 8]


# -- helpers ------------------------------------------------------------------


def _assert_permutation(board: Board) -> None:
    assert sorted(board.ids) == list(range(1, 10))


def _half_turned_solution() -> Board:
    """The solved board spun 180° as a whole: every tile moved and turned."""
    return Board(tiles=tuple(Tile(t.id, 180) for t in reversed(SOLUTION.tiles)))


# -- construction -------------------------------------------------------------


def test_solution_is_canonical() -> None:
    assert SOLUTION.ids == list(range(1, 10))
    assert SOLUTION.rotations == [0] * 9


def test_from_ids_defaults_to_upright() -> None:
    board = Board.from_ids(SCRAMBLED)
    assert board.ids == SCRAMBLED
    assert board.rotations == [0] * 9


@pytest.mark.parametrize(
    "ids",
    [
        [1, 2, 3, 4, 5, 6, 7, 8],
        [1, 1, 3, 4, 5, 6, 7, 8, 9],
        [0, 2, 3, 4, 5, 6, 7, 8, 9],
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10],
    ],
)
def test_invalid_arrangement_rejected(ids: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_ids(ids)


def test_rotation_count_must_match() -> None:
    with pytest.raises(ValueError):
        Board.from_ids(SCRAMBLED, [0, 90])


@pytest.mark.parametrize("rotation", [45, 1, -30, 359, 910])
def test_partial_turn_rejected(rotation: int) -> None:
    with pytest.raises(ValueError):
        Board.from_ids(SCRAMBLED, [rotation] * 9)
    with pytest.raises(ValueError):
        Board.from_ids(SCRAMBLED, [0] * 8 + [rotation])


# -- swap ---------------------------------------------------------------------


def test_swap_exchanges_tiles_with_their_rotation() -> None:
    board = Board.from_ids(SCRAMBLED, [0, 90, 0, 0, 0, 0, 0, 0, 270])
    swapped = board.swap(1, 8)
    assert swapped.tiles[1] == Tile(8, 270)
    assert swapped.tiles[8] == Tile(1, 90)


def test_swap_does_not_modify_original() -> None:
    board = Board.from_ids(SCRAMBLED)
    board.swap(0, 1)
    assert board.ids == SCRAMBLED


def test_swap_same_cell_is_noop() -> None:
    board = Board.from_ids(SCRAMBLED)
    assert board.swap(4, 4) == board


@pytest.mark.parametrize("a,b", list(itertools.permutations(range(9), 2)))
def test_swap_is_self_inverse(a: int, b: int) -> None:
    board = Board.from_ids(SCRAMBLED, [0, 90, 180, 270, 360, 450, 0, 90, 180])
    once = board.swap(a, b)
    _assert_permutation(once)
    assert once.swap(a, b) == board


@pytest.mark.parametrize("a,b", [(-1, 0), (0, 9), (9, 9), (100, 3)])
def test_swap_rejects_bad_index(a: int, b: int) -> None:
    with pytest.raises(InvalidIndexError):
        SOLUTION.swap(a, b)


# -- rotate -------------------------------------------------------------------


def test_rotate_adds_quarter_turn() -> None:
    rotated = SOLUTION.rotate(3)
    assert rotated.rotations == [0, 0, 0, 90, 0, 0, 0, 0, 0]
    assert rotated.ids == SOLUTION.ids
    assert SOLUTION.rotations == [0] * 9


@pytest.mark.parametrize("cell", range(9))
def test_four_rotations_return_to_start(cell: int) -> None:
    board = Board.from_ids(SCRAMBLED, [270] * 9)
    turned = board
    for _ in range(4):
        turned = turned.rotate(cell)
    assert turned.tiles[cell].rotation == 270 + 360
    assert turned.tiles[cell].orientation == board.tiles[cell].orientation


def test_rotation_is_never_wrapped() -> None:
    board = SOLUTION
    for _ in range(10):
        board = board.rotate(0)
    assert board.tiles[0].rotation == 900
    assert board.tiles[0].orientation == 180


@pytest.mark.parametrize("cell", [-1, 9, 42])
def test_rotate_rejects_bad_index(cell: int) -> None:
    with pytest.raises(InvalidIndexError) as exc:
        SOLUTION.rotate(cell)
    assert exc.value.index == cell


# -- solved predicate ---------------------------------------------------------


def test_solution_is_solved() -> None:
    assert is_solved(SOLUTION)
    assert SOLUTION.is_solved()


def test_full_turn_still_solved() -> None:
    board = Board.from_ids(range(1, 10), [360, 0, 720, 0, 0, -360, 0, 0, 1080])
    assert is_solved(board)


def test_quarter_turn_not_solved() -> None:
    board = Board.from_ids(range(1, 10), [90, 0, 0, 0, 0, 0, 0, 0, 0])
    assert not is_solved(board)


def test_wrong_position_not_solved() -> None:
    assert not is_solved(Board.from_ids(SCRAMBLED))
    assert not is_solved(SOLUTION.swap(7, 8))


def test_is_tile_correct() -> None:
    board = Board.from_ids([1, 3, 2, 4, 5, 6, 7, 8, 9], [0, 0, 0, 90, 0, 0, 0, 0, 0])
    assert board.is_tile_correct(0)
    assert not board.is_tile_correct(1)
    assert not board.is_tile_correct(3)
    assert board.is_tile_correct(4)


# -- edge matching vs. solved -------------------------------------------------
#
# The solved predicate is the literal id + orientation comparison against the
# canonical layout.  Edge matching is only reported for display.


def test_canonical_layout_matches_every_edge() -> None:
    assert SOLUTION.matching_edges() == 12
    assert SOLUTION.edges_match()


def test_matching_edges_is_not_the_solved_predicate() -> None:
    board = _half_turned_solution()
    assert board.edges_match()
    assert not is_solved(board)


def test_swap_breaks_edges() -> None:
    assert SOLUTION.swap(0, 8).matching_edges() < 12
