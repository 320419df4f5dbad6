"""History controller tests — move counter and single-level undo."""

from __future__ import annotations

from mosaic.engine.gamestate import History, HistoryEntry
from mosaic.models.board import SOLUTION, Board

START = Board.from_ids([3, 1, 2, 5, 4, 6, 9, 7, 8])


def test_init() -> None:
    history = History(START)
    assert history.move_count == 0
    assert history.entries == [HistoryEntry(START, 0)]
    assert history.current == START
    assert len(history) == 1


def test_record_increments_in_lockstep() -> None:
    history = History(START)
    board = START
    for n in range(1, 6):
        board = board.rotate(n)
        history.record(board)
        assert history.move_count == n
        assert len(history) == n + 1
        assert history.entries[-1] == HistoryEntry(board, n)
    assert history.current == board


def test_snapshots_are_independent() -> None:
    history = History(START)
    moved = START.swap(0, 1)
    history.record(moved)
    history.record(moved.rotate(0))
    assert history.entries[0].board == START
    assert history.entries[1].board.ids == [1, 3, 2, 5, 4, 6, 9, 7, 8]
    assert history.entries[1].board.rotations == [0] * 9


def test_undo_with_nothing_to_undo() -> None:
    history = History(START)
    assert history.undo() is None
    assert history.move_count == 0
    assert history.entries == [HistoryEntry(START, 0)]


def test_undo_collapses_to_two_entries() -> None:
    history = History(START)
    a = START.swap(0, 1)
    b = a.rotate(4)
    c = b.swap(2, 3)
    for board in (a, b, c):
        history.record(board)

    restored = history.undo()

    assert restored == b
    assert history.move_count == 4
    assert history.entries == [HistoryEntry(START, 0), HistoryEntry(b, 4)]
    assert history.current == b


def test_second_undo_goes_back_to_initial() -> None:
    history = History(START)
    a = START.swap(0, 1)
    b = a.rotate(4)
    history.record(a)
    history.record(b)

    assert history.undo() == a
    # Only the initial snapshot sits behind the restored board now.
    assert history.undo() == START
    assert history.move_count == 4
    assert len(history) == 2
    assert history.undo() == START
    assert history.move_count == 5


def test_reset_replaces_history() -> None:
    history = History(START)
    history.record(START.rotate(0))
    history.record(START.rotate(1))
    history.reset(SOLUTION)
    assert history.move_count == 0
    assert history.entries == [HistoryEntry(SOLUTION, 0)]
    assert history.initial == SOLUTION
