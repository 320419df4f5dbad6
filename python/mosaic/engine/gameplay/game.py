"""Core gameplay logic — processes moves, undo, and checks win condition."""

from __future__ import annotations

import logging
import random
from typing import NamedTuple

from mosaic.engine.gamegenerator import GameGenerator
from mosaic.engine.gamestate import History
from mosaic.models.board import CELLS, Board, is_solved
from mosaic.models.errors import InvalidIndexError
from mosaic.models.move import Move, Rotate, Swap

logger = logging.getLogger(__name__)


class MoveResult(NamedTuple):
    board: Board
    move_count: int


class GamePlay:
    """Orchestrates a single game session.

    Not thread-safe: callers sharing a session must issue one move at a
    time.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self.history = History(GameGenerator.generate(rng))
        self._undo_available = False

    @classmethod
    def new_game(cls, rng: random.Random | None = None) -> GamePlay:
        return cls(rng)

    @classmethod
    def from_board(cls, board: Board, rng: random.Random | None = None) -> GamePlay:
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj._rng = rng
        obj.history = History(board)
        obj._undo_available = False
        return obj

    # -- moves ----------------------------------------------------------------

    def apply_move(self, move: Move) -> MoveResult:
        """Apply *move* to the current board and record it.

        Swapping a cell with itself is ignored: nothing is recorded.

        Raises :class:`InvalidIndexError` without touching the session if
        any cell index is off the board.
        """
        board = self.board
        if isinstance(move, Swap):
            _validate(move.a, move.b)
            if move.a == move.b:
                logger.debug("Ignored %s: same cell", move)
                return MoveResult(board, self.move_count)
            board = board.swap(move.a, move.b)
        elif isinstance(move, Rotate):
            _validate(move.cell)
            board = board.rotate(move.cell)
        else:
            raise TypeError(f"Unknown move: {move!r}")

        self.history.record(board)
        self._undo_available = True
        logger.debug("Applied %s -> ids=%s (move %d)", move, board.ids, self.move_count)
        if self.check_solved(board):
            logger.info("Puzzle solved in %d moves", self.move_count)
        return MoveResult(board, self.move_count)

    def undo(self) -> Board | None:
        """Restore the previous board, or return ``None`` if there is none."""
        board = self.history.undo()
        if board is not None:
            self._undo_available = False
        return board

    def reset(self, rng: random.Random | None = None) -> Board:
        """Deal a fresh board and start the history over."""
        if rng is not None:
            self._rng = rng
        board = GameGenerator.generate(self._rng)
        self.history.reset(board)
        self._undo_available = False
        return board

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.history.current

    @property
    def move_count(self) -> int:
        return self.history.move_count

    @property
    def can_undo(self) -> bool:
        """True after a move since the last undo or reset, unless solved."""
        return (
            self._undo_available
            and len(self.history) > 1
            and not self.is_won
        )

    def check_solved(self, board: Board | None = None) -> bool:
        return is_solved(self.board if board is None else board)

    @property
    def is_won(self) -> bool:
        return self.check_solved()


def _validate(*indices: int) -> None:
    for index in indices:
        if not 0 <= index < CELLS:
            raise InvalidIndexError(index, CELLS)
