"""Tracks the move history of a game in progress."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mosaic.models.board import Board

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    board: Board
    move_count: int


class History:
    """Holds every board snapshot of the session and the move counter.

    Undo is single-level: it collapses the history down to the initial
    snapshot plus the restored board, so a second undo in a row returns
    to the board the first undo came from.
    """

    def __init__(self, board: Board) -> None:
        self.entries: list[HistoryEntry] = [HistoryEntry(board, 0)]
        self.move_count: int = 0

    # -- queries --------------------------------------------------------------

    @property
    def current(self) -> Board:
        return self.entries[-1].board

    @property
    def initial(self) -> Board:
        return self.entries[0].board

    def __len__(self) -> int:
        return len(self.entries)

    # -- updates --------------------------------------------------------------

    def record(self, board: Board) -> None:
        self.move_count += 1
        self.entries.append(HistoryEntry(board, self.move_count))

    def undo(self) -> Board | None:
        """Step back to the previous snapshot.

        Returns the restored board, or ``None`` if there is nothing to
        undo.  Undoing counts as a move.
        """
        if len(self.entries) <= 1:
            logger.debug("Nothing to undo")
            return None

        prev = self.entries[-2]
        self.move_count += 1
        self.entries = [self.entries[0], HistoryEntry(prev.board, self.move_count)]
        logger.debug("Undo restored ids=%s at move %d", prev.board.ids, self.move_count)
        return prev.board

    def reset(self, board: Board) -> None:
        self.entries = [HistoryEntry(board, 0)]
        self.move_count = 0
