"""Errors raised by the puzzle models and engine."""

from __future__ import annotations


class InvalidIndexError(ValueError):
    """A cell index outside the board was passed to a move."""

    def __init__(self, index: int, cells: int = 9) -> None:
        super().__init__(f"Cell index {index} is out of range [0, {cells}).")
        self.index = index
