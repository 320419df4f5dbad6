"""Deals random mosaic boards."""

from __future__ import annotations

import logging
import random

from mosaic.models.board import SOLUTION, Board
from mosaic.models.tile import QUARTER_TURN, Tile

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates boards by shuffling and turning the solved tiles."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (tiles 1-9 in order, all upright)."""
        return SOLUTION

    @staticmethod
    def shuffle(tiles: list[Tile], rng: random.Random) -> None:
        """Fisher-Yates shuffle of *tiles* in-place."""
        for i in range(len(tiles) - 1, 0, -1):
            j = rng.randint(0, i)
            tiles[i], tiles[j] = tiles[j], tiles[i]

    @staticmethod
    def random_rotation(rng: random.Random) -> int:
        return rng.randrange(4) * QUARTER_TURN

    @staticmethod
    def generate(rng: random.Random | None = None) -> Board:
        """Return a random arrangement with a random orientation per tile.

        Every ordering and every orientation is equally likely.  The result
        may happen to be solved already; callers get it as dealt.
        """
        if rng is None:
            rng = random.Random()
        tiles = list(SOLUTION.tiles)
        GameGenerator.shuffle(tiles, rng)
        board = Board(
            tiles=tuple(
                Tile(id=t.id, rotation=GameGenerator.random_rotation(rng))
                for t in tiles
            )
        )
        logger.debug("Dealt ids=%s rotations=%s", board.ids, board.rotations)
        return board
