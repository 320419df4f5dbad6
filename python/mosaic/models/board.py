"""Board model for the mosaic puzzle."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from mosaic.models.errors import InvalidIndexError
from mosaic.models.tile import QUARTER_TURN, Edge, Tile, edge_colors

SIZE = 3
CELLS = SIZE * SIZE
TILE_IDS = frozenset(range(1, CELLS + 1))


@dataclass(frozen=True)
class Board:
    """An arrangement of the nine tiles, stored row-major.

    Boards are values: :meth:`swap` and :meth:`rotate` return a new board
    and leave the receiver untouched.
    """

    tiles: tuple[Tile, ...]

    def __post_init__(self) -> None:
        ids = [t.id for t in self.tiles]
        if len(ids) != CELLS or set(ids) != TILE_IDS:
            raise ValueError(
                f"A board must hold each tile 1-{CELLS} exactly once, got {ids}."
            )
        rotations = [t.rotation for t in self.tiles]
        if any(r % QUARTER_TURN for r in rotations):
            raise ValueError(
                f"Tile rotations must be whole quarter turns, got {rotations}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_ids(
        cls, ids: Iterable[int], rotations: Iterable[int] | None = None
    ) -> Board:
        """Create a board from row-major tile ids and optional rotations.

        Example::

            Board.from_ids([3, 1, 2, 5, 4, 6, 9, 7, 8])
        """
        ids = list(ids)
        rots = list(rotations) if rotations is not None else [0] * len(ids)
        if len(rots) != len(ids):
            raise ValueError(
                f"Expected {len(ids)} rotations, got {len(rots)}."
            )
        return cls(tiles=tuple(Tile(i, r) for i, r in zip(ids, rots)))

    # -- queries --------------------------------------------------------------

    @property
    def ids(self) -> list[int]:
        return [t.id for t in self.tiles]

    @property
    def rotations(self) -> list[int]:
        return [t.rotation for t in self.tiles]

    def is_solved(self) -> bool:
        """Check every cell holds its goal tile at orientation 0."""
        return all(self.is_tile_correct(i) for i in range(CELLS))

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is its goal tile, upright."""
        tile = self.tiles[index]
        goal = SOLUTION.tiles[index]
        return tile.id == goal.id and tile.orientation == goal.orientation

    def matching_edges(self) -> int:
        """Count the touching edge pairs (of 12) whose colors agree."""
        faces = [edge_colors(t) for t in self.tiles]
        count = 0
        for r in range(SIZE):
            for c in range(SIZE):
                here = faces[r * SIZE + c]
                if c + 1 < SIZE:
                    right = faces[r * SIZE + c + 1]
                    count += here[Edge.RIGHT] == right[Edge.LEFT]
                if r + 1 < SIZE:
                    below = faces[(r + 1) * SIZE + c]
                    count += here[Edge.BOTTOM] == below[Edge.TOP]
        return count

    def edges_match(self) -> bool:
        """True if every pair of touching edges shares a color."""
        return self.matching_edges() == 2 * SIZE * (SIZE - 1)

    # -- moves ----------------------------------------------------------------

    def swap(self, a: int, b: int) -> Board:
        """Return a board with the tiles in cells *a* and *b* exchanged."""
        _check_index(a)
        _check_index(b)
        tiles = list(self.tiles)
        tiles[a], tiles[b] = tiles[b], tiles[a]
        return Board(tiles=tuple(tiles))

    def rotate(self, index: int) -> Board:
        """Return a board with the tile at *index* turned 90° clockwise."""
        _check_index(index)
        tiles = list(self.tiles)
        tiles[index] = tiles[index].rotated()
        return Board(tiles=tuple(tiles))


def _check_index(index: int) -> None:
    if not 0 <= index < CELLS:
        raise InvalidIndexError(index, CELLS)


SOLUTION = Board.from_ids(range(1, CELLS + 1))


def is_solved(board: Board) -> bool:
    return board.is_solved()
