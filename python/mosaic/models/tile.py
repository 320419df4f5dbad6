"""Tile model — identity, rotation and the colors painted on each tile."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Color(StrEnum):
    RED = "#FF8080"
    BLUE = "#6666FF"
    ORANGE = "#FFA366"
    GREEN = "#66FF66"
    NEUTRAL = "#FFFFFF"


class Edge(StrEnum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


# Clockwise order: one quarter-turn moves each edge one step along this tuple.
EDGE_ORDER: tuple[Edge, ...] = (Edge.TOP, Edge.RIGHT, Edge.BOTTOM, Edge.LEFT)

QUARTER_TURN = 90

# Unrotated edge-midpoint colors for each tile id.
BASE_EDGES: dict[int, dict[Edge, Color]] = {
    1: {Edge.TOP: Color.RED, Edge.LEFT: Color.BLUE, Edge.RIGHT: Color.ORANGE, Edge.BOTTOM: Color.GREEN},
    2: {Edge.TOP: Color.RED, Edge.LEFT: Color.ORANGE, Edge.RIGHT: Color.GREEN, Edge.BOTTOM: Color.BLUE},
    3: {Edge.TOP: Color.RED, Edge.LEFT: Color.GREEN, Edge.RIGHT: Color.ORANGE, Edge.BOTTOM: Color.GREEN},
    4: {Edge.TOP: Color.GREEN, Edge.LEFT: Color.ORANGE, Edge.RIGHT: Color.RED, Edge.BOTTOM: Color.BLUE},
    5: {Edge.TOP: Color.BLUE, Edge.LEFT: Color.RED, Edge.RIGHT: Color.ORANGE, Edge.BOTTOM: Color.RED},
    6: {Edge.TOP: Color.GREEN, Edge.LEFT: Color.ORANGE, Edge.RIGHT: Color.BLUE, Edge.BOTTOM: Color.ORANGE},
    7: {Edge.TOP: Color.BLUE, Edge.LEFT: Color.RED, Edge.RIGHT: Color.GREEN, Edge.BOTTOM: Color.ORANGE},
    8: {Edge.TOP: Color.RED, Edge.LEFT: Color.GREEN, Edge.RIGHT: Color.BLUE, Edge.BOTTOM: Color.GREEN},
    9: {Edge.TOP: Color.ORANGE, Edge.LEFT: Color.BLUE, Edge.RIGHT: Color.RED, Edge.BOTTOM: Color.BLUE},
}

# Accent color of each tile, shown by frontends next to the tile number.
ACCENTS: dict[int, str] = {
    1: "#FF5733",
    2: "#33FF57",
    3: "#3357FF",
    4: "#FF33F5",
    5: "#33FFF5",
    6: "#F5FF33",
    7: "#FF3333",
    8: "#33FF33",
    9: "#3333FF",
}

# Sub-grid (row, col) of each edge-midpoint square.
_EDGE_CELLS: dict[Edge, tuple[int, int]] = {
    Edge.TOP: (0, 1),
    Edge.LEFT: (1, 0),
    Edge.RIGHT: (1, 2),
    Edge.BOTTOM: (2, 1),
}


def normalize_rotation(rotation: int) -> int:
    """Reduce an accumulated rotation to its effective orientation in [0, 360)."""
    return ((rotation % 360) + 360) % 360


@dataclass(frozen=True)
class Tile:
    """One puzzle tile.

    ``rotation`` is the raw number of degrees the tile has been turned
    clockwise.  It only ever grows; use :attr:`orientation` when comparing.
    """

    id: int
    rotation: int = 0

    @property
    def orientation(self) -> int:
        return normalize_rotation(self.rotation)

    @property
    def quarter_turns(self) -> int:
        return self.orientation // QUARTER_TURN

    @property
    def accent(self) -> str:
        return ACCENTS[self.id]

    def rotated(self) -> Tile:
        """Return this tile turned one quarter clockwise."""
        return Tile(id=self.id, rotation=self.rotation + QUARTER_TURN)


def edge_colors(tile: Tile) -> dict[Edge, Color]:
    """Colors currently showing on each edge of *tile*.

    A clockwise quarter-turn carries the top color to the right edge, the
    right color to the bottom, and so on.
    """
    base = BASE_EDGES[tile.id]
    turns = tile.quarter_turns
    visible: dict[Edge, Color] = {}
    for i, edge in enumerate(EDGE_ORDER):
        visible[EDGE_ORDER[(i + turns) % 4]] = base[edge]
    return visible


def sub_grid(tile: Tile) -> tuple[tuple[Color, ...], ...]:
    """Return the 3×3 colors of *tile* as seen on the board (row-major)."""
    grid = [[Color.NEUTRAL] * 3 for _ in range(3)]
    for edge, color in edge_colors(tile).items():
        r, c = _EDGE_CELLS[edge]
        grid[r][c] = color
    return tuple(tuple(row) for row in grid)
