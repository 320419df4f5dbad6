"""Moves a player can make on the board."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Swap:
    """Exchange the tiles in cells *a* and *b*."""

    a: int
    b: int


@dataclass(frozen=True)
class Rotate:
    """Turn the tile in *cell* a quarter clockwise."""

    cell: int


Move = Swap | Rotate
