from mosaic.models.board import SOLUTION, Board, is_solved
from mosaic.models.errors import InvalidIndexError
from mosaic.models.move import Move, Rotate, Swap
from mosaic.models.tile import Color, Edge, Tile, edge_colors, normalize_rotation, sub_grid

__all__ = [
    "Board",
    "Color",
    "Edge",
    "InvalidIndexError",
    "Move",
    "Rotate",
    "SOLUTION",
    "Swap",
    "Tile",
    "edge_colors",
    "is_solved",
    "normalize_rotation",
    "sub_grid",
]
