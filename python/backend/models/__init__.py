from backend.models.board import EMPTY, Direction, Tile, is_adjacent, solved_grid
from backend.models.errors import (
    InvalidDimension,
    PositionOutOfRange,
    PuzzleError,
    SearchLimitExceeded,
)
from backend.models.picture import Picture, PictureCatalog

__all__ = [
    "EMPTY",
    "Direction",
    "InvalidDimension",
    "Picture",
    "PictureCatalog",
    "PositionOutOfRange",
    "PuzzleError",
    "SearchLimitExceeded",
    "Tile",
    "is_adjacent",
    "solved_grid",
]
