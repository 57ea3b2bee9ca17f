"""Grid geometry for the sliding puzzle.

A grid is a flat, row-major sequence of tiles.  Position ``p`` sits at
row ``p // size`` and column ``p % size``.
"""

from __future__ import annotations

from enum import StrEnum

from backend.models.errors import PositionOutOfRange


class _Empty:
    """The single blank slot.  Never equal to a tile identifier."""

    _instance: _Empty | None = None

    def __new__(cls) -> _Empty:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"

    def __reduce__(self) -> str:
        return "EMPTY"


EMPTY = _Empty()

Tile = int | _Empty


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides in, keyed by the
# direction the *tile* travels.
_SLIDE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


# -- coordinates --------------------------------------------------------------


def check_position(position: int, size: int) -> None:
    if not 0 <= position < size * size:
        raise PositionOutOfRange(position, size)


def to_cell(position: int, size: int) -> tuple[int, int]:
    """Return ``(row, col)`` for a flat *position*."""
    return divmod(position, size)


def to_position(row: int, col: int, size: int) -> int:
    if not (0 <= row < size and 0 <= col < size):
        raise PositionOutOfRange(row * size + col, size)
    return row * size + col


def is_adjacent(a: int, b: int, size: int) -> bool:
    """True iff *a* and *b* are orthogonal neighbours on a size×size grid.

    No diagonals, no wrap-around between the end of one row and the
    start of the next.
    """
    check_position(a, size)
    check_position(b, size)
    ar, ac = to_cell(a, size)
    br, bc = to_cell(b, size)
    return abs(ar - br) + abs(ac - bc) == 1


def neighbours(position: int, size: int) -> list[int]:
    """Positions orthogonally adjacent to *position*, in up/down/left/right order."""
    check_position(position, size)
    r, c = to_cell(position, size)
    found: list[int] = []
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < size and 0 <= nc < size:
            found.append(nr * size + nc)
    return found


def slide_source(empty_position: int, direction: Direction, size: int) -> int | None:
    """Position of the tile that would slide in *direction* into the blank.

    E.g. ``Direction.UP`` picks the tile **below** the blank.  Returns
    ``None`` when that tile would be off the board.
    """
    br, bc = to_cell(empty_position, size)
    dr, dc = _SLIDE_OFFSETS[direction]
    tr, tc = br + dr, bc + dc
    if not (0 <= tr < size and 0 <= tc < size):
        return None
    return tr * size + tc


# -- arrangements -------------------------------------------------------------


def solved_grid(size: int, empty_position: int | None = None) -> list[Tile]:
    """Return the target arrangement: tile ``p`` at position ``p``.

    The blank replaces the tile at *empty_position* (default: the
    bottom-right slot, whose picture piece is left out).
    """
    if empty_position is None:
        empty_position = size * size - 1
    check_position(empty_position, size)
    return [
        EMPTY if p == empty_position else p for p in range(size * size)
    ]


def format_grid(grid: list[Tile] | tuple[Tile, ...], size: int) -> str:
    """Plain-text rendering, mostly for log messages and assertion output."""
    width = len(str(size * size - 1))
    rows: list[str] = []
    for r in range(size):
        cells = grid[r * size : (r + 1) * size]
        rows.append(
            " ".join(
                "·".rjust(width) if t is EMPTY else str(t).rjust(width)
                for t in cells
            )
        )
    return "\n".join(rows)
