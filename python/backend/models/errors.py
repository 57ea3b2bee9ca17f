"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by the engine."""


class InvalidDimension(PuzzleError, ValueError):
    """The grid size or the target arrangement cannot form a puzzle."""


class PositionOutOfRange(PuzzleError, IndexError):
    """A grid position outside ``0 .. size*size - 1`` was passed in."""

    def __init__(self, position: int, size: int) -> None:
        super().__init__(
            f"Position {position} is outside a {size}×{size} grid "
            f"(valid: 0..{size * size - 1})."
        )
        self.position = position
        self.size = size


class SearchLimitExceeded(PuzzleError):
    """The solver spent its expansion budget without reaching the goal."""
