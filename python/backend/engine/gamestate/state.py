"""The puzzle state machine: grid, blank, move counter, solved check."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from backend.engine.gamegenerator import GameGenerator, ShuffleStrategy
from backend.models.board import (
    EMPTY,
    Tile,
    check_position,
    is_adjacent,
    neighbours,
    solved_grid,
    to_position,
)
from backend.models.errors import InvalidDimension
from backend.settings import WALK_STEPS_PER_TILE

logger = logging.getLogger(__name__)


class PuzzleState:
    """Holds the current arrangement of one puzzle and applies moves to it.

    The target arrangement is fixed at construction.  Whether the puzzle
    is solved is always recomputed from the grid, never stored.  A new
    game gets a new ``PuzzleState``; instances are not reset in place.
    """

    def __init__(self, size: int, target: Sequence[Tile]) -> None:
        if size < 2:
            raise InvalidDimension(f"Grid size must be at least 2, got {size}.")
        if len(target) != size * size:
            raise InvalidDimension(
                f"Expected {size * size} tiles for a {size}×{size} grid, "
                f"got {len(target)}."
            )
        blanks = sum(1 for t in target if t is EMPTY)
        if blanks != 1:
            raise InvalidDimension(
                f"The target arrangement must hold exactly one EMPTY, found {blanks}."
            )

        self.size = size
        self._solved: tuple[Tile, ...] = tuple(target)
        self._grid: list[Tile] = list(target)
        self.empty_position: int = self._grid.index(EMPTY)
        self.move_count: int = 0

    @classmethod
    def solved(cls, size: int) -> PuzzleState:
        """A state in the conventional target order (blank bottom-right)."""
        return cls(size, solved_grid(size))

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> tuple[Tile, ...]:
        return tuple(self._grid)

    @property
    def solved_grid(self) -> tuple[Tile, ...]:
        return self._solved

    def tile_at(self, row: int, col: int) -> Tile:
        return self._grid[to_position(row, col, self.size)]

    def is_solved(self) -> bool:
        return tuple(self._grid) == self._solved

    def is_tile_correct(self, position: int) -> bool:
        check_position(position, self.size)
        return self._grid[position] == self._solved[position]

    def movable_positions(self) -> list[int]:
        """Positions whose tile could slide into the blank right now."""
        return neighbours(self.empty_position, self.size)

    def copy(self) -> PuzzleState:
        clone = PuzzleState(self.size, self._solved)
        clone._grid = self._grid[:]
        clone.empty_position = self.empty_position
        clone.move_count = self.move_count
        return clone

    # -- transitions ----------------------------------------------------------

    def attempt_move(self, position: int) -> bool:
        """Slide the tile at *position* into the blank.

        Returns False (and changes nothing) when *position* is the blank
        itself or is not next to it.  Raises ``PositionOutOfRange`` for
        positions that are not on the grid.
        """
        check_position(position, self.size)
        if position == self.empty_position:
            return False
        if not is_adjacent(position, self.empty_position, self.size):
            return False

        blank = self.empty_position
        self._grid[blank], self._grid[position] = self._grid[position], self._grid[blank]
        self.empty_position = position
        self.move_count += 1
        return True

    def shuffle(
        self,
        rng: random.Random | None = None,
        strategy: ShuffleStrategy = ShuffleStrategy.WALK,
        steps: int | None = None,
    ) -> None:
        """Scramble the grid.  The move counter is left alone.

        ``WALK`` restarts from the target and makes *steps* random legal
        moves, so the result is always solvable.  ``PERMUTATION`` shuffles
        the current tiles freely and may produce an unsolvable grid.
        Both retry until the grid is not already solved.
        """
        rng = rng or random.Random()
        strategy = ShuffleStrategy(strategy)
        if steps is None:
            steps = self.size * self.size * WALK_STEPS_PER_TILE

        walk_length = steps
        while True:
            if strategy is ShuffleStrategy.WALK:
                self._grid = list(self._solved)
                self.empty_position = GameGenerator.random_walk(
                    self._grid,
                    self._solved.index(EMPTY),
                    self.size,
                    rng,
                    walk_length,
                )
            else:
                self.empty_position = GameGenerator.permute(self._grid, rng)
            if not self.is_solved():
                break
            if strategy is ShuffleStrategy.WALK:
                if steps == 0:
                    break
                # On a 2×2 grid the walk is a fixed cycle; one more step
                # always leaves the target.
                walk_length += 1

        logger.debug(
            "Shuffled %dx%d grid (%s), blank at %d",
            self.size,
            self.size,
            strategy.value,
            self.empty_position,
        )
