"""Shuffles for sliding puzzle grids."""

from __future__ import annotations

import logging
import random
from enum import StrEnum

from backend.models.board import EMPTY, Tile, neighbours

logger = logging.getLogger(__name__)


class ShuffleStrategy(StrEnum):
    WALK = "walk"
    PERMUTATION = "permutation"


class GameGenerator:
    """Scrambles a flat grid in place.  All methods are static."""

    @staticmethod
    def random_walk(
        grid: list[Tile],
        empty_position: int,
        size: int,
        rng: random.Random,
        steps: int,
    ) -> int:
        """Slide the blank around *steps* times; return its final position.

        Each step is a legal move, so the result is always reachable
        from (and back to) the starting arrangement.  The blank never
        steps straight back to where it just was unless it has nowhere
        else to go.
        """
        prev_pos: int | None = None

        for _ in range(steps):
            options = neighbours(empty_position, size)
            if prev_pos in options and len(options) > 1:
                options.remove(prev_pos)
            target = rng.choice(options)
            grid[empty_position], grid[target] = grid[target], grid[empty_position]
            prev_pos, empty_position = empty_position, target

        return empty_position

    @staticmethod
    def permute(grid: list[Tile], rng: random.Random) -> int:
        """Fisher–Yates shuffle of *grid*; return the blank's new position.

        Half of all permutations cannot be solved by sliding.
        """
        rng.shuffle(grid)
        return grid.index(EMPTY)
