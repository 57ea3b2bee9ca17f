"""Sliding puzzle solver."""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Sequence

from backend.engine.gamestate import PuzzleState
from backend.models.board import EMPTY, Tile, neighbours
from backend.models.errors import SearchLimitExceeded
from backend.settings import SOLVER_MAX_EXPANSIONS

logger = logging.getLogger(__name__)


def _encode(grid: Sequence[Tile], target: Sequence[Tile]) -> tuple[int, ...]:
    """Replace each tile by the position it occupies in *target*."""
    goal_of = {tile: pos for pos, tile in enumerate(target)}
    return tuple(goal_of[t] for t in grid)


def _distance(a: int, b: int, size: int) -> int:
    ar, ac = divmod(a, size)
    br, bc = divmod(b, size)
    return abs(ar - br) + abs(ac - bc)


def _permutation_parity(perm: Sequence[int]) -> int:
    """0 for an even permutation, 1 for odd (counted via cycle lengths)."""
    seen = [False] * len(perm)
    parity = 0
    for start in range(len(perm)):
        if seen[start]:
            continue
        length = 0
        p = start
        while not seen[p]:
            seen[p] = True
            p = perm[p]
            length += 1
        parity ^= (length - 1) & 1
    return parity


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def is_solvable(
        grid: Sequence[Tile], target: Sequence[Tile], size: int
    ) -> bool:
        """Return True if *grid* can reach *target* by sliding tiles.

        Every move swaps the blank with a neighbour, flipping the
        permutation parity and moving the blank one step.  So the two
        parities must agree.
        """
        perm = _encode(grid, target)
        blank_goal = target.index(EMPTY)
        blank_now = perm.index(blank_goal)
        return _permutation_parity(perm) == _distance(blank_now, blank_goal, size) % 2

    @staticmethod
    def solve(
        state: PuzzleState,
        max_expansions: int = SOLVER_MAX_EXPANSIONS,
        weight: float | None = None,
    ) -> list[int]:
        """Return the tile positions to move, in order, to solve *state*.

        Feed each position to ``PuzzleState.attempt_move``.  Returns
        ``[]`` when already solved or unsolvable.  With ``weight == 1``
        the solution is optimal; larger weights trade length for speed
        and are the default above 3×3.  Raises ``SearchLimitExceeded``
        after *max_expansions* nodes.
        """
        if state.is_solved():
            return []
        if not Solver.is_solvable(state.grid, state.solved_grid, state.size):
            return []

        size = state.size
        if weight is None:
            weight = 1.0 if size <= 3 else 2.0

        cells = size * size
        adjacency = [neighbours(p, size) for p in range(cells)]
        blank_value = state.solved_grid.index(EMPTY)
        start = _encode(state.grid, state.solved_grid)
        goal = tuple(range(cells))

        h0 = sum(
            _distance(p, v, size) for p, v in enumerate(start) if v != blank_value
        )
        tie = itertools.count()
        frontier: list[tuple[float, int, int, int, tuple[int, ...], int]] = [
            (weight * h0, next(tie), 0, h0, start, state.empty_position)
        ]
        best: dict[tuple[int, ...], int] = {start: 0}
        parent: dict[tuple[int, ...], tuple[tuple[int, ...], int]] = {}
        expansions = 0

        while frontier:
            _, _, cost, h, node, blank = heapq.heappop(frontier)
            if node == goal:
                return Solver._unwind(parent, node, start)
            if cost > best[node]:
                continue

            expansions += 1
            if expansions > max_expansions:
                raise SearchLimitExceeded(
                    f"No solution within {max_expansions} expansions "
                    f"({size}×{size})."
                )

            for src in adjacency[blank]:
                tile = node[src]
                child_h = h - _distance(src, tile, size) + _distance(blank, tile, size)
                child = list(node)
                child[blank], child[src] = tile, blank_value
                key = tuple(child)
                child_cost = cost + 1
                if child_cost < best.get(key, child_cost + 1):
                    best[key] = child_cost
                    parent[key] = (node, src)
                    heapq.heappush(
                        frontier,
                        (
                            child_cost + weight * child_h,
                            next(tie),
                            child_cost,
                            child_h,
                            key,
                            src,
                        ),
                    )

        return []

    @staticmethod
    def hint(state: PuzzleState) -> int | None:
        """Return the single best next tile to move, or ``None``.

        ``None`` means solved, unsolvable, or too hard to search.
        """
        if state.is_solved():
            return None

        try:
            moves = Solver.solve(state)
        except SearchLimitExceeded as exc:
            logger.info("Hint unavailable: %s", exc)
            return None

        return moves[0] if moves else None

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _unwind(
        parent: dict[tuple[int, ...], tuple[tuple[int, ...], int]],
        node: tuple[int, ...],
        start: tuple[int, ...],
    ) -> list[int]:
        moves: list[int] = []
        while node != start:
            node, src = parent[node]
            moves.append(src)
        moves.reverse()
        return moves
