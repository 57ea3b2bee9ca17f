from __future__ import annotations

import random
from typing import Callable

import pytest

from backend.engine.gamestate import PuzzleState
from backend.models.board import EMPTY


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def state3() -> PuzzleState:
    """3×3 puzzle in target order: [0, 1, …, 7, EMPTY]."""
    return PuzzleState(3, [0, 1, 2, 3, 4, 5, 6, 7, EMPTY])


def _assert_invariants(state: PuzzleState) -> None:
    grid = state.grid
    assert sum(1 for t in grid if t is EMPTY) == 1
    assert grid[state.empty_position] is EMPTY
    ids = sorted(t for t in grid if t is not EMPTY)
    expected = sorted(t for t in state.solved_grid if t is not EMPTY)
    assert ids == expected


@pytest.fixture
def check_invariants() -> Callable[[PuzzleState], None]:
    """Tile multiset kept, one blank, and ``empty_position`` pointing at it."""
    return _assert_invariants
