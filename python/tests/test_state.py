"""PuzzleState: construction, moves, solved detection, invariants."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import ShuffleStrategy
from backend.engine.gamestate import PuzzleState
from backend.models.board import EMPTY, is_adjacent, solved_grid
from backend.models.errors import InvalidDimension, PositionOutOfRange

E = EMPTY


# -- construction -------------------------------------------------------------


def test_new_state_is_solved(state3: PuzzleState) -> None:
    assert state3.is_solved()
    assert state3.move_count == 0
    assert state3.empty_position == 8
    assert state3.grid == tuple(state3.solved_grid)


@pytest.mark.parametrize("size", [1, 0, -3])
def test_too_small_size_rejected(size: int) -> None:
    with pytest.raises(InvalidDimension):
        PuzzleState(size, [E])


def test_wrong_length_rejected() -> None:
    with pytest.raises(InvalidDimension):
        PuzzleState(3, [0, 1, 2, E])


@pytest.mark.parametrize(
    "target",
    [
        [0, 1, 2, 3],  # no blank
        [E, 1, 2, E],  # two blanks
    ],
)
def test_target_needs_exactly_one_blank(target: list) -> None:
    with pytest.raises(InvalidDimension):
        PuzzleState(2, target)


def test_invalid_dimension_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        PuzzleState(3, [])


def test_blank_may_start_anywhere() -> None:
    state = PuzzleState(2, [1, E, 2, 3])
    assert state.empty_position == 1
    assert state.is_solved()


def test_solved_factory() -> None:
    state = PuzzleState.solved(4)
    assert list(state.grid) == solved_grid(4)
    assert state.empty_position == 15


def test_target_is_copied() -> None:
    target = [0, 1, 2, E]
    state = PuzzleState(2, target)
    target[0] = 99
    assert state.solved_grid[0] == 0
    assert state.grid[0] == 0


# -- the walk-through from the design notes -----------------------------------


def test_scenario_3x3(state3: PuzzleState) -> None:
    assert state3.attempt_move(8) is False
    assert state3.move_count == 0

    assert state3.attempt_move(5) is True
    assert state3.grid == (0, 1, 2, 3, 4, E, 6, 7, 5)
    assert state3.empty_position == 5
    assert state3.move_count == 1
    assert not state3.is_solved()

    assert state3.attempt_move(8) is True
    assert state3.grid == (0, 1, 2, 3, 4, 5, 6, 7, E)
    assert state3.move_count == 2
    assert state3.is_solved()


# -- moves --------------------------------------------------------------------


def test_clicking_the_blank_is_a_no_op(state3: PuzzleState) -> None:
    before = state3.grid
    assert state3.attempt_move(state3.empty_position) is False
    assert state3.grid == before
    assert state3.move_count == 0


@pytest.mark.parametrize("pos", [0, 1, 2, 3, 4, 6])
def test_non_adjacent_move_is_a_no_op(state3: PuzzleState, pos: int) -> None:
    before = state3.grid
    assert state3.attempt_move(pos) is False
    assert state3.grid == before
    assert state3.empty_position == 8
    assert state3.move_count == 0


def test_no_wrap_around_between_rows() -> None:
    # blank at position 3 (row 1, col 0); position 2 is the end of row 0
    state = PuzzleState(3, [0, 1, 2, E, 4, 5, 6, 7, 8])
    assert state.attempt_move(2) is False
    assert state.attempt_move(0) is True


@pytest.mark.parametrize("bad", [-1, 9, 42])
def test_out_of_range_move_raises(state3: PuzzleState, bad: int) -> None:
    with pytest.raises(PositionOutOfRange):
        state3.attempt_move(bad)
    assert state3.move_count == 0


def test_move_and_back_restores_grid(state3: PuzzleState, rng: random.Random) -> None:
    state3.shuffle(rng)
    start_grid = state3.grid
    start_moves = state3.move_count
    movable = state3.movable_positions()
    for pos in movable:
        blank = state3.empty_position
        assert is_adjacent(pos, blank, 3)
        assert state3.attempt_move(pos)
        assert state3.attempt_move(blank)
        assert state3.grid == start_grid
    assert state3.move_count == start_moves + 2 * len(movable)


def test_movable_positions(state3: PuzzleState) -> None:
    assert sorted(state3.movable_positions()) == [5, 7]


def test_grid_is_read_only_snapshot(state3: PuzzleState) -> None:
    snapshot = state3.grid
    assert isinstance(snapshot, tuple)
    state3.attempt_move(7)
    assert snapshot[7] == 7


def test_tile_at_and_correctness(state3: PuzzleState) -> None:
    state3.attempt_move(7)
    assert state3.tile_at(2, 1) is EMPTY
    assert state3.tile_at(2, 2) == 7
    assert not state3.is_tile_correct(8)
    assert state3.is_tile_correct(0)


def test_copy_is_independent(state3: PuzzleState) -> None:
    clone = state3.copy()
    clone.attempt_move(5)
    assert state3.is_solved()
    assert state3.move_count == 0
    assert clone.move_count == 1


# -- solved detection ---------------------------------------------------------


def test_two_swapped_tiles_is_not_solved() -> None:
    state = PuzzleState(3, [0, 1, 2, 3, 4, 5, 6, 7, E])
    state._grid[0], state._grid[1] = 1, 0
    assert not state.is_solved()


def test_solved_compares_position_by_position() -> None:
    # same tiles, different order, same blank position
    target = [0, 1, 2, E]
    state = PuzzleState(2, target)
    state._grid = [2, 1, 0, E]
    assert not state.is_solved()


def test_single_legal_move_unsolves(state3: PuzzleState) -> None:
    for pos in state3.movable_positions():
        clone = state3.copy()
        assert clone.attempt_move(pos)
        assert not clone.is_solved()


# -- invariants under random play --------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 5])
@pytest.mark.parametrize("strategy", list(ShuffleStrategy))
def test_invariants_hold_under_random_play(
    size: int, strategy: ShuffleStrategy, check_invariants
) -> None:
    rng = random.Random(size * 31 + len(strategy))
    state = PuzzleState.solved(size)
    expected_moves = 0
    for step in range(400):
        if step % 97 == 0:
            state.shuffle(rng, strategy)
        else:
            moved = state.attempt_move(rng.randrange(size * size))
            expected_moves += moved
        check_invariants(state)
        assert state.move_count == expected_moves
