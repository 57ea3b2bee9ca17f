"""GamePlay — the session commands a frontend drives."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import ShuffleStrategy
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import PuzzleState
from backend.models.board import Direction
from backend.models.picture import PictureCatalog
from backend.settings import Difficulty



@pytest.fixture
def game() -> GamePlay:
    return GamePlay(Difficulty.EASY, rng=random.Random(42))


def _one_move_from_solved() -> GamePlay:
    state = PuzzleState.solved(3)
    state.attempt_move(5)
    state.move_count = 0
    return GamePlay.from_state(state)


def test_new_game_is_shuffled(game: GamePlay) -> None:
    assert game.size == 3
    assert game.moves == 0
    assert not game.is_won
    assert game.picture.name in {p.name for p in game.catalog.pictures}
    assert Solver.is_solvable(game.state.grid, game.state.solved_grid, 3)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_difficulty_sets_grid_size(difficulty: Difficulty) -> None:
    game = GamePlay(difficulty, rng=random.Random(0))
    assert game.size == int(difficulty)
    assert len(game.state.grid) == int(difficulty) ** 2


def test_select_counts_legal_moves_only(game: GamePlay) -> None:
    blank = game.state.empty_position
    assert game.select(blank) is False
    assert game.moves == 0

    target = game.state.movable_positions()[0]
    assert game.select(target) is True
    assert game.moves == 1
    assert game.state.empty_position == target


def test_move_by_direction() -> None:
    game = _one_move_from_solved()  # blank at 5, row 1 column 2
    assert game.move(Direction.LEFT) is False  # nothing right of column 2
    assert game.move(Direction.UP) is True  # tile at 8 slides up
    assert game.is_won


def test_move_right_slides_left_neighbour() -> None:
    game = _one_move_from_solved()
    assert game.move(Direction.RIGHT) is True  # tile at 4 slides right
    assert game.state.empty_position == 4
    assert game.moves == 1


def test_move_tile_by_row_col() -> None:
    game = _one_move_from_solved()
    assert game.move_tile(0, 0) is False
    assert game.move_tile(2, 2) is True
    assert game.is_won


def test_win_pauses_clock_and_blocks_moves() -> None:
    game = _one_move_from_solved()
    assert game.select(8)
    assert game.is_won
    assert not game.clock.running
    assert game.select(5) is False
    assert game.moves == 1


def test_restart_keeps_picture_and_difficulty(game: GamePlay) -> None:
    picture = game.picture
    old_state = game.state
    game.select(game.state.movable_positions()[0])

    game.restart()

    assert game.state is not old_state
    assert game.picture == picture
    assert game.size == 3
    assert game.moves == 0
    assert not game.is_won
    assert game.clock.running


def test_play_again_changes_picture(game: GamePlay) -> None:
    picture = game.picture
    game.select(game.state.movable_positions()[0])

    game.play_again()

    assert game.picture != picture
    assert game.moves == 0
    assert game.difficulty is Difficulty.EASY


def test_change_difficulty_builds_new_state(game: GamePlay) -> None:
    old_state = game.state
    game.change_difficulty(Difficulty.HARD)
    assert game.state is not old_state
    assert game.size == 5
    assert game.difficulty is Difficulty.HARD
    assert game.moves == 0


def test_shuffle_keeps_moves(game: GamePlay) -> None:
    game.select(game.state.movable_positions()[0])
    game.shuffle()
    assert game.moves == 1
    assert not game.is_won


def test_shuffle_after_win_restarts_clock() -> None:
    game = _one_move_from_solved()
    game.select(8)
    assert not game.clock.running
    game.shuffle()
    assert game.clock.running
    assert not game.is_won


def test_permutation_strategy_is_used() -> None:
    rng = random.Random(3)
    results = set()
    for _ in range(40):
        game = GamePlay(Difficulty.EASY, rng=rng, strategy=ShuffleStrategy.PERMUTATION)
        results.add(Solver.is_solvable(game.state.grid, game.state.solved_grid, 3))
    assert results == {True, False}


def test_custom_catalog() -> None:
    game = GamePlay(catalog=PictureCatalog(["x.png", "y.png"]), rng=random.Random(1))
    first = game.picture
    game.play_again()
    assert game.picture != first


def test_hint_solves_the_game(game: GamePlay) -> None:
    game.state.shuffle(game.rng, steps=16)
    for _ in range(200):
        if game.is_won:
            break
        pos = game.hint()
        assert pos is not None
        assert game.select(pos)
    assert game.is_won
