"""Game session — the commands a frontend issues, on top of the state machine."""

from __future__ import annotations

import logging
import random

from backend.engine.gamegenerator import ShuffleStrategy
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameClock, PuzzleState
from backend.models.board import Direction, slide_source, to_position
from backend.models.picture import Picture, PictureCatalog
from backend.settings import DEFAULT_DIFFICULTY, Difficulty

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    A session has one picture, one difficulty, and the current
    ``PuzzleState`` with its clock.  Restart, new picture and difficulty
    changes all build a fresh ``PuzzleState`` rather than resetting the
    old one.
    """

    def __init__(
        self,
        difficulty: Difficulty = DEFAULT_DIFFICULTY,
        catalog: PictureCatalog | None = None,
        rng: random.Random | None = None,
        strategy: ShuffleStrategy = ShuffleStrategy.WALK,
    ) -> None:
        self.catalog = catalog or PictureCatalog()
        self.rng = rng or random.Random()
        self.strategy = strategy
        self.difficulty = Difficulty(difficulty)
        self.picture: Picture = self.catalog.choose(self.rng)
        self.clock = GameClock()
        self.state = self._new_state()

    @classmethod
    def from_state(
        cls,
        state: PuzzleState,
        picture: Picture | None = None,
        rng: random.Random | None = None,
    ) -> GamePlay:
        """Wrap an existing state (e.g. a hand-built board) in a session."""
        obj = object.__new__(cls)
        obj.catalog = PictureCatalog()
        obj.rng = rng or random.Random()
        obj.strategy = ShuffleStrategy.WALK
        obj.difficulty = Difficulty(state.size)
        obj.picture = picture or obj.catalog.pictures[0]
        obj.clock = GameClock()
        obj.state = state
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.state.size

    @property
    def moves(self) -> int:
        return self.state.move_count

    @property
    def elapsed_seconds(self) -> int:
        return self.clock.elapsed_seconds

    @property
    def is_won(self) -> bool:
        return self.state.is_solved()

    # -- movement -------------------------------------------------------------

    def select(self, position: int) -> bool:
        """Handle a click on the tile at *position*.

        Returns True if the tile slid.  Once the puzzle is solved further
        clicks are ignored until a new puzzle is started.
        """
        if self.is_won:
            return False
        moved = self.state.attempt_move(position)
        if moved and self.is_won:
            self.clock.pause()
            logger.info(
                "Solved %s (%s) in %d moves and %d seconds",
                self.picture.name,
                self.difficulty.label,
                self.moves,
                self.elapsed_seconds,
            )
        return moved

    def move_tile(self, row: int, col: int) -> bool:
        return self.select(to_position(row, col, self.size))

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        src = slide_source(self.state.empty_position, direction, self.size)
        if src is None:
            return False
        return self.select(src)

    def hint(self) -> int | None:
        return Solver.hint(self.state)

    # -- commands -------------------------------------------------------------

    def restart(self) -> None:
        """Same picture, same difficulty, fresh shuffle, counters at zero."""
        logger.info("Restart: %s (%s)", self.picture.name, self.difficulty.label)
        self.state = self._new_state()
        self.clock.reset()

    def play_again(self) -> None:
        """Start over with a different picture."""
        self.picture = self.catalog.choose(self.rng, exclude=self.picture)
        logger.info("Play again: %s (%s)", self.picture.name, self.difficulty.label)
        self.state = self._new_state()
        self.clock.reset()

    def change_difficulty(self, difficulty: Difficulty) -> None:
        """Switch grid size.  This also picks a new picture."""
        self.difficulty = Difficulty(difficulty)
        self.play_again()

    def shuffle(self) -> None:
        """Re-scramble the current puzzle; moves and clock keep counting."""
        self.state.shuffle(self.rng, self.strategy)
        if not self.clock.running:
            self.clock.resume()

    # -- helpers --------------------------------------------------------------

    def _new_state(self) -> PuzzleState:
        state = PuzzleState(int(self.difficulty), self.picture.slice(int(self.difficulty)))
        state.shuffle(self.rng, self.strategy)
        return state
