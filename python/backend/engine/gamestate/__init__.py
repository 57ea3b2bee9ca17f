from backend.engine.gamestate.clock import GameClock
from backend.engine.gamestate.state import PuzzleState

__all__ = ["GameClock", "PuzzleState"]
