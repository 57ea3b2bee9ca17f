"""Game-wide defaults.  The CLI overrides some of these per run."""

from __future__ import annotations

from enum import IntEnum


class Difficulty(IntEnum):
    """Grid size for each level offered by the difficulty selector."""

    EASY = 3
    MEDIUM = 4
    HARD = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> Difficulty:
        return cls[label.strip().upper()]


DEFAULT_DIFFICULTY = Difficulty.EASY

# Pictures the player can be given.  Slicing is done elsewhere; the
# engine only ever sees the name and tile identifiers.
PICTURES: tuple[str, ...] = (
    "landscape.jpg",
    "cityscape.jpg",
    "wildlife.jpg",
    "abstract.jpg",
)

# Random-walk length is size*size times this factor.
WALK_STEPS_PER_TILE = 100

# Nodes the solver may expand before giving up on a hint.
SOLVER_MAX_EXPANSIONS = 200_000
