"""Picture catalogue — stands in for the image slicer.

Decoding and cutting the actual image is left to whoever renders it.
The engine needs only the picture's name and the ordered tile
identifiers its pieces map to.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence

from backend.models.board import Tile, solved_grid
from backend.models.errors import InvalidDimension
from backend.settings import PICTURES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Picture:
    name: str

    @property
    def title(self) -> str:
        """Human-readable title, e.g. ``"wildlife.jpg"`` → ``"Wildlife"``."""
        stem = self.name.rsplit(".", 1)[0]
        return stem.replace("_", " ").replace("-", " ").title()

    def slice(self, size: int) -> list[Tile]:
        """Return the solved arrangement for a size×size cut of this picture.

        Piece ``p`` keeps identifier ``p`` for every cut, so the same
        logical piece always maps to the same tile within one game.  The
        bottom-right piece is dropped to make room for the blank.
        """
        if size < 2:
            raise InvalidDimension(f"Cannot cut a picture into a {size}×{size} grid.")
        return solved_grid(size)


class PictureCatalog:
    """The set of pictures a game may be played with."""

    def __init__(self, names: Sequence[str] = PICTURES) -> None:
        if not names:
            raise ValueError("PictureCatalog needs at least one picture.")
        self.pictures: list[Picture] = [Picture(n) for n in names]

    def __len__(self) -> int:
        return len(self.pictures)

    def choose(
        self,
        rng: random.Random,
        exclude: Picture | None = None,
    ) -> Picture:
        """Pick a picture at random, avoiding *exclude* when there is a choice."""
        pool = [p for p in self.pictures if p != exclude] or self.pictures
        picture = rng.choice(pool)
        logger.debug("Picked picture %s", picture.name)
        return picture
