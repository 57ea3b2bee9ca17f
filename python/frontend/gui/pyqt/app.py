"""PyQt6 GUI frontend — one window, like the classic picture puzzle.

Tile buttons in a grid, a difficulty selector, move and time counters,
and Restart / Play Again (New Image) / Shuffle buttons.  Solving the
puzzle pops a congratulations box followed by a play-again prompt.
"""

from __future__ import annotations

import logging
import random
import sys

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QComboBox,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gamegenerator import ShuffleStrategy
from backend.engine.gameplay import GamePlay
from backend.models.board import EMPTY, Direction
from backend.settings import Difficulty

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_BLUE_H = "#a4c4fc"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PINK = "#f5c2e7"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
    QComboBox {{ background: {_SURFACE0}; color: {_TEXT};
                 border: none; border-radius: 6px; padding: 4px 10px; }}
"""

_KEY_DIRECTIONS = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_W: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_S: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_A: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
    Qt.Key.Key_D: Direction.RIGHT,
}


def _styled_btn(text: str, *, bg: str = _SURFACE0, hover: str = _SURFACE1) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", 12, QFont.Weight.Bold))
    btn.setMinimumHeight(36)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{_TEXT};"
        f" border:none; border-radius:8px; padding:6px 14px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )
    return btn


class _PuzzleWindow(QMainWindow):
    """Board, info row and control row in a single window."""

    def __init__(self, game: GamePlay) -> None:
        super().__init__()
        self.game = game

        self.setWindowTitle("Picture Puzzle Game")
        self.setStyleSheet(_GLOBAL_CSS)

        page = QWidget()
        page.setObjectName("page")
        self.setCentralWidget(page)

        root = QVBoxLayout(page)
        root.setSpacing(8)
        root.setContentsMargins(16, 12, 16, 12)

        self._title = QLabel()
        self._title.setFont(QFont("Helvetica", 17, QFont.Weight.Bold))
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._title)

        # board
        self._frame = QFrame()
        self._frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        self._grid = QGridLayout(self._frame)
        self._grid.setSpacing(4)
        self._grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(self._frame, alignment=Qt.AlignmentFlag.AlignCenter)
        self._btns: list[QPushButton] = []

        # info row
        info = QHBoxLayout()
        info.setAlignment(Qt.AlignmentFlag.AlignCenter)
        info.setSpacing(14)
        info.addWidget(QLabel("Difficulty: "))
        self._level = QComboBox()
        self._level.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        for d in Difficulty:
            self._level.addItem(d.label, d)
        self._level.setCurrentIndex(list(Difficulty).index(game.difficulty))
        self._level.currentIndexChanged.connect(self._on_level)
        info.addWidget(self._level)
        self._moves = QLabel()
        self._moves.setStyleSheet(f"color:{_PINK};")
        info.addWidget(self._moves)
        self._time = QLabel()
        self._time.setStyleSheet(f"color:{_PINK};")
        info.addWidget(self._time)
        root.addLayout(info)

        # control row
        controls = QHBoxLayout()
        controls.setAlignment(Qt.AlignmentFlag.AlignCenter)
        controls.setSpacing(10)
        restart = _styled_btn("Restart")
        restart.clicked.connect(self._on_restart)
        again = _styled_btn("Play Again (New Image)", bg=_BLUE, hover=_BLUE_H)
        again.clicked.connect(self._on_play_again)
        shuffle = _styled_btn("Shuffle")
        shuffle.clicked.connect(self._on_shuffle)
        for b in (restart, again, shuffle):
            controls.addWidget(b)
        root.addLayout(controls)

        # timer
        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(1000)

        self._build_board()

    # -- board --

    def _build_board(self) -> None:
        """(Re)create one button per grid slot for the current size."""
        for b in self._btns:
            self._grid.removeWidget(b)
            b.deleteLater()
        self._btns = []

        size = self.game.size
        tile_px = max(48, min(96, 420 // size))
        f_sz = max(12, tile_px // 4)
        for pos in range(size * size):
            b = QPushButton()
            b.setFixedSize(tile_px, tile_px)
            b.setFont(QFont("Helvetica", f_sz, QFont.Weight.Bold))
            b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            b.clicked.connect(lambda _, p=pos: self._click(p))
            self._grid.addWidget(b, pos // size, pos % size)
            self._btns.append(b)
        self._sync()
        self.adjustSize()

    def _sync(self) -> None:
        state = self.game.state
        self._title.setText(f"{self.game.picture.title}  {state.size}×{state.size}")
        for pos, tile in enumerate(state.grid):
            b = self._btns[pos]
            if tile is EMPTY:
                b.setText("")
                b.setStyleSheet(
                    f"QPushButton{{background:{_MANTLE};border:none;border-radius:8px;}}"
                )
                continue
            b.setText(str(tile + 1))
            correct = state.is_tile_correct(pos)
            bg = _GREEN if correct else _BLUE
            hv = _GREEN_H if correct else _BLUE_H
            b.setStyleSheet(
                f"QPushButton{{background:{bg};color:{_BASE};"
                f"border:none;border-radius:8px;font-weight:bold;}}"
                f"QPushButton:hover{{background:{hv};}}"
            )
        self._moves.setText(f"Moves: {self.game.moves}")
        self._tick()

    def _tick(self) -> None:
        self._time.setText(f"Time: {self.game.elapsed_seconds}s")

    # -- input --

    def _click(self, pos: int) -> None:
        if self.game.select(pos):
            self._sync()
            self._check_win()

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        direction = _KEY_DIRECTIONS.get(event.key())
        if direction is not None:
            if self.game.move(direction):
                self._sync()
                self._check_win()
        elif event.key() in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)

    # -- commands --

    def _on_restart(self) -> None:
        self.game.restart()
        self._timer.start(1000)
        self._sync()

    def _on_play_again(self) -> None:
        self.game.play_again()
        self._timer.start(1000)
        self._sync()

    def _on_shuffle(self) -> None:
        self.game.shuffle()
        self._timer.start(1000)
        self._sync()

    def _on_level(self, index: int) -> None:
        difficulty = self._level.itemData(index)
        if difficulty is None or difficulty == self.game.difficulty:
            return
        self.game.change_difficulty(difficulty)
        self._timer.start(1000)
        self._build_board()

    def _check_win(self) -> None:
        if not self.game.is_won:
            return
        self._timer.stop()
        self._tick()
        QMessageBox.information(
            self,
            "Puzzle Solved",
            f"Congratulations! You solved the puzzle in {self.game.moves} "
            f"moves and {self.game.elapsed_seconds} seconds.",
        )
        choice = QMessageBox.question(
            self,
            "Puzzle Solved",
            "Play Again?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        if choice == QMessageBox.StandardButton.Yes:
            self._on_play_again()
        else:
            logger.info("Player declined another round; closing")
            self.close()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    difficulty: Difficulty,
    strategy: ShuffleStrategy,
    rng: random.Random,
) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _PuzzleWindow(GamePlay(difficulty, rng=rng, strategy=strategy))
    window.show()
    qapp.exec()
