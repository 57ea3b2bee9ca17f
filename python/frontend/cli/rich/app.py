"""Rich terminal frontend — styled board, live clock, keyboard play.

Uses the ``rich`` library for output and the shared single-key input
handler.  Mirrors the GUI controls: restart, new picture, shuffle and a
difficulty switch.
"""

from __future__ import annotations

import logging
import random
import sys

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamegenerator import ShuffleStrategy
from backend.engine.gameplay import GamePlay
from backend.models.board import EMPTY, Direction, to_cell
from backend.settings import Difficulty
from frontend.cli.input_handler import get_key, get_key_timeout

logger = logging.getLogger(__name__)

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_LEVELS = {
    "easy": Difficulty.EASY,
    "medium": Difficulty.MEDIUM,
    "hard": Difficulty.HARD,
}


# -- board rendering ----------------------------------------------------------


def render_board(game: GamePlay) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Tiles show their piece number, counted from 1 like the pieces of a
    picture.  Pieces already in place are green.
    """
    state = game.state
    size = state.size
    width = len(str(size * size))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(size):
        table.add_column(width=width + 1, justify="center")

    grid = state.grid
    for r in range(size):
        cells: list[str] = []
        for c in range(size):
            pos = r * size + c
            tile = grid[pos]
            if tile is EMPTY:
                cells.append("[dim]·[/dim]")
            elif state.is_tile_correct(pos):
                cells.append(f"[bold green]{tile + 1:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{tile + 1:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Difficulty: ", style="dim")
    stats.append(game.difficulty.label, style="bold cyan")
    stats.append("    Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(f"{game.elapsed_seconds}s", style="bold yellow")
    return stats


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    size = game.size
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("X", style="bold cyan")
    controls.append("  shuffle   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  new picture   ", style="dim")
    controls.append("1-3", style="bold cyan")
    controls.append("  difficulty   ", style="dim")
    controls.append("H", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(render_board(game)),
        title=f"[bold cyan]{game.picture.title}  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save the cursor so _update_time() can repaint just the stats line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(game: GamePlay) -> None:
    """Overwrite just the stats line using the saved cursor position."""
    _DIM = "\033[2m"
    _CB = "\033[36;1m"
    _YB = "\033[33;1m"
    _RS = "\033[0m"

    label = game.difficulty.label
    stats_raw = (
        f"{_DIM}Difficulty: {_RS}{_CB}{label}{_RS}"
        f"    {_DIM}Moves: {_RS}{_YB}{game.moves}{_RS}"
        f"    {_DIM}Time: {_RS}{_YB}{game.elapsed_seconds}s{_RS}"
    )
    visible_len = len(
        f"Difficulty: {label}    Moves: {game.moves}    Time: {game.elapsed_seconds}s"
    )
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


def _draw_win(game: GamePlay) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("Congratulations!", style="bold green")
    congrats.append(
        f"  You solved the puzzle in {game.moves} moves "
        f"and {game.elapsed_seconds} seconds.  ",
        style="green",
    )
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(Align.center(render_board(game)), Align.center(congrats)),
        title=f"[bold green]{game.picture.title}  {game.size}×{game.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Play again? (Y/N)\n", style="bold")))


# -- command handling ---------------------------------------------------------


def _hint(game: GamePlay) -> str:
    pos = game.hint()
    if pos is None:
        return "[yellow]No hint available.[/yellow]"
    r, c = to_cell(pos, game.size)
    tile = game.state.grid[pos]
    game.select(pos)
    return f"[cyan]Hint:[/cyan] moved piece [bold]{tile + 1}[/bold] from row {r + 1}, column {c + 1}"


def handle_key(game: GamePlay, key: str) -> tuple[bool, str]:
    """Apply one action to *game*.  Returns ``(keep_playing, status)``."""
    if key in _DIRECTIONS:
        game.move(_DIRECTIONS[key])
        return True, ""
    if key == "shuffle":
        game.shuffle()
        return True, "[yellow]Shuffled![/yellow]"
    if key == "restart":
        game.restart()
        return True, "[yellow]Restarted.[/yellow]"
    if key == "new":
        game.play_again()
        return True, f"[yellow]New picture: {game.picture.title}[/yellow]"
    if key in _LEVELS:
        game.change_difficulty(_LEVELS[key])
        return True, f"[yellow]Difficulty: {game.difficulty.label}[/yellow]"
    if key == "hint":
        return True, _hint(game)
    if key == "quit":
        return False, ""
    return True, ""


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay) -> None:
    status = ""
    while True:
        while not game.is_won:
            _draw_game(game, status)

            # Wait for input with a short timeout so the clock keeps ticking.
            while True:
                key = get_key_timeout(0.5)
                if key is not None:
                    break
                _update_time(game)

            keep_playing, status = handle_key(game, key)
            if not keep_playing:
                return

        _draw_win(game)
        while True:
            key = get_key()
            if key == "yes":
                game.play_again()
                status = ""
                break
            if key in ("new", "quit"):
                return


# -- public entry point -------------------------------------------------------


def run(
    difficulty: Difficulty,
    strategy: ShuffleStrategy,
    rng: random.Random,
) -> None:
    """Launch the Rich terminal game."""
    game = GamePlay(difficulty, rng=rng, strategy=strategy)
    logger.debug("Rich frontend started with %s", game.picture.name)
    try:
        _play(game)
    finally:
        console.clear()
        console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
