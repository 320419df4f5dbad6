"""Rich terminal frontend — coloured tiles, panels, and a keyboard cursor.

Uses the ``rich`` library for styled output.  Tiles are picked up and
dropped with Enter/Space (a swap), turned with ``t``, and the last move
can be taken back with ``u``.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mosaic.engine.gameplay import GamePlay
from mosaic.models.board import CELLS, SIZE, Board
from mosaic.models.errors import InvalidIndexError
from mosaic.models.move import Rotate, Swap
from mosaic.models.tile import Color, sub_grid
from mosaic_frontend.cli.input_handler import get_key
from mosaic_frontend.preferences import PreferencesStore

logger = logging.getLogger(__name__)

console = Console()

RULES = (
    "Each square in the grid holds one tile.",
    "You can rotate or move tiles to try and solve the puzzle.",
    "Tiles start in random positions.",
    "Two tiles match if the colors on their touching sides are the same.",
)

_CURSOR_STEP: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


class Mode(StrEnum):
    PLAY = "play"
    RULES = "rules"
    CONFIRM_NEW = "confirm_new"


@dataclass
class Screen:
    """What the player is looking at, on top of the game session."""

    game: GamePlay
    cursor: int = 0
    selected: int | None = None
    mode: Mode = Mode.PLAY
    status: str = ""


# -- input --------------------------------------------------------------------


def move_cursor(cursor: int, key: str) -> int:
    """Step the cursor one cell, stopping at the board edge."""
    dr, dc = _CURSOR_STEP[key]
    r, c = divmod(cursor, SIZE)
    r = min(max(r + dr, 0), SIZE - 1)
    c = min(max(c + dc, 0), SIZE - 1)
    return r * SIZE + c


def _apply(screen: Screen, move: Swap | Rotate) -> None:
    try:
        screen.game.apply_move(move)
    except InvalidIndexError as e:
        logger.warning("Rejected %s: %s", move, e)
        screen.status = f"[red]{e}[/red]"


def handle_key(screen: Screen, key: str, rng: random.Random | None = None) -> bool:
    """Update *screen* for one key press.  Returns False when the player quits."""
    game = screen.game

    if screen.mode is Mode.RULES:
        screen.mode = Mode.PLAY
        return True

    if screen.mode is Mode.CONFIRM_NEW:
        screen.mode = Mode.PLAY
        if key == "yes":
            game.reset(rng)
            screen.selected = None
            screen.status = "[yellow]New game![/yellow]"
        else:
            screen.status = "[dim]Kept the current game.[/dim]"
        return True

    if key == "quit":
        return False

    if key in _CURSOR_STEP:
        screen.cursor = move_cursor(screen.cursor, key)
    elif key == "select":
        if screen.selected is None:
            screen.selected = screen.cursor
            tile = game.board.tiles[screen.cursor]
            screen.status = f"Picked up tile [bold]{tile.id}[/bold]. Move and press Enter to swap."
        elif screen.selected == screen.cursor:
            screen.selected = None
            screen.status = "[dim]Put the tile back.[/dim]"
        else:
            _apply(screen, Swap(screen.selected, screen.cursor))
            screen.selected = None
    elif key == "rotate":
        _apply(screen, Rotate(screen.cursor))
    elif key == "undo":
        if game.can_undo:
            game.undo()
            screen.selected = None
            screen.status = "[cyan]Undid the last move.[/cyan]"
        else:
            screen.status = "[yellow]Nothing to undo.[/yellow]"
    elif key == "new":
        if game.move_count > 0:
            screen.mode = Mode.CONFIRM_NEW
        else:
            game.reset(rng)
            screen.selected = None
            screen.status = "[yellow]New game![/yellow]"
    elif key == "help":
        screen.mode = Mode.RULES

    return True


# -- board rendering ----------------------------------------------------------


def _render_tile(board: Board, index: int) -> Text:
    tile = board.tiles[index]
    text = Text()
    for r, row in enumerate(sub_grid(tile)):
        for line in range(2):
            for c, color in enumerate(row):
                label = "    "
                if r == 1 and c == 1 and line == 0:
                    label = f" {tile.id}  "
                style = f"bold {tile.accent} on {color.value}" if color is Color.NEUTRAL else f"on {color.value}"
                text.append(label, style=style)
            if not (r == SIZE - 1 and line == 1):
                text.append("\n")
    return text


def _render_board(board: Board, cursor: int | None = None, selected: int | None = None) -> Table:
    """Return a Rich Table of the nine tiles, cursor and pick highlighted."""
    table = Table(
        show_header=False,
        show_edge=False,
        box=None,
        padding=(0, 0),
    )
    for _ in range(SIZE):
        table.add_column(justify="center")

    cells: list[Panel] = []
    for i in range(CELLS):
        if i == selected:
            border, box = "bold magenta", rich.box.DOUBLE
        elif i == cursor:
            border, box = "bold yellow", rich.box.HEAVY
        elif board.is_tile_correct(i):
            border, box = "green", rich.box.ROUNDED
        else:
            border, box = "bright_black", rich.box.ROUNDED
        cells.append(Panel(_render_tile(board, i), box=box, border_style=border, padding=0, expand=False))

    for r in range(SIZE):
        table.add_row(*cells[r * SIZE : (r + 1) * SIZE])
    return table


# -- screens ------------------------------------------------------------------


def _draw_game(screen: Screen) -> None:
    console.clear()

    game = screen.game
    board = game.board
    solved = game.is_won

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.move_count), style="bold yellow")
    stats.append("    Edges: ", style="dim")
    stats.append(f"{board.matching_edges()}/12", style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  pick/swap   ", style="dim")
    controls.append("T", style="bold cyan")
    controls.append("  rotate   ", style="dim")
    if game.can_undo:
        controls.append("U", style="bold green")
        controls.append("  undo   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  new   ", style="dim")
    controls.append("H", style="bold cyan")
    controls.append("  rules   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    parts: list = []
    if solved:
        parts.append(Align.center(Text("\U0001f389 Puzzle Solved! \U0001f389", style="bold black on #FFD700")))
        parts.append(Text(""))
    parts.append(Align.center(_render_board(board, screen.cursor, screen.selected)))

    panel = Panel(
        Group(*parts),
        title="[bold cyan]Mosaic Match[/bold cyan]",
        border_style="bold green" if solved else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if screen.status:
        console.print(Align.center(Text.from_markup(f"  {screen.status}")))
    console.print(Align.center(controls))


def _draw_rules() -> None:
    console.clear()

    steps = Text()
    for i, rule in enumerate(RULES, 1):
        steps.append(f"  {i}. ", style="bold cyan")
        steps.append(f"{rule}\n")

    example = Text.from_markup(
        "[bold]Example:[/bold] If the right side of one tile is blue, "
        "the left side of the tile next to it must also be blue."
    )
    goal = Text.from_markup(
        "[bold]To win:[/bold] The puzzle is solved when all touching "
        "sides between tiles match in color."
    )

    panel = Panel(
        Group(steps, Panel(example, border_style="blue"), Text(""), goal),
        title="[bold]How to Play[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
        width=72,
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))


def _draw_confirm(screen: Screen) -> None:
    _draw_game(screen)
    body = Text.from_markup(
        f"You've made [bold]{screen.game.move_count}[/bold] moves. Are you sure "
        "you want to start a new game? Your current progress will be lost.\n\n"
        "[bold cyan]Y[/bold cyan] [dim]start new game[/dim]    "
        "[bold cyan]any other key[/bold cyan] [dim]cancel[/dim]"
    )
    panel = Panel(body, title="[bold]Start New Game?[/bold]", border_style="yellow", width=60)
    console.print(Align.center(panel))


def _draw(screen: Screen) -> None:
    if screen.mode is Mode.RULES:
        _draw_rules()
    elif screen.mode is Mode.CONFIRM_NEW:
        _draw_confirm(screen)
    else:
        _draw_game(screen)


# -- game loop ----------------------------------------------------------------


def _play_game(screen: Screen, rng: random.Random) -> None:
    while True:
        _draw(screen)
        screen.status = ""
        key = get_key()
        if not handle_key(screen, key, rng):
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(data_dir: Path, seed: int | None = None, show_rules: bool = False) -> None:
    """Launch the Rich CLI.  Rules are shown first on the player's first visit."""
    rng = random.Random(seed)
    store = PreferencesStore(data_dir / "preferences.json")
    screen = Screen(game=GamePlay.new_game(rng))

    if show_rules or store.first_visit:
        screen.mode = Mode.RULES
        store.mark_rules_seen()

    _play_game(screen, rng)
