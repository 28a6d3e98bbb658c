"""Rich terminal frontend — replays a scripted sequence of tilts.

Each step is drawn as a coloured table together with the score, so a
game can be followed move by move without any keyboard handling.
"""

from __future__ import annotations

import logging

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import MAX_PIECE
from backend.engine.gamegenerator import TileGenerator
from backend.engine.gameplay import GamePlay
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)

console = Console()

_KEY_MAP: dict[str, Direction] = {
    "u": Direction.UP,
    "d": Direction.DOWN,
    "l": Direction.LEFT,
    "r": Direction.RIGHT,
}

_TILE_STYLES: dict[int, str] = {
    2: "bold #776e65 on #eee4da",
    4: "bold #776e65 on #ede0c8",
    8: "bold white on #f2b179",
    16: "bold white on #f59563",
    32: "bold white on #f67c5f",
    64: "bold white on #f65e3b",
    128: "bold white on #edcf72",
    256: "bold white on #edcc61",
    512: "bold white on #edc850",
    1024: "bold white on #edc53f",
    2048: "bold white on #edc22e",
}


# -- helpers ------------------------------------------------------------------


def parse_moves(moves: str) -> list[Direction]:
    """Turn a string such as ``"uulrd"`` into directions.

    Whitespace and commas are skipped; any other unknown character is
    logged and ignored.
    """
    directions: list[Direction] = []
    for ch in moves.lower():
        if ch in " ,":
            continue
        direction = _KEY_MAP.get(ch)
        if direction is None:
            logger.warning("Ignoring unknown move %r", ch)
            continue
        directions.append(direction)
    return directions


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the grid, top row first."""
    width = max(4, max((len(str(t.value)) for t in board.tiles()), default=1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width, justify="center")

    for row in range(board.size - 1, -1, -1):
        cells: list[Text] = []
        for col in range(board.size):
            t = board.tile(col, row)
            if t is None:
                cells.append(Text("·", style="dim"))
            else:
                style = _TILE_STYLES.get(t.value, "bold white on #3c3a32")
                cells.append(Text(f"{t.value:>{width}}", style=style))
        table.add_row(*cells)

    return table


def _draw_game(game: GamePlay, title: str) -> None:
    stats = Text()
    stats.append("  Score: ", style="dim")
    stats.append(str(game.score), style="bold yellow")
    stats.append("    Max: ", style="dim")
    stats.append(str(game.max_score), style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")

    parts = [Align.center(_render_board(game.board)), Align.center(stats)]
    border = "bright_blue"
    if game.game_over:
        parts.append(Align.center(Text("\n  GAME OVER  ", style="bold red")))
        border = "red"

    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )
    console.print(Align.center(panel))


# -- public entry point -------------------------------------------------------


def run(
    size: int,
    moves: str = "",
    seed: int | None = None,
    max_piece: int = MAX_PIECE,
    plain: bool = False,
) -> GamePlay:
    """Start a game, replay *moves*, and draw every step.

    With *plain* the canonical text rendering is printed instead of Rich
    panels.
    """
    size_label = f"2048  {size}×{size}"

    def draw(game: GamePlay, title: str) -> None:
        if plain:
            console.print(str(game), markup=False, highlight=False)
        else:
            _draw_game(game, title)

    generator = TileGenerator(seed)
    game = GamePlay(size, max_piece=max_piece)
    generator.start(game)
    draw(game, size_label)

    for direction in parse_moves(moves):
        if game.game_over:
            logger.info("Game over, skipping remaining moves")
            break
        if game.tilt(direction):
            if not game.game_over:
                generator.add_random_tile(game)
            draw(game, f"{size_label}  ·  {direction.value}")
        else:
            logger.info("Tilt %s did not change the board", direction.value)

    draw(game, f"{size_label}  ·  final")
    return game
