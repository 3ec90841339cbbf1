"""Terminal game commands."""

import asyncio
import random

import typer
from rich.console import Console
from rich.markup import escape
from rich.status import Status
from rich.table import Table

from triviaboard.config import settings
from triviaboard.errors import TriviaBoardError
from triviaboard.models.board import Board, ClueCoordinate, RevealState
from triviaboard.services.game import GameSession
from triviaboard.services.jservice import JServiceClient

console = Console()
app = typer.Typer(help="Play a trivia board in the terminal")

PROMPT = "Clue as 'column row' (r = restart, q = quit)"


def render_board(board: Board) -> Table:
    """Draw a board as a rich table: one column per category, one row per clue."""
    table = Table(show_lines=True)
    table.add_column("#", style="dim", justify="right")
    for category_index, category in enumerate(board.categories):
        table.add_column(f"{category_index}: {escape(category.title)}", style="bold")

    for clue_index in range(board.clue_count):
        cells = [str(clue_index)]
        for category in board.categories:
            clue = category.clues[clue_index]
            if clue.reveal_state == RevealState.QUESTION:
                cells.append(f"[yellow]{escape(clue.question)}[/yellow]")
            elif clue.reveal_state == RevealState.ANSWER:
                cells.append(f"[green]{escape(clue.answer)}[/green]")
            else:
                cells.append("?")
        table.add_row(*cells)

    return table


class ConsoleRenderer:
    """Shows a spinner while loading and redraws the board on changes."""

    def __init__(self, console: Console):
        self.console = console
        self._status: Status | None = None
        self._board: Board | None = None

    def on_load_start(self) -> None:
        self._board = None
        self._status = self.console.status("[dim]Loading board...[/dim]")
        self._status.start()

    def on_load_end(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def on_load_failed(self, error: Exception) -> None:
        self.console.print(f"[red]Error:[/red] {escape(str(error))}")

    def on_board_ready(self, board: Board) -> None:
        self._board = board
        self.console.print(render_board(board))

    def on_clue_revealed(self, coordinate: ClueCoordinate, text: str) -> None:
        self.console.print(f"[cyan]{coordinate}[/cyan] {escape(text)}")
        if self._board is not None:
            self.console.print(render_board(self._board))


def _rng(seed: int | None) -> random.Random | None:
    return random.Random(seed) if seed is not None else None


@app.command("board")
def show_board(
    seed: int | None = typer.Option(None, "--seed", "-s", help="Random seed for category and clue sampling"),
    answers: bool = typer.Option(False, "--answers", help="Show questions and answers"),
):
    """Fetch and print a fresh board."""

    async def _board():
        async with JServiceClient() as client:
            game = GameSession(client, settings=settings, rng=_rng(seed))
            try:
                board = await game.start_game()
            except TriviaBoardError as e:
                console.print(f"[red]Error:[/red] {escape(str(e))}")
                raise typer.Exit(1) from e

        if answers:
            for category_index in range(board.category_count):
                for clue_index in range(board.clue_count):
                    coordinate = ClueCoordinate(category_index, clue_index)
                    # Two clicks: question, then answer
                    game.reveal(coordinate)
                    game.reveal(coordinate)

        console.print(render_board(board))

    asyncio.run(_board())


@app.command("play")
def play(
    seed: int | None = typer.Option(None, "--seed", "-s", help="Random seed for category and clue sampling"),
):
    """Play interactively: pick cells to reveal questions, then answers."""

    async def _play():
        async with JServiceClient() as client:
            game = GameSession(client, renderer=ConsoleRenderer(console), settings=settings, rng=_rng(seed))

            try:
                await game.start_game()
            except TriviaBoardError as e:
                raise typer.Exit(1) from e

            while True:
                choice = typer.prompt(PROMPT).strip().lower()
                if choice == "q":
                    break
                if choice == "r":
                    try:
                        await game.start_game()
                    except TriviaBoardError as e:
                        raise typer.Exit(1) from e
                    continue

                try:
                    coordinate = ClueCoordinate.parse(choice)
                    result = game.reveal(coordinate)
                except (ValueError, TriviaBoardError) as e:
                    console.print(f"[yellow]{escape(str(e))}[/yellow]")
                    continue

                if not result.changed:
                    console.print(f"[dim]{coordinate} is already answered[/dim]")
                elif game.current_board().is_complete():
                    console.print("[green]Board complete![/green]")
                    break

    asyncio.run(_play())
