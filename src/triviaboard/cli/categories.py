"""Trivia API catalog commands."""

import asyncio

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from triviaboard.errors import UpstreamError
from triviaboard.services.jservice import JServiceClient

console = Console()
app = typer.Typer(help="Browse the trivia API catalog")


@app.command("list")
def list_categories(
    limit: int = typer.Option(20, "--limit", "-l", help="Number of catalog entries to fetch"),
):
    """List categories offered by the trivia API."""

    async def _list():
        console.print("[dim]Fetching category catalog...[/dim]")

        async with JServiceClient() as client:
            try:
                catalog = await client.list_categories(limit=limit)
            except UpstreamError as e:
                console.print(f"[red]Error:[/red] {escape(str(e))}")
                raise typer.Exit(1) from e

        if not catalog:
            console.print("[yellow]No categories found[/yellow]")
            return

        table = Table(title="Categories")
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Title", style="green")
        table.add_column("Clues", style="magenta", justify="right")

        for category in catalog:
            table.add_row(str(category.id), escape(category.title), str(category.clue_count))

        console.print(table)

    asyncio.run(_list())


@app.command("show")
def show_category(
    category_id: int = typer.Argument(..., help="Category ID"),
):
    """Show every clue in one category."""

    async def _show():
        async with JServiceClient() as client:
            try:
                detail = await client.get_category(category_id)
            except UpstreamError as e:
                console.print(f"[red]Error:[/red] {escape(str(e))}")
                raise typer.Exit(1) from e

        console.print(f"\n[bold]{escape(detail.title)}[/bold] ({len(detail.clues)} clues)")
        for clue in detail.clues:
            console.print(f"  [yellow]{escape(clue.question)}[/yellow]")
            console.print(f"    [dim]{escape(clue.answer)}[/dim]")

    asyncio.run(_show())
