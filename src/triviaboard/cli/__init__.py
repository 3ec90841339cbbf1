"""CLI commands using Typer."""

import typer

from triviaboard.cli.categories import app as categories_app
from triviaboard.cli.game import app as game_app

app = typer.Typer(name="triviaboard", help="Trivia Board CLI")

# Register sub-apps
app.add_typer(game_app, name="game")
app.add_typer(categories_app, name="categories")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Configure logging before running a command."""
    from triviaboard.logging import setup_logging

    setup_logging("DEBUG" if verbose else None)


@app.command()
def version():
    """Show version information."""
    from triviaboard import __version__

    typer.echo(f"Trivia Board v{__version__}")


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind to"),
    port: int = typer.Option(8000, help="Port to bind to"),
    reload: bool = typer.Option(False, help="Enable auto-reload"),
):
    """Run the API server."""
    import uvicorn

    from triviaboard.logging import get_uvicorn_log_config

    uvicorn.run(
        "triviaboard.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=get_uvicorn_log_config(),
    )


if __name__ == "__main__":
    app()
