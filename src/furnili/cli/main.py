"""Typer CLI for furniture BOM calculation."""

import logging
from typing import Annotated

import typer

from furnili.cli.commands import calculate_command, rates_app

app = typer.Typer(
    name="furnili",
    help="Calculate bills of materials for furniture units.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Furniture bill-of-materials calculator."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Register commands
app.command(name="calculate")(calculate_command)
app.add_typer(rates_app, name="rates")


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="Bind address")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", "-p", help="Bind port")] = 8000,
    reload: Annotated[bool, typer.Option("--reload", help="Auto-reload on changes")] = False,
) -> None:
    """Run the REST API with uvicorn."""
    import uvicorn

    uvicorn.run("furnili.web:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
