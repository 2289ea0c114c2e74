"""Rates commands for listing reference board and hardware rates."""

from pathlib import Path
from typing import Annotated

import typer

from furnili.application import ServiceFactory
from furnili.application.config import ConfigError
from furnili.contracts.protocols import RateProvider
from furnili.infrastructure import RateTableFormatter

rates_app = typer.Typer(
    name="rates",
    help="Show reference rate tables.",
)

RatesFileOption = Annotated[
    Path | None,
    typer.Option("--rates", "-r", help="JSON rate file (default: bundled rates)"),
]


def _load_rates(rates_path: Path | None) -> RateProvider:
    try:
        return ServiceFactory(rates_path=rates_path).get_rate_provider()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        for detail in e.details:
            path = detail.get("path")
            if path:
                typer.echo(f"  {path}: {detail.get('message')}", err=True)
        raise typer.Exit(code=1)


@rates_app.command(name="board")
def board_rates(rates: RatesFileOption = None) -> None:
    """List active board rates per square foot.

    Example:
        furnili rates board --rates my-rates.json
    """
    provider = _load_rates(rates)
    typer.echo(RateTableFormatter().format_board_rates(provider.board_rates()))


@rates_app.command(name="hardware")
def hardware_rates(rates: RatesFileOption = None) -> None:
    """List active hardware rates."""
    provider = _load_rates(rates)
    typer.echo(RateTableFormatter().format_hardware_rates(provider.hardware_rates()))
