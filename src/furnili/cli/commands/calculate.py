"""Calculate command for producing a bill of materials from the CLI."""

from pathlib import Path
from typing import Annotated

import typer

from furnili.application import CalculationRequest, ServiceFactory
from furnili.application.config import ConfigError
from furnili.domain import CustomPart, RateLookupError, ValidationError
from furnili.infrastructure import BomReportFormatter

OUTPUT_FORMATS = ("text", "json")


def parse_custom_part(value: str) -> CustomPart:
    """Parse a ``NAME:QTY[:LxW]`` custom part option.

    Examples:
        >>> parse_custom_part("Loft Panel:2:900x450").quantity
        2

    Raises:
        ValidationError: If the value is malformed.
    """
    fields = value.split(":")
    if len(fields) not in (2, 3) or not fields[0].strip():
        raise ValidationError(
            f"Invalid custom part {value!r}; expected NAME:QTY[:LxW]",
            field="custom",
            value=value,
        )
    name, quantity_text = fields[0].strip(), fields[1].strip()
    try:
        quantity = int(quantity_text)
    except ValueError:
        raise ValidationError(
            f"Invalid quantity {quantity_text!r} for custom part {name!r}",
            field="custom",
            value=value,
        ) from None

    length = width = None
    if len(fields) == 3:
        size = fields[2].lower().split("x")
        try:
            length, width = (float(s) for s in size)
        except ValueError:
            raise ValidationError(
                f"Invalid size {fields[2]!r} for custom part {name!r}; expected LxW",
                field="custom",
                value=value,
            ) from None
    return CustomPart(name=name, quantity=quantity, length=length, width=width)


def calculate_command(
    unit_type: Annotated[
        str,
        typer.Option("--unit-type", "-u", help="Unit type, e.g. wardrobe, tv_panel"),
    ],
    height: Annotated[float, typer.Option("--height", "-h", help="Overall height")],
    width: Annotated[float, typer.Option("--width", "-w", help="Overall width")],
    depth: Annotated[float, typer.Option("--depth", "-d", help="Overall depth")],
    board_type: Annotated[
        str,
        typer.Option("--board-type", "-b", help="Board material, e.g. mdf, ply"),
    ],
    unit: Annotated[
        str,
        typer.Option("--unit", help="Unit of the dimensions: mm or ft"),
    ] = "mm",
    thickness: Annotated[
        str,
        typer.Option("--thickness", "-t", help="Board thickness: 6, 12, 18 or 25 mm"),
    ] = "18",
    finish: Annotated[
        str,
        typer.Option("--finish", help="Board finish, e.g. laminate, veneer"),
    ] = "laminate",
    shelves: Annotated[int, typer.Option("--shelves", help="Number of shelves")] = 0,
    drawers: Annotated[int, typer.Option("--drawers", help="Number of drawers")] = 0,
    shutters: Annotated[int, typer.Option("--shutters", help="Number of shutters")] = 0,
    doors: Annotated[int, typer.Option("--doors", help="Number of doors")] = 0,
    back_panels: Annotated[
        int, typer.Option("--back-panels", help="Number of back panels")
    ] = 0,
    custom: Annotated[
        list[str] | None,
        typer.Option("--custom", help="Custom part NAME:QTY[:LxW]; repeatable"),
    ] = None,
    carcass: Annotated[
        bool,
        typer.Option("--carcass", help="Also list top, bottom and side panels"),
    ] = False,
    rates: Annotated[
        Path | None,
        typer.Option("--rates", "-r", help="JSON rate file (default: bundled rates)"),
    ] = None,
    store: Annotated[
        Path | None,
        typer.Option("--store", help="JSON file to keep calculation history in"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
) -> None:
    """Calculate a bill of materials for one furniture unit.

    Examples:
        furnili calculate -u wardrobe -h 2400 -w 1200 -d 600 -b mdf --shutters 2 --shelves 3
        furnili calculate -u tv_panel -h 6 -w 8 -d 1.5 --unit ft -b ply --format json
        furnili calculate -u wardrobe -h 2100 -w 900 -d 560 -b mdf --custom "Loft Panel:1:900x450"
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Error: Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    factory = ServiceFactory(rates_path=rates, store_path=store)
    try:
        command = factory.create_calculate_command()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        request = CalculationRequest(
            unit_type=unit_type,
            height=height,
            width=width,
            depth=depth,
            unit_of_measure=unit,
            board_type=board_type,
            board_thickness=thickness,
            finish=finish,
            shelves=shelves,
            drawers=drawers,
            shutters=shutters,
            doors=doors,
            back_panels=back_panels,
            custom_parts=[parse_custom_part(value) for value in custom or []],
            include_carcass=carcass,
        )
        calculation = command.execute(request)
    except (ValidationError, RateLookupError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(BomReportFormatter().format(calculation, output_format))
