"""Typer CLI for renovation material estimates."""

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from renobudget.application import PricingTier, get_factory, resolve_price_table
from renobudget.application.config import (
    ConfigError,
    EstimateConfiguration,
    config_to_geometry,
    load_config,
    merge_config_with_cli,
)
from renobudget.cli.commands import display_load_error, validate_command
from renobudget.domain.catalog import DEFAULT_CURRENCY, material_info
from renobudget.domain.exceptions import EstimationError
from renobudget.domain.services.geometry import resolve_room_walls
from renobudget.infrastructure.pricing_client import PriceSourceError


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="renobudget",
    help="Estimate renovation materials and costs from room dimensions.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Estimate renovation materials and costs from room dimensions."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load(config_file: Path) -> EstimateConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _fetch_tier_prices(tier: PricingTier) -> dict[str, float]:
    """Fetch prices for ``tier`` from the configured price source."""
    source = get_factory().get_price_source()
    if source is None:
        typer.echo(
            "Error: no price source configured "
            "(set RENOBUDGET_PRICES_URL and RENOBUDGET_PRICES_KEY)",
            err=True,
        )
        raise typer.Exit(code=1)
    try:
        return asyncio.run(source.fetch_tier_prices(tier))
    except PriceSourceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def estimate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON room estimate file"),
    ],
    osb_floor: Annotated[
        bool | None,
        typer.Option("--osb/--no-osb", help="Lay an OSB subfloor with baseboards"),
    ] = None,
    suspended_ceiling: Annotated[
        bool | None,
        typer.Option("--ceiling/--no-ceiling", help="Build a suspended ceiling"),
    ] = None,
    sockets: Annotated[
        int | None,
        typer.Option("--sockets", help="Number of sockets"),
    ] = None,
    switches: Annotated[
        int | None,
        typer.Option("--switches", help="Number of switches"),
    ] = None,
    tier: Annotated[
        PricingTier | None,
        typer.Option("--tier", help="Price tier: budget, mid_range, premium"),
    ] = None,
    fetch_prices: Annotated[
        bool,
        typer.Option("--fetch-prices", help="Fetch tier prices from the price source"),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = OutputFormat.TEXT,
) -> None:
    """Estimate materials and costs for one room.

    CLI options override values from the configuration file.

    Examples:
        renobudget estimate kitchen.json
        renobudget estimate kitchen.json --osb --sockets 6 --switches 2
        renobudget estimate kitchen.json --tier premium --fetch-prices --format json
    """
    config = _load(config_file)
    try:
        config = merge_config_with_cli(
            config,
            use_osb_floor=osb_floor,
            use_suspended_ceiling=suspended_ceiling,
            socket_count=sockets,
            switch_count=switches,
            tier=tier.value if tier is not None else None,
        )
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    tier_prices = (
        _fetch_tier_prices(PricingTier(config.pricing.tier)) if fetch_prices else None
    )

    factory = get_factory()
    result = factory.create_estimate_command().execute_config(config, tier_prices)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == OutputFormat.JSON:
        typer.echo(factory.get_json_exporter().export(result))
    else:
        typer.echo(factory.get_material_report_formatter().format(result))


@app.command()
def walls(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON room estimate file"),
    ],
) -> None:
    """List the walls of a room with ids, lengths and coordinates.

    Wall ids are the values openings refer to in the configuration file.

    Example:
        renobudget walls living-room.json
    """
    config = _load(config_file)
    try:
        room_walls = resolve_room_walls(config_to_geometry(config.room))
    except EstimationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(get_factory().get_wall_list_formatter().format(room_walls))


@app.command()
def prices(
    tier: Annotated[
        PricingTier,
        typer.Option("--tier", help="Price tier: budget, mid_range, premium"),
    ] = PricingTier.MID_RANGE,
    fetch: Annotated[
        bool,
        typer.Option("--fetch", help="Fetch tier prices from the price source"),
    ] = False,
) -> None:
    """Show the unit price of every material.

    Without --fetch the built-in default prices are shown.

    Examples:
        renobudget prices
        renobudget prices --tier budget --fetch
    """
    tier_prices = _fetch_tier_prices(tier) if fetch else None
    table = resolve_price_table(tier_prices)

    source = f"{tier.value} tier" if fetch else "defaults"
    typer.echo(f"UNIT PRICES ({source}, {DEFAULT_CURRENCY})")
    typer.echo("=" * 56)
    for key, price in table.prices.items():
        info = material_info(key)
        typer.echo(f"{info.name:<30} {price:>10.2f} / {info.unit.value}")


@app.command()
def summary(
    config_files: Annotated[
        list[Path],
        typer.Argument(help="Room estimate files belonging to one project"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = OutputFormat.TEXT,
) -> None:
    """Summarize a project made of several rooms.

    Rooms whose estimate fails are reported and counted as not estimated.

    Example:
        renobudget summary kitchen.json bathroom.json bedroom.json
    """
    configs = [_load(path) for path in config_files]
    currency = configs[0].pricing.currency if configs else DEFAULT_CURRENCY

    factory = get_factory()
    result = factory.create_summary_command().execute(configs, currency=currency)
    for error in result.errors:
        typer.echo(f"Warning: {error}", err=True)

    if output_format == OutputFormat.JSON:
        typer.echo(factory.get_json_exporter().export_project(result))
    else:
        typer.echo(
            factory.get_project_summary_formatter().format(result.summary, currency)
        )


if __name__ == "__main__":
    app()
