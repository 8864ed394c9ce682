"""``renobudget validate``: check a room file without estimating it.

Exit codes follow ``ValidationResult.exit_code``: 0 when the room is clean,
1 when it cannot be estimated and 2 when it can but something looks off.
"""

from pathlib import Path
from typing import Annotated

import typer

from renobudget.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Room estimate JSON file to check"),
    ],
) -> None:
    """Check a room file for schema errors, bad geometry and advisories.

    Example:
        renobudget validate kitchen.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _report(result)
    raise typer.Exit(code=result.exit_code)


def _json_lines(error: ConfigError) -> list[str]:
    lines = ["Invalid JSON syntax"]
    for detail in error.details:
        lines.append(
            f"  Line {detail.get('line', '?')}, Column {detail.get('column', '?')}: "
            f"{detail.get('message', error.message)}"
        )
    return lines


def _schema_lines(error: ConfigError) -> list[str]:
    lines: list[str] = []
    for detail in error.details:
        lines.append(f"{detail.get('path', '?')}: {detail.get('message', '')}")
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  Value: {value!r}")
    return lines


def display_load_error(error: ConfigError) -> None:
    """Print why a room file could not be loaded, on stderr."""
    if error.error_type == "file_not_found":
        lines = [f"File not found: {error.path}"]
    elif error.error_type == "json_parse":
        lines = _json_lines(error)
    elif error.error_type == "validation" and error.details:
        lines = _schema_lines(error)
    else:
        lines = [error.message]

    typer.echo("Errors:", err=True)
    for line in lines:
        typer.echo(f"  {line}", err=True)
    typer.echo()
    typer.echo("Validation failed.", err=True)


def _report(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.has_warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    counts = f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    if not result.is_valid:
        typer.echo(f"Validation failed: {counts}", err=True)
    elif result.has_warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
