"""Reading room estimate files.

A room file is JSON shaped like ``EstimateConfiguration``. Anything that
keeps a file from becoming a configuration surfaces as ``ConfigError``,
tagged with one of the categories below so the CLI and the API can render
it their own way.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from renobudget.application.config.schemas import EstimateConfiguration

logger = logging.getLogger(__name__)

FILE_NOT_FOUND = "file_not_found"
FILE_READ_ERROR = "file_read_error"
JSON_PARSE = "json_parse"
VALIDATION = "validation"


class ConfigError(Exception):
    """A room file or payload that cannot be turned into a configuration.

    Attributes:
        message: Human readable summary.
        error_type: One of ``file_not_found``, ``file_read_error``,
            ``json_parse`` or ``validation``.
        path: Offending file, or None for in-memory payloads.
        details: One dict per problem. JSON problems carry ``line``,
            ``column`` and ``message``; schema problems carry ``path``,
            ``message``, ``value`` and ``error_type``.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic ``loc`` the way a user would write it.

    >>> _format_json_path(("room", "openings", 0, "width"))
    'room.openings[0].width'
    """
    rendered = ""
    for segment in loc:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = str(segment)
    return rendered


def _schema_problem(err: dict[str, Any]) -> dict[str, Any]:
    return {
        "path": _format_json_path(err["loc"]),
        "message": err["msg"],
        "value": err.get("input"),
        "error_type": err["type"],
    }


def _summary(problems: list[dict[str, Any]]) -> str:
    # Whole-object inputs are not echoed.
    lines = [f"Room configuration has {len(problems)} problem(s):"]
    for problem in problems:
        line = f"  - {problem['path']}: {problem['message']}"
        value = problem["value"]
        if value is not None and not isinstance(value, dict):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def config_error_from_validation(
    error: PydanticValidationError, path: Path | None = None
) -> ConfigError:
    """Wrap a pydantic failure as a ``validation`` ConfigError."""
    problems = [_schema_problem(err) for err in error.errors()]
    logger.debug(f"Rejected configuration with {len(problems)} problem(s)")
    return ConfigError(
        message=_summary(problems),
        error_type=VALIDATION,
        path=path,
        details=problems,
    )


def _validate(data: Any, path: Path | None = None) -> EstimateConfiguration:
    try:
        return EstimateConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise config_error_from_validation(e, path) from e


def load_config(path: Path) -> EstimateConfiguration:
    """Read ``path`` and validate it as a room estimate configuration.

    Raises:
        ConfigError: Tagged ``file_not_found``, ``file_read_error``,
            ``json_parse`` or ``validation``.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type=FILE_NOT_FOUND,
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Cannot read {path}: {e}",
            error_type=FILE_READ_ERROR,
            path=path,
        ) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"{path} is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type=JSON_PARSE,
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    logger.debug(f"Parsed {path}")
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> EstimateConfiguration:
    """Validate an already parsed payload, such as an API request body."""
    return _validate(data)
