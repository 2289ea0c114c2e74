"""Loading of JSON rate files into a validated RateConfiguration.

Every failure surfaces as a ConfigError whose ``error_type`` names the stage
that failed, so the CLI and the API can report it without inspecting the
underlying exception.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from furnili.application.config.schema import RateConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A rate file could not be read, parsed or validated.

    Attributes:
        message: Human-readable summary.
        error_type: One of ``file_not_found``, ``file_read_error``,
            ``json_parse`` or ``validation``.
        path: The offending file, when loading from disk.
        details: Per-problem dictionaries. JSON errors carry ``line`` and
            ``column``; validation errors carry ``path``, ``message``,
            ``value`` and ``error_type``.
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
        self.details = list(details) if details else []

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as ``board_rates[1].thickness``."""
    rendered = ""
    for segment in loc:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = str(segment)
    return rendered


def _describe(detail: dict[str, Any]) -> str:
    where = detail["path"] or "<root>"
    value = detail["value"]
    if value is None or isinstance(value, (dict, list)):
        return f"  - {where}: {detail['message']}"
    return f"  - {where}: {detail['message']} (got: {value!r})"


def load_rate_config_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> RateConfiguration:
    """Validate already-parsed rate data.

    Raises:
        ConfigError: With ``error_type="validation"`` if the data does not
            match the schema.
    """
    try:
        return RateConfiguration.model_validate(data)
    except PydanticValidationError as exc:
        details = [
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
            for err in exc.errors()
        ]
        summary = "\n".join(
            ["Rate configuration validation failed:"] + [_describe(d) for d in details]
        )
        raise ConfigError(summary, "validation", path, details) from exc


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise ConfigError(f"Rate file not found: {path}", "file_not_found", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(
            f"Could not read rate file {path}: {exc}", "file_read_error", path
        ) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"Rate file {path} is not valid JSON at line {exc.lineno}, "
            f"column {exc.colno}: {exc.msg}",
            "json_parse",
            path,
            [{"line": exc.lineno, "column": exc.colno, "message": exc.msg}],
        ) from exc


def load_rate_config(path: Path) -> RateConfiguration:
    """Read, parse and validate a JSON rate file.

    Raises:
        ConfigError: If any stage fails; see ``ConfigError.error_type``.
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise ConfigError(
            f"Rate file {path} must hold a JSON object at the top level",
            "validation",
            path,
        )
    config = load_rate_config_from_dict(data, path=path)
    logger.debug(
        f"Parsed {path}: {len(config.board_rates)} board rates, "
        f"{len(config.hardware_rates)} hardware rates"
    )
    return config
