"""Configuration loading for pdfprinter print defaults."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from pdfprinter.command import PrintOptions
from pdfprinter.exceptions import ConfigError

_STRING_FIELDS = ("printer", "sumatra_pdf_path")


@dataclass
class PrintDefaults:
    """Print defaults read from a configuration file."""
    printer: str | None = None
    sumatra_pdf_path: str | None = None
    win32: list[str] = field(default_factory=list)

    def to_options(
        self,
        printer: str | None = None,
        sumatra_pdf_path: str | None = None,
        win32: list[str] | None = None,
    ) -> PrintOptions:
        """Merge explicit values over these defaults.

        Explicit printer and path replace the configured ones; explicit
        win32 options are appended after the configured ones.
        """
        merged_win32 = [*self.win32, *(win32 or [])]
        return PrintOptions(
            printer=printer or self.printer,
            sumatra_pdf_path=sumatra_pdf_path or self.sumatra_pdf_path,
            win32=merged_win32 or None,
        )


def parse_defaults(data: dict[str, Any]) -> PrintDefaults:
    """Validate a parsed configuration mapping."""
    known = set(_STRING_FIELDS) | {"win32"}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            {"valid": ", ".join(sorted(known))},
        )

    for name in _STRING_FIELDS:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"'{name}' must be a string")

    win32 = data.get("win32") or []
    if isinstance(win32, str):
        # A single option string is accepted for convenience
        win32 = [win32]
    if not isinstance(win32, list):
        raise ConfigError("'win32' must be a list of option strings")

    return PrintDefaults(
        printer=data.get("printer"),
        sumatra_pdf_path=data.get("sumatra_pdf_path"),
        win32=[str(item) for item in win32],
    )


def load_config(config_path: Path) -> PrintDefaults:
    """Load and validate a configuration file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", {"file": config_path}) from e

    if data is None:
        return PrintDefaults()
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a YAML dictionary", {"file": config_path})

    return parse_defaults(data)
