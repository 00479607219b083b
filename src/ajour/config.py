"""Configuration management for ajour."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import click

from .core.summary import DAY_BOUNDARIES

logger = logging.getLogger(__name__)

AJOUR_HOME = Path(os.environ.get("AJOUR_HOME", click.get_app_dir("ajour")))
CONFIG_FILE = AJOUR_HOME / "ajour.conf"
JOURNAL_FILE = AJOUR_HOME / "ajour.json"


@dataclass
class Config:
    """ajour configuration."""

    journal_file: Path = field(default_factory=lambda: JOURNAL_FILE)
    # "utc" keeps summaries grouped the way existing journals were grouped
    day_boundary: str = "utc"
    lock_timeout: float = 10.0


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from ajour.conf (or `path`)."""
    config = Config()
    config_file = Path(path).expanduser() if path else CONFIG_FILE

    if not config_file.exists():
        logger.debug(f"No config at {config_file}, using defaults")
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "journal_file":
                if value:
                    config.journal_file = Path(value).expanduser()
            case "day_boundary":
                boundary = value.lower()
                if boundary in DAY_BOUNDARIES:
                    config.day_boundary = boundary
                else:
                    logger.warning(f"Unknown DAY_BOUNDARY {value!r}, using {config.day_boundary!r}")
            case "lock_timeout":
                try:
                    config.lock_timeout = float(value)
                except ValueError:
                    logger.warning(f"Invalid LOCK_TIMEOUT {value!r}, using {config.lock_timeout}")
            case _:
                logger.debug(f"Ignoring unknown config key {key!r}")

    return config
