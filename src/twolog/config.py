"""Configuration management for 2log."""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TWOLOG_HOME = Path(os.environ.get("TWOLOG_HOME", Path.home() / ".2log"))
CONFIG_FILE = TWOLOG_HOME / "2log.conf"

DEFAULT_JOURNAL_DIR = str(Path.home() / "Documents" / "ThirdTime" / "Journal")
DEFAULT_TODAY_HEADER = "## Today"


@dataclass
class Config:
    """2log configuration."""

    journal_dir: str = DEFAULT_JOURNAL_DIR
    today_header: str = DEFAULT_TODAY_HEADER


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    # A comment needs whitespace before its "#"; headers like "## Today" start with one.
    return re.split(r"\s+#", value, maxsplit=1)[0].strip()


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration: defaults, then 2log.conf, then environment overrides."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if config_file.exists():
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
                case "journal_dir":
                    config.journal_dir = value
                case "today_header":
                    if value:
                        config.today_header = value
                    else:
                        logger.warning(f"Empty TODAY_HEADER in {config_file}, using {config.today_header!r}")
                case _:
                    logger.debug(f"Ignoring unknown config key {key!r} in {config_file}")

    if journal_dir := os.environ.get("TWOLOG_JOURNAL_DIR"):
        config.journal_dir = journal_dir
    if today_header := os.environ.get("TWOLOG_TODAY_HEADER"):
        config.today_header = today_header

    return config
