"""
Reading config.toml from disk.

Parsing only: section contents are checked in `validators`. The one
transformation done here is anchoring a relative `sink.spool_path` at the
directory holding the configuration file, so the spool location does not
depend on the working directory the collector was started from.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict

from ..validation import handle_config_error, ErrorSeverity

logger = logging.getLogger(__name__)

KNOWN_SECTIONS = ("paths", "scheduler", "sink", "logging")


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Parse a TOML file into a dictionary.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the file is malformed
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        logger.error(f"{description} not found: {file_path}")
        raise FileNotFoundError(f"{description} not found: {file_path}")

    logger.debug(f"Reading {description} {file_path}")
    try:
        return tomllib.loads(file_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        handle_config_error(
            error=e,
            context=f"parsing {description} {file_path.name}",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise


def load_main_config(config_path: Path) -> Dict[str, Any]:
    """
    Load config.toml and anchor its relative spool path.

    Unknown top-level sections are reported and ignored.
    """
    config_path = Path(config_path)
    config_data = load_toml_file(config_path, "main configuration file")

    unknown = sorted(set(config_data) - set(KNOWN_SECTIONS))
    if unknown:
        logger.warning(f"Ignoring unknown sections in {config_path.name}: {unknown}")

    sink = config_data.get("sink")
    if isinstance(sink, dict) and isinstance(sink.get("spool_path"), str):
        spool_path = Path(sink["spool_path"].strip())
        if sink["spool_path"].strip() and not spool_path.is_absolute():
            sink["spool_path"] = str(config_path.parent / spool_path)

    return config_data
