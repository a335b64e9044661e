"""
System property access.

Boot timing is published as system properties rather than sysfs nodes. They
are read through the `getprop` tool.
"""

import logging
import subprocess
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


def run_command(command: List[str], timeout: float = 5.0) -> Tuple[int, str, str]:
    """Execute a command and capture its output.

    Args:
        command: Argument vector to execute.
        timeout: Seconds to wait before giving up.

    Returns:
        Tuple of (return_code, stdout_string, stderr_string).
        return_code is -1 for execution errors.
    """
    logger.debug(f"Executing command: {command}")
    try:
        process = subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
        return process.returncode, process.stdout, process.stderr
    except FileNotFoundError as e:
        logger.debug(f"Command not found: {command[0]}: {e}")
        return -1, "", f"Error: Command not found '{command[0]}'"
    except subprocess.TimeoutExpired:
        logger.error(f"Command {command} timed out after {timeout}s")
        return -1, "", "Error: timed out"
    except OSError as e:
        logger.error(f"Unexpected error while running {command}: {type(e).__name__}: {e}")
        return -1, "", f"An unexpected error occurred: {e}"


class PropertyReader:
    """Reads system properties with `getprop`."""

    def __init__(self, getprop: str = "getprop"):
        self.getprop = getprop

    def get(self, name: str) -> Optional[str]:
        returncode, stdout, _ = run_command([self.getprop, name])
        if returncode != 0:
            return None
        value = stdout.strip()
        return value or None

    def get_int(self, name: str, default: int = 0) -> int:
        """Integer property, or `default` when unset or not an integer."""
        value = self.get(name)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.info(f"Property {name} is not an integer: {value!r}")
            return default
