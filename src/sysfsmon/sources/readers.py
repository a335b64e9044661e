"""
Raw readers and parsers for procfs/sysfs nodes.

The parsers work on text and never raise for malformed content; they return
an empty mapping or None instead. The readers wrap them with file access and
turn I/O failures into the same "unavailable" results, logging why.

Supported layouts:
- multi-line key/value files such as /proc/vmstat ("nr_free_pages 12345")
- single scalar files, hex ("0x1A") or decimal ("26")
- single-line fixed-arity files such as /sys/block/zram0/mm_stat, whitespace
  or comma separated, with a minimum number of required fields
"""

import logging
import re
from typing import Dict, List, NamedTuple, Optional

from ..validation import ErrorSeverity, handle_file_error

logger = logging.getLogger(__name__)

UINT64_MAX = 2 ** 64 - 1

_HEX_PREFIX = re.compile(r"0x([0-9a-fA-F]+)")
# ASCII digits only, as the kernel writes them.
_SIGNED_DECIMAL_PREFIX = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_DECIMAL = re.compile(r"[0-9]+")
_FIELD_SEPARATORS = re.compile(r"[\s,]+")


class ResetReading(NamedTuple):
    """Result of reading a self-resetting counter."""
    value: int
    # False when writing 0 back failed; the value is still valid.
    reset_ok: bool


def parse_unsigned(text: str) -> Optional[int]:
    """Parse a trimmed, unsigned 64-bit decimal. Returns None when invalid."""
    token = text.strip()
    if not _UNSIGNED_DECIMAL.fullmatch(token):
        return None
    value = int(token)
    if value > UINT64_MAX:
        return None
    return value


def parse_key_value_text(text: str) -> Dict[str, int]:
    """
    Parse `<key><whitespace><unsigned decimal>` lines.

    Lines that do not split into exactly two tokens, or whose value is not an
    unsigned integer, are skipped one by one.

    >>> parse_key_value_text("nr_free_pages 12345\\nbad_line\\nnr_anon_pages 99\\n")
    {'nr_free_pages': 12345, 'nr_anon_pages': 99}
    """
    data: Dict[str, int] = {}
    for line in text.splitlines():
        words = line.split()
        if len(words) != 2:
            continue
        value = parse_unsigned(words[1])
        if value is None:
            continue
        data[words[0]] = value
    return data


def parse_scalar(text: str) -> Optional[int]:
    """
    Parse a scalar node: `0x`-prefixed hex or decimal.

    Like a scanf conversion, trailing content after the number is ignored.
    Returns None when the content starts with neither form.
    """
    content = text.strip()
    if content.startswith("0x"):
        match = _HEX_PREFIX.match(content)
        if not match:
            return None
        return int(match.group(1), 16)
    match = _SIGNED_DECIMAL_PREFIX.match(content)
    if not match:
        return None
    return int(match.group(0))


def _scan_integers(text: str, limit: Optional[int] = None) -> List[int]:
    values: List[int] = []
    for token in _FIELD_SEPARATORS.split(text.strip()):
        if limit is not None and len(values) >= limit:
            break
        if not _SIGNED_DECIMAL_PREFIX.fullmatch(token):
            break
        values.append(int(token))
    return values


def parse_fixed_arity(text: str, min_fields: int, max_fields: Optional[int] = None) -> Optional[List[int]]:
    """
    Scan up to `max_fields` integers from a single-line node.

    Scanning stops at the first token that is not an integer. Returns None when
    fewer than `min_fields` were scanned. Trailing optional fields that are
    absent are simply missing from the result.
    """
    values = _scan_integers(text, max_fields)
    if len(values) < min_fields:
        return None
    return values


def parse_int_sequence(text: str) -> List[int]:
    """All leading integers of a whitespace/comma separated list."""
    return _scan_integers(text)


def read_text(path: str) -> Optional[str]:
    """
    Read a whole node as text.

    Returns None when the path is not configured or cannot be read.
    """
    if not path:
        return None
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        handle_file_error(e, f"reading {path}", severity=ErrorSeverity.INFO, reraise=False, logger=logger)
        return None


def read_key_value_file(path: str) -> Dict[str, int]:
    """Read a /proc/vmstat style node. An empty mapping means unavailable."""
    if not path:
        logger.info("key/value node path is not specified")
        return {}
    text = read_text(path)
    if text is None:
        logger.error(f"Unable to read key/value data from {path}")
        return {}
    return parse_key_value_text(text)


def read_scalar(path: str) -> Optional[int]:
    text = read_text(path)
    if text is None:
        return None
    value = parse_scalar(text)
    if value is None:
        logger.error(f"Unable to convert {path} to int: {text.strip()[:32]!r}")
    return value


def read_unsigned(path: str) -> Optional[int]:
    text = read_text(path)
    if text is None:
        return None
    value = parse_unsigned(text)
    if value is None:
        logger.info(f"Unable to convert {path} to uint: {text.strip()[:32]!r}")
    return value


def read_fixed_arity_line(path: str, min_fields: int, max_fields: Optional[int] = None) -> Optional[List[int]]:
    text = read_text(path)
    if text is None:
        return None
    values = parse_fixed_arity(text, min_fields, max_fields)
    if values is None:
        logger.error(
            f"Unable to parse {path}: expected at least {min_fields} fields in {text.strip()[:64]!r}"
        )
    return values


def writeback(path: str, value: int) -> bool:
    """Write a value back to a node. Returns False on failure."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(str(value))
        return True
    except OSError as e:
        handle_file_error(e, f"writing {value} to {path}", severity=ErrorSeverity.WARNING, reraise=False, logger=logger)
        return False


def read_scalar_and_reset(path: str) -> Optional[ResetReading]:
    """
    Read a self-resetting counter and write 0 back.

    The next read then reflects only activity since this one. A failed
    write-back does not invalidate the value; it is reported via `reset_ok`.
    Returns None when the counter could not be read or parsed.
    """
    value = read_scalar(path)
    if value is None:
        return None
    reset_ok = writeback(path, 0)
    if not reset_ok:
        logger.error(f"Failed to clear counter {path}; next read will include this period")
    return ResetReading(value=value, reset_ok=reset_ok)
