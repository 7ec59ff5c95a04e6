"""
Extracts kernel counters from raw pseudo-file buffers.

The stat buffer is not parsed line by line. It is split into whitespace
separated tokens, and any token that matches a known keyword has the next
one or two tokens read as integers. Lines without a known keyword are
ignored, so kernels with extra or reordered lines still produce whatever
fields they do carry.

Integers follow strict base-10 rules: an optional sign followed by ASCII
digits, within the signed 64-bit range. Python's ``int()`` alone is more
lenient (it accepts underscores, surrounding whitespace and non-ASCII
digits), so tokens are matched against a pattern first.
"""

import logging
import re
from typing import Dict, Tuple

from ...validation import StatParseError

logger = logging.getLogger(__name__)

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# keyword -> output field for each following token, in order
KEYWORD_FIELDS: Dict[bytes, Tuple[str, ...]] = {
    b"intr": ("interrupts",),
    b"ctxt": ("context_switches",),
    b"processes": ("processes_forked",),
    b"btime": ("boot_time",),
    b"page": ("disk_pages_in", "disk_pages_out"),
}


def parse_int64(text: str) -> int:
    """
    Parse a base-10 signed 64-bit integer.

    Raises:
        ValueError: If ``text`` is not a plain decimal integer or is out of range.
    """
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value


def parse_primary(buffer: bytes) -> Dict[str, int]:
    """
    Extract the recognized counters from a /proc/stat buffer.

    Never raises. A field is left out when its keyword is absent, when the
    token after it is missing (keyword at the end of the buffer), or when
    that token is not a valid integer. A repeated keyword overwrites the
    earlier value.

    Args:
        buffer: Raw stat file contents.

    Returns:
        Mapping of output field name to value.
    """
    tokens = buffer.split()
    fields: Dict[str, int] = {}

    for i, token in enumerate(tokens):
        names = KEYWORD_FIELDS.get(token)
        if names is None:
            continue

        for offset, name in enumerate(names, start=1):
            if i + offset >= len(tokens):
                logger.debug(f"Keyword {token!r} has no value for {name}; skipping")
                continue
            raw = tokens[i + offset].decode("ascii", errors="replace")
            try:
                fields[name] = parse_int64(raw)
            except ValueError:
                logger.debug(f"Skipping {name}: {raw!r} is not an integer")

    return fields


def parse_secondary(buffer: bytes, path: str = "") -> int:
    """
    Parse the entropy buffer as one integer, ignoring surrounding whitespace.

    Args:
        buffer: Raw entropy file contents.
        path: Source path, used in the error message.

    Raises:
        StatParseError: If the trimmed text is empty, non-numeric or out of range.
    """
    text = buffer.decode("utf-8", errors="replace").strip()
    try:
        return parse_int64(text)
    except ValueError:
        raise StatParseError(path, text) from None
