"""
Reads the raw contents of kernel pseudo-files.

Every call performs one full read; nothing is cached between cycles.
"""

import logging
import os

from ...validation import StatFileNotFoundError, StatFileReadError

logger = logging.getLogger(__name__)


def read_primary(path: str) -> bytes:
    """
    Read the stat file, checking that it exists first.

    Only a missing path counts as "does not exist"; any other stat failure
    (permission denied on a parent, a file used as a directory) is a read error.

    Args:
        path: Path to the stat file (normally /proc/stat).

    Returns:
        The full file contents.

    Raises:
        StatFileNotFoundError: If the path does not exist.
        StatFileReadError: If the path cannot be stat'd or read.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        raise StatFileNotFoundError(path) from None
    except OSError as e:
        raise StatFileReadError(path, e) from e

    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise StatFileReadError(path, e) from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return data


def read_secondary(path: str) -> bytes:
    """
    Read the entropy file. Any failure, including a missing file, is a read error.

    Raises:
        StatFileReadError: If the file cannot be opened or read.
    """
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise StatFileReadError(path, e) from e
