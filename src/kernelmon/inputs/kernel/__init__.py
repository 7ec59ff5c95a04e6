"""
Kernel counters input (/proc/stat and entropy_avail).

Linux only: the input registers itself only when running on Linux.
"""

import logging

import psutil

from .collector import INPUT_NAME, KernelStats
from .extractor import KEYWORD_FIELDS, parse_int64, parse_primary, parse_secondary
from .reader import read_primary, read_secondary

logger = logging.getLogger(__name__)


def register(registry) -> None:
    """Add the kernel input to ``registry`` if this platform has /proc."""
    if not psutil.LINUX:
        logger.debug("Not running on Linux; kernel input is unavailable")
        return
    registry.add(INPUT_NAME, KernelStats)


__all__ = [
    "INPUT_NAME",
    "KernelStats",
    "KEYWORD_FIELDS",
    "parse_int64",
    "parse_primary",
    "parse_secondary",
    "read_primary",
    "read_secondary",
    "register",
]
