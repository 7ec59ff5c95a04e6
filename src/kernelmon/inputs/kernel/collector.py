"""
Kernel activity input.

KernelStats reads /proc/stat and the entropy pool indicator on every cycle
and reports interrupts, context switches, forked processes, boot time, paged
disk I/O and available entropy.
"""

import logging
from typing import Any, Dict, List

from ...models.config import DEFAULT_ENTROPY_STAT_FILE, DEFAULT_STAT_FILE
from ...models.sample import Sample, new_samples
from ...validation import KernelStatError, StatFileNotFoundError
from ..base import AbstractInput
from .extractor import parse_primary, parse_secondary
from .reader import read_primary, read_secondary

logger = logging.getLogger(__name__)

INPUT_NAME = "kernel"


class KernelStats(AbstractInput):
    """
    Collects kernel counters from /proc/stat and the entropy pool.

    The two file paths are fixed at construction. ``interval`` and
    ``print_configs`` are only carried for the agent; the input itself does
    not act on them.
    """

    def __init__(
        self,
        stat_file: str = DEFAULT_STAT_FILE,
        entropy_stat_file: str = DEFAULT_ENTROPY_STAT_FILE,
        interval: float = 0.0,
        print_configs: bool = False,
    ):
        self._stat_file = stat_file
        self._entropy_stat_file = entropy_stat_file
        self.interval = interval
        self.print_configs = print_configs

    @property
    def stat_file(self) -> str:
        return self._stat_file

    @property
    def entropy_stat_file(self) -> str:
        return self._entropy_stat_file

    def get_input_name(self) -> str:
        return INPUT_NAME

    def get_interval(self) -> float:
        return self.interval

    def init(self) -> None:
        pass

    def describe_config(self) -> Dict[str, Any]:
        return {
            "stat_file": self._stat_file,
            "entropy_stat_file": self._entropy_stat_file,
            "interval": self.interval,
            "print_configs": self.print_configs,
        }

    def collect(self) -> Dict[str, int]:
        """
        Run the read and parse steps of one cycle.

        The entropy value is read and parsed before the stat buffer is
        parsed, so an entropy failure yields nothing at all rather than a
        partial set of stat fields.

        Returns:
            The observation map, always including ``entropy_avail``.

        Raises:
            StatFileNotFoundError: The stat file does not exist.
            StatFileReadError: Either file could not be read.
            StatParseError: The entropy file is not a valid integer.
        """
        data = read_primary(self._stat_file)
        entropy_data = read_secondary(self._entropy_stat_file)
        entropy_value = parse_secondary(entropy_data, path=self._entropy_stat_file)

        fields = parse_primary(data)
        fields["entropy_avail"] = entropy_value
        return fields

    def gather(self) -> List[Sample]:
        """
        Run one collection cycle and return its samples.

        Any cycle-level failure is logged once and produces no samples.
        """
        try:
            fields = self.collect()
        except StatFileNotFoundError as e:
            logger.error(f"failed to read: {e.path} error: {e}")
            return []
        except KernelStatError as e:
            logger.error(f"failed to collect from: {e.path} error: {e}")
            return []

        logger.debug(f"Collected {len(fields)} kernel fields")
        return new_samples(fields, prefix=INPUT_NAME)
