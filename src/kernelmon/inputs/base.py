"""
Defines the abstract interface every input implements.

An input is a discoverable, independently constructed collection unit. The
agent asks each input for its name and interval, calls ``init()`` once, and
then calls ``gather()`` on every tick.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..models.sample import Sample

logger = logging.getLogger(__name__)


class AbstractInput(ABC):
    """
    Abstract base class for inputs.

    Subclasses implement the collection cycle in ``gather``. A cycle must not
    raise: failures are logged and reported as an empty sample list.
    """

    print_configs: bool = False

    @abstractmethod
    def get_input_name(self) -> str:
        """Return the stable name this input is registered under."""
        pass

    @abstractmethod
    def get_interval(self) -> float:
        """
        Return the collection interval in seconds.

        0 means the input has no preference and the agent's global interval
        applies.
        """
        pass

    @abstractmethod
    def init(self) -> None:
        """
        Prepare the input before its first cycle.

        Raises:
            Exception: If the input cannot run; the agent will skip it.
        """
        pass

    @abstractmethod
    def gather(self) -> List[Sample]:
        """
        Run one collection cycle.

        Returns:
            Zero or more samples. An empty list means nothing was collected,
            either because the cycle failed or there was nothing to report.
        """
        pass

    def describe_config(self) -> Dict[str, Any]:
        """Return the effective configuration, for print_configs logging."""
        return {}
