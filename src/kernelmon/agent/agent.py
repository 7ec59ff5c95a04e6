"""
Collection agent: builds inputs from the registry and runs their cycles.

Each input gets its own daemon thread that calls ``gather()`` at the input's
interval. Cycles of one input never overlap: if a cycle runs past its
interval, the next one starts as soon as it returns. Samples from every
input go through a single writer guarded by a lock.
"""

import logging
import socket
import threading
import time
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from ..inputs.base import AbstractInput
from ..inputs.registry import InputRegistry
from ..models.config import AppConfig
from ..models.sample import Sample
from ..storage.base import SampleWriter

logger = logging.getLogger(__name__)


def input_options(app_config: AppConfig, name: str) -> Dict[str, Any]:
    """
    Return the constructor options configured for input ``name``.

    Inputs without a configuration section get no options and use their
    built-in defaults.
    """
    section = getattr(app_config, name, None)
    if section is None:
        return {}
    options = asdict(section)
    options.pop("enabled", None)
    return options


def input_enabled(app_config: AppConfig, name: str) -> bool:
    section = getattr(app_config, name, None)
    return getattr(section, "enabled", True)


class Agent:
    """
    Runs a set of inputs on their intervals and forwards samples to a writer.

    Args:
        app_config: Validated application configuration.
        registry: Registry the inputs are created from.
        writer: Destination for every non-empty batch of samples.
        input_names: Restrict the agent to these inputs. Defaults to every
            registered input that is enabled in the configuration.
    """

    def __init__(
        self,
        app_config: AppConfig,
        registry: InputRegistry,
        writer: SampleWriter,
        input_names: Optional[List[str]] = None,
    ):
        self.app_config = app_config
        self.registry = registry
        self.writer = writer
        self.input_names = input_names
        self.hostname = app_config.global_config.hostname or socket.gethostname()
        self.inputs: List[AbstractInput] = []
        self._threads: List[threading.Thread] = []
        self._stop_event = threading.Event()
        self._writer_lock = threading.Lock()

    # --- setup ---

    def _selected_names(self) -> List[str]:
        if self.input_names is not None:
            for name in self.input_names:
                if name not in self.registry:
                    raise KeyError(
                        f"Unknown input '{name}'. Available: {self.registry.names()}"
                    )
            return list(self.input_names)
        return [
            name for name in self.registry.names()
            if input_enabled(self.app_config, name)
        ]

    def setup_inputs(self) -> List[AbstractInput]:
        """
        Create and initialize the selected inputs.

        Inputs whose ``init()`` fails are logged and left out.

        Raises:
            KeyError: If an explicitly requested input is not registered.
        """
        self.inputs = []
        for name in self._selected_names():
            input_ = self.registry.create(name, **input_options(self.app_config, name))
            try:
                input_.init()
            except Exception as e:
                logger.error(f"Failed to initialize input '{name}': {e}")
                continue

            if self.app_config.global_config.print_configs or input_.print_configs:
                logger.info(f"Input '{name}' configuration: {input_.describe_config()}")

            self.inputs.append(input_)

        logger.info(f"Initialized inputs: {[i.get_input_name() for i in self.inputs]}")
        return self.inputs

    def resolve_interval(self, input_: AbstractInput) -> float:
        """Return the input's own interval, or the global one if it has none."""
        interval = input_.get_interval()
        if interval and interval > 0:
            return interval
        return self.app_config.global_config.interval

    # --- collection ---

    def _apply_labels(self, samples: List[Sample]) -> None:
        for sample in samples:
            for key, value in self.app_config.global_config.labels.items():
                sample.labels.setdefault(key, value)
            sample.labels.setdefault("agent_hostname", self.hostname)

    def collect_once(self, input_: AbstractInput) -> List[Sample]:
        """
        Run one cycle of ``input_`` and forward its samples to the writer.

        Returns:
            The samples written, or an empty list if the cycle produced none.
        """
        name = input_.get_input_name()
        try:
            samples = input_.gather()
        except Exception as e:
            # gather() is expected to log and swallow its own failures
            logger.error(f"Input '{name}' raised during gather: {e}", exc_info=True)
            return []

        if not samples:
            return []

        self._apply_labels(samples)
        with self._writer_lock:
            try:
                self.writer.write(samples)
            except Exception as e:
                logger.error(f"Failed to write {len(samples)} samples from '{name}': {e}")
                return []
        return samples

    def run_once(self) -> List[Sample]:
        """
        Set up the inputs, run each one cycle, and return all samples.

        This is the --test mode of the CLI.
        """
        samples: List[Sample] = []
        for input_ in self.setup_inputs():
            samples.extend(self.collect_once(input_))
        return samples

    def _run_input(self, input_: AbstractInput) -> None:
        interval = self.resolve_interval(input_)
        name = input_.get_input_name()
        logger.info(f"Starting input '{name}' (interval: {interval}s)")

        while not self._stop_event.is_set():
            started = time.monotonic()
            self.collect_once(input_)
            elapsed = time.monotonic() - started
            if elapsed > interval:
                logger.warning(
                    f"Input '{name}' took {elapsed:.3f}s, longer than its {interval}s interval"
                )
            self._stop_event.wait(max(0.0, interval - elapsed))

        logger.info(f"Input '{name}' stopped")

    # --- lifecycle ---

    def start(self) -> None:
        """Set up the inputs and start one collection thread per input."""
        if self._threads:
            raise RuntimeError("Agent is already running")

        self._stop_event.clear()
        for input_ in self.setup_inputs():
            thread = threading.Thread(
                target=self._run_input,
                args=(input_,),
                name=f"input-{input_.get_input_name()}",
                daemon=True,
            )
            thread.start()
            self._threads.append(thread)

        if not self._threads:
            logger.warning("No inputs are running")

    def stop(self, timeout: float = 5.0) -> bool:
        """
        Signal every collection thread to stop and wait for them.

        Returns:
            True if all threads finished within ``timeout`` seconds.
        """
        self._stop_event.set()
        deadline = time.monotonic() + timeout
        all_stopped = True
        for thread in self._threads:
            thread.join(max(0.0, deadline - time.monotonic()))
            if thread.is_alive():
                logger.warning(f"Thread {thread.name} did not stop within {timeout}s")
                all_stopped = False
        self._threads = []

        try:
            self.writer.close()
        except Exception as e:
            logger.error(f"Error closing writer: {e}")
        return all_stopped

    def wait(self, poll_interval: float = 1.0) -> None:
        """Block until ``stop()`` is called."""
        while not self._stop_event.wait(poll_interval):
            pass

    @property
    def is_running(self) -> bool:
        return bool(self._threads) and not self._stop_event.is_set()
