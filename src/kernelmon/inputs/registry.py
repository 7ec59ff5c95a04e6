"""
Registry of input constructors.

The registry is an explicit object owned by whoever runs the agent. Input
modules take part by exposing an ``INPUT_NAME`` and a ``register(registry)``
function; ``build_default_registry`` runs that pass over all built-in inputs.
"""

import logging
from typing import Any, Callable, Dict, List

from .base import AbstractInput

logger = logging.getLogger(__name__)

InputFactory = Callable[..., AbstractInput]


class InputRegistry:
    """
    Maps input names to factories that build fresh input instances.
    """

    def __init__(self):
        self._factories: Dict[str, InputFactory] = {}

    def add(self, name: str, factory: InputFactory) -> None:
        """
        Register a factory under ``name``.

        Raises:
            ValueError: If the name is empty or already registered.
        """
        if not name:
            raise ValueError("Input name must not be empty")
        if name in self._factories:
            raise ValueError(f"Input '{name}' is already registered")
        self._factories[name] = factory
        logger.debug(f"Registered input: {name}")

    def create(self, name: str, **options: Any) -> AbstractInput:
        """
        Build a new instance of the named input.

        ``options`` are passed to the factory as keyword arguments; with no
        options the input is built with its defaults.

        Raises:
            KeyError: If no input is registered under ``name``.
        """
        try:
            factory = self._factories[name]
        except KeyError:
            raise KeyError(
                f"Unknown input '{name}'. Available: {self.names()}"
            ) from None
        return factory(**options)

    def names(self) -> List[str]:
        """Return the registered input names in sorted order."""
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def build_default_registry() -> InputRegistry:
    """
    Create a registry populated with every built-in input that supports the
    current platform.
    """
    from . import kernel

    registry = InputRegistry()
    for module in (kernel,):
        module.register(registry)
    logger.info(f"Available inputs: {registry.names()}")
    return registry
