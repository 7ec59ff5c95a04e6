"""
Inputs package.

Each input is a self-contained collection unit implementing
``AbstractInput``. Inputs are discovered through an ``InputRegistry`` built
by ``build_default_registry``.
"""

from .base import AbstractInput
from .registry import InputRegistry, build_default_registry

__all__ = [
    "AbstractInput",
    "InputRegistry",
    "build_default_registry",
]
