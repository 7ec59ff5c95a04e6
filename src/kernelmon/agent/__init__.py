"""
Scheduling of input collection cycles.
"""

from .agent import Agent, input_enabled, input_options

__all__ = ["Agent", "input_enabled", "input_options"]
