"""
Command-line interface for kernelmon.
"""

from .main import main_cli

__all__ = ["main_cli"]
