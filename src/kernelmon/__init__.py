"""
kernelmon: kernel activity sampler.

This package reads kernel counters from /proc/stat and the entropy pool
indicator and turns them into named integer samples.

The package is organized into specialized modules:
- config: TOML configuration loading and validation
- models: Configuration and sample data structures
- validation: Error types and validation helpers
- inputs: The input interface, the input registry and the kernel input
- storage: Sample writers (console, Parquet via Polars)
- agent: Periodic scheduling of input collection cycles
- cli: Command-line interface

Usage:
    From command line:
        kernelmon --test
        python -m kernelmon.cli.main --config conf/config.toml

    Programmatically:
        from kernelmon import KernelStats
        fields = KernelStats().collect()
"""

from .config import get_config, clear_config_cache, set_config_path
from .agent import Agent
from .inputs import AbstractInput, InputRegistry, build_default_registry
from .inputs.kernel import KernelStats
from .models import AppConfig, GlobalConfig, KernelInputConfig, Sample, WriterConfig
from .validation import (
    KernelStatError,
    StatFileNotFoundError,
    StatFileReadError,
    StatParseError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "Agent",
    "AbstractInput",
    "InputRegistry",
    "build_default_registry",
    "KernelStats",
    "AppConfig",
    "GlobalConfig",
    "KernelInputConfig",
    "Sample",
    "WriterConfig",
    "KernelStatError",
    "StatFileNotFoundError",
    "StatFileReadError",
    "StatParseError",
    "ValidationError",
]
