"""
Data models for the kernelmon package.
"""

from .config import (
    DEFAULT_ENTROPY_STAT_FILE,
    DEFAULT_STAT_FILE,
    AppConfig,
    GlobalConfig,
    KernelInputConfig,
    WriterConfig,
)
from .sample import Sample, new_samples

__all__ = [
    "DEFAULT_ENTROPY_STAT_FILE",
    "DEFAULT_STAT_FILE",
    "AppConfig",
    "GlobalConfig",
    "KernelInputConfig",
    "WriterConfig",
    "Sample",
    "new_samples",
]
