"""
Configuration data models.

This module contains the configuration data structures for global agent
settings, the sample writer, and the kernel input.
"""

from dataclasses import dataclass, field
from typing import Dict, Literal

DEFAULT_STAT_FILE = "/proc/stat"
DEFAULT_ENTROPY_STAT_FILE = "/proc/sys/kernel/random/entropy_avail"


@dataclass
class GlobalConfig:
    """
    Agent-wide settings, loaded from the `[global]` table.
    """

    # Default collection interval in seconds for inputs that do not set their own.
    interval: float = 15.0
    # Log every input's effective configuration at startup.
    print_configs: bool = False
    # Value of the agent_hostname label; empty means the system hostname.
    hostname: str = ""
    # Extra labels attached to every sample.
    labels: Dict[str, str] = field(default_factory=dict)


@dataclass
class WriterConfig:
    """
    Sample writer settings, loaded from the `[writer]` table.

    Attributes:
        type: 'console' prints samples to stdout, 'parquet' appends them to
            `<output_dir>/samples.parquet`.
        output_dir: Directory for parquet output.
        compression: Parquet compression codec.
    """

    type: Literal["console", "parquet"] = "console"
    output_dir: str = "data"
    compression: Literal["snappy", "gzip", "brotli", "lz4", "zstd"] = "snappy"


@dataclass
class KernelInputConfig:
    """
    Settings for the kernel input, loaded from `[inputs.kernel]`.
    """

    enabled: bool = True
    # 0 means "use the global interval".
    interval: float = 0.0
    print_configs: bool = False
    stat_file: str = DEFAULT_STAT_FILE
    entropy_stat_file: str = DEFAULT_ENTROPY_STAT_FILE


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    global_config: GlobalConfig = field(default_factory=GlobalConfig)
    writer: WriterConfig = field(default_factory=WriterConfig)
    kernel: KernelInputConfig = field(default_factory=KernelInputConfig)
