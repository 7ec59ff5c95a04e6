"""
Configuration management for the kernelmon package.

This module provides loading, validation and cached access to the agent's
TOML configuration.
"""

from .manager import (
    clear_config_cache,
    get_config,
    is_config_loaded,
    set_config_path,
)
from .loader import default_config_path, load_config_file
from .validators import (
    validate_app_config,
    validate_global_config,
    validate_kernel_input_config,
    validate_writer_config,
)

__all__ = [
    "get_config",
    "set_config_path",
    "clear_config_cache",
    "is_config_loaded",
    "default_config_path",
    "load_config_file",
    "validate_app_config",
    "validate_global_config",
    "validate_kernel_input_config",
    "validate_writer_config",
]
