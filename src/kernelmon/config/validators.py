"""
Configuration validation utilities.

This module turns the raw TOML tables into validated configuration models.
"""

import logging
from typing import Any, Dict

from ..models.config import (
    DEFAULT_ENTROPY_STAT_FILE,
    DEFAULT_STAT_FILE,
    AppConfig,
    GlobalConfig,
    KernelInputConfig,
    WriterConfig,
)
from ..validation import (
    ValidationError,
    validate_bool,
    validate_enum_choice,
    validate_file_path,
    validate_labels,
    validate_positive_float,
)

logger = logging.getLogger(__name__)

WRITER_TYPES = ["console", "parquet"]
COMPRESSION_CHOICES = ["snappy", "gzip", "brotli", "lz4", "zstd"]


def _require_table(value: Any, field_name: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValidationError(f"{field_name} must be a table", field_name=field_name, value=value)
    return value


def validate_global_config(global_data: Dict[str, Any]) -> GlobalConfig:
    """
    Validate and create a GlobalConfig from the `[global]` table.

    Raises:
        ValidationError: If validation fails
    """
    global_data = _require_table(global_data, "global")

    interval = validate_positive_float(
        global_data.get("interval", 15),
        min_value=0.001,
        max_value=86400.0,
        field_name="global.interval",
    )

    print_configs = validate_bool(
        global_data.get("print_configs", False), field_name="global.print_configs"
    )

    hostname = global_data.get("hostname", "")
    if not isinstance(hostname, str):
        raise ValidationError(
            "global.hostname must be a string", field_name="global.hostname", value=hostname
        )

    labels = validate_labels(global_data.get("labels", {}), field_name="global.labels")

    return GlobalConfig(
        interval=interval,
        print_configs=print_configs,
        hostname=hostname.strip(),
        labels=labels,
    )


def validate_writer_config(writer_data: Dict[str, Any]) -> WriterConfig:
    """
    Validate and create a WriterConfig from the `[writer]` table.

    Raises:
        ValidationError: If validation fails
    """
    writer_data = _require_table(writer_data, "writer")

    writer_type = validate_enum_choice(
        writer_data.get("type", "console"),
        choices=WRITER_TYPES,
        field_name="writer.type",
    )

    compression = validate_enum_choice(
        writer_data.get("compression", "snappy"),
        choices=COMPRESSION_CHOICES,
        field_name="writer.compression",
    )

    output_dir = validate_file_path(
        writer_data.get("output_dir", "data"), field_name="writer.output_dir"
    )

    return WriterConfig(type=writer_type, output_dir=output_dir, compression=compression)


def validate_kernel_input_config(kernel_data: Dict[str, Any]) -> KernelInputConfig:
    """
    Validate and create a KernelInputConfig from the `[inputs.kernel]` table.

    Raises:
        ValidationError: If validation fails
    """
    kernel_data = _require_table(kernel_data, "inputs.kernel")

    enabled = validate_bool(kernel_data.get("enabled", True), field_name="inputs.kernel.enabled")

    interval = validate_positive_float(
        kernel_data.get("interval", 0),
        min_value=0.0,
        max_value=86400.0,
        field_name="inputs.kernel.interval",
    )

    print_configs = validate_bool(
        kernel_data.get("print_configs", False), field_name="inputs.kernel.print_configs"
    )

    stat_file = validate_file_path(
        kernel_data.get("stat_file", DEFAULT_STAT_FILE), field_name="inputs.kernel.stat_file"
    )
    entropy_stat_file = validate_file_path(
        kernel_data.get("entropy_stat_file", DEFAULT_ENTROPY_STAT_FILE),
        field_name="inputs.kernel.entropy_stat_file",
    )

    return KernelInputConfig(
        enabled=enabled,
        interval=interval,
        print_configs=print_configs,
        stat_file=stat_file,
        entropy_stat_file=entropy_stat_file,
    )


def validate_app_config(config_data: Dict[str, Any]) -> AppConfig:
    """
    Validate the whole parsed configuration file.

    Missing tables fall back to their defaults.

    Raises:
        ValidationError: If any table fails validation
    """
    inputs_data = _require_table(config_data.get("inputs", {}), "inputs")
    unknown_inputs = set(inputs_data) - {"kernel"}
    if unknown_inputs:
        logger.warning(f"Ignoring configuration for unknown inputs: {sorted(unknown_inputs)}")

    return AppConfig(
        global_config=validate_global_config(config_data.get("global", {})),
        writer=validate_writer_config(config_data.get("writer", {})),
        kernel=validate_kernel_input_config(inputs_data.get("kernel", {})),
    )
