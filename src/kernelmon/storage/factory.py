"""
Factory for creating sample writer instances.
"""

import logging
from pathlib import Path

from ..models.config import WriterConfig
from .base import SampleWriter
from .writers import ConsoleWriter, ParquetWriter

logger = logging.getLogger(__name__)


def create_writer(writer_config: WriterConfig) -> SampleWriter:
    """
    Create the sample writer described by ``writer_config``.

    Args:
        writer_config: Validated writer settings

    Returns:
        SampleWriter instance

    Raises:
        ValueError: If the writer type is unknown
    """
    if writer_config.type == "console":
        logger.debug("Creating ConsoleWriter")
        return ConsoleWriter()
    elif writer_config.type == "parquet":
        logger.debug(
            f"Creating ParquetWriter in {writer_config.output_dir} "
            f"(compression: {writer_config.compression})"
        )
        return ParquetWriter(Path(writer_config.output_dir), writer_config.compression)
    else:
        raise ValueError(f"Unsupported writer type: {writer_config.type}")
