"""
Storage and emission for collected samples.

Samples can be printed to the console or appended to a compressed Parquet
file through Polars for later analysis.
"""

from .base import DataStorage, SampleWriter
from .parquet_storage import ParquetStorage
from .writers import ConsoleWriter, ParquetWriter, format_sample
from .factory import create_writer

__all__ = [
    "DataStorage",
    "SampleWriter",
    "ParquetStorage",
    "ConsoleWriter",
    "ParquetWriter",
    "format_sample",
    "create_writer",
]
