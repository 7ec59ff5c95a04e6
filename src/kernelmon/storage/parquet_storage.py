"""
Parquet storage implementation using Polars.
"""

import logging
from pathlib import Path
from typing import List, Optional, Literal
import polars as pl

from .base import DataStorage

logger = logging.getLogger(__name__)


class ParquetStorage(DataStorage):
    """
    Parquet storage implementation using Polars.

    Appends are done by reading the existing file and rewriting it with the
    new rows concatenated. Frames with different column sets (for example,
    samples carrying different labels) are concatenated diagonally, so
    missing columns are filled with nulls.
    """

    def __init__(self, compression: Literal["snappy", "gzip", "brotli", "lz4", "zstd"] = "snappy"):
        """
        Initialize Parquet storage with specified compression.

        Args:
            compression: Compression algorithm to use
        """
        self.compression = compression
        logger.debug(f"Initialized ParquetStorage with compression: {compression}")

    def save_dataframe(self, df: pl.DataFrame, path: str) -> None:
        try:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            df.write_parquet(path, compression=self.compression)
            logger.debug(f"Saved DataFrame with {len(df)} rows to {path}")
        except Exception as e:
            logger.error(f"Failed to save DataFrame to {path}: {e}")
            raise

    def load_dataframe(self, path: str, columns: Optional[List[str]] = None) -> pl.DataFrame:
        try:
            if columns:
                df = pl.read_parquet(path, columns=columns)
                logger.debug(f"Loaded DataFrame with columns {columns} from {path}")
            else:
                df = pl.read_parquet(path)
                logger.debug(f"Loaded DataFrame with {len(df)} rows from {path}")
            return df
        except Exception as e:
            logger.error(f"Failed to load DataFrame from {path}: {e}")
            raise

    def append_dataframe(self, df: pl.DataFrame, path: str) -> None:
        try:
            if self.file_exists(path):
                existing_df = self.load_dataframe(path)
                combined_df = pl.concat([existing_df, df], how="diagonal_relaxed")
                self.save_dataframe(combined_df, path)
                logger.debug(f"Appended {len(df)} rows to existing file {path}")
            else:
                self.save_dataframe(df, path)
                logger.debug(f"Created new file {path} with {len(df)} rows")
        except Exception as e:
            logger.error(f"Failed to append DataFrame to {path}: {e}")
            raise

    def file_exists(self, path: str) -> bool:
        return Path(path).exists()
