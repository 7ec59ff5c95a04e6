"""
Abstract base classes for storage and sample emission.

DataStorage is the low-level interface for persisting DataFrames.
SampleWriter is what the agent hands each cycle's samples to; concrete
writers decide whether samples are printed or persisted.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import polars as pl

from ..models.sample import Sample


class DataStorage(ABC):
    """Abstract base class for data storage implementations."""

    @abstractmethod
    def save_dataframe(self, df: pl.DataFrame, path: str) -> None:
        """
        Save a Polars DataFrame to the specified path.

        Args:
            df: Polars DataFrame to save
            path: File path to save to
        """
        pass

    @abstractmethod
    def load_dataframe(
        self, path: str, columns: Optional[List[str]] = None
    ) -> pl.DataFrame:
        """
        Load a Polars DataFrame from the specified path.

        Args:
            path: File path to load from
            columns: Optional list of columns to load (for column pruning)

        Returns:
            Loaded Polars DataFrame
        """
        pass

    @abstractmethod
    def append_dataframe(self, df: pl.DataFrame, path: str) -> None:
        """
        Append a Polars DataFrame to an existing file, creating it if needed.

        Args:
            df: Polars DataFrame to append
            path: File path to append to
        """
        pass

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Check if a file exists at the specified path."""
        pass


class SampleWriter(ABC):
    """Receives the samples produced by each collection cycle."""

    @abstractmethod
    def write(self, samples: List[Sample]) -> None:
        """
        Emit one batch of samples.

        Args:
            samples: Samples from a single cycle; may be empty.
        """
        pass

    def close(self) -> None:
        """Release any resources held by the writer."""
        pass
