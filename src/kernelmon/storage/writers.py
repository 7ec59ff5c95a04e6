"""
Sample writers: where each cycle's samples end up.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Literal
import polars as pl

from ..models.sample import Sample
from .base import SampleWriter
from .parquet_storage import ParquetStorage

logger = logging.getLogger(__name__)

SAMPLES_FILENAME = "samples.parquet"


def format_sample(sample: Sample) -> str:
    """Render a sample as `<timestamp> <metric> <k=v ...> <value>`."""
    labels = " ".join(f"{k}={v}" for k, v in sorted(sample.labels.items()))
    parts = [f"{int(sample.timestamp)}", sample.metric]
    if labels:
        parts.append(labels)
    parts.append(str(sample.value))
    return " ".join(parts)


class ConsoleWriter(SampleWriter):
    """Prints one line per sample. Used by --test runs and for debugging."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def write(self, samples: List[Sample]) -> None:
        for sample in samples:
            print(format_sample(sample), file=self.stream)
        self.stream.flush()


class ParquetWriter(SampleWriter):
    """
    Appends samples to `<output_dir>/samples.parquet`.

    Each sample becomes one row with `timestamp`, `metric` and `value`
    columns plus one string column per label.
    """

    def __init__(
        self,
        output_dir: Path,
        compression: Literal["snappy", "gzip", "brotli", "lz4", "zstd"] = "snappy",
    ):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.storage = ParquetStorage(compression=compression)
        self.file_path = self.output_dir / SAMPLES_FILENAME
        logger.debug(f"ParquetWriter writing to: {self.file_path}")

    def write(self, samples: List[Sample]) -> None:
        if not samples:
            return

        df = pl.DataFrame([s.to_dict() for s in samples]).with_columns(
            pl.col("value").cast(pl.Int64),
            pl.col("timestamp").cast(pl.Float64),
        )
        self.storage.append_dataframe(df, str(self.file_path))
        logger.debug(f"Wrote {len(samples)} samples to {self.file_path}")

    def load(self, columns: Optional[List[str]] = None) -> pl.DataFrame:
        """
        Load everything written so far.

        Raises:
            FileNotFoundError: If nothing has been written yet.
        """
        if not self.storage.file_exists(str(self.file_path)):
            raise FileNotFoundError(f"No samples found in {self.output_dir}")
        return self.storage.load_dataframe(str(self.file_path), columns)
