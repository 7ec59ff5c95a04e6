"""
Unit tests for sample writers and the writer factory.
"""

import io

import pytest

from kernelmon.models.config import WriterConfig
from kernelmon.models.sample import Sample, new_samples
from kernelmon.storage import ConsoleWriter, ParquetWriter, create_writer, format_sample


def _samples():
    return new_samples(
        {"interrupts": 1500, "entropy_avail": 128},
        prefix="kernel",
        labels={"agent_hostname": "box"},
        timestamp=1600000000.5,
    )


class TestFormatSample:
    def test_with_labels(self):
        sample = Sample("kernel_ctxt", 300, 1600000000.9, {"b": "2", "a": "1"})
        assert format_sample(sample) == "1600000000 kernel_ctxt a=1 b=2 300"

    def test_without_labels(self):
        assert format_sample(Sample("kernel_ctxt", 300, 10.0)) == "10 kernel_ctxt 300"


class TestConsoleWriter:
    def test_one_line_per_sample(self):
        stream = io.StringIO()

        ConsoleWriter(stream=stream).write(_samples())

        lines = stream.getvalue().splitlines()
        assert lines == [
            "1600000000 kernel_entropy_avail agent_hostname=box 128",
            "1600000000 kernel_interrupts agent_hostname=box 1500",
        ]

    def test_empty_batch(self):
        stream = io.StringIO()
        ConsoleWriter(stream=stream).write([])
        assert stream.getvalue() == ""


class TestParquetWriter:
    def test_write_and_load(self, temp_dir):
        writer = ParquetWriter(temp_dir / "out")

        writer.write(_samples())
        writer.write(_samples())

        df = writer.load()
        assert len(df) == 4
        assert set(df.columns) == {"timestamp", "metric", "value", "agent_hostname"}
        assert df["metric"].to_list()[:2] == ["kernel_entropy_avail", "kernel_interrupts"]
        assert df["value"].to_list()[:2] == [128, 1500]

    def test_empty_batch_writes_nothing(self, temp_dir):
        writer = ParquetWriter(temp_dir)

        writer.write([])

        assert not writer.file_path.exists()
        with pytest.raises(FileNotFoundError):
            writer.load()

    def test_compression_is_passed_through(self, temp_dir):
        writer = ParquetWriter(temp_dir, compression="zstd")
        assert writer.storage.compression == "zstd"


class TestCreateWriter:
    def test_console(self):
        assert isinstance(create_writer(WriterConfig(type="console")), ConsoleWriter)

    def test_parquet(self, temp_dir):
        writer = create_writer(
            WriterConfig(type="parquet", output_dir=str(temp_dir / "samples"), compression="gzip")
        )
        assert isinstance(writer, ParquetWriter)
        assert writer.output_dir == temp_dir / "samples"
        assert writer.output_dir.is_dir()

    def test_unsupported_type(self):
        with pytest.raises(ValueError) as excinfo:
            create_writer(WriterConfig(type="kafka"))
        assert "Unsupported writer type" in str(excinfo.value)
