"""
Unit tests for validation helpers and error types.
"""

import logging

import pytest

from kernelmon.models.sample import new_samples
from kernelmon.validation import (
    ErrorSeverity,
    StatFileReadError,
    ValidationError,
    handle_cli_error,
    handle_error,
    validate_bool,
    validate_enum_choice,
    validate_file_path,
    validate_labels,
    validate_positive_float,
)


class TestValidators:
    def test_positive_float(self):
        assert validate_positive_float("2.5") == 2.5
        assert validate_positive_float(3, min_value=1, max_value=3) == 3.0

    def test_positive_float_bounds(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_positive_float(0.5, min_value=1, field_name="x")
        assert excinfo.value.field_name == "x"
        assert excinfo.value.value == 0.5

        with pytest.raises(ValidationError):
            validate_positive_float(10, max_value=5)

    def test_positive_float_rejects_non_numbers(self):
        for value in ("abc", None, True, [1]):
            with pytest.raises(ValidationError):
                validate_positive_float(value)

    def test_bool(self):
        assert validate_bool(False) is False
        with pytest.raises(ValidationError):
            validate_bool("false")

    def test_enum_choice(self):
        assert validate_enum_choice("gzip", ["snappy", "gzip"]) == "gzip"
        assert validate_enum_choice("GZIP", ["snappy", "gzip"], case_sensitive=False) == "gzip"
        with pytest.raises(ValidationError):
            validate_enum_choice("GZIP", ["snappy", "gzip"])
        with pytest.raises(ValidationError):
            validate_enum_choice(1, ["snappy"])

    def test_file_path(self):
        assert validate_file_path("/proc/stat") == "/proc/stat"
        with pytest.raises(ValidationError):
            validate_file_path("")

    def test_labels(self):
        assert validate_labels({"a": 1, "b": "x", "c": 1.5}) == {"a": "1", "b": "x", "c": "1.5"}
        with pytest.raises(ValidationError):
            validate_labels({"a": True})


class TestErrorHandling:
    def test_handle_error_reraises(self, caplog):
        error = RuntimeError("boom")
        with pytest.raises(RuntimeError):
            handle_error(error, "testing")
        assert "Error in testing: boom" in caplog.text

    def test_handle_error_without_reraise(self, caplog):
        caplog.set_level(logging.DEBUG)
        handle_error(RuntimeError("quiet"), "testing", severity="warning", reraise=False)
        assert caplog.records[-1].levelno == logging.WARNING

    def test_handle_error_severity_enum(self, caplog):
        handle_error(RuntimeError("x"), "ctx", severity=ErrorSeverity.ERROR, reraise=False)
        assert caplog.records[-1].levelno == logging.ERROR

    def test_handle_cli_error_exits(self):
        with pytest.raises(SystemExit) as excinfo:
            handle_cli_error(RuntimeError("bad"), "startup", exit_code=3)
        assert excinfo.value.code == 3

    def test_read_error_keeps_cause(self):
        cause = PermissionError("denied")
        error = StatFileReadError("/proc/stat", cause)
        assert error.cause is cause
        assert error.path == "/proc/stat"
        assert "denied" in str(error)


class TestNewSamples:
    def test_prefix_labels_and_timestamp(self):
        samples = new_samples({"b": 2, "a": 1}, prefix="kernel", labels={"h": "x"}, timestamp=5.0)

        assert [s.metric for s in samples] == ["kernel_a", "kernel_b"]
        assert all(s.timestamp == 5.0 for s in samples)
        assert all(s.labels == {"h": "x"} for s in samples)
        # labels are copied, not shared
        samples[0].labels["extra"] = "1"
        assert "extra" not in samples[1].labels

    def test_no_prefix(self):
        samples = new_samples({"a": 1})
        assert samples[0].metric == "a"
        assert samples[0].timestamp > 0

    def test_to_dict(self):
        sample = new_samples({"a": 1}, labels={"h": "x"}, timestamp=1.0)[0]
        assert sample.to_dict() == {"timestamp": 1.0, "metric": "a", "value": 1, "h": "x"}
