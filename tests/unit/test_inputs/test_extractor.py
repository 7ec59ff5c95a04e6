"""
Unit tests for the kernel field extractor.
"""

import pytest

from kernelmon.inputs.kernel.extractor import (
    INT64_MAX,
    INT64_MIN,
    KEYWORD_FIELDS,
    parse_int64,
    parse_primary,
    parse_secondary,
)
from kernelmon.validation import StatParseError


class TestParsePrimary:
    """Test cases for parse_primary."""

    def test_all_recognized_fields(self):
        buffer = (
            b"cpu 10 20\nintr 1500\nctxt 300\nprocesses 42\n"
            b"btime 1600000000\npage 5 7\n"
        )
        assert parse_primary(buffer) == {
            "interrupts": 1500,
            "context_switches": 300,
            "processes_forked": 42,
            "boot_time": 1600000000,
            "disk_pages_in": 5,
            "disk_pages_out": 7,
        }

    def test_realistic_proc_stat(self, sample_proc_stat):
        fields = parse_primary(sample_proc_stat)
        assert fields["interrupts"] == 1500
        assert fields["context_switches"] == 300
        assert fields["processes_forked"] == 42
        assert fields["boot_time"] == 1600000000
        assert fields["disk_pages_in"] == 5
        assert fields["disk_pages_out"] == 7
        assert len(fields) == 6

    def test_malformed_value_is_skipped(self):
        assert parse_primary(b"intr abc\nctxt 300\n") == {"context_switches": 300}

    def test_missing_keywords_are_omitted(self):
        assert parse_primary(b"cpu 1 2 3\nprocs_running 4\n") == {}

    def test_empty_buffer(self):
        assert parse_primary(b"") == {}
        assert parse_primary(b"   \n\t\n") == {}

    def test_keyword_as_last_token(self):
        assert parse_primary(b"ctxt 300\nintr") == {"context_switches": 300}
        assert parse_primary(b"intr\n") == {}

    def test_page_with_only_one_value(self):
        assert parse_primary(b"page 5") == {"disk_pages_in": 5}

    def test_page_fields_are_independent(self):
        assert parse_primary(b"page abc 7\n") == {"disk_pages_out": 7}
        assert parse_primary(b"page 5 xyz\n") == {"disk_pages_in": 5}

    def test_repeated_keyword_last_write_wins(self):
        assert parse_primary(b"ctxt 1\nctxt 2\n") == {"context_switches": 2}

    def test_repeated_keyword_keeps_last_successful_value(self):
        assert parse_primary(b"ctxt 1\nctxt oops\n") == {"context_switches": 1}

    def test_keywords_are_case_sensitive(self):
        assert parse_primary(b"INTR 5\nCtxt 6\n") == {}

    def test_keyword_must_match_whole_token(self):
        assert parse_primary(b"intrx 5\npages 1 2\n") == {}

    def test_negative_and_signed_values(self):
        assert parse_primary(b"ctxt -3\nintr +4\n") == {
            "context_switches": -3,
            "interrupts": 4,
        }

    def test_int64_bounds(self):
        assert parse_primary(b"ctxt 9223372036854775807") == {"context_switches": INT64_MAX}
        assert parse_primary(b"ctxt -9223372036854775808") == {"context_switches": INT64_MIN}
        assert parse_primary(b"ctxt 9223372036854775808") == {}

    def test_tokens_split_on_any_whitespace(self):
        assert parse_primary(b"ctxt\t300\r\nbtime   7") == {
            "context_switches": 300,
            "boot_time": 7,
        }

    def test_keyword_table(self):
        assert KEYWORD_FIELDS[b"page"] == ("disk_pages_in", "disk_pages_out")
        assert all(len(names) >= 1 for names in KEYWORD_FIELDS.values())
        output_names = [n for names in KEYWORD_FIELDS.values() for n in names]
        assert len(output_names) == len(set(output_names))


class TestParseSecondary:
    """Test cases for parse_secondary."""

    @pytest.mark.parametrize(
        "buffer, expected",
        [
            (b"128\n", 128),
            (b"64", 64),
            (b"  256 \n\n", 256),
            (b"0\n", 0),
            (b"-1\n", -1),
        ],
    )
    def test_valid_values(self, buffer, expected):
        assert parse_secondary(buffer) == expected

    @pytest.mark.parametrize(
        "buffer",
        [b"not_a_number", b"", b"\n", b"12 34", b"99999999999999999999", b"\xff\xfe", b"1_000"],
    )
    def test_invalid_values(self, buffer):
        with pytest.raises(StatParseError):
            parse_secondary(buffer)

    def test_error_carries_path_and_text(self):
        with pytest.raises(StatParseError) as excinfo:
            parse_secondary(b"garbage\n", path="/proc/sys/kernel/random/entropy_avail")

        assert excinfo.value.path == "/proc/sys/kernel/random/entropy_avail"
        assert excinfo.value.text == "garbage"
        assert "entropy_avail" in str(excinfo.value)


class TestParseInt64:
    """Strict base-10 parsing rules."""

    def test_accepts_plain_decimal(self):
        assert parse_int64("42") == 42
        assert parse_int64("+42") == 42
        assert parse_int64("-42") == -42
        assert parse_int64("007") == 7

    @pytest.mark.parametrize("text", ["", "+", "-", "1_000", " 1", "1 ", "0x10", "1.5", "٣"])
    def test_rejects_lenient_forms(self, text):
        with pytest.raises(ValueError):
            parse_int64(text)

    def test_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            parse_int64(str(INT64_MAX + 1))
        with pytest.raises(ValueError):
            parse_int64(str(INT64_MIN - 1))
