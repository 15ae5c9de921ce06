"""
Tests for utility functions.
"""

import logging
from datetime import datetime

import pytest

from shipyard_cli.utils import (
    format_datetime,
    truncate_string,
    parse_key_value,
    setup_logging,
    short_id,
    pluck,
    join_values,
    print_success,
    print_error,
    print_warning,
    print_info,
    print_table,
    print_json,
)


class TestFormatDatetime:
    """Tests for format_datetime function."""

    def test_format_none(self):
        """Test formatting None."""
        assert format_datetime(None) == "-"
        assert format_datetime("") == "-"

    def test_format_string(self):
        """Test formatting ISO string."""
        assert format_datetime("2025-01-08T10:30:00Z") == "2025-01-08 10:30:00"

    def test_format_datetime_object(self):
        """Test formatting datetime object."""
        dt = datetime(2025, 1, 8, 10, 30, 0)
        assert format_datetime(dt) == "2025-01-08 10:30:00"

    def test_format_epoch(self):
        """Test formatting epoch seconds (UTC)."""
        assert format_datetime(0) == "1970-01-01 00:00:00"

    def test_unparseable_passthrough(self):
        assert format_datetime("yesterday") == "yesterday"


class TestTruncateString:
    """Tests for truncate_string function."""

    def test_no_truncation_needed(self):
        assert truncate_string("Hello", 10) == "Hello"

    def test_truncation(self):
        result = truncate_string("Hello World!", 8)
        assert len(result) == 8
        assert result.endswith("...")

    def test_none(self):
        assert truncate_string(None) == ""


class TestParseKeyValue:
    """Tests for parse_key_value function."""

    def test_simple(self):
        assert parse_key_value(["A=1", "B=two"]) == {"A": "1", "B": "two"}

    def test_value_with_separator(self):
        assert parse_key_value(["URL=http://h?a=b"]) == {"URL": "http://h?a=b"}

    def test_empty_value(self):
        assert parse_key_value(["EMPTY="]) == {"EMPTY": ""}

    def test_invalid_format(self):
        with pytest.raises(ValueError):
            parse_key_value(["invalid"])

    def test_empty_key(self):
        with pytest.raises(ValueError):
            parse_key_value(["=value"])


class TestRecordHelpers:
    """Tests for short_id, pluck and join_values."""

    def test_short_id(self):
        assert short_id("0123456789abcdef") == "0123456789ab"
        assert short_id(None) == ""

    def test_pluck_nested(self):
        assert pluck({"engine": {"id": "e1"}}, "engine", "id") == "e1"

    def test_pluck_missing(self):
        assert pluck({"engine": None}, "engine", "id") == ""
        assert pluck({}, "image", "name", default="-") == "-"

    def test_join_values(self):
        assert join_values(["a", "b"]) == "a, b"
        assert join_values(None) == ""


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_verbose(self):
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_quiet(self):
        setup_logging(quiet=True)
        assert logging.getLogger().level == logging.ERROR

    def test_default(self):
        setup_logging()
        assert logging.getLogger().level == logging.WARNING


class TestPrintFunctions:
    """Tests for print_* utility functions."""

    def test_print_success(self, capsys):
        print_success("Operation completed")
        captured = capsys.readouterr()
        assert "Operation completed" in captured.out

    def test_print_error_simple(self, capsys):
        print_error("Something went wrong")
        captured = capsys.readouterr()
        assert "Something went wrong" in captured.err

    def test_print_error_with_details(self, capsys):
        print_error("Error occurred", details="Additional info here")
        captured = capsys.readouterr()
        assert "Error occurred" in captured.err
        assert "Additional info here" in captured.err

    def test_print_warning(self, capsys):
        print_warning("Watch out!")
        captured = capsys.readouterr()
        assert "Watch out!" in captured.out

    def test_print_info(self, capsys):
        print_info("Just so you know")
        captured = capsys.readouterr()
        assert "Just so you know" in captured.out


class TestPrintTable:
    """Tests for print_table function."""

    def test_print_basic_table(self, capsys):
        headers = ["Name", "Age"]
        rows = [["Alice", "30"], ["Bob", 25]]
        print_table(headers, rows)
        captured = capsys.readouterr()
        assert "Name" in captured.out
        assert "Alice" in captured.out
        assert "25" in captured.out

    def test_columns_aligned(self, capsys):
        print_table(["ID", "State"], [["abcdef", "running"], ["x", "stopped"]])
        lines = capsys.readouterr().out.splitlines()
        assert lines[2].index("running") == lines[3].index("stopped")

    def test_print_empty_table(self, capsys):
        print_table(["X", "Y"], [])
        captured = capsys.readouterr()
        assert "X" in captured.out
        assert "Y" in captured.out


class TestPrintJson:
    """Tests for print_json function."""

    def test_print_dict(self, capsys):
        print_json({"name": "Test", "count": 42})
        captured = capsys.readouterr()
        assert '"name"' in captured.out
        assert "42" in captured.out

    def test_print_with_custom_indent(self, capsys):
        print_json({"key": "value"}, indent=4)
        captured = capsys.readouterr()
        assert '    "key"' in captured.out
