"""
Tests for the record parsing component.

Tests cover CSV parsing of ragged rows, decoding, fetch failures and the
explicit row-to-reading conversion.
"""

import math
import pytest

from plant_monitor.components.parsing import CsvRecordParserComponent, parse_csv, to_reading
from plant_monitor.config import CsvSettings
from plant_monitor.utils.exceptions import FetchError


class TestCsvRecordParserComponent:
    """Test suite for CsvRecordParserComponent."""

    def test_execute_parses_rows_in_file_order(self, sample_config, multi_row_store):
        """Rows come back in the order they appear in the object."""
        component = CsvRecordParserComponent(sample_config, multi_row_store)

        rows = component.execute("test-bucket", "2024-01-01T11-00.csv")

        assert rows == [
            ["2024-01-01T11:00", "21000", "3", "22000"],
            ["2024-01-01T11:10", "21500", "4", "22500"],
            ["2024-01-01T11:20", "22000", "5", "23000"],
        ]
        assert multi_row_store.calls == [("get", "test-bucket", "2024-01-01T11-00.csv")]

    def test_execute_keeps_ragged_rows(self, sample_config, empty_store, base_time):
        """Short and long rows are not padded or trimmed."""
        empty_store.put("ragged.csv", "t1,100\nt2,200,x,300,extra\n", base_time)
        component = CsvRecordParserComponent(sample_config, empty_store)

        rows = component.execute("test-bucket", "ragged.csv")

        assert rows == [["t1", "100"], ["t2", "200", "x", "300", "extra"]]

    def test_execute_skips_blank_lines(self, sample_config, empty_store, base_time):
        """Blank lines, including the trailing newline, produce no rows."""
        empty_store.put("blank.csv", "t1,1,x,2\n\n\nt2,3,x,4\n\n", base_time)
        component = CsvRecordParserComponent(sample_config, empty_store)

        rows = component.execute("test-bucket", "blank.csv")

        assert len(rows) == 2

    def test_execute_handles_crlf_and_quotes(self, sample_config, empty_store, base_time):
        empty_store.put("crlf.csv", 't1,"1,5",x,2\r\nt2,3,x,4\r\n', base_time)
        component = CsvRecordParserComponent(sample_config, empty_store)

        rows = component.execute("test-bucket", "crlf.csv")

        assert rows == [["t1", "1,5", "x", "2"], ["t2", "3", "x", "4"]]

    def test_execute_fetch_failure(self, sample_config, scenario_store):
        """Store errors surface as FetchError."""
        scenario_store.get_errors["obj1.csv"] = ConnectionError("timed out")
        component = CsvRecordParserComponent(sample_config, scenario_store)

        with pytest.raises(FetchError, match="obj1.csv"):
            component.execute("test-bucket", "obj1.csv")

    def test_execute_invalid_bytes_degrade_to_bad_field(self, sample_config, empty_store, base_time):
        """A stray invalid byte only spoils the field it sits in."""
        empty_store.put("corrupt.csv", b"t1,15000,x,25000\nt2,\xff300,x,10000\n", base_time)
        component = CsvRecordParserComponent(sample_config, empty_store)

        rows = component.execute("test-bucket", "corrupt.csv")

        assert rows == [["t1", "15000", "x", "25000"], ["t2", "\ufffd300", "x", "10000"]]
        result = component.to_reading(rows[1], key="corrupt.csv")
        assert math.isnan(result.reading.moisture_a)
        assert result.reading.moisture_b == 10000.0
        assert [(i.field, i.reason) for i in result.issues] == [("moisture_a", "not_a_number")]

    def test_execute_handles_cr_only_line_endings(self, sample_config, empty_store, base_time):
        """A lone carriage return terminates a row."""
        empty_store.put("cr.csv", "t1,15000,x,25000\rt2,30000,x,10000\r", base_time)
        component = CsvRecordParserComponent(sample_config, empty_store)

        rows = component.execute("test-bucket", "cr.csv")

        assert rows == [["t1", "15000", "x", "25000"], ["t2", "30000", "x", "10000"]]

    def test_execute_oversized_field(self, sample_config, empty_store, base_time):
        """Rows the csv module refuses to split are reported as FetchError."""
        empty_store.put("huge.csv", "t1," + "9" * 200000 + ",x,1\n", base_time)
        component = CsvRecordParserComponent(sample_config, empty_store)

        with pytest.raises(FetchError, match="huge.csv"):
            component.execute("test-bucket", "huge.csv")

    def test_to_reading_uses_configured_layout(self, sample_config):
        """The component converts with the layout from config."""
        component = CsvRecordParserComponent(sample_config, None)

        result = component.to_reading(["2024-01-01T00:00", "15000", "x", "25000"])

        assert result.ok
        assert result.reading.timestamp == "2024-01-01T00:00"
        assert result.reading.moisture_a == 15000.0
        assert result.reading.moisture_b == 25000.0


class TestParseCsv:
    """Tests for parse_csv."""

    def test_empty_text(self):
        assert parse_csv("") == []

    def test_single_row_without_newline(self):
        assert parse_csv("a,b,c,d") == [["a", "b", "c", "d"]]

    def test_mixed_line_endings(self):
        assert parse_csv("a,1\rb,2\r\nc,3\n") == [["a", "1"], ["b", "2"], ["c", "3"]]

    def test_quoted_newline_stays_in_field(self):
        assert parse_csv('a,"x\ny",1\n') == [["a", "x\ny", "1"]]


class TestToReading:
    """Tests for the row-to-reading conversion."""

    @pytest.fixture
    def layout(self):
        return CsvSettings()

    def test_ignores_unused_column(self, layout):
        """Column 2 never affects the reading."""
        result = to_reading(["ts", "1", "not-a-number", "2"], layout)

        assert result.ok
        assert result.reading.moisture_a == 1.0
        assert result.reading.moisture_b == 2.0

    def test_missing_moisture_b(self, layout):
        """A three-field row yields NaN for plant 2 and a missing issue."""
        result = to_reading(["ts", "17000", "12"], layout, key="short.csv")

        assert not result.ok
        assert result.reading.moisture_a == 17000.0
        assert math.isnan(result.reading.moisture_b)
        assert len(result.issues) == 1
        issue = result.issues[0]
        assert issue.field == "moisture_b"
        assert issue.index == 3
        assert issue.reason == "missing"
        assert issue.raw is None
        assert issue.key == "short.csv"

    def test_non_numeric_moisture(self, layout):
        """Unparseable text yields NaN and a not_a_number issue."""
        result = to_reading(["ts", "n/a", "x", "21000"], layout)

        assert math.isnan(result.reading.moisture_a)
        assert result.reading.moisture_b == 21000.0
        assert [(i.field, i.reason, i.raw) for i in result.issues] == [("moisture_a", "not_a_number", "n/a")]

    def test_empty_row_field(self, layout):
        """An empty string field is not a number."""
        result = to_reading(["ts", "", "x", "5"], layout)

        assert math.isnan(result.reading.moisture_a)
        assert result.issues[0].reason == "not_a_number"

    def test_timestamp_only_row(self, layout):
        result = to_reading(["ts"], layout)

        assert result.reading.timestamp == "ts"
        assert math.isnan(result.reading.moisture_a)
        assert math.isnan(result.reading.moisture_b)
        assert {i.field for i in result.issues} == {"moisture_a", "moisture_b"}

    def test_missing_timestamp(self, layout):
        """An empty row still converts, with every field reported."""
        result = to_reading([], layout)

        assert result.reading.timestamp == ""
        assert [i.field for i in result.issues] == ["timestamp", "moisture_a", "moisture_b"]

    def test_whitespace_around_numbers(self, layout):
        result = to_reading(["ts", " 15000 ", "x", "25000\t"], layout)

        assert result.ok
        assert result.reading.moisture_a == 15000.0
        assert result.reading.moisture_b == 25000.0

    def test_custom_layout(self):
        """Column indices come from the layout."""
        layout = CsvSettings(timestamp_index=2, moisture_a_index=0, moisture_b_index=1)

        result = to_reading(["10", "20", "ts"], layout)

        assert result.ok
        assert result.reading.timestamp == "ts"
        assert result.reading.moisture_a == 10.0
        assert result.reading.moisture_b == 20.0
