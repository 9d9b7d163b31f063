"""
Test per CSVParser (split righe, header, griglia)
"""

import pytest

from src.core.exceptions import (
    MalformedInputError,
    MissingHeadersError,
    ColumnCountMismatchError,
)
from src.services.csv_import.csv_parser import CSVParser


class TestCSVParser:
    """Test per CSVParser"""

    def test_split_lines_requires_two_lines(self):
        with pytest.raises(MalformedInputError) as exc_info:
            CSVParser.split_lines("knoxid,serialnumber")
        assert exc_info.value.message == "CSV file must contain at least a header row and one data row"

    def test_split_lines_empty_text(self):
        with pytest.raises(MalformedInputError):
            CSVParser.split_lines("")

    def test_header_and_trailing_newline_is_two_lines(self):
        assert CSVParser.split_lines("name,category\n") == ["name,category", ""]

    def test_parse_headers_trims_and_lowercases(self):
        assert CSVParser.parse_headers(" KnoxID , Serial Number ,Category\r") == [
            "knoxid", "serial number", "category"
        ]

    def test_split_values_does_not_handle_quotes(self):
        assert CSVParser.split_values('"Dell, Inc", x') == ['"Dell', 'Inc"', 'x']

    def test_validate_headers_lists_every_missing_header(self):
        with pytest.raises(MissingHeadersError) as exc_info:
            CSVParser.validate_headers(["name"], ["vmid", "vmname", "hypervisor"])

        error = exc_info.value
        assert error.missing_headers == ["vmid", "vmname", "hypervisor"]
        assert error.message == "CSV file is missing required headers: vmid, vmname, hypervisor"
        assert error.details == {"missing_headers": ["vmid", "vmname", "hypervisor"]}

    def test_validate_headers_any_position(self):
        CSVParser.validate_headers(["extra", "category", "name"], ["name", "category"])

    def test_parse_grid_skips_blank_lines_and_keeps_line_numbers(self):
        content = "name,category\n\nMouse, Peripherals \n   \nKeyboard,Peripherals\n"
        headers, rows = CSVParser.parse_grid(content, ["name", "category"])

        assert headers == ["name", "category"]
        assert [row.line_number for row in rows] == [3, 5]
        assert rows[0].values == ["Mouse", "Peripherals"]

    def test_parse_grid_column_count_mismatch(self):
        content = "name,category\nMouse,Peripherals\n\nKeyboard"
        with pytest.raises(ColumnCountMismatchError) as exc_info:
            CSVParser.parse_grid(content, ["name", "category"])

        error = exc_info.value
        assert error.line_number == 4
        assert error.message == "Line 4 has 1 values, but header has 2 columns"

    def test_parse_grid_too_many_values(self):
        with pytest.raises(ColumnCountMismatchError) as exc_info:
            CSVParser.parse_grid("name,category\nMouse,Peripherals,Extra", ["name", "category"])
        assert exc_info.value.line_number == 2
        assert exc_info.value.value_count == 3
        assert exc_info.value.column_count == 2

    def test_parse_grid_checks_headers_before_rows(self):
        with pytest.raises(MissingHeadersError):
            CSVParser.parse_grid("name\nMouse,Peripherals", ["name", "category"])
