"""
Test per la lettura dei file caricati
"""

import pytest

from src.core.exceptions import LegacyFormatRejectedError, UnsupportedFormatError
from src.services.csv_import.file_reader import parse_file, parse_excel_file, file_extension


class TestFileReader:

    def test_csv_is_decoded(self):
        assert parse_file("assets.csv", b"knoxid,serialnumber\nK1,SN1") == "knoxid,serialnumber\nK1,SN1"

    def test_extension_is_case_insensitive(self):
        assert parse_file("ASSETS.CSV", b"a,b\n1,2") == "a,b\n1,2"

    def test_utf8_bom_is_removed(self):
        assert parse_file("vms.csv", b"\xef\xbb\xbfvmid,vmname\n1,2") == "vmid,vmname\n1,2"

    def test_latin1_fallback(self):
        assert parse_file("vms.csv", "name\nCaffè".encode("latin-1")) == "name\nCaffè"

    @pytest.mark.parametrize("filename", ["assets.xlsx", "assets.XLS"])
    def test_excel_is_rejected_with_guidance(self, filename):
        with pytest.raises(LegacyFormatRejectedError) as exc_info:
            parse_file(filename, b"PK\x03\x04")

        assert exc_info.value.message == (
            "Excel files are not directly supported. "
            "Please save your Excel file as CSV format and upload the CSV file instead."
        )
        assert exc_info.value.status_code == 400

    def test_excel_reader_always_fails(self):
        with pytest.raises(LegacyFormatRejectedError) as exc_info:
            parse_excel_file("book.xlsx", b"")
        assert exc_info.value.message == "Please save your Excel file as CSV format and upload the CSV file instead."

    @pytest.mark.parametrize("filename", ["assets.txt", "assets", "", None, "report.csv.zip"])
    def test_unsupported_format(self, filename):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            parse_file(filename, b"a,b\n1,2")
        assert exc_info.value.message == "Unsupported file format. Please upload a CSV file."

    def test_file_extension(self):
        assert file_extension("archive.tar.CSV") == "csv"
        assert file_extension(None) == ""
