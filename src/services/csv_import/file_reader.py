"""
Uploaded file reader for CSV Import System.

Gates uploads on their extension and decodes CSV bytes into text.
"""
from __future__ import annotations

from typing import Optional

from src.core.exceptions import LegacyFormatRejectedError, UnsupportedFormatError

CSV_EXTENSION = 'csv'
LEGACY_SPREADSHEET_EXTENSIONS = ('xlsx', 'xls')

EXCEL_GUIDANCE = 'Please save your Excel file as CSV format and upload the CSV file instead.'


def file_extension(filename: Optional[str]) -> str:
    """Estensione lower-case (ultimo segmento dopo il punto)"""
    return (filename or '').lower().rsplit('.', 1)[-1]


def decode_content(file_content: bytes) -> str:
    """Decodifica UTF-8 (rimuovendo il BOM) con fallback Latin-1"""
    try:
        return file_content.decode('utf-8-sig')
    except UnicodeDecodeError:
        return file_content.decode('latin-1')


def parse_excel_file(filename: Optional[str], file_content: bytes) -> str:
    """
    I file Excel non vengono mai letti: l'utente deve salvarli come CSV.

    Raises:
        LegacyFormatRejectedError: Sempre
    """
    raise LegacyFormatRejectedError(EXCEL_GUIDANCE, filename)


def parse_file(filename: Optional[str], file_content: bytes) -> str:
    """
    Restituisce il testo di un file caricato.

    Args:
        filename: Nome originale del file (determina il formato)
        file_content: Contenuto in bytes

    Returns:
        Testo CSV

    Raises:
        LegacyFormatRejectedError: Per .xlsx / .xls
        UnsupportedFormatError: Per qualunque altra estensione
    """
    extension = file_extension(filename)

    if extension == CSV_EXTENSION:
        return decode_content(file_content)
    if extension in LEGACY_SPREADSHEET_EXTENSIONS:
        raise LegacyFormatRejectedError(filename=filename)
    raise UnsupportedFormatError(filename)
