"""
CSV Parser for Import System.

Splits raw CSV text into a header row and value rows.
Follows Single Responsibility Principle - only parsing logic.

Known limitation: values are split on every comma, quoted fields are not
supported on import.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from src.core.exceptions import (
    MalformedInputError,
    MissingHeadersError,
    ColumnCountMismatchError,
)


@dataclass(frozen=True)
class ParsedRow:
    """Riga dati con numero riga sorgente (1-based, header = riga 1)"""
    line_number: int
    values: List[str]


class CSVParser:
    """
    Parser CSV minimale: separatore virgola, nessun quoting.

    Stateless parser - tutti i metodi sono statici.
    """

    DELIMITER = ','

    @staticmethod
    def split_lines(content: str) -> List[str]:
        """
        Divide il testo in righe sul carattere line-feed.

        Raises:
            MalformedInputError: Se il testo ha meno di due righe
        """
        lines = content.split('\n')
        if len(lines) < 2:
            raise MalformedInputError()
        return lines

    @staticmethod
    def split_values(line: str) -> List[str]:
        """Divide una riga sulle virgole e rimuove gli spazi da ogni valore"""
        return [value.strip() for value in line.split(CSVParser.DELIMITER)]

    @staticmethod
    def parse_headers(line: str) -> List[str]:
        """Normalizza la riga di intestazione: trim + lower-case"""
        return [header.lower() for header in CSVParser.split_values(line)]

    @staticmethod
    def validate_headers(headers: List[str], required_headers: List[str]) -> None:
        """
        Verifica che tutti gli header obbligatori siano presenti (in qualunque posizione).

        Raises:
            MissingHeadersError: Con l'elenco completo degli header mancanti
        """
        missing = [header for header in required_headers if header not in headers]
        if missing:
            raise MissingHeadersError(missing)

    @staticmethod
    def parse_grid(content: str, required_headers: List[str]) -> Tuple[List[str], List[ParsedRow]]:
        """
        Parse completo: header normalizzati + righe dati.

        Le righe vuote (dopo trim) vengono saltate e non producono record.

        Args:
            content: Testo CSV
            required_headers: Header obbligatori (lower-case)

        Returns:
            Tuple (headers, rows)

        Raises:
            MalformedInputError: Meno di due righe
            MissingHeadersError: Header obbligatori assenti
            ColumnCountMismatchError: Riga con numero di valori diverso dalle colonne
        """
        lines = CSVParser.split_lines(content)

        headers = CSVParser.parse_headers(lines[0])
        CSVParser.validate_headers(headers, required_headers)

        rows: List[ParsedRow] = []
        for index, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue

            values = CSVParser.split_values(line)
            if len(values) != len(headers):
                raise ColumnCountMismatchError(index, len(values), len(headers))

            rows.append(ParsedRow(line_number=index, values=values))

        return headers, rows
