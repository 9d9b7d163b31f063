"""
Sistema di gestione errori centralizzato per l'import/export CSV dell'inventario
"""
from abc import ABC
from typing import Optional, Dict, Any, List
from enum import Enum

class ErrorCode(Enum):
    """Codici errore standardizzati"""
    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"
    MALFORMED_CSV = "MALFORMED_CSV"
    MISSING_HEADERS = "MISSING_HEADERS"
    COLUMN_COUNT_MISMATCH = "COLUMN_COUNT_MISMATCH"
    NO_RECORDS = "NO_RECORDS"
    UNSUPPORTED_FILE_FORMAT = "UNSUPPORTED_FILE_FORMAT"
    UNSUPPORTED_IMPORT_TYPE = "UNSUPPORTED_IMPORT_TYPE"

    # Infrastructure errors
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

class BaseApplicationException(Exception, ABC):
    """Base exception per l'applicazione"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 400
    ):
        self.message = message
        self.error_code = error_code.value
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Converte l'eccezione in dizionario per la risposta API"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "status_code": self.status_code
        }

class ValidationException(BaseApplicationException):
    """Errori di validazione dei dati in ingresso"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 400)

class InfrastructureException(BaseApplicationException):
    """Errori di infrastruttura"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.EXTERNAL_SERVICE_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message, error_code, details, status_code)


# ============================================================================
# CSV import errors
# ============================================================================

class CSVImportException(ValidationException):
    """Base per tutti gli errori di parsing/validazione di un file CSV"""


class MalformedInputError(CSVImportException):
    """Il testo sorgente ha meno di due righe"""

    def __init__(self, message: str = "CSV file must contain at least a header row and one data row"):
        super().__init__(message, ErrorCode.MALFORMED_CSV)


class MissingHeadersError(CSVImportException):
    """Uno o più header obbligatori non sono presenti nella riga di intestazione"""

    def __init__(self, missing_headers: List[str]):
        self.missing_headers = list(missing_headers)
        super().__init__(
            f"CSV file is missing required headers: {', '.join(self.missing_headers)}",
            ErrorCode.MISSING_HEADERS,
            {"missing_headers": self.missing_headers}
        )


class ColumnCountMismatchError(CSVImportException):
    """Il numero di valori di una riga non coincide con il numero di colonne dell'header"""

    def __init__(self, line_number: int, value_count: int, column_count: int):
        self.line_number = line_number
        self.value_count = value_count
        self.column_count = column_count
        super().__init__(
            f"Line {line_number} has {value_count} values, but header has {column_count} columns",
            ErrorCode.COLUMN_COUNT_MISMATCH,
            {"line": line_number, "values": value_count, "columns": column_count}
        )


class IncompleteRecordError(CSVImportException):
    """Una riga non valorizza uno o più campi obbligatori"""

    def __init__(
        self,
        line_number: int,
        message: Optional[str] = None,
        field_values: Optional[Dict[str, Any]] = None
    ):
        self.line_number = line_number
        self.field_values = dict(field_values or {})
        details: Dict[str, Any] = {"line": line_number}
        if self.field_values:
            details["fields"] = self.field_values
        super().__init__(
            message or f"Line {line_number} is missing required values",
            ErrorCode.REQUIRED_FIELD_MISSING,
            details
        )


class NoRecordsError(CSVImportException):
    """Nessun record valido trovato nel file (solo import VM)"""

    def __init__(self, message: str = "No valid VM records found in CSV file"):
        super().__init__(message, ErrorCode.NO_RECORDS)


class UnsupportedFormatError(CSVImportException):
    """Estensione file non supportata"""

    def __init__(self, filename: Optional[str] = None):
        super().__init__(
            "Unsupported file format. Please upload a CSV file.",
            ErrorCode.UNSUPPORTED_FILE_FORMAT,
            {"filename": filename} if filename else None
        )


class LegacyFormatRejectedError(CSVImportException):
    """File Excel (.xlsx/.xls): rifiutato sempre con istruzioni per l'utente"""

    DEFAULT_MESSAGE = (
        "Excel files are not directly supported. "
        "Please save your Excel file as CSV format and upload the CSV file instead."
    )

    def __init__(self, message: str = DEFAULT_MESSAGE, filename: Optional[str] = None):
        super().__init__(
            message,
            ErrorCode.UNSUPPORTED_FILE_FORMAT,
            {"filename": filename} if filename else None
        )


class UnsupportedImportTypeError(CSVImportException):
    """Tipo di import sconosciuto"""

    def __init__(self, import_type: str, supported: Optional[List[str]] = None):
        super().__init__(
            "Unsupported import type",
            ErrorCode.UNSUPPORTED_IMPORT_TYPE,
            {"import_type": import_type, "supported": supported or []}
        )


class SubmissionError(InfrastructureException):
    """Il servizio di bulk-import ha risposto con uno stato di errore"""

    def __init__(
        self,
        message: str = "Import failed",
        upstream_status: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.upstream_status = upstream_status
        error_details = dict(details or {})
        if upstream_status is not None:
            error_details["upstream_status"] = upstream_status
        super().__init__(message, ErrorCode.EXTERNAL_SERVICE_ERROR, error_details, 502)
