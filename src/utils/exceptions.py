"""
Custom Exceptions Module.

Exceptions raised by the I/O glue around the field extraction engine.
The engine itself never raises: it degrades to sentinel values instead.

Exception Hierarchy:
    InvoiceScanError (base)
    ├── InputError
    │   ├── UnsupportedFileTypeError
    │   ├── InputFileNotFoundError
    │   └── CorruptedFileError
    ├── OCRResultError
    │   └── MalformedOCRResultError
    └── OutputError
        └── ResultExportError
"""


class InvoiceScanError(Exception):
    """
    Base exception for all invoice scanner errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# INPUT ERRORS
# =============================================================================

class InputError(InvoiceScanError):
    """Base exception for input handling errors."""
    pass


class UnsupportedFileTypeError(InputError):
    """
    Raised when an unsupported file type is provided.

    Example:
        >>> raise UnsupportedFileTypeError(".pdf", [".json", ".txt"])
    """

    def __init__(self, file_type: str, supported_types: list):
        message = f"Unsupported file type: '{file_type}'"
        details = {"file_type": file_type, "supported_types": supported_types}
        super().__init__(message, details)


class InputFileNotFoundError(InputError):
    """Raised when an input file or directory cannot be found."""

    def __init__(self, filepath: str):
        message = f"File not found: {filepath}"
        details = {"filepath": filepath}
        super().__init__(message, details)


class CorruptedFileError(InputError):
    """Raised when a file is empty, undecodable or not valid JSON."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Corrupted or unreadable file: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


# =============================================================================
# OCR RESULT ERRORS
# =============================================================================

class OCRResultError(InvoiceScanError):
    """Base exception for OCR result payload errors."""
    pass


class MalformedOCRResultError(OCRResultError):
    """Raised when an OCR payload does not have the region/line/word shape."""

    def __init__(self, reason: str = None):
        message = "Malformed OCR result"
        details = {"reason": reason}
        super().__init__(message, details)


# =============================================================================
# OUTPUT ERRORS
# =============================================================================

class OutputError(InvoiceScanError):
    """Base exception for output handling errors."""
    pass


class ResultExportError(OutputError):
    """Raised when scan results cannot be written."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Failed to export results: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


__all__ = [
    'InvoiceScanError',
    'InputError',
    'UnsupportedFileTypeError',
    'InputFileNotFoundError',
    'CorruptedFileError',
    'OCRResultError',
    'MalformedOCRResultError',
    'OutputError',
    'ResultExportError',
]
