"""Custom exceptions for pagequill."""

from typing import Optional


class PageQuillError(Exception):
    """Base exception for pagequill errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class EncodingError(PageQuillError):
    """Exception raised for malformed or non-encodable input blocks."""

    pass


class GeometryError(PageQuillError):
    """Exception raised for invalid page geometry."""

    pass


class LayoutError(PageQuillError):
    """Exception raised during layout calculation."""

    pass


class CompilationError(PageQuillError):
    """Exception raised during PDF compilation.

    Object and offset bookkeeping is produced in the same pass that emits the
    bytes, so this error marks an internal defect and aborts the document.
    """

    pass
