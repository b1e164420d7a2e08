"""Exception hierarchy for pdfprinter.

All pdfprinter exceptions inherit from PdfPrinterError, enabling:
- Catching every library error with `except PdfPrinterError`
- Error context preservation via the `context` attribute
- Causality chains via `raise ... from e` patterns
"""

from typing import Any


class PdfPrinterError(Exception):
    """Base exception for all pdfprinter errors.

    Args:
        message: Human-readable error description
        context: Optional dict of contextual information (command, returncode, etc.)
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        base = super().__str__()
        if self.context:
            details = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{base} [{details}]"
        return base


class ValidationError(PdfPrinterError):
    """Raised when a print request is rejected before any process is started."""


class ExecutionError(PdfPrinterError):
    """Raised when an external command fails to start or exits non-zero."""


class ConfigError(PdfPrinterError):
    """Raised when a configuration file is invalid."""
