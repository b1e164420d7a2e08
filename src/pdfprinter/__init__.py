"""pdfprinter - List printers and print PDF files through SumatraPDF."""

import logging

__version__ = "0.1.0"

from pdfprinter.command import CommandInvocation, PrintOptions, build_print_command
from pdfprinter.exceptions import (
    ConfigError,
    ExecutionError,
    PdfPrinterError,
    ValidationError,
)
from pdfprinter.printer import get_default_printer, list_printers, print_file

__all__ = [
    "__version__",
    "CommandInvocation",
    "PrintOptions",
    "build_print_command",
    "list_printers",
    "get_default_printer",
    "print_file",
    "PdfPrinterError",
    "ValidationError",
    "ExecutionError",
    "ConfigError",
]

# Prevent "No handler found" warnings when used as a library
logging.getLogger("pdfprinter").addHandler(logging.NullHandler())
