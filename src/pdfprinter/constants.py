"""Centralized constants for pdfprinter."""

# Bundled PDF printing helper
SUMATRA_EXECUTABLE = "SumatraPDF.exe"

# Environment variable overriding the bundled helper location
SUMATRA_PATH_ENV = "PDFPRINTER_SUMATRA_PATH"

# SumatraPDF command-line flags
FLAG_PRINT_TO = "-print-to"
FLAG_PRINT_TO_DEFAULT = "-print-to-default"
FLAG_PRINT_DIALOG = "-print-dialog"
FLAG_SILENT = "-silent"

# Printer enumeration command (wmic prints a fixed-width table)
LIST_COMMAND = "wmic"
LIST_ARGS = ("printer", "get", "name")
LIST_DEFAULT_ARGS = ("printer", "get", "default,name")

# Flag value marking the default printer in the enumeration output
DEFAULT_FLAG = "TRUE"
