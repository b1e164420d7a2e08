"""Command-line interface for pdfprinter."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from pdfprinter import __version__
from pdfprinter.logging_config import get_logger

logger = get_logger(__name__)


def show_version() -> None:
    """Show version information including the SumatraPDF location."""
    from pdfprinter.paths import default_sumatra_path

    logger.info("pdfprinter %s", __version__)
    logger.info("SumatraPDF: %s", default_sumatra_path())


def cmd_list_printers() -> int:
    """List available printers."""
    from pdfprinter.exceptions import ExecutionError
    from pdfprinter.printer import list_printers

    try:
        printers = list_printers()
    except ExecutionError as e:
        logger.error("%s", e)
        return 1

    if not printers:
        logger.info("No printers found.")
        return 0
    logger.info("Available printers:")
    for i, printer in enumerate(printers, 1):
        logger.info("  %d. %s", i, printer)
    return 0


def cmd_default_printer() -> int:
    """Show the default printer."""
    from pdfprinter.exceptions import ExecutionError
    from pdfprinter.printer import get_default_printer

    try:
        printer = get_default_printer()
    except ExecutionError as e:
        logger.error("%s", e)
        return 1

    if not printer:
        logger.info("No default printer set.")
        return 0
    logger.info("%s", printer)
    return 0


def _dry_run(executable: str, args: Sequence[str]) -> str:
    logger.info("[dry-run] Would execute: %s", subprocess.list2cmdline([executable, *args]))
    return ""


def cmd_print(
    pdf: Path,
    config_path: Path | None = None,
    printer: str | None = None,
    sumatra_path: str | None = None,
    win32: list[str] | None = None,
    dry_run: bool = False,
) -> int:
    """Print a PDF file."""
    from pdfprinter.config import PrintDefaults, load_config
    from pdfprinter.exceptions import PdfPrinterError
    from pdfprinter.printer import print_file, run_command

    try:
        defaults = load_config(config_path) if config_path else PrintDefaults()
        options = defaults.to_options(
            printer=printer,
            sumatra_pdf_path=sumatra_path,
            win32=win32,
        )
        execute = _dry_run if dry_run else run_command
        print_file(str(pdf), options, execute=execute)
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except PdfPrinterError as e:
        logger.error("%s", e)
        return 1

    if not dry_run:
        logger.info("Sent %s to %s", pdf, options.printer or "the default printer")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pdfp",
        description="List printers and print PDF files through SumatraPDF.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pdfp --list-printers                          List available printers
  pdfp --default-printer                        Show the default printer
  pdfp report.pdf                               Print to the default printer
  pdfp report.pdf -p "Microsoft Print to PDF"   Print to a specific printer
  pdfp report.pdf --win32='-print-settings "1-3,fit"'
                                                Pass SumatraPDF options through
  pdfp report.pdf --win32=-print-dialog         Show the print dialog
  pdfp report.pdf -c printing.yaml --dry-run    Show the command without running it
""",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version information and exit",
    )

    parser.add_argument(
        "pdf",
        nargs="?",
        type=Path,
        help="PDF file to print",
    )

    parser.add_argument(
        "-p",
        "--printer",
        help="Printer name (default: system default printer)",
    )

    parser.add_argument(
        "--sumatra-path",
        help="Path to SumatraPDF.exe (overrides config and PDFPRINTER_SUMATRA_PATH)",
    )

    parser.add_argument(
        "--win32",
        action="append",
        metavar="OPTION",
        help="Raw SumatraPDF option, may be repeated; use --win32=OPTION since options start with '-'",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to YAML file with print defaults",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the print command without running it",
    )

    parser.add_argument(
        "--list-printers",
        action="store_true",
        help="List available printers and exit",
    )

    parser.add_argument(
        "--default-printer",
        action="store_true",
        help="Show the default printer and exit",
    )

    # Logging options
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v shows executed commands)",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress all output except errors",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to file (includes all levels)",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    from pdfprinter.logging_config import setup_logging

    setup_logging(
        verbosity=parsed.verbose,
        quiet=parsed.quiet,
        log_file=parsed.log_file,
    )

    if parsed.version:
        show_version()
        return 0

    if parsed.list_printers:
        return cmd_list_printers()

    if parsed.default_printer:
        return cmd_default_printer()

    if not parsed.pdf:
        parser.print_help()
        return 1

    return cmd_print(
        parsed.pdf,
        config_path=parsed.config,
        printer=parsed.printer,
        sumatra_path=parsed.sumatra_path,
        win32=parsed.win32,
        dry_run=parsed.dry_run,
    )


if __name__ == "__main__":
    sys.exit(main())
