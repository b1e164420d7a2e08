"""Printer interface for pdfprinter: enumeration via wmic, printing via SumatraPDF."""

import os
import subprocess
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pdfprinter.command import PrintOptions, build_print_command
from pdfprinter.constants import LIST_ARGS, LIST_COMMAND, LIST_DEFAULT_ARGS
from pdfprinter.exceptions import ExecutionError
from pdfprinter.listing import parse_printer_list
from pdfprinter.logging_config import get_logger
from pdfprinter.paths import default_sumatra_path

logger = get_logger(__name__)

# execute(executable, args) -> stdout
Executor = Callable[[str, Sequence[str]], str]


def run_command(executable: str, args: Sequence[str]) -> str:
    """
    Run an external command and return its standard output.

    Args:
        executable: Program to run
        args: Arguments passed to the program, one token each

    Returns:
        Captured stdout

    Raises:
        ExecutionError: If the program cannot be started or exits non-zero
    """
    cmd = [executable, *args]
    logger.debug("Running: %s", subprocess.list2cmdline(cmd))

    try:
        result = subprocess.run(
            cmd,
            check=True,
            capture_output=True,
            text=True,
            errors="replace",
        )
    except subprocess.CalledProcessError as e:
        raise ExecutionError(
            f"Command failed: {executable}",
            {"returncode": e.returncode, "stderr": (e.stderr or "").strip()},
        ) from e
    except OSError as e:
        raise ExecutionError(f"Could not run {executable}: {e}") from e

    return result.stdout


def list_printers(want_default: bool = False, *, execute: Executor = run_command) -> list[str] | str:
    """
    List available printers on the system.

    Args:
        want_default: If True, return only the default printer's name
        execute: Command runner (injectable for testing)

    Returns:
        List of printer names, or the default printer name ("" if none)

    Raises:
        ExecutionError: If printer enumeration fails (from the runner, unchanged)
    """
    args = LIST_DEFAULT_ARGS if want_default else LIST_ARGS
    stdout = execute(LIST_COMMAND, list(args))
    return parse_printer_list(stdout or "", want_default)


def get_default_printer(*, execute: Executor = run_command) -> str:
    """Return the name of the default printer, or "" if none is set."""
    return list_printers(True, execute=execute)


def print_file(
    pdf: str | os.PathLike,
    options: PrintOptions | Mapping[str, Any] | None = None,
    *,
    execute: Executor = run_command,
    exists: Callable[[str], bool] = os.path.exists,
    default_executable: Callable[[], str] = default_sumatra_path,
) -> str:
    """
    Print a PDF file using SumatraPDF.

    Args:
        pdf: Path to the PDF file
        options: PrintOptions or an equivalent mapping
        execute: Command runner (injectable for testing)
        exists: Existence check for the PDF path
        default_executable: Returns the SumatraPDF path when none is configured

    Returns:
        Output of the runner (SumatraPDF's stdout)

    Raises:
        ValidationError: If the file or options are invalid; nothing is run
        ExecutionError: If SumatraPDF fails (from the runner, unchanged)
    """
    invocation = build_print_command(
        pdf,
        options,
        exists=exists,
        default_executable=default_executable,
    )
    logger.debug("Print command: %s", subprocess.list2cmdline(invocation.as_argv()))
    return execute(invocation.executable, invocation.arguments)
