"""Construction of SumatraPDF print command lines."""

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pdfprinter.constants import (
    FLAG_PRINT_DIALOG,
    FLAG_PRINT_TO,
    FLAG_PRINT_TO_DEFAULT,
    FLAG_SILENT,
)
from pdfprinter.exceptions import ValidationError
from pdfprinter.paths import default_sumatra_path
from pdfprinter.tokenizer import split_options

# Mapping keys accepted by PrintOptions.from_dict (camelCase alias kept for
# callers porting option objects from other tools)
_OPTION_KEYS = {
    "printer": "printer",
    "sumatra_pdf_path": "sumatra_pdf_path",
    "sumatraPdfPath": "sumatra_pdf_path",
    "win32": "win32",
}


@dataclass
class PrintOptions:
    """Options for a single print job.

    Attributes:
        printer: Target printer name; the system default is used when unset
        sumatra_pdf_path: SumatraPDF executable overriding the bundled one
        win32: Raw SumatraPDF options, each possibly holding quoted sub-tokens
    """

    printer: str | None = None
    sumatra_pdf_path: str | None = None
    win32: list[str] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PrintOptions":
        """Build options from a mapping (e.g. parsed YAML or JSON).

        Raises:
            ValidationError: If data is not a mapping or has unknown keys
        """
        if not isinstance(data, Mapping):
            raise ValidationError("Invalid print options", {"type": type(data).__name__})

        unknown = sorted(set(data) - set(_OPTION_KEYS))
        if unknown:
            raise ValidationError(
                "Unknown print options",
                {"keys": ", ".join(unknown)},
            )

        kwargs = {_OPTION_KEYS[key]: value for key, value in data.items()}
        return cls(**kwargs)


@dataclass(frozen=True)
class CommandInvocation:
    """A fully resolved command ready to be executed."""

    executable: str
    arguments: list[str] = field(default_factory=list)

    def as_argv(self) -> list[str]:
        """Return the command as a single argv list."""
        return [self.executable, *self.arguments]


def _coerce_options(options: PrintOptions | Mapping[str, Any] | None) -> PrintOptions:
    if options is None:
        return PrintOptions()
    if isinstance(options, PrintOptions):
        return options
    if isinstance(options, Mapping):
        return PrintOptions.from_dict(options)
    raise ValidationError("Invalid print options", {"type": type(options).__name__})


def build_print_command(
    pdf: str | os.PathLike | None,
    options: PrintOptions | Mapping[str, Any] | None = None,
    *,
    exists: Callable[[str], bool] = os.path.exists,
    default_executable: Callable[[], str] = default_sumatra_path,
) -> CommandInvocation:
    """
    Build the SumatraPDF invocation printing a PDF file.

    Argument order: split win32 options, printer target (-print-to NAME or
    -print-to-default), -silent, then the file. When -print-dialog is among
    the win32 options, the printer target and -silent are left out and the
    printer option is ignored.

    Args:
        pdf: Path to the PDF file
        options: PrintOptions, an equivalent mapping, or None
        exists: Existence check for the PDF path
        default_executable: Returns the SumatraPDF path when none is configured

    Returns:
        CommandInvocation with the executable and its arguments

    Raises:
        ValidationError: If the file or options are invalid
    """
    if not pdf:
        raise ValidationError("No PDF specified")
    if not isinstance(pdf, (str, os.PathLike)):
        raise ValidationError("Invalid PDF name", {"type": type(pdf).__name__})

    pdf_path = os.fspath(pdf)
    if not exists(pdf_path):
        raise ValidationError("No such file", {"path": pdf_path})

    opts = _coerce_options(options)

    if opts.win32 is not None and not isinstance(opts.win32, (list, tuple)):
        raise ValidationError("options.win32 should be an array")
    if opts.win32 is not None and not all(isinstance(item, str) for item in opts.win32):
        raise ValidationError("options.win32 entries should be strings")
    if opts.printer is not None and not isinstance(opts.printer, str):
        raise ValidationError("options.printer should be a string")
    if opts.sumatra_pdf_path is not None and not isinstance(opts.sumatra_pdf_path, (str, os.PathLike)):
        raise ValidationError("options.sumatra_pdf_path should be a string")

    executable = os.fspath(opts.sumatra_pdf_path or default_executable())

    args = split_options(opts.win32 or [])
    interactive = FLAG_PRINT_DIALOG in args

    if not interactive:
        if opts.printer:
            args.extend([FLAG_PRINT_TO, opts.printer])
        else:
            args.append(FLAG_PRINT_TO_DEFAULT)
        args.append(FLAG_SILENT)

    args.append(pdf_path)

    return CommandInvocation(executable=executable, arguments=args)
