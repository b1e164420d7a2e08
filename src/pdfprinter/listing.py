"""Parsing of printer enumeration output.

`wmic printer get name` prints a header row followed by one printer per
line, padded to a fixed column width:

    Name
    Microsoft Print to PDF
    Zebra

With `get default,name` a leading TRUE/FALSE column is added:

    Default  Name
    FALSE    Microsoft Print to PDF
    TRUE     Zebra

Column widths depend on the longest value, so rows are split on runs of
whitespace rather than on fixed offsets.
"""

import re

from pdfprinter.constants import DEFAULT_FLAG

_COLUMN_SEPARATOR = re.compile(r"\s+")


def _data_rows(stdout: str) -> list[str]:
    """Return stripped, non-blank rows with the header row removed."""
    rows = [line.strip() for line in stdout.splitlines()]
    rows = [row for row in rows if row]
    return rows[1:]


def parse_printer_list(stdout: str, want_default: bool = False) -> list[str] | str:
    """
    Parse printer enumeration output.

    Args:
        stdout: Raw text printed by the enumeration command
        want_default: If True, return only the printer flagged as default

    Returns:
        List of printer names in output order, or (when want_default is set)
        the default printer's name, or "" if no row is flagged TRUE
    """
    rows = _data_rows(stdout)

    if not want_default:
        return rows

    for row in rows:
        parts = _COLUMN_SEPARATOR.split(row, maxsplit=1)
        if len(parts) == 2 and parts[0] == DEFAULT_FLAG:
            return parts[1].strip()
    return ""
