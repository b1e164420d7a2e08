"""Splitting of raw SumatraPDF option strings into argv tokens.

Callers pass options such as ``-print-settings "1,2,fit"`` as a single
string. Double-quoted segments become part of one token and the quotes
are dropped. Backslashes are kept literally, unlike ``shlex.split``, so
Windows paths survive untouched.
"""

from collections.abc import Iterable

_QUOTE = '"'


def split_quoted(raw: str) -> list[str]:
    """
    Split a raw option string on whitespace, honoring double quotes.

    Args:
        raw: Option string, e.g. '-print-settings "1,2,fit"'

    Returns:
        Non-empty tokens in order. An unterminated quote extends to the end
        of the input.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quote = False

    for char in raw:
        if char == _QUOTE:
            in_quote = not in_quote
        elif char.isspace() and not in_quote:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens


def split_options(raw_options: Iterable[str]) -> list[str]:
    """Split each raw option string and flatten the results, preserving order."""
    result = []
    for raw in raw_options:
        result.extend(split_quoted(raw))
    return result
