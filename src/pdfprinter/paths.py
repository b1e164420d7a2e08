"""Location of the bundled SumatraPDF helper."""

import os
import sys
from pathlib import Path

from pdfprinter.constants import SUMATRA_EXECUTABLE, SUMATRA_PATH_ENV

PACKAGE_DIR = Path(__file__).resolve().parent


def resolve_bundled_path(relative: str) -> str:
    """
    Resolve a file shipped alongside the package.

    Inside a frozen (PyInstaller) application, package data is unpacked to
    a temporary directory exposed as ``sys._MEIPASS``; the file is looked up
    there under the package name. Otherwise it lives next to this module.

    Args:
        relative: Path relative to the package directory

    Returns:
        Absolute path as a string (existence is not checked)
    """
    bundle_root = getattr(sys, "_MEIPASS", None)
    if getattr(sys, "frozen", False) and bundle_root:
        return str(Path(bundle_root) / PACKAGE_DIR.name / relative)
    return str(PACKAGE_DIR / relative)


def default_sumatra_path() -> str:
    """Return the SumatraPDF location used when no override is given.

    The PDFPRINTER_SUMATRA_PATH environment variable wins over the bundled copy.
    """
    env_path = os.environ.get(SUMATRA_PATH_ENV)
    if env_path:
        return env_path
    return resolve_bundled_path(SUMATRA_EXECUTABLE)
