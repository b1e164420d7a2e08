"""Shared fixtures for pdfprinter tests."""

import logging
import tempfile
import shutil
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import yaml


# === Path/Directory Fixtures ===

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


# === Logging Fixtures ===

@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging() so streams do not leak between tests."""
    yield
    logger = logging.getLogger("pdfprinter")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            handler.close()
            logger.removeHandler(handler)


# === PDF Fixtures ===

@pytest.fixture
def temp_pdf(temp_dir):
    """Create a temporary single-page PDF for testing."""
    from pypdf import PdfWriter

    pdf_path = temp_dir / "test.pdf"
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)  # Letter size
    with open(pdf_path, "wb") as f:
        writer.write(f)
    return pdf_path


# === Command Runner Fixtures ===

class RecordingRunner:
    """Stand-in for run_command: records calls, returns canned stdout."""

    def __init__(self, stdout: str = "", error: Exception | None = None):
        self.stdout = stdout
        self.error = error
        self.calls: list[tuple[str, list[str]]] = []

    def __call__(self, executable, args):
        self.calls.append((executable, list(args)))
        if self.error is not None:
            raise self.error
        return self.stdout

    @property
    def last_call(self):
        return self.calls[-1]


@pytest.fixture
def make_runner():
    """Factory for recording runners with custom stdout or error."""
    return RecordingRunner


@pytest.fixture
def runner():
    """Recording command runner with empty stdout."""
    return RecordingRunner()


@pytest.fixture
def mock_subprocess_run():
    """Patch subprocess.run for printer tests."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        yield mock_run


# === Enumeration Output Fixtures ===

@pytest.fixture
def printer_list_stdout():
    """Output of `wmic printer get name`, with padding and blank lines."""
    return (
        "\n"
        "Name                        \n"
        "\n"
        "Windows Printer         \n"
        "\n"
        "Zebra                            \n"
        "\n"
        "        "
    )


@pytest.fixture
def printer_list_default_stdout():
    """Output of `wmic printer get default,name`."""
    return (
        "\n"
        "Default     Name                        \n"
        "FALSE       Windows Printer         \n"
        "TRUE        Zebra                            \n"
        "        "
    )


# === Config Fixtures ===

@pytest.fixture
def config_dict():
    """Configuration dictionary with every supported key."""
    return {
        "printer": "Office Laser",
        "sumatra_pdf_path": "C:/Tools/SumatraPDF.exe",
        "win32": ['-print-settings "1-3,fit"'],
    }


@pytest.fixture
def temp_config_file(temp_dir, config_dict):
    """Write config_dict to a YAML file."""
    config_path = temp_dir / "printing.yaml"
    with open(config_path, "w") as f:
        yaml.dump(config_dict, f)
    return config_path
