# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from json import dumps
from logging import getLogger
from pathlib import Path

# Third party imports
import pytest

# Local imports
from typed_json import Document
from typed_json import load_from_text
from typed_json.infrastructure.config import reset_config

# Settings document used throughout the JSON reading tutorial
TUTORIAL_JSON = (
    '{"gameTitle":"My New Game","fullScreenMode":false,"numPlayers":1,'
    '"screenSize":{"width":800,"height":600},"levels":["level1","level2","level3"]}'
)


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation(tmp_path, monkeypatch):
    """Minimal isolation for most tests - reset logging and cached config"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(30)  # WARNING level

    # Keep a stray typed_json.json in the working directory from leaking in
    monkeypatch.chdir(tmp_path)
    reset_config()

    yield

    reset_config()


@pytest.fixture
def tutorial_text() -> str:
    """The tutorial settings document as JSON text"""
    return TUTORIAL_JSON


@pytest.fixture
def tutorial_doc() -> Document:
    """The tutorial settings document, loaded"""
    return load_from_text(TUTORIAL_JSON)


@pytest.fixture
def write_json(tmp_path):
    """Write text (or data, serialized) to a file under tmp_path and return its path"""

    def _write(content: object, name: str = "settings.json", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        text = content if isinstance(content, str) else dumps(content)
        path.write_text(text, encoding=encoding)
        return path

    return _write
