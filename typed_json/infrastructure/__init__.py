# typed_json/infrastructure/__init__.py

"""System infrastructure: configuration, logging setup and document loading."""

# Local imports
from typed_json.infrastructure.config import ReaderConfig
from typed_json.infrastructure.config import get_config
from typed_json.infrastructure.persistence import load_from_file
from typed_json.infrastructure.persistence import load_from_text

__all__ = ["ReaderConfig", "get_config", "load_from_file", "load_from_text"]
