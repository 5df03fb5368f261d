# typed_json/infrastructure/config/__init__.py

"""Configuration infrastructure for typed_json.

This module manages configuration loading, validation, and models.
"""

# Local imports
from typed_json.infrastructure.config._loader import get_config
from typed_json.infrastructure.config._loader import reset_config
from typed_json.infrastructure.config._models import LoggingConfig
from typed_json.infrastructure.config._models import ParsingConfig
from typed_json.infrastructure.config._models import ReaderConfig

__all__ = [
    "get_config",
    "reset_config",
    "LoggingConfig",
    "ParsingConfig",
    "ReaderConfig",
]
