# typed_json/infrastructure/logging/__init__.py

"""Logging infrastructure for typed_json.

The library itself only emits records through module loggers; these helpers
are for applications that want a ready-made handler setup.
"""

# Local imports
from typed_json.infrastructure.logging._setup import set_up_logging as setup_logging
from typed_json.infrastructure.logging._setup import (
    set_up_logging_from_config as setup_logging_from_config,
)

__all__ = ["setup_logging", "setup_logging_from_config"]
