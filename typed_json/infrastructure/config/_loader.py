# typed_json/infrastructure/config/_loader.py

"""Access to the process-wide default reader configuration"""

# Standard library imports
from logging import getLogger
from pathlib import Path

# Local imports
from typed_json.infrastructure.config._models import ReaderConfig

logger = getLogger(__name__)

# Global default instance
_default_config: ReaderConfig | None = None


def get_config(config_path: Path | str | None = None) -> ReaderConfig:
    """Get reader configuration

    Args:
        config_path: Path to configuration file, None for the cached default

    Returns:
        ReaderConfig instance
    """
    global _default_config

    if config_path:
        return ReaderConfig.load(config_path)

    if _default_config is None:
        _default_config = ReaderConfig.load(None)
        logger.debug(f"Default reader configuration: {_default_config.to_dict()}")

    return _default_config


def reset_config() -> None:
    """Drop the cached default so the next get_config() reloads it"""
    global _default_config
    _default_config = None
