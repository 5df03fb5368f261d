# typed_json/infrastructure/config/_models.py

"""Pydantic models for reader configuration with validation"""

# Standard library imports
import json
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

# Local imports
from typed_json.core.types.json import JSONDict

logger = getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "typed_json.json"


class ParsingConfig(BaseModel):
    """How documents are decoded and parsed"""

    model_config = ConfigDict(frozen=True)

    encoding: str = Field("utf-8", description="Text encoding of document files")
    allow_non_finite: bool = Field(
        False, description="Accept NaN/Infinity literals, which are not valid JSON"
    )
    reject_duplicate_keys: bool = Field(
        False, description="Fail the load when an object repeats a key (default: last wins)"
    )
    max_document_bytes: int | None = Field(
        None, gt=0, description="Refuse files larger than this many bytes"
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Ensure the encoding is known to Python"""
        # Standard library imports
        from codecs import lookup

        try:
            lookup(v)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {v}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration"""

    model_config = ConfigDict(frozen=True)

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class ReaderConfig(BaseModel):
    """Root configuration model"""

    model_config = ConfigDict(frozen=True)

    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "ReaderConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file, None to look for
                typed_json.json in the current directory

        Returns:
            Validated ReaderConfig instance; defaults when the file is missing
            or invalid
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILENAME)
            if not config_path.exists():
                return cls()

        if not config_path.exists():
            logger.warning(f"Config file {config_path} not found. Using defaults.")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> JSONDict:
        return self.model_dump()
