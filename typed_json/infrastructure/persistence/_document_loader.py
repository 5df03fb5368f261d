# typed_json/infrastructure/persistence/_document_loader.py

"""Loading JSON documents from files and in-memory text"""

# Standard library imports
from logging import getLogger
from os import PathLike
from os import fspath
from os import stat

# Local imports
from typed_json.core.domain.document import Document
from typed_json.core.domain.document import MEMORY_SOURCE
from typed_json.core.domain.errors import JsonIOError
from typed_json.core.domain.errors import ParseError
from typed_json.infrastructure.config import ReaderConfig
from typed_json.infrastructure.config import get_config
from typed_json.infrastructure.persistence._parser import parse_text

logger = getLogger(__name__)

_BOM = "\ufeff"


def _read_file(source: str, config: ReaderConfig) -> str:
    encoding = config.parsing.encoding
    limit = config.parsing.max_document_bytes

    try:
        size = stat(source).st_size
    except OSError as e:
        raise JsonIOError(f"Cannot read {source}: {e.strerror or e}", source) from e

    if limit is not None and size > limit:
        raise JsonIOError(f"{source} is {size:,} bytes, over the {limit:,} byte limit", source)

    try:
        with open(source, "r", encoding=encoding, newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise JsonIOError(f"Cannot decode {source} as {encoding}: {e.reason}", source) from e
    except OSError as e:
        raise JsonIOError(f"Cannot read {source}: {e.strerror or e}", source) from e

    # Editors on Windows like to prepend a byte order mark
    if text.startswith(_BOM):
        text = text[1:]
    return text


def load_from_file(path: str | PathLike[str], config: ReaderConfig | None = None) -> Document:
    """Load a JSON document from a file

    The whole file is read and closed before parsing; the returned Document
    holds no reference to it.

    Args:
        path: Filesystem path of the document
        config: Reader configuration, None for the default

    Returns:
        The loaded Document

    Raises:
        JsonIOError: The file is missing, unreadable, undecodable or too large
        ParseError: The contents are not well-formed JSON
    """
    config = config or get_config()
    source = fspath(path)

    try:
        text = _read_file(source, config)
        root = parse_text(text, source, config.parsing)
    except (JsonIOError, ParseError) as e:
        logger.warning(f"Failed to load JSON document: {e}")
        raise

    logger.debug(f"Loaded {source} ({len(text):,} characters, root {root.kind.value})")
    return Document(root, source)


def load_from_text(text: str, config: ReaderConfig | None = None) -> Document:
    """Load a JSON document from an in-memory string

    Raises:
        ParseError: text is not well-formed JSON
    """
    config = config or get_config()

    try:
        root = parse_text(text, MEMORY_SOURCE, config.parsing)
    except ParseError as e:
        logger.warning(f"Failed to parse JSON text: {e}")
        raise

    logger.debug(f"Parsed in-memory JSON ({len(text):,} characters, root {root.kind.value})")
    return Document(root, MEMORY_SOURCE)
