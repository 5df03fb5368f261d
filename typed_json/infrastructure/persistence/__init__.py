# typed_json/infrastructure/persistence/__init__.py

"""Document loading for typed_json."""

# Local imports
from typed_json.infrastructure.persistence._document_loader import load_from_file
from typed_json.infrastructure.persistence._document_loader import load_from_text
from typed_json.infrastructure.persistence._parser import parse_text

__all__ = ["load_from_file", "load_from_text", "parse_text"]
