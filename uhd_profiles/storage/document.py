"""JSON document codec for the catalog file."""

import json
from typing import Any


class DocumentError(ValueError):
    """Raised when document text cannot be parsed or a value cannot be serialized."""

    pass


def parse_document(text: str) -> Any:
    """Parse document text into a tree of dict/list/str/int/float/bool/None.

    Args:
        text: Document text

    Returns:
        Parsed value (the root may be any JSON value)

    Raises:
        DocumentError: If the text is not a valid document
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentError(str(e)) from e


def serialize_document(value: Any, indent: int = 2) -> str:
    """Serialize a value tree to indented, human-readable text.

    Key order is preserved, so equal inputs always give identical output.

    Raises:
        DocumentError: If the value holds a non-serializable object
    """
    try:
        return json.dumps(value, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise DocumentError(f"Cannot serialize document: {e}") from e
