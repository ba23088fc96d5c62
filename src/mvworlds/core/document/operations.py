"""Document parsing and serialization.

Usage:
    document = parse(path.read_bytes())
    path.write_bytes(serialize(document))
"""

from __future__ import annotations

from typing import Any

import yaml

from mvworlds.core.document.models import Document, Node
from mvworlds.errors import ParseError

DEFAULT_ENCODING = "utf-8"


def _normalize_keys(node: Any, path: str = "", ancestors: frozenset[int] = frozenset()) -> Node:
    """Stringify mapping keys recursively (YAML allows ``123:`` or ``true:`` keys).

    Raises:
        ParseError: If an alias refers to one of its own ancestors, or two keys
            become the same text (``1`` and ``'1'``).
    """
    if not isinstance(node, (dict, list)):
        return node
    where = path or "<root>"
    if id(node) in ancestors:
        raise ParseError(f"Recursive alias at '{where}'")
    ancestors = ancestors | {id(node)}

    if isinstance(node, list):
        return [
            _normalize_keys(item, f"{path}[{index}]", ancestors) for index, item in enumerate(node)
        ]

    normalized: dict[str, Node] = {}
    for key, value in node.items():
        name = _key_to_str(key)
        if name in normalized:
            raise ParseError(f"Duplicate key '{name}' at '{where}' once keys are read as text")
        normalized[name] = _normalize_keys(value, f"{path}.{name}" if path else name, ancestors)
    return normalized


def _key_to_str(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def parse(data: bytes | str, encoding: str = DEFAULT_ENCODING) -> Document:
    """Parse YAML text into a Document.

    Args:
        data: Raw document bytes or already-decoded text.
        encoding: Encoding used to decode bytes.

    Returns:
        The parsed document. Empty input yields an empty mapping.

    Raises:
        ParseError: If the input cannot be decoded, is not valid YAML, holds a
            recursive alias, or has keys that collide once read as text.
    """
    if isinstance(data, bytes):
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError as e:
            raise ParseError(f"Worlds document is not valid {encoding}: {e}") from e
    else:
        text = data

    try:
        root = yaml.safe_load(text)
        return Document(_normalize_keys(root))
    except yaml.MarkedYAMLError as e:
        mark = e.problem_mark
        where = f" at line {mark.line + 1}, column {mark.column + 1}" if mark else ""
        raise ParseError(f"Malformed worlds document{where}: {e.problem}") from e
    except yaml.YAMLError as e:
        raise ParseError(f"Malformed worlds document: {e}") from e
    except RecursionError as e:
        raise ParseError("Worlds document is nested too deeply") from e


def serialize(document: Document, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Serialize a Document to YAML bytes.

    Mapping order is preserved as inserted; nothing is sorted.

    Args:
        document: Document to serialize.
        encoding: Output encoding.

    Returns:
        Encoded YAML text.
    """
    text = yaml.safe_dump(
        document.root,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        indent=2,
    )
    return text.encode(encoding)
