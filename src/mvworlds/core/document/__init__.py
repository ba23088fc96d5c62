"""Structured document functionality: YAML tree with dotted-path access."""

from mvworlds.core.document.models import PATH_SEPARATOR, Document, Node, Section, split_path
from mvworlds.core.document.operations import DEFAULT_ENCODING, parse, serialize

__all__ = [
    "Document",
    "Section",
    "Node",
    "PATH_SEPARATOR",
    "split_path",
    "parse",
    "serialize",
    "DEFAULT_ENCODING",
]
