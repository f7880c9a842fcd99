"""
Exchange document serialization.

This module provides:
- serialize / parse: JSON text <-> FiniteAutomaton
- to_document / from_document: dict form of the same document
- canonical_json_str: Deterministic JSON encoding
"""

from .canonical import canonicalize, canonical_json_str
from .document import from_document, parse, serialize, to_document

__all__ = [
    "canonicalize",
    "canonical_json_str",
    "from_document",
    "parse",
    "serialize",
    "to_document",
]
