"""
Canonical JSON encoding for exchange documents.

The same automaton always serializes to the same text, whatever order its
document dict was assembled in.
"""

import json
from typing import Any, Optional


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested dict/list to canonical form.

    Rules:
    - dict keys sorted alphabetically
    - tuples converted to lists
    - list order preserved (states and transitions keep insertion order)
    """
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_str(obj: Any, indent: Optional[int] = None) -> str:
    """
    Deterministic JSON string.

    Guarantees:
    - sorted keys
    - no whitespace unless indent is given
    - ensure_ascii=False keeps non-ASCII symbols readable
    """
    canon = canonicalize(obj)
    if indent:
        return json.dumps(canon, sort_keys=True, indent=indent, ensure_ascii=False)
    return json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
