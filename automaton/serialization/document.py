"""
Exchange document codec.

Document layout:
    {
        "alphabet": "ab",
        "forceDeterminism": true,
        "states": [{"name": "s0", "initial": true}, {"name": "s1", "accepting": true}],
        "transitions": [{"startState": "s0", "targetState": "s1", "inputCharacters": "a"}]
    }

"accepting" and "initial" are omitted when false. Parsing goes through
FiniteAutomaton.add_state/add_transition, so every engine invariant applies
and engine errors propagate unchanged.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from ..config import Settings
from ..core.automaton import FiniteAutomaton
from ..core.errors import DocumentError
from .canonical import canonical_json_str

logger = logging.getLogger(__name__)


def to_document(fa: FiniteAutomaton) -> Dict[str, Any]:
    """Build the document dict for fa using only its public introspection."""
    states: List[Dict[str, Any]] = []
    transitions: List[Dict[str, Any]] = []

    for name in fa.state_names:
        record: Dict[str, Any] = {"name": name}
        if fa.is_state_accepting(name):
            record["accepting"] = True
        if fa.is_state_initial(name):
            record["initial"] = True
        states.append(record)

        for target in fa.get_transitions(name) or []:
            transitions.append({
                "startState": name,
                "targetState": target,
                "inputCharacters": "".join(fa.get_input_characters(name, target) or ()),
            })

    return {
        "alphabet": "".join(fa.alphabet),
        "forceDeterminism": fa.force_determinism,
        "states": states,
        "transitions": transitions,
    }


def serialize(fa: FiniteAutomaton, indent: bool = False, settings: Optional[Settings] = None) -> str:
    """
    Serialize fa to a JSON string.

    Args:
        fa: Automaton to serialize
        indent: Pretty-print with the configured indent width (default 4)
        settings: Output settings (read from the environment if None)
    """
    width = (settings or Settings.from_env()).json_indent if indent else None
    return canonical_json_str(to_document(fa), indent=width)


def _require(obj: Dict[str, Any], key: str, kind: type, where: str) -> Any:
    if key not in obj:
        raise DocumentError(f"Missing field {key!r} in {where}")
    value = obj[key]
    if not isinstance(value, kind):
        raise DocumentError(f"Field {key!r} in {where} must be of type {kind.__name__}")
    return value


def _optional_flag(obj: Dict[str, Any], key: str, where: str) -> bool:
    value = obj.get(key, False)
    if not isinstance(value, bool):
        raise DocumentError(f"Field {key!r} in {where} must be of type bool")
    return value


def _records(doc: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    records = _require(doc, key, list, "document")
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise DocumentError(f"Entry {index} of {key!r} must be an object")
    return records


def from_document(doc: Any) -> FiniteAutomaton:
    """
    Build an automaton from a document dict.

    Raises:
        DocumentError: If the document is malformed
        AutomatonError: If the content violates an engine invariant
    """
    if not isinstance(doc, dict):
        raise DocumentError("Document must be a JSON object")

    fa = FiniteAutomaton(
        _require(doc, "alphabet", str, "document"),
        _require(doc, "forceDeterminism", bool, "document"),
    )

    for index, record in enumerate(_records(doc, "states")):
        where = f"state {index}"
        fa.add_state(
            _require(record, "name", str, where),
            _optional_flag(record, "accepting", where),
            _optional_flag(record, "initial", where),
        )

    for index, record in enumerate(_records(doc, "transitions")):
        where = f"transition {index}"
        fa.add_transition(
            _require(record, "startState", str, where),
            _require(record, "targetState", str, where),
            _require(record, "inputCharacters", str, where),
        )

    logger.debug("Built automaton with %d states from document", len(fa))
    return fa


def parse(text: str) -> FiniteAutomaton:
    """
    Parse a JSON string into a FiniteAutomaton.

    Raises:
        DocumentError: If text is not valid JSON or the document is malformed
        AutomatonError: If the content violates an engine invariant
    """
    try:
        doc = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise DocumentError(f"Invalid JSON: {e}") from e
    return from_document(doc)
