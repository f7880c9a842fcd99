"""
Finite Automaton Engine

States, labeled transitions, optional forced determinism and string
acceptance, with a JSON exchange format.
"""

from .core import (
    FiniteAutomaton,
    AutomatonError,
    DeterminismViolationError,
    DocumentError,
    DuplicateStateError,
    DuplicateTransitionError,
    InvalidSymbolError,
    NoInitialStateError,
    RunError,
    StructuralError,
    UnknownStateError,
    UnsupportedNfaError,
)
from .serialization import parse, serialize

__version__ = "0.1.0"

__all__ = [
    "FiniteAutomaton",
    "AutomatonError",
    "DeterminismViolationError",
    "DocumentError",
    "DuplicateStateError",
    "DuplicateTransitionError",
    "InvalidSymbolError",
    "NoInitialStateError",
    "RunError",
    "StructuralError",
    "UnknownStateError",
    "UnsupportedNfaError",
    "parse",
    "serialize",
]
