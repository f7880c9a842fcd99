"""
Core automaton primitives.

This module provides the engine:
- FiniteAutomaton: State/transition store with optional forced determinism
- is_deterministic: Determinism validator
- simulate: Acceptance simulator for deterministic automata
- Errors: Structural, determinism and run errors
"""

from .automaton import FiniteAutomaton
from .state import State, Transition
from .determinism import is_deterministic
from .simulator import RunOutcome, RunResult, simulate
from .errors import (
    AutomatonError,
    StructuralError,
    DuplicateStateError,
    UnknownStateError,
    DuplicateTransitionError,
    InvalidSymbolError,
    DeterminismViolationError,
    RunError,
    UnsupportedNfaError,
    NoInitialStateError,
    DocumentError,
)

__all__ = [
    "FiniteAutomaton",
    "State",
    "Transition",
    "is_deterministic",
    "RunOutcome",
    "RunResult",
    "simulate",
    "AutomatonError",
    "StructuralError",
    "DuplicateStateError",
    "UnknownStateError",
    "DuplicateTransitionError",
    "InvalidSymbolError",
    "DeterminismViolationError",
    "RunError",
    "UnsupportedNfaError",
    "NoInitialStateError",
    "DocumentError",
]
