"""
Determinism validator.

A pure predicate over the current states. Nothing is cached: the answer is
recomputed on every call, regardless of whether determinism was forced while
building.
"""

from typing import Iterable

from .state import State


def count_initial(states: Iterable[State]) -> int:
    return sum(1 for state in states if state.initial)


def has_empty_transition(state: State) -> bool:
    return any(not transition.symbols for transition in state.transitions.values())


def has_overlapping_transitions(state: State) -> bool:
    """
    Check whether two outgoing transitions of state share a symbol.

    A symbol repeated inside a single transition is not an overlap.
    """
    seen = set()
    for transition in state.transitions.values():
        symbols = set(transition.symbols)
        if seen & symbols:
            return True
        seen |= symbols
    return False


def is_deterministic(states: Iterable[State]) -> bool:
    """
    Decide whether the given states form a deterministic automaton.

    True iff:
    - at most one state is initial
    - no transition has an empty symbol set
    - no state has two outgoing transitions sharing a symbol
    """
    states = list(states)
    if count_initial(states) > 1:
        return False
    if any(has_empty_transition(state) for state in states):
        return False
    return not any(has_overlapping_transitions(state) for state in states)
