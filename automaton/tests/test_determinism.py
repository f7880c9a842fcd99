"""
Tests for the determinism validator.

The forced flag only changes when determinism is enforced, never what it means.
"""

import pytest

from automaton.core import FiniteAutomaton, DeterminismViolationError
from automaton.core.determinism import has_overlapping_transitions, is_deterministic
from automaton.core.state import State, Transition


def _build(force: bool, states, transitions) -> FiniteAutomaton:
    fa = FiniteAutomaton("abc", force_determinism=force)
    for name, accepting, initial in states:
        fa.add_state(name, accepting, initial)
    for start, target, symbols in transitions:
        fa.add_transition(start, target, symbols)
    return fa


def test_empty_automaton_is_deterministic():
    assert FiniteAutomaton("ab").is_deterministic()


def test_no_initial_state_is_still_deterministic():
    fa = _build(False, [("s0", False, False)], [("s0", "s0", "a")])

    assert fa.is_deterministic()


def test_two_initial_states_not_deterministic():
    fa = _build(False, [("s0", False, True), ("s1", False, True)], [])

    assert not fa.is_deterministic()


def test_empty_symbol_set_not_deterministic():
    fa = _build(False, [("s0", False, True), ("s1", False, False)], [("s0", "s1", "")])

    assert not fa.is_deterministic()


def test_shared_symbol_not_deterministic():
    fa = _build(
        False,
        [("s0", False, True), ("s1", False, False), ("s2", False, False)],
        [("s0", "s1", "ab"), ("s0", "s2", "bc")],
    )

    assert not fa.is_deterministic()


def test_repeated_symbol_inside_one_transition_is_fine():
    fa = _build(False, [("s0", False, True), ("s1", False, False)], [("s0", "s1", "aa")])

    assert fa.is_deterministic()


@pytest.mark.parametrize(
    "states,transitions",
    [
        ([("s0", False, True), ("s1", True, False)], [("s0", "s1", "a"), ("s0", "s0", "bc")]),
        ([("s0", False, True), ("s1", True, False)], [("s0", "s1", "a"), ("s0", "s0", "ab")]),
        ([("s0", False, True), ("s1", False, True)], [("s0", "s1", "a")]),
        ([("s0", False, True), ("s1", False, False)], [("s1", "s0", "abc"), ("s1", "s1", "c")]),
        ([("s0", False, False)], [("s0", "s0", "")]),
    ],
)
def test_flag_only_changes_enforcement_timing(states, transitions):
    """Lazy and eager automatons built from the same steps agree."""
    lazy = _build(False, states, transitions)
    try:
        eager = _build(True, states, transitions)
    except DeterminismViolationError:
        assert not lazy.is_deterministic()
    else:
        assert lazy.is_deterministic()
        assert eager.is_deterministic()


def test_validator_matches_pairwise_definition():
    """The seen-set check gives the same answer as comparing every pair."""
    cases = [
        [("x", "ab"), ("y", "c")],
        [("x", "ab"), ("y", "bc")],
        [("x", "aa"), ("y", "b")],
        [("x", "a"), ("y", "b"), ("z", "ca")],
        [],
    ]
    for edges in cases:
        state = State("s")
        for target, symbols in edges:
            state.add(Transition(target, tuple(symbols)))
        transitions = list(state.transitions.values())
        pairwise = any(
            set(t1.symbols) & set(t2.symbols)
            for i, t1 in enumerate(transitions)
            for t2 in transitions[i + 1:]
        )
        assert has_overlapping_transitions(state) == pairwise


def test_validator_is_not_cached():
    fa = _build(False, [("s0", False, True), ("s1", False, False)], [("s0", "s1", "a")])
    assert fa.is_deterministic()

    fa.add_transition("s0", "s0", "a")
    assert not fa.is_deterministic()


def test_is_deterministic_accepts_plain_states():
    states = [State("a", initial=True), State("b", initial=True)]

    assert not is_deterministic(states)
    assert is_deterministic(states[:1])
