import pytest

from automaton.core import FiniteAutomaton


def build_example(force_determinism: bool = True) -> FiniteAutomaton:
    """s0 (initial) --a--> s1 (accepting), s0 --b--> s0."""
    fa = FiniteAutomaton("ab", force_determinism=force_determinism)
    fa.add_state("s0", initial=True)
    fa.add_state("s1", accepting=True)
    fa.add_transition("s0", "s1", "a")
    fa.add_transition("s0", "s0", "b")
    return fa


@pytest.fixture
def example():
    return build_example()


@pytest.fixture
def example_document():
    return {
        "alphabet": "ab",
        "forceDeterminism": True,
        "states": [
            {"name": "s0", "initial": True},
            {"name": "s1", "accepting": True},
        ],
        "transitions": [
            {"startState": "s0", "targetState": "s1", "inputCharacters": "a"},
            {"startState": "s0", "targetState": "s0", "inputCharacters": "b"},
        ],
    }
