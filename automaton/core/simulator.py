"""
Acceptance simulator: run an input string through a deterministic automaton.

The run is a single left-to-right pass without lookahead or backtracking:
Running(current, remaining) -> Accepted | Rejected.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .determinism import is_deterministic
from .errors import NoInitialStateError, UnsupportedNfaError
from .state import State


class RunOutcome(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class RunResult:
    """
    Result of one run.

    Fields:
        outcome: ACCEPTED or REJECTED
        final_state: Name of the state the run ended in
        consumed: Number of input symbols consumed
        stuck: True if the run stopped because no transition matched
    """
    outcome: RunOutcome
    final_state: str
    consumed: int
    stuck: bool = False

    @property
    def accepted(self) -> bool:
        return self.outcome is RunOutcome.ACCEPTED

    def to_dict(self) -> dict:
        return {
            "accepted": self.accepted,
            "outcome": self.outcome.value,
            "final_state": self.final_state,
            "consumed": self.consumed,
            "stuck": self.stuck,
        }


def _initial_state(states: Mapping[str, State]) -> State:
    for state in states.values():
        if state.initial:
            return state
    raise NoInitialStateError("This automaton does not have an initial state!")


def _step(state: State, symbol: str) -> Optional[str]:
    for transition in state.transitions.values():
        if transition.accepts(symbol):
            return transition.target
    return None


def simulate(states: Mapping[str, State], string: str) -> RunResult:
    """
    Run string through the automaton described by states.

    Args:
        states: State mapping keyed by name
        string: Input symbols, consumed in order

    Returns:
        RunResult; getting stuck is a rejection, not an error

    Raises:
        UnsupportedNfaError: If the states are not deterministic
        NoInitialStateError: If there is no initial state
    """
    if not is_deterministic(states.values()):
        raise UnsupportedNfaError("Checking strings is not implemented for non-deterministic automatons!")

    current = _initial_state(states)
    consumed = 0
    for symbol in string:
        target = _step(current, symbol)
        if target is None:
            return RunResult(RunOutcome.REJECTED, current.name, consumed, stuck=True)
        current = states[target]
        consumed += 1

    outcome = RunOutcome.ACCEPTED if current.accepting else RunOutcome.REJECTED
    return RunResult(outcome, current.name, consumed)
