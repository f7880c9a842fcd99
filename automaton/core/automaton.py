"""
FiniteAutomaton: the state/transition store.

Mutations validate first and commit last, so a failed call leaves the
automaton exactly as it was. The store defines no locking; callers that share
one instance between threads must serialize mutations themselves.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .determinism import is_deterministic
from .errors import (
    DeterminismViolationError,
    DuplicateStateError,
    DuplicateTransitionError,
    InvalidSymbolError,
    UnknownStateError,
)
from .simulator import RunResult, simulate
from .state import State, Transition


class FiniteAutomaton:
    """
    Finite automaton over a fixed alphabet.

    If force_determinism is True, every mutation that would make the automaton
    non-deterministic is rejected with DeterminismViolationError.

    Usage:
        fa = FiniteAutomaton("ab", force_determinism=True)
        fa.add_state("s0", initial=True)
        fa.add_state("s1", accepting=True)
        fa.add_transition("s0", "s1", "a")
        fa.check_string("a")  # True
    """

    def __init__(self, alphabet: Iterable[str], force_determinism: bool = False) -> None:
        self._alphabet: Tuple[str, ...] = tuple(alphabet)
        self._force_determinism = bool(force_determinism)
        self._states: Dict[str, State] = {}

    @property
    def alphabet(self) -> Tuple[str, ...]:
        return self._alphabet

    @property
    def force_determinism(self) -> bool:
        return self._force_determinism

    @property
    def state_names(self) -> List[str]:
        """Names of all states in insertion order."""
        return [state.key for state in self._states.values()]

    @property
    def initial_states(self) -> List[str]:
        return [state.key for state in self._states.values() if state.initial]

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, name: object) -> bool:
        return name in self._states

    def copy(self) -> "FiniteAutomaton":
        """
        Independent deep copy.

        The alphabet tuple is shared (it is immutable); states and their
        transition mappings are duplicated.
        """
        other = FiniteAutomaton(self._alphabet, self._force_determinism)
        other._states = {name: state.clone() for name, state in self._states.items()}
        return other

    # Introspection. Unknown names give None instead of raising.

    def is_state_initial(self, name: str) -> Optional[bool]:
        state = self._states.get(name)
        return None if state is None else state.initial

    def is_state_accepting(self, name: str) -> Optional[bool]:
        state = self._states.get(name)
        return None if state is None else state.accepting

    def get_transitions(self, start: str) -> Optional[List[str]]:
        """
        Target names of the transitions leaving start.

        Returns:
            List of target names ([] if there are none), or None if start
            does not exist
        """
        state = self._states.get(start)
        if state is None:
            return None
        return [transition.target for transition in state.transitions.values()]

    def get_input_characters(self, start: str, target: str) -> Optional[Tuple[str, ...]]:
        """
        Input characters of the transition from start to target.

        Returns:
            Symbols of the transition, or None if either state or the
            transition does not exist
        """
        state = self._states.get(start)
        if state is None or target not in self._states:
            return None
        transition = state.transitions.get(target)
        return None if transition is None else transition.symbols

    # Mutations

    def add_state(self, name: str, accepting: bool = False, initial: bool = False) -> None:
        """
        Add a state with no outgoing transitions.

        Raises:
            DuplicateStateError: If name already exists
            DeterminismViolationError: If determinism is forced and another
                state is already initial
        """
        if name in self._states:
            raise DuplicateStateError(name)
        if self._force_determinism and initial and self.initial_states:
            raise DeterminismViolationError(
                "There can only be one initial state in a deterministic automaton!"
            )
        state = State(name=name, accepting=bool(accepting), initial=bool(initial))
        self._states[state.key] = state

    def add_transition(self, start: str, target: str, symbols: Iterable[str]) -> None:
        """
        Add a transition from start to target labeled with symbols.

        A plain string is split into its characters.

        Raises:
            UnknownStateError: If start or target does not exist
            DuplicateTransitionError: If start already has a transition to target
            InvalidSymbolError: If a symbol is not in the alphabet
            DeterminismViolationError: If determinism is forced and a symbol
                already labels another transition of start, or symbols is empty
        """
        symbols = tuple(symbols)
        start_state = self._require_state(start)
        self._require_state(target)
        if start_state.has_transition_to(target):
            raise DuplicateTransitionError(start, target)

        unknown = [symbol for symbol in symbols if symbol not in self._alphabet]
        if unknown:
            raise InvalidSymbolError(unknown)

        if self._force_determinism:
            if not symbols:
                raise DeterminismViolationError(
                    "In a deterministic automaton a transition needs at least one input character."
                )
            if start_state.used_symbols() & set(symbols):
                raise DeterminismViolationError(
                    "In a deterministic automaton an input character can only be in one transition of a state."
                )

        start_state.add(Transition(target=target, symbols=symbols))

    def _require_state(self, name: str) -> State:
        state = self._states.get(name)
        if state is None:
            raise UnknownStateError(name)
        return state

    # Validation and simulation

    def is_deterministic(self) -> bool:
        return is_deterministic(self._states.values())

    def simulate(self, string: str) -> RunResult:
        """
        Run string and report how the run ended.

        Raises:
            UnsupportedNfaError: If the automaton is not deterministic
            NoInitialStateError: If there is no initial state
        """
        return simulate(self._states, string)

    def check_string(self, string: str) -> bool:
        """Check whether this automaton accepts string."""
        return self.simulate(string).accepted

    def __repr__(self) -> str:
        return (
            f"FiniteAutomaton(force_determinism={self._force_determinism}, "
            f"alphabet={list(self._alphabet)}, states={list(self._states.values())})"
        )
