"""
State and transition model for the automaton store.

States and transitions are identified by a single field (the state name,
the transition target). Every mapping goes through key() so that two
objects with the same handle but different flags are never confused.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class Transition:
    """
    Edge from its owning state to another state.

    Fields:
        target: Name of the target state
        symbols: Input characters labeling this edge (fixed at creation)
    """
    target: str
    symbols: Tuple[str, ...] = ()

    @property
    def key(self) -> str:
        return self.target

    def accepts(self, symbol: str) -> bool:
        return symbol in self.symbols

    def __repr__(self) -> str:
        return f"Transition(target={self.target}, symbols={list(self.symbols)})"


@dataclass
class State:
    """
    One automaton state and its outgoing transitions.

    Fields:
        name: Unique handle within one automaton
        accepting: Whether a run ending here accepts
        initial: Whether runs start here
        transitions: Outgoing transitions keyed by target name

    Only FiniteAutomaton creates and mutates states.
    """
    name: str
    accepting: bool = False
    initial: bool = False
    transitions: Dict[str, Transition] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return self.name

    def add(self, transition: Transition) -> None:
        self.transitions[transition.key] = transition

    def has_transition_to(self, target: str) -> bool:
        return target in self.transitions

    def used_symbols(self) -> set:
        """Union of all symbols on outgoing transitions."""
        used = set()
        for transition in self.transitions.values():
            used.update(transition.symbols)
        return used

    def clone(self) -> "State":
        # Transitions are frozen, only the mapping needs duplicating
        return State(
            name=self.name,
            accepting=self.accepting,
            initial=self.initial,
            transitions=dict(self.transitions),
        )
