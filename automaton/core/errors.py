"""
Exception types for the finite automaton engine.

Every mutation either succeeds completely or raises one of these without
touching the automaton.
"""


class AutomatonError(Exception):
    """Base class for all automaton errors."""
    pass


class StructuralError(AutomatonError):
    """Raised when a mutation violates a static invariant of the data model."""
    pass


class DuplicateStateError(StructuralError):
    """Raised when a state name is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"State {name} already exists!")


class UnknownStateError(StructuralError):
    """Raised when a state name does not resolve."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"State {name} does not exist!")


class DuplicateTransitionError(StructuralError):
    """Raised when a transition between the same two states already exists."""

    def __init__(self, start: str, target: str) -> None:
        self.start = start
        self.target = target
        super().__init__(f"There is already a transition from state {start} to state {target}!")


class InvalidSymbolError(StructuralError):
    """Raised when input characters are not a subset of the alphabet."""

    def __init__(self, symbols) -> None:
        self.symbols = tuple(symbols)
        super().__init__(
            f"The input characters have to be a subset of the alphabet! Unknown: {''.join(self.symbols)!r}"
        )


class DeterminismViolationError(AutomatonError):
    """Raised when a mutation would make a forced-deterministic automaton non-deterministic."""
    pass


class RunError(AutomatonError):
    """Raised when a string cannot be checked at all."""
    pass


class UnsupportedNfaError(RunError):
    """Raised when checking a string on a non-deterministic automaton."""
    pass


class NoInitialStateError(RunError):
    """Raised when the automaton has no initial state to start from."""
    pass


class DocumentError(AutomatonError):
    """Raised when an exchange document is malformed."""
    pass
