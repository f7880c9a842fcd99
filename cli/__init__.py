"""
Finite automaton CLI

Commands:
- finite-automaton checkstring - Check whether an automaton accepts a string
- finite-automaton inspect - Show states, transitions and determinism
- finite-automaton format - Normalize an automaton document
- finite-automaton version - Show version information
"""

__version__ = "0.1.0"
