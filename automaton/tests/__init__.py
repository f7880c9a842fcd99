"""
Test suite for the finite automaton engine.

Focus areas:
- Store invariants and all-or-nothing mutations
- Determinism validation
- Acceptance simulation
- Exchange document round trips
- CLI error reporting
"""
