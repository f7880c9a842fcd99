"""
Command implementations for the finite-automaton CLI.
"""
