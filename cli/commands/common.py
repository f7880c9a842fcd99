"""
Shared helpers for commands: load a document, report failures.
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from automaton import FiniteAutomaton, parse
from automaton.core.errors import AutomatonError
from automaton.logging_config import get_logger

err_console = Console(stderr=True)


def fail(phase: str, error: Exception, json_output: bool = False) -> typer.Exit:
    """
    Report error for phase and return the Exit to raise.

    Usage:
        raise fail("reading file", e)
    """
    if json_output:
        print(json.dumps({"error": str(error), "phase": phase}))
    else:
        err_console.print(f"[red]Error while {phase}:[/red] {escape(str(error))}", soft_wrap=True)
    return typer.Exit(1)


def load_automaton(path: Path, json_output: bool = False) -> FiniteAutomaton:
    """Read and parse the document at path, exiting with status 1 on failure."""
    logger = get_logger(__name__, source=str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.info("Could not read automaton file")
        raise fail("reading file", e, json_output)

    try:
        fa = parse(text)
    except AutomatonError as e:
        logger.info("Could not parse automaton", extra={"error": type(e).__name__})
        raise fail("parsing automaton", e, json_output)

    logger.info("Loaded automaton", extra={"states": len(fa)})
    return fa
