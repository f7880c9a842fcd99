"""
Checkstring command: does the automaton accept a string?
"""

import json
from pathlib import Path

import typer
from rich.console import Console

from automaton.core.errors import AutomatonError
from automaton.logging_config import get_logger

from .common import fail, load_automaton

console = Console()


def checkstring_command(
    automaton_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="The automaton JSON file",
    ),
    string: str = typer.Argument(..., help="The string to check"),
    boolean: bool = typer.Option(
        False, "--boolean", "-b", help="Only show a boolean value instead of a sentence"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output the run as JSON"),
):
    """
    Check whether the given automaton accepts the given string.

    Examples:
        finite-automaton checkstring automaton.json abba
        finite-automaton checkstring automaton.json abba --boolean
        finite-automaton checkstring automaton.json "" --json
    """
    logger = get_logger(__name__, source=str(automaton_file))
    fa = load_automaton(automaton_file, json_output)

    try:
        result = fa.simulate(string)
    except AutomatonError as e:
        logger.info("Could not check string", extra={"error": type(e).__name__})
        raise fail("checking string", e, json_output)

    logger.info("Checked string", extra=result.to_dict())

    if json_output:
        print(json.dumps({"string": string, **result.to_dict()}, indent=2))
    elif boolean:
        print(json.dumps(result.accepted))
    else:
        negation = "" if result.accepted else "not "
        console.print(f"The string is {negation}accepted by the automaton.")
