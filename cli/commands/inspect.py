"""
Inspect command: show states, transitions and determinism of an automaton.
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from automaton.serialization import to_document

from .common import load_automaton

console = Console()


def _mark(flag: bool) -> str:
    return "[green]✓[/green]" if flag else ""


def inspect_command(
    automaton_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="The automaton JSON file",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show the states and transitions of an automaton.

    Examples:
        finite-automaton inspect automaton.json
        finite-automaton inspect automaton.json --json
    """
    fa = load_automaton(automaton_file, json_output)
    doc = to_document(fa)
    deterministic = fa.is_deterministic()

    if json_output:
        print(json.dumps({"deterministic": deterministic, "automaton": doc}, indent=2))
        return

    console.print(f"Alphabet: [cyan]{escape(''.join(fa.alphabet))}[/cyan]")
    console.print(f"Forced determinism: [cyan]{fa.force_determinism}[/cyan]")
    console.print(
        f"Deterministic: {'[green]yes[/green]' if deterministic else '[yellow]no[/yellow]'}"
    )

    states = Table(title=f"States ({len(fa)})")
    states.add_column("Name", style="cyan")
    states.add_column("Initial", justify="center")
    states.add_column("Accepting", justify="center")
    for record in doc["states"]:
        states.add_row(
            escape(record["name"]),
            _mark(record.get("initial", False)),
            _mark(record.get("accepting", False)),
        )
    console.print(states)

    transitions = Table(title=f"Transitions ({len(doc['transitions'])})")
    transitions.add_column("Start", style="cyan")
    transitions.add_column("Target", style="cyan")
    transitions.add_column("Input", style="yellow")
    for record in doc["transitions"]:
        transitions.add_row(
            escape(record["startState"]),
            escape(record["targetState"]),
            escape(record["inputCharacters"]),
        )
    console.print(transitions)
