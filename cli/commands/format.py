"""
Format command: rewrite a document in normalized form.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from automaton.serialization import serialize

from .common import fail, load_automaton

console = Console()


def format_command(
    automaton_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="The automaton JSON file",
    ),
    indent: bool = typer.Option(True, "--indent/--compact", help="Pretty-print or write compact JSON"),
    output: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Output file (default: stdout)",
    ),
):
    """
    Parse an automaton and write it back in normalized form.

    Examples:
        finite-automaton format automaton.json
        finite-automaton format automaton.json --compact
        finite-automaton format automaton.json --out normalized.json
    """
    fa = load_automaton(automaton_file)
    text = serialize(fa, indent=indent)

    if output is None:
        print(text)
        return

    try:
        output.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        raise fail("writing file", e)
    console.print(f"[green]✓ Wrote {len(fa)} states to[/green] {output}")
