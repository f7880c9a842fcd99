#!/usr/bin/env python3
"""
Finite automaton CLI

Main entrypoint for the finite-automaton command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from automaton.logging_config import setup_logging
from cli.commands.check import checkstring_command
from cli.commands.format import format_command
from cli.commands.inspect import inspect_command

# Initialize Typer app
app = typer.Typer(
    name="finite-automaton",
    help="Build finite automata from JSON documents and check strings against them",
    add_completion=False,
)

console = Console()

app.command(name="checkstring")(checkstring_command)
app.command(name="inspect")(inspect_command)
app.command(name="format")(format_command)


@app.callback()
def configure():
    """Build finite automata from JSON documents and check strings against them."""
    setup_logging()


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from automaton import __version__ as engine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]finite-automaton CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", f"v{engine_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
