#!/usr/bin/env python3
"""
formstate CLI - demo forms for the form state manager

Main entrypoint for the formstate command-line tool.
"""

import typer
from typing import Optional
from rich.console import Console
from rich.table import Table

from cli.commands import load, person
from formstate.logging_config import setup_logging

# Initialize Typer app
app = typer.Typer(
    name="formstate",
    help="Form state manager demo CLI",
    add_completion=False,
)

# Console for rich output
console = Console()


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR"),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="text or json"),
):
    """Configure logging for all commands."""
    setup_logging(level=log_level, log_format=log_format)


# Add standalone commands
app.command("person")(person.person_command)
app.command("load")(load.load_command)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from formstate import __version__ as core_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]formstate CLI[/bold]", f"v{__version__}")
    table.add_row("Core", f"v{core_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
