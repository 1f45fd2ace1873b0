"""
Person command: drive the person form with a sequence of steps
"""

import json
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from formstate.core import FormStateError, canonical_json_str
from formstate.core.view import DerivedView
from formstate.demo import PersonForm

console = Console()

TRUTHY = {"1", "true", "yes", "on"}


def apply_step(form: PersonForm, step: str) -> None:
    """
    Apply one step to the form.

    Steps:
        reset           reset the form
        bob             press "Set correct name"
        real=true|false toggle the checkbox
        field=value     type value into the field's input
    """
    if step == "reset":
        form.reset()
        return
    if step == "bob":
        form.set_correct_name()
        return
    if "=" not in step:
        raise typer.BadParameter(f"expected field=value, reset or bob, got {step!r}")
    field, raw = step.split("=", 1)
    if field == "real":
        form.set_is_real_person(raw.strip().lower() in TRUTHY)
    else:
        form.change(field, raw)


def render(view: DerivedView) -> Table:
    table = Table(title="Person Form")
    table.add_column("Field", style="green")
    table.add_column("Value", style="cyan")
    table.add_column("Errors", style="red")

    for key, value in view.values.items():
        errors = view.errors[key]
        table.add_row(key, repr(value), "\n".join(errors) if errors else "")

    return table


def person_command(
    steps: List[str] = typer.Argument(None, help="Steps: field=value, real=true|false, bob, reset"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Apply steps to the person form and show the resulting view.

    Examples:
        formstate person name=Alice name=Alice
        formstate person age=12 age=12 --json
        formstate person name=Alice bob reset
    """
    form = PersonForm()
    try:
        for step in steps or []:
            apply_step(form, step)
    except FormStateError as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    view = form.view()
    if json_output:
        print(canonical_json_str(view))
    else:
        console.print(render(view))
        console.print(f"  Pristine: [cyan]{view.pristine}[/cyan]")
        console.print(f"  Has errors: [yellow]{view.has_errors}[/yellow]")
