"""
Load command: run the delayed data loader
"""

import asyncio

import typer
from rich.console import Console

from formstate.demo import DataLoader

console = Console()


async def _run(loader: DataLoader) -> None:
    def show(prev, state):
        for line in loader.lines():
            console.print(f"  {line}")
        console.print()

    unsubscribe = loader.state.subscribe(show)
    loader.start()
    try:
        await loader.wait()
    finally:
        loader.close()
        unsubscribe()


def load_command(
    json_delay: float = typer.Option(1.0, "--json-delay", help="Seconds before json arrives"),
    another_delay: float = typer.Option(3.0, "--another-delay", help="Seconds before anotherJson arrives"),
):
    """
    Populate two fields asynchronously and print them as they arrive.

    Examples:
        formstate load
        formstate load --json-delay 0 --another-delay 0.5
    """
    loader = DataLoader(json_delay=json_delay, another_delay=another_delay)

    console.print("[bold]Loading...[/bold]")
    for line in loader.lines():
        console.print(f"  {line}")
    console.print()

    asyncio.run(_run(loader))

    if loader.loaded:
        console.print("[green]✓ All values loaded[/green]")
