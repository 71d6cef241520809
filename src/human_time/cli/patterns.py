"""Patterns command - list the recognized expressions."""

import rich_click as click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from human_time.cli.main import Context, pass_context

console = Console()


@click.command()
@pass_context
def patterns(ctx: Context) -> None:
    """List recognized expressions in priority order.

    When an expression matches several patterns, the first one listed wins.
    """
    from human_time.core.recognizers import RECOGNIZERS

    table = Table(title="Recognized expressions")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Example")
    table.add_column("Match")

    for index, recognizer in enumerate(RECOGNIZERS, start=1):
        scope = "whole input" if recognizer.anchored else "anywhere"
        table.add_row(str(index), recognizer.name, escape(recognizer.example), scope)

    console.print(table)

    if ctx.verbose:
        console.print()
        for recognizer in RECOGNIZERS:
            console.print(
                f"[bold]{recognizer.name}[/bold]: {escape(recognizer.pattern.pattern)}",
                highlight=False,
                soft_wrap=True,
            )
