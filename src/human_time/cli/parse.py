"""Parse command - turn expressions into timestamps."""

from typing import Optional, Tuple

import rich_click as click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from human_time.cli.main import Context, pass_context
from human_time.core.config import OUTPUT_FORMATS

console = Console()


@click.command()
@click.argument("expressions", nargs=-1, required=True)
@click.option(
    "--now",
    metavar="TIME",
    help="Pretend the current time is this (e.g. 2015-05-14T12:00:00Z); zoneless values use --tz",
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format (default from config, else iso)",
)
@click.option("--anchored", "-a", is_flag=True, help="Require phrases to match the whole input")
@click.option("--explain", "-e", is_flag=True, help="Show which pattern matched each expression")
@pass_context
def parse(
    ctx: Context,
    expressions: Tuple[str, ...],
    now: Optional[str],
    output_format: Optional[str],
    anchored: bool,
    explain: bool,
) -> None:
    """Parse one or more time expressions.

    Each EXPRESSION is parsed separately and printed on its own line:

        htime parse "3 days ago" "this week"

        htime parse --now 2015-05-14T12:00:00Z "now - 90m"
    """
    from human_time.core.clock import FixedClock, SystemClock
    from human_time.core.exceptions import ParseError
    from human_time.core.formatting import format_instant
    from human_time.core.parser import Parser

    config = ctx.config
    zone = ctx.zone()
    clock = SystemClock(zone)
    if now is not None:
        try:
            clock = FixedClock(Parser(clock).parse(now), zone)
        except ParseError as e:
            raise click.BadParameter(str(e), param_hint="'--now'") from e
    parser = Parser(clock, anchored=anchored or config.anchored)
    fmt = output_format or config.format

    table = Table(show_header=True) if explain else None
    if table is not None:
        table.add_column("Expression", style="cyan")
        table.add_column("Pattern")
        table.add_column("Result")

    failed = False
    for expression in expressions:
        try:
            match = parser.explain(expression)
        except ParseError as e:
            failed = True
            console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
            continue

        result = format_instant(match.instant, fmt)
        if table is not None:
            table.add_row(escape(expression), match.recognizer, result)
        else:
            console.print(result, highlight=False, soft_wrap=True)

    if table is not None and table.row_count:
        console.print(table)

    if failed:
        raise SystemExit(1)
