"""Config command - manage configuration."""

import os
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Optional

import rich_click as click
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from human_time.cli.main import Context, pass_context
from human_time.core.clock import TZ_ENV_VAR
from human_time.core.config import HumanTimeConfig

console = Console()

DEFAULT_CONFIG = '''# human-time configuration

# Zone used for expressions without an explicit offset.
# An IANA name such as "Europe/Paris", or "local" for the host's zone.
# The HUMAN_TIME_TZ environment variable overrides this.
timezone = "local"

# Require phrases like "yesterday" to be the whole input
# (by default they may appear anywhere in it).
anchored = false

# Output format for `htime parse`: "iso", "rfc3339" or "epoch"
format = "iso"
'''


@click.group()
def config_cmd() -> None:
    """Manage configuration."""
    pass


@config_cmd.command("show")
@pass_context
def show(ctx: Context) -> None:
    """Show effective settings and the configuration file they came from."""
    config = ctx.config
    zone = ctx.zone()

    table = Table(show_header=True, title="Effective settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_column("Source", style="dim")
    table.add_row("timezone", _zone_label(zone), _zone_source(ctx))
    table.add_row("anchored", str(config.anchored).lower(), _file_source(config, "anchored"))
    table.add_row("format", config.format, _file_source(config, "format"))
    console.print(table)
    console.print()

    if config.source_path is None:
        console.print("[yellow]No configuration file found[/yellow]")
        console.print("\nSearch locations:")
        console.print("  1. ./human-time.toml")
        console.print("  2. ./pyproject.toml \\[tool.human-time]")
        console.print("  3. <git root>/human-time.toml")
        console.print("  4. ~/.config/human-time/config.toml")
        return

    console.print(f"[bold]Config file:[/bold] {config.source_path}", soft_wrap=True)
    console.print()

    content = config.source_path.read_text()
    syntax = Syntax(content, "toml", theme="monokai", line_numbers=True)
    console.print(syntax)


def _zone_label(zone: Optional[tzinfo]) -> str:
    if zone is None:
        return f"local ({datetime.now().astimezone().tzname()})"
    return str(zone)


def _zone_source(ctx: Context) -> str:
    if ctx.tz is not None:
        return "--tz"
    if os.environ.get(TZ_ENV_VAR):
        return TZ_ENV_VAR
    if ctx.config.timezone:
        return "config file"
    return "default"


def _file_source(config: HumanTimeConfig, name: str) -> str:
    if getattr(config, name) == getattr(HumanTimeConfig(), name):
        return "default"
    return "config file"


@config_cmd.command("init")
@click.option("--global", "-g", "global_config", is_flag=True, help="Create global config")
@pass_context
def init(ctx: Context, global_config: bool) -> None:
    """Create a new configuration file."""
    from human_time.core.config import CONFIG_NAME, user_config_path

    if global_config:
        config_path = user_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        config_path = Path.cwd() / CONFIG_NAME

    if config_path.exists():
        if not click.confirm(f"{config_path} already exists. Overwrite?"):
            console.print("[yellow]Cancelled[/yellow]")
            return

    config_path.write_text(DEFAULT_CONFIG)
    console.print(f"[green]Created {config_path}[/green]")


@config_cmd.command("path")
@pass_context
def path(ctx: Context) -> None:
    """Show path to the configuration file in effect."""
    config_path = ctx.config.source_path

    if config_path is not None:
        console.print(str(config_path), soft_wrap=True)
    else:
        console.print("[yellow]No configuration file found[/yellow]")
