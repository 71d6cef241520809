"""Main CLI entry point using rich-click."""

import logging
from datetime import tzinfo
from pathlib import Path
from typing import Optional

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler

from human_time.core.clock import detect_timezone, resolve_timezone
from human_time.core.config import HumanTimeConfig, load_config
from human_time.core.exceptions import ConfigError

# Configure rich-click
click.rich_click.SHOW_ARGUMENTS = True

# Global console for Rich output
console = Console()


# Context object to pass state between commands
class Context:
    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.tz: Optional[str] = None
        self.verbose: bool = False
        self._config: Optional[HumanTimeConfig] = None

    @property
    def config(self) -> HumanTimeConfig:
        """Configuration from --config or auto-discovery (loaded once)."""
        if self._config is None:
            try:
                self._config = load_config(self.config_path)
            except ConfigError as e:
                raise click.ClickException(str(e)) from e
        return self._config

    def zone(self) -> Optional[tzinfo]:
        """Local zone: --tz, then HUMAN_TIME_TZ, then the config file."""
        try:
            if self.tz is not None:
                return resolve_timezone(self.tz)
            return detect_timezone(self.config)
        except ConfigError as e:
            raise click.ClickException(str(e)) from e


pass_context = click.make_pass_decorator(Context, ensure=True)


def _configure_logging(verbose: bool) -> None:
    """Route human_time debug logging through Rich when verbose."""
    logger = logging.getLogger("human_time")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    if verbose:
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--tz",
    type=str,
    help="Local time zone (IANA name, e.g. Europe/Paris, or 'local')",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(package_name="human-time")
@pass_context
def cli(ctx: Context, config: Optional[Path], tz: Optional[str], verbose: bool) -> None:
    """Human-friendly date and time parsing.

    Turn expressions such as "3 days ago", "this week", "2015-05-14" or
    "now - 90m" into absolute timestamps.
    """
    ctx.config_path = config
    ctx.tz = tz
    ctx.verbose = verbose
    _configure_logging(verbose)


# Import and register subcommands
from human_time.cli.parse import parse
from human_time.cli.patterns import patterns
from human_time.cli.config import config_cmd

cli.add_command(parse)
cli.add_command(patterns)
cli.add_command(config_cmd, name="config")


def main() -> None:
    """Entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
