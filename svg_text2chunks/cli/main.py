"""Entry point for the ``svg-text2chunks`` command."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from svg_text2chunks import __version__
from svg_text2chunks.cli.commands import fonts, inspect
from svg_text2chunks.config import Config
from svg_text2chunks.exceptions import ConfigError
from svg_text2chunks.log import LOG_LEVELS, setup_logging

console = Console()


@click.group()
@click.version_option(__version__, prog_name="svg-text2chunks")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity (overrides the config file)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Inspect how SVG text elements split into positioned chunks."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {e}")
        raise SystemExit(1) from e

    level = (log_level or config.log_level).upper()
    setup_logging(level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(inspect)
cli.add_command(fonts)


if __name__ == "__main__":
    cli()
