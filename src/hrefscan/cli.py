"""Command-line interface for hrefscan."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from hrefscan import __version__
from hrefscan.config import Settings
from hrefscan.errors import HrefscanError
from hrefscan.observability import configure_logging
from hrefscan.pipeline import run


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option("--url", "-u", help="The base url used for relative links.")
@click.option("--style", "-s", help='A style expression used to target specific links. Defaults to just "a".')
@click.option("--config", "-c", type=click.Path(dir_okay=False), help="Configuration file path")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def cli(url: Optional[str], style: Optional[str], config: Optional[str], log_level: Optional[str]) -> None:
    """Extract links from HTML read on standard input."""
    try:
        base = Settings.from_yaml(Path(config)) if config else Settings.load({})
        settings = base.merged(url=url, style=style, log_level=log_level)
        configure_logging(settings.log_level)
        run(settings, click.get_binary_stream("stdin"), sys.stdout)
    except HrefscanError as e:
        click.echo(str(e), err=True)
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
