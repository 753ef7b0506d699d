"""Command line interface for listing remote GitHub directories."""

from __future__ import annotations

import asyncio
import logging

import click

from github_ls.domain.exceptions import ListingError
from github_ls.infrastructure.config import APP_NAME, APP_VERSION, get_settings
from github_ls.interface.dependencies import list_remote
from github_ls.interface.presenter import format_error, render_json, render_table

logger = logging.getLogger(__name__)

EPILOG = f"""\b
Examples:
  $ {APP_NAME} <path>              # list remote items
  $ {APP_NAME} <path> -b <branch>  # list remote items on target branch
"""


def log_error(message: str) -> None:
    click.echo(format_error(message), err=True)


@click.command(
    name=APP_NAME,
    epilog=EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("path", required=False)
@click.option("-b", "--branch", help="List items from specified git branch")
@click.option("-j", "--json", "as_json", is_flag=True, help="Output list in JSON format")
@click.option("--colors/--no-colors", default=None, help="Enable or disable `ls` colors")
@click.version_option(
    APP_VERSION, "-v", "--version", prog_name=APP_NAME, message="%(version)s"
)
def cli(path: str | None, branch: str | None, as_json: bool, colors: bool | None) -> None:
    """List the contents of a GitHub repository path, like `ls` for a remote."""
    settings = get_settings()
    if colors is None:
        colors = settings.colors
    colorize = colors and click.get_text_stream("stdout").isatty()

    if not path:
        log_error("Error: Github path required!")
        raise SystemExit(1)

    try:
        entries = asyncio.run(list_remote(path, branch=branch, settings=settings))
    except ListingError as exc:
        logger.debug("Listing failed", exc_info=True)
        log_error(f"Error: {str(exc).strip()}")
        raise SystemExit(1) from exc

    if as_json:
        click.echo(render_json(entries))
    else:
        click.echo(render_table(entries, colors=colorize))
