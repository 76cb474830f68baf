"""CLI entry point for composer-outdated."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .config import find_config, load_config, merge_ignores
from .errors import ComposerOutdatedError
from .invoker import run
from .models import InvocationOptions, OverallOutcome
from .report import format_json, format_report

UPDATE_REQUIRED_EXIT_CODE = 2


def _configure_logging(debug: bool) -> None:
    """Warnings go to stderr; --debug also shows composer's captured output."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if debug:
        logging.getLogger("composer_outdated").setLevel(logging.DEBUG)


@click.group()
@click.version_option(package_name="composer-outdated")
def cli() -> None:
    """Check a PHP project for outdated composer dependencies."""


@cli.command()
@click.option(
    "--ignore",
    "-i",
    "ignored",
    metavar="PACKAGE_NAME",
    multiple=True,
    help="Dependencies that should be ignored (repeatable).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file. Defaults to .composer-outdated.toml if present.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.option("--debug", is_flag=True, help="Show debug logging.")
def check(
    ignored: tuple[str, ...],
    config_path: Path | None,
    output_format: str,
    debug: bool,
) -> None:
    """Run composer outdated in the current directory.

    Exits 0 when everything is up to date and 2 when composer reports that
    an update is required.
    """
    _configure_logging(debug)
    try:
        path = config_path or find_config(Path.cwd())
        options = load_config(path) if path else InvocationOptions()
        options = merge_ignores(options, ignored)
        outcome, report = run(options)
    except ComposerOutdatedError as exc:
        raise click.ClickException(str(exc)) from exc

    if output_format == "json":
        click.echo(format_json(outcome, report))
    else:
        click.echo(format_report(outcome, report))

    if outcome is OverallOutcome.UPDATE_REQUIRED:
        raise SystemExit(UPDATE_REQUIRED_EXIT_CODE)
