"""datehumanizer CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from ..core.config import ConfigError, build_registry, load_config
from .humanize_cmd import humanize_cmd
from .locales_cmd import locales


@click.group()
@click.version_option(package_name="datehumanizer")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: ~/.config/datehumanizer/config.yaml)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Turn timestamps into phrases like "3 hours ago" or "in 5 minutes"."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["registry"] = build_registry(config)


cli.add_command(humanize_cmd, "humanize")
cli.add_command(locales, "locales")
