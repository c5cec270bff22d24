"""datehumanizer locales: inspect and validate locale tables."""

from __future__ import annotations

from pathlib import Path

import click

from ..locales.loader import LocaleFileError, load_locale_file
from ..locales.registry import LocaleRegistry, missing_keys


@click.group()
def locales() -> None:
    """Inspect available locales."""


@locales.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """List registered locale codes, default first."""
    registry: LocaleRegistry = ctx.obj["registry"]
    for code in registry.list():
        click.echo(code)


@locales.command("check")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
def check_cmd(path: Path) -> None:
    """Check that a YAML locale file defines every message key."""
    try:
        templates = load_locale_file(path)
    except LocaleFileError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    missing = missing_keys(templates)
    if missing:
        click.echo(click.style(f"{path}: missing {len(missing)} key(s)", fg="red"), err=True)
        for key in missing:
            click.echo(f"  {key}", err=True)
        raise SystemExit(1)
    click.echo(click.style(f"{path}: OK", fg="green"))
