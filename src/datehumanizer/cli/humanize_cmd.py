"""datehumanizer humanize: print the relative phrase for a timestamp."""

from __future__ import annotations

import re
from pathlib import Path

import click

from ..core.config import HumanizerConfig
from ..formatter import DEFAULT_THRESHOLDS, INVALID_DATE, humanize
from ..locales.loader import LocaleFileError, load_locale_file
from ..locales.registry import LocaleRegistry

_EPOCH_MS = re.compile(r"^-?\d+$")


def parse_date_arg(value: str) -> str | int:
    """Treat all-digit arguments as epoch milliseconds, anything else as ISO text."""
    if _EPOCH_MS.match(value.strip()):
        return int(value)
    return value


def _parse_thresholds(ctx, param, values: tuple[str, ...]) -> dict[str, int]:
    thresholds: dict[str, int] = {}
    for item in values:
        unit, sep, bound = item.partition("=")
        unit = unit.strip()
        if not sep or unit not in DEFAULT_THRESHOLDS:
            raise click.BadParameter(
                f"expected UNIT=N with UNIT one of {', '.join(DEFAULT_THRESHOLDS)}, got {item!r}"
            )
        try:
            thresholds[unit] = int(bound)
        except ValueError:
            raise click.BadParameter(f"threshold for {unit!r} must be an integer, got {bound!r}")
        if thresholds[unit] <= 0:
            raise click.BadParameter(f"threshold for {unit!r} must be positive")
    return thresholds


def _parse_locale_files(ctx, param, values: tuple[str, ...]) -> list[tuple[str, Path]]:
    parsed: list[tuple[str, Path]] = []
    for item in values:
        code, sep, path = item.partition("=")
        if not sep or not code or not path:
            raise click.BadParameter(f"expected CODE=PATH, got {item!r}")
        parsed.append((code, Path(path)))
    return parsed


@click.command()
@click.argument("date")
@click.option("--now", default=None, help="Reference time (ISO 8601 or epoch ms). Default: current time.")
@click.option("--locale", "-l", default=None, help="Locale code, e.g. en, es, fr.")
@click.option(
    "--threshold",
    "-t",
    "thresholds",
    multiple=True,
    callback=_parse_thresholds,
    help="Override a unit threshold, e.g. minute=120. Repeatable.",
)
@click.option(
    "--seconds/--no-seconds",
    "include_seconds",
    default=None,
    help="Collapse differences under 5 seconds to 'just now' (default: on).",
)
@click.option(
    "--locale-file",
    "locale_files",
    multiple=True,
    callback=_parse_locale_files,
    help="Register a locale from a YAML file, as CODE=PATH. Repeatable.",
)
@click.pass_context
def humanize_cmd(
    ctx: click.Context,
    date: str,
    now: str | None,
    locale: str | None,
    thresholds: dict[str, int],
    include_seconds: bool | None,
    locale_files: list[tuple[str, Path]],
) -> None:
    """Print DATE as a relative phrase. Numeric DATE values are epoch milliseconds."""
    config: HumanizerConfig = ctx.obj.get("config") or HumanizerConfig()
    registry: LocaleRegistry = ctx.obj["registry"]

    for code, path in locale_files:
        try:
            templates = load_locale_file(path)
        except LocaleFileError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)
        if not registry.register(code, templates):
            click.echo(f"Error: locale file {path} is incomplete for {code!r}", err=True)
            raise SystemExit(1)

    result = humanize(
        parse_date_arg(date),
        locale=locale or config.locale,
        thresholds={**config.thresholds, **thresholds} or None,
        include_seconds=config.include_seconds if include_seconds is None else include_seconds,
        now=parse_date_arg(now) if now is not None else None,
        registry=registry,
    )
    click.echo(result)
    if result == INVALID_DATE:
        raise SystemExit(1)
