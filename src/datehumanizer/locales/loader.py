"""Load locale tables from YAML files."""

from __future__ import annotations

from pathlib import Path

import yaml


class LocaleFileError(Exception):
    """Raised when a locale file cannot be read or is not a mapping."""


def load_locale_file(path: Path) -> dict[str, str]:
    """Read a locale table from a YAML file.

    The file holds one mapping of message key to template, e.g.::

        just_now: gerade eben
        minutes_ago: vor {count} Minuten

    Completeness is not checked here; :meth:`LocaleRegistry.register` does
    that.

    Raises:
        LocaleFileError: If the file is unreadable, is not valid YAML, or its
            top level is not a mapping.
    """
    try:
        with open(path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except OSError as e:
        raise LocaleFileError(f"Cannot read locale file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise LocaleFileError(f"Invalid YAML in locale file {path}: {e}") from e

    if not isinstance(loaded, dict):
        raise LocaleFileError(f"Locale file {path} must contain a mapping of keys to templates")
    return {str(k): v for k, v in loaded.items()}
