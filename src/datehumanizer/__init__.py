"""datehumanizer: locale-aware relative time phrases ("3 hours ago", "in 5 minutes")."""

from __future__ import annotations

from collections.abc import Mapping

from .core.types import FormattingRequest, MessageKey, Thresholds
from .formatter import (
    DEFAULT_THRESHOLDS,
    INVALID_DATE,
    InvalidDateError,
    coerce_date,
    humanize,
)
from .locales.builtin import DEFAULT_LOCALE
from .locales.registry import LocaleRegistry, default_registry, missing_keys

__version__ = "1.0.0"


def register_locale(code: str, templates: Mapping) -> bool:
    """Add or replace a locale in the process-wide registry."""
    return default_registry.register(code, templates)


def list_locales() -> list[str]:
    """Locale codes in the process-wide registry, default first."""
    return default_registry.list()


__all__ = [
    "DEFAULT_LOCALE",
    "DEFAULT_THRESHOLDS",
    "INVALID_DATE",
    "FormattingRequest",
    "InvalidDateError",
    "LocaleRegistry",
    "MessageKey",
    "Thresholds",
    "coerce_date",
    "default_registry",
    "humanize",
    "list_locales",
    "missing_keys",
    "register_locale",
]
