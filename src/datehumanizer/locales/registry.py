"""Locale registry: locale code to message templates.

A registry always holds the default locale. Lookups of unknown codes fall
back to it, so formatting never fails for lack of a table. Writes are
serialized and publish a fresh mapping, so concurrent readers see either the
old or the new set of tables, never a half-registered one.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType

from ..core.types import MessageKey
from .builtin import BUILTIN_LOCALES, DEFAULT_LOCALE

logger = logging.getLogger(__name__)

LocaleTable = Mapping[MessageKey, str]


def missing_keys(templates: Mapping) -> list[str]:
    """Return the message keys *templates* lacks or leaves empty.

    Keys may be plain strings or :class:`MessageKey` members. A value counts
    as missing unless it is a non-empty string.
    """
    missing: list[str] = []
    for key in MessageKey:
        value = templates.get(key)
        if not isinstance(value, str) or not value:
            missing.append(key.value)
    return missing


class LocaleRegistry:
    """Mutable mapping of locale codes to validated template tables."""

    def __init__(self, seed_builtins: bool = True) -> None:
        self._lock = threading.Lock()
        self._tables: Mapping[str, LocaleTable] = MappingProxyType({})
        self.register(DEFAULT_LOCALE, BUILTIN_LOCALES[DEFAULT_LOCALE])
        if seed_builtins:
            for code, templates in BUILTIN_LOCALES.items():
                if code != DEFAULT_LOCALE:
                    self.register(code, templates)

    @property
    def default_locale(self) -> str:
        return DEFAULT_LOCALE

    def register(self, code: str, templates: Mapping) -> bool:
        """Validate and store a locale table.

        Args:
            code: Locale code, e.g. ``"de"``. Must be a non-empty string.
            templates: Mapping of every message key to its template.

        Returns:
            True if the table was stored, False if it was rejected. A rejected
            table leaves the registry unchanged.
        """
        if not isinstance(code, str) or not code or not isinstance(templates, Mapping):
            logger.error(
                "Invalid locale configuration: code must be a non-empty string "
                "and templates a mapping (got %r, %s)",
                code,
                type(templates).__name__,
            )
            return False

        missing = missing_keys(templates)
        if missing:
            logger.error(
                "Missing translation keys for locale %r: %s",
                code,
                ", ".join(missing),
            )
            return False

        table = MappingProxyType({key: templates.get(key) for key in MessageKey})
        with self._lock:
            tables = dict(self._tables)
            tables[code] = table
            self._tables = MappingProxyType(tables)
        logger.debug("Registered locale %r", code)
        return True

    def unregister(self, code: str) -> bool:
        """Remove a locale. The default locale cannot be removed."""
        if code == DEFAULT_LOCALE:
            logger.warning("Refusing to remove default locale %r", code)
            return False
        with self._lock:
            if not isinstance(code, str) or code not in self._tables:
                return False
            tables = dict(self._tables)
            del tables[code]
            self._tables = MappingProxyType(tables)
        return True

    def lookup(self, code: str) -> LocaleTable:
        """Return the table for *code*, or the default table if unregistered."""
        tables = self._tables
        if isinstance(code, str) and code in tables:
            return tables[code]
        return tables[DEFAULT_LOCALE]

    def list(self) -> list[str]:
        """Registered locale codes in registration order."""
        return list(self._tables)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"LocaleRegistry({self.list()!r})"


default_registry = LocaleRegistry()
