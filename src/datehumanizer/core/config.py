"""Configuration loading for datehumanizer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from ..locales.builtin import DEFAULT_LOCALE
from ..locales.registry import LocaleRegistry

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the config file exists but cannot be used."""


@dataclass
class HumanizerConfig:
    """Default formatting options and extra locale tables."""

    locale: str = DEFAULT_LOCALE
    include_seconds: bool = True
    thresholds: dict[str, int] = field(default_factory=dict)
    locales: dict[str, dict[str, str]] = field(default_factory=dict)


def default_config_path(config_dir: Path | None = None) -> Path:
    """Return the default path for config.yaml.

    Args:
        config_dir: Override config directory. If None, uses
            $XDG_CONFIG_HOME/datehumanizer or ~/.config/datehumanizer.
    """
    if config_dir:
        return config_dir / "config.yaml"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "datehumanizer" / "config.yaml"
    return Path.home() / ".config" / "datehumanizer" / "config.yaml"


def load_config(path: Path | None = None) -> HumanizerConfig | None:
    """Load a HumanizerConfig from YAML.

    Args:
        path: Path to config.yaml. Uses default_config_path() if None.

    Returns:
        HumanizerConfig if the file exists, None otherwise.

    Raises:
        ConfigError: If the file is not valid YAML or a section has the
            wrong shape.
    """
    config_path = path or default_config_path()
    if not config_path.exists():
        return None

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return HumanizerConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: top level must be a mapping")

    locale = data.get("locale", DEFAULT_LOCALE)
    if not isinstance(locale, str) or not locale:
        raise ConfigError(f"{config_path}: 'locale' must be a non-empty string")

    include_seconds = data.get("include_seconds", True)
    if not isinstance(include_seconds, bool):
        raise ConfigError(f"{config_path}: 'include_seconds' must be true or false")

    thresholds = data.get("thresholds") or {}
    if not isinstance(thresholds, dict):
        raise ConfigError(f"{config_path}: 'thresholds' must be a mapping")

    locales = data.get("locales") or {}
    if not isinstance(locales, dict) or not all(isinstance(t, dict) for t in locales.values()):
        raise ConfigError(f"{config_path}: 'locales' must map codes to template mappings")

    return HumanizerConfig(
        locale=locale,
        include_seconds=include_seconds,
        thresholds=dict(thresholds),
        locales={str(code): dict(table) for code, table in locales.items()},
    )


def build_registry(config: HumanizerConfig | None = None) -> LocaleRegistry:
    """Create a registry with the built-in locales plus those in *config*.

    Incomplete locale tables are skipped; the registry logs what they lack.
    """
    registry = LocaleRegistry()
    if config is None:
        return registry
    for code, templates in config.locales.items():
        if not registry.register(code, templates):
            logger.warning("Skipping incomplete locale %r from config", code)
    return registry
