"""Tests for config loading and registry construction."""

from pathlib import Path

import pytest
import yaml

from datehumanizer.core.config import (
    ConfigError,
    HumanizerConfig,
    build_registry,
    default_config_path,
    load_config,
)
from datehumanizer.locales.builtin import EN


class TestDefaultConfigPath:
    def test_override_dir(self, tmp_path: Path):
        assert default_config_path(tmp_path) == tmp_path / "config.yaml"

    def test_xdg(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert default_config_path() == tmp_path / "datehumanizer" / "config.yaml"

    def test_home(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert default_config_path() == tmp_path / ".config" / "datehumanizer" / "config.yaml"


class TestLoadConfig:
    def test_missing_file(self, tmp_path: Path):
        assert load_config(tmp_path / "missing.yaml") is None

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == HumanizerConfig()

    def test_full(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({
            "locale": "es",
            "include_seconds": False,
            "thresholds": {"minute": 120},
            "locales": {"en-x": dict(EN)},
        }))
        cfg = load_config(path)
        assert cfg is not None
        assert cfg.locale == "es"
        assert cfg.include_seconds is False
        assert cfg.thresholds == {"minute": 120}
        assert cfg.locales["en-x"]["just_now"] == "just now"

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("locale: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    @pytest.mark.parametrize(
        "content, message",
        [
            ("- a\n- b\n", "top level"),
            ("locale: ''\n", "'locale'"),
            ("include_seconds: maybe\n", "'include_seconds'"),
            ("thresholds: [1, 2]\n", "'thresholds'"),
            ("locales:\n  de: nope\n", "'locales'"),
        ],
    )
    def test_wrong_shapes(self, tmp_path: Path, content, message):
        path = tmp_path / "config.yaml"
        path.write_text(content)
        with pytest.raises(ConfigError, match=message):
            load_config(path)


class TestBuildRegistry:
    def test_no_config(self):
        assert build_registry(None).list() == ["en", "es", "fr"]

    def test_adds_configured_locales(self):
        cfg = HumanizerConfig(locales={"en-x": dict(EN)})
        assert build_registry(cfg).list() == ["en", "es", "fr", "en-x"]

    def test_skips_incomplete(self, caplog):
        cfg = HumanizerConfig(locales={"it": {"just_now": "proprio ora"}})
        registry = build_registry(cfg)
        assert "it" not in registry
        assert "Skipping incomplete locale 'it'" in caplog.text

    def test_registries_are_independent(self):
        cfg = HumanizerConfig(locales={"en-x": dict(EN)})
        build_registry(cfg)
        assert "en-x" not in build_registry(None)
