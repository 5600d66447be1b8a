"""Tests for perch.config — ClientConfig construction and lookups."""

import dataclasses
from pathlib import Path

import pytest

from perch.config import EMPTY_ENTRY, ClientConfig, Mode, PageEntry
from perch.errors import ConfigurationError
from perch.values import Deferred, Static


class TestDefaults:
    def test_empty_config(self) -> None:
        cfg = ClientConfig()
        assert cfg.pages == {}
        assert cfg.legacy is EMPTY_ENTRY
        assert cfg.base_url == "/"
        assert cfg.version_order == "name"

    def test_frozen(self) -> None:
        cfg = ClientConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.development = "js/src"  # type: ignore[misc]

    def test_scan_root_defaults_to_cwd(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert ClientConfig().scan_root() == tmp_path

    def test_scan_root_explicit(self, tmp_path: Path) -> None:
        assert ClientConfig(root=str(tmp_path)).scan_root() == tmp_path

    def test_invalid_version_order(self) -> None:
        with pytest.raises(ConfigurationError, match="version_order"):
            ClientConfig(version_order="newest")  # type: ignore[arg-type]


class TestFromMapping:
    def test_builds_page_map(self, config: ClientConfig) -> None:
        entry = config.pages["welcome"]["index"]
        assert entry == PageEntry(page=Static("home"), theme=Static("default"))
        assert config.pages["welcome"]["about"].use_build is True

    def test_legacy_entry(self, config: ClientConfig) -> None:
        assert config.legacy.page == Static("legacy")
        assert config.legacy.use_build is True

    def test_scalar_settings(self, config: ClientConfig) -> None:
        assert config.development == "js/src"
        assert config.loader == "js/lib/main"

    def test_callable_page_is_deferred(self) -> None:
        cfg = ClientConfig.from_mapping({"pages": {"a": {"b": {"page": lambda: "x"}}}})
        assert isinstance(cfg.pages["a"]["b"].page, Deferred)

    def test_unknown_keys_ignored(self) -> None:
        cfg = ClientConfig.from_mapping({"development": "js/src", "minify": True})
        assert cfg.development == "js/src"

    def test_absent_pages_and_legacy(self) -> None:
        cfg = ClientConfig.from_mapping({})
        assert cfg.pages == {}
        assert cfg.legacy.is_empty

    def test_pages_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="'pages' must be a mapping"):
            ClientConfig.from_mapping({"pages": ["welcome"]})

    def test_actions_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="'pages.welcome' must be a mapping"):
            ClientConfig.from_mapping({"pages": {"welcome": "home"}})

    def test_entry_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="pages.welcome.index must be a mapping"):
            ClientConfig.from_mapping({"pages": {"welcome": {"index": "home"}}})

    def test_bad_page_type(self) -> None:
        with pytest.raises(ConfigurationError, match="pages.welcome.index.page"):
            ClientConfig.from_mapping({"pages": {"welcome": {"index": {"page": 1}}}})


class TestLookups:
    def test_get_present(self, config: ClientConfig) -> None:
        assert config.get("production") == "js/build"

    def test_get_default_for_unset(self) -> None:
        assert ClientConfig().get("production", "fallback") == "fallback"

    def test_get_default_for_unknown(self, config: ClientConfig) -> None:
        assert config.get("nope", 1) == 1

    def test_base_directory(self, config: ClientConfig) -> None:
        assert config.base_directory(Mode.DEVELOPMENT) == "js/src"
        assert config.base_directory(Mode.PRODUCTION) == "js/build"

    def test_base_directory_strips_slashes(self) -> None:
        assert ClientConfig(production="/js/build/").base_directory(Mode.PRODUCTION) == "js/build"

    def test_base_directory_missing(self) -> None:
        with pytest.raises(ConfigurationError, match="'production'"):
            ClientConfig(development="js/src").base_directory(Mode.PRODUCTION)


class TestMode:
    def test_extensions(self) -> None:
        assert Mode.DEVELOPMENT.extension == "less"
        assert Mode.PRODUCTION.extension == "css"

    def test_value_is_config_key(self) -> None:
        assert Mode.PRODUCTION == "production"
