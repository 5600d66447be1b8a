"""Shared fixtures: a client config rooted in a temporary site directory."""

from pathlib import Path

import pytest

from perch.config import ClientConfig


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """An empty site root with the development and production directories."""
    (tmp_path / "js" / "src").mkdir(parents=True)
    (tmp_path / "js" / "build").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def settings(site: Path) -> dict:
    """A ``client`` namespace as it would come out of a config loader."""
    return {
        "development": "js/src",
        "production": "js/build",
        "loader": "js/lib/main",
        "require": "js/lib/require",
        "root": site,
        "pages": {
            "welcome": {
                "index": {"page": "home", "theme": "default"},
                "about": {"page": "about", "theme": "default", "use_build": True},
            },
            "admin_users": {
                "edit": {"page": "users", "theme": "admin"},
            },
        },
        "legacy": {"page": "legacy", "theme": "ie", "use_build": True},
    }


@pytest.fixture
def config(settings: dict) -> ClientConfig:
    return ClientConfig.from_mapping(settings)
