"""Client configuration.

ClientConfig is a frozen dataclass holding the already-loaded ``client``
config namespace: base directories per mode, module-loader settings, and
the controller/action page map.  Build one directly or from a plain
mapping (e.g. the result of ``tomllib.load``)::

    config = ClientConfig.from_mapping({
        "development": "js/src",
        "production": "js/build",
        "loader": "js/lib/main",
        "require": "js/lib/require",
        "pages": {"welcome": {"index": {"page": "home", "theme": "default"}}},
    })
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import StrEnum
from pathlib import Path
from typing import Any, Literal

from perch.errors import ConfigurationError
from perch.values import Value, as_value


class Mode(StrEnum):
    """Asset delivery mode. The value doubles as the config key for its base directory."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @property
    def extension(self) -> str:
        """Stylesheet extension served in this mode."""
        return "less" if self is Mode.DEVELOPMENT else "css"


@dataclass(frozen=True, slots=True)
class PageEntry:
    """Page settings for one controller/action, or for the legacy branch.

    An entry with neither ``page`` nor ``theme`` means nothing is injected.
    """

    page: Value | None = None
    theme: Value | None = None
    use_build: bool = False

    @property
    def is_empty(self) -> bool:
        return self.page is None and self.theme is None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, where: str = "entry") -> "PageEntry":
        if not isinstance(data, Mapping):
            msg = f"{where} must be a mapping, got {type(data).__name__}"
            raise ConfigurationError(msg)
        return cls(
            page=as_value(data.get("page"), key=f"{where}.page"),
            theme=as_value(data.get("theme"), key=f"{where}.theme"),
            use_build=bool(data.get("use_build", False)),
        )


EMPTY_ENTRY = PageEntry()

type PageMap = Mapping[str, Mapping[str, PageEntry]]


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Client asset configuration. Immutable after creation."""

    # Base directories, relative to the scan root and the site root
    development: str | None = None
    production: str | None = None

    # Module loader (development mode)
    loader: str | None = None  # Loader entry point, passed as data-main
    require: str | None = None  # Loader bundle, without ".js"

    # Page settings
    pages: PageMap = field(default_factory=dict)  # controller_key -> action -> entry
    legacy: PageEntry = EMPTY_ENTRY

    # Filesystem root for build scans. None means the working directory at scan time.
    root: str | Path | None = None

    # Prefix for tag URLs that are neither absolute paths nor full URLs
    base_url: str = "/"

    # How matching builds are ordered before the last one is taken
    version_order: Literal["name", "numeric"] = "name"

    def __post_init__(self) -> None:
        if self.version_order not in ("name", "numeric"):
            msg = f"version_order must be 'name' or 'numeric', got {self.version_order!r}"
            raise ConfigurationError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ClientConfig":
        """Build a config from a loaded ``client`` namespace.

        Unknown keys are ignored. ``pages`` and ``legacy`` may be absent.
        """
        pages: dict[str, dict[str, PageEntry]] = {}
        raw_pages = data.get("pages") or {}
        if not isinstance(raw_pages, Mapping):
            msg = f"'pages' must be a mapping, got {type(raw_pages).__name__}"
            raise ConfigurationError(msg)
        for controller, actions in raw_pages.items():
            if not isinstance(actions, Mapping):
                msg = f"'pages.{controller}' must be a mapping, got {type(actions).__name__}"
                raise ConfigurationError(msg)
            pages[controller] = {
                action: PageEntry.from_mapping(entry, where=f"pages.{controller}.{action}")
                for action, entry in actions.items()
            }

        raw_legacy = data.get("legacy") or {}
        known = {f.name for f in fields(cls)} - {"pages", "legacy"}
        return cls(
            pages=pages,
            legacy=PageEntry.from_mapping(raw_legacy, where="legacy"),
            **{k: v for k, v in data.items() if k in known},
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Return the setting named *key*, or *default* when unset or unknown."""
        if key not in {f.name for f in fields(self)}:
            return default
        value = getattr(self, key)
        return default if value is None else value

    def require_key(self, key: str) -> str:
        """Return a string setting that must be present.

        Raises ``ConfigurationError`` when it is missing or empty.
        """
        value = self.get(key)
        if not value:
            msg = f"Client config is missing required key {key!r}"
            raise ConfigurationError(msg)
        return str(value)

    def base_directory(self, mode: Mode) -> str:
        """Base directory for *mode*, without leading or trailing slashes."""
        return self.require_key(mode.value).strip("/")

    def scan_root(self) -> Path:
        return Path(self.root) if self.root is not None else Path.cwd()
