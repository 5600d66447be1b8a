"""Client — the public entry points templates call.

Each entry point resolves the page data for the current request scope,
locates the asset, and renders a tag.  When there is nothing to inject
the result is an empty string, so layouts can call them unconditionally::

    <head>
      {{ inject_theme_styles() }}
    </head>
    <body>
      ...
      {{ inject_controller_script() }}
    </body>
"""

from collections.abc import Callable

from kida.template import Markup

from perch.config import ClientConfig, PageEntry
from perch.html import render_script, render_style
from perch.locator import locate_script, locate_style
from perch.pages import PageDataResolver


class Client:
    """Injects page controller scripts and theme styles for one app.

    Usage::

        client = Client(ClientConfig.from_mapping(settings["client"]))

        with request_scope(RouteContext("welcome", "index")):
            client.inject_controller_script()
    """

    __slots__ = ("_config", "_resolver")

    def __init__(self, config: ClientConfig) -> None:
        self._config = config
        self._resolver = PageDataResolver(config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def page_data(self, legacy: bool = False) -> PageEntry:
        """Page data for the current request (cached per scope)."""
        return self._resolver.resolve(legacy)

    def is_development(self, legacy: bool = False) -> bool:
        """True unless the current page data asks for the built bundle."""
        return self._resolver.is_development(legacy)

    def inject_controller_script(self, legacy: bool = False) -> Markup | str:
        """``<script>`` for the current page controller, or ``""``."""
        entry = self.page_data(legacy)
        if entry.is_empty:
            return ""
        tag = locate_script(self._config, entry)
        if tag is None:
            return ""
        return render_script(tag, base_url=self._config.base_url)

    def inject_legacy_support_script(self) -> Markup | str:
        """Controller script from the ``legacy`` branch, for older browsers."""
        return self.inject_controller_script(legacy=True)

    def inject_theme_styles(self, legacy: bool = False) -> Markup | str:
        """``<link>`` for the current page theme, or ``""``."""
        entry = self.page_data(legacy)
        if entry.is_empty:
            return ""
        tag = locate_style(self._config, entry)
        if tag is None:
            return ""
        return render_style(tag, base_url=self._config.base_url)

    def inject_legacy_support_styles(self) -> Markup | str:
        """Theme styles from the ``legacy`` branch, for older browsers."""
        return self.inject_theme_styles(legacy=True)

    def template_globals(self) -> dict[str, Callable[..., Markup | str]]:
        """Entry points keyed by the names templates call them by."""
        return {
            "inject_controller_script": self.inject_controller_script,
            "inject_legacy_support_script": self.inject_legacy_support_script,
            "inject_theme_styles": self.inject_theme_styles,
            "inject_legacy_support_styles": self.inject_legacy_support_styles,
        }
