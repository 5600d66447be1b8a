"""Page data resolution.

Maps the current request to the ``PageEntry`` that decides which page
controller script and theme stylesheet get injected.  Results are cached
in the request scope, once per ``Variant``.
"""

import logging
from enum import Enum

from perch.config import EMPTY_ENTRY, ClientConfig, PageEntry
from perch.context import get_scope
from perch.routing import RouteContext

logger = logging.getLogger("perch.pages")


class Variant(Enum):
    """Which branch of the client config a lookup reads."""

    STANDARD = "standard"
    LEGACY = "legacy"

    @classmethod
    def of(cls, legacy: bool) -> "Variant":
        return cls.LEGACY if legacy else cls.STANDARD


def lookup_entry(config: ClientConfig, variant: Variant, route: RouteContext | None) -> PageEntry:
    """Return the config entry for *variant* without caching.

    The legacy branch ignores the route. The standard branch reads
    ``pages[route.controller_key][route.action]`` and falls back to the
    empty entry when the route is unknown or unbound.
    """
    if variant is Variant.LEGACY:
        return config.legacy
    if route is None or not config.pages:
        return EMPTY_ENTRY
    actions = config.pages.get(route.controller_key)
    if not actions:
        return EMPTY_ENTRY
    return actions.get(route.action, EMPTY_ENTRY)


def is_development(entry: PageEntry) -> bool:
    """True unless the entry explicitly asks for the built bundle."""
    return not entry.use_build


class PageDataResolver:
    """Resolves page data for the current request scope.

    Usage::

        resolver = PageDataResolver(config)
        with request_scope(RouteContext("welcome", "index")):
            entry = resolver.resolve()
    """

    __slots__ = ("_config",)

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    def resolve(self, legacy: bool = False) -> PageEntry:
        """Return the entry for the current request.

        Computed once per variant per scope; later calls return the cached
        object. Raises ``LookupError`` outside a request scope.
        """
        scope = get_scope()
        variant = Variant.of(legacy)
        try:
            return scope.page_data[variant]
        except KeyError:
            pass
        entry = lookup_entry(self._config, variant, scope.route)
        logger.debug("page data for %s (%s): %r", scope.route, variant.value, entry)
        scope.page_data[variant] = entry
        return entry

    def is_development(self, legacy: bool = False) -> bool:
        return is_development(self.resolve(legacy))
