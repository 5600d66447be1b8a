"""Request-scoped state via ContextVar.

Provides:
- ``scope_var``: The current ``RequestScope`` for this task/thread.
- ``request_scope()``: Context manager that binds a fresh scope.
- ``get_scope()`` / ``get_route()``: Accessors for the bound scope.

A scope carries the routing context and the page-data cache for one
request.  It is set by ``ClientScope`` middleware (or by hand around a
render) and reset afterwards, so nothing survives into the next request.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. Concurrent requests never share a cache. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from perch.routing import RouteContext

if TYPE_CHECKING:
    from perch.config import PageEntry
    from perch.pages import Variant


@dataclass(slots=True)
class RequestScope:
    """Per-request state: the route and the resolved page data."""

    route: RouteContext | None = None
    page_data: "dict[Variant, PageEntry]" = field(default_factory=dict)


scope_var: ContextVar[RequestScope] = ContextVar("perch_scope")
"""The current request scope. Set by ``request_scope()``."""


def get_scope() -> RequestScope:
    """Return the current request scope.

    Raises ``LookupError`` if called outside a request scope.
    """
    return scope_var.get()


def get_route() -> RouteContext | None:
    """Return the routing context bound to the current scope, if any."""
    return get_scope().route


@contextmanager
def request_scope(route: RouteContext | None = None) -> Iterator[RequestScope]:
    """Bind a fresh request scope for the duration of the block.

    Usage::

        with request_scope(RouteContext("welcome", "index")):
            html = template.render(ctx)
    """
    scope = RequestScope(route=route)
    token = scope_var.set(scope)
    try:
        yield scope
    finally:
        scope_var.reset(token)
