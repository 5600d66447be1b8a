"""ASGI middleware that opens a request scope per HTTP request.

The routing context comes from a caller-supplied function, since only
the host framework knows which controller and action a path maps to::

    def route_for(scope):
        return RouteContext.from_path(scope["path"])

    app = ClientScope(app, route_for)

Non-HTTP scopes (``lifespan``, ``websocket``) pass through untouched.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

from perch.context import request_scope
from perch.routing import RouteContext

# Raw ASGI types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]

RouteResolver: TypeAlias = Callable[[Scope], RouteContext | None]


class ClientScope:
    """Wraps an ASGI app so each HTTP request gets its own request scope.

    The scope is reset when the wrapped app returns or raises.
    """

    __slots__ = ("_app", "_route_for")

    def __init__(self, app: ASGIApp, route_for: RouteResolver) -> None:
        self._app = app
        self._route_for = route_for

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self._app(scope, receive, send)
            return

        with request_scope(self._route_for(scope)):
            await self._app(scope, receive, send)
