"""Perch — page controller scripts and theme styles for server-rendered HTML.

Picks the JavaScript controller and the stylesheet for each page from a
controller/action map, serving raw sources through a module loader in
development and the newest versioned build in production.

Basic usage::

    from perch import Client, ClientConfig, RouteContext, request_scope

    client = Client(ClientConfig.from_mapping(settings["client"]))

    with request_scope(RouteContext("welcome", "index")):
        client.inject_theme_styles()
        client.inject_controller_script()

Templates (kida)::

    from perch.templating import register_globals
    register_globals(env, client)
"""

__version__ = "0.1.0"
__all__ = [
    "Client",
    "ClientConfig",
    "ClientScope",
    "ConfigurationError",
    "Deferred",
    "Mode",
    "PageEntry",
    "PerchError",
    "RouteContext",
    "Static",
    "Variant",
    "get_scope",
    "request_scope",
]

_LAZY_IMPORTS: dict[str, str] = {
    "Client": "perch.client",
    "ClientConfig": "perch.config",
    "ClientScope": "perch.middleware",
    "ConfigurationError": "perch.errors",
    "Deferred": "perch.values",
    "Mode": "perch.config",
    "PageEntry": "perch.config",
    "PerchError": "perch.errors",
    "RouteContext": "perch.routing",
    "Static": "perch.values",
    "Variant": "perch.pages",
    "get_scope": "perch.context",
    "request_scope": "perch.context",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
