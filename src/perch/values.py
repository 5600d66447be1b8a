"""Possibly-deferred configuration values.

A page or theme name in the client config is either a plain string or a
zero-argument callable that produces one on demand.  The two cases are
modelled explicitly::

    Static("home")
    Deferred(lambda: current_tenant().page)

and collapsed with ``resolve_value()`` at the point of use.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from perch.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Static:
    """A value known when the config is loaded."""

    value: str

    def resolve(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Deferred:
    """A value computed by calling ``factory`` each time it is resolved.

    Exceptions raised by the factory propagate unchanged.
    """

    factory: Callable[[], str | None]

    def resolve(self) -> str | None:
        result = self.factory()
        if result is None or isinstance(result, str):
            return result
        msg = (
            f"Deferred value {self.factory!r} returned "
            f"{type(result).__name__}, expected str"
        )
        raise TypeError(msg)


Value: TypeAlias = Static | Deferred


def as_value(raw: object, *, key: str = "value") -> Value | None:
    """Wrap a raw config value in the matching variant.

    ``None`` stays ``None``.  Existing variants pass through.  Strings become
    ``Static``, callables become ``Deferred``.  Anything else is a
    configuration error.
    """
    if raw is None or isinstance(raw, Static | Deferred):
        return raw
    if isinstance(raw, str):
        return Static(raw)
    if callable(raw):
        return Deferred(raw)
    msg = f"{key!r} must be a string or a callable, got {type(raw).__name__}"
    raise ConfigurationError(msg)


def resolve_value(value: Value | None) -> str | None:
    """Return the concrete string for *value*, or ``None`` when absent."""
    if value is None:
        return None
    return value.resolve()
