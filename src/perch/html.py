"""Tag rendering for located assets.

Returns kida ``Markup`` so autoescaping templates do not double-escape.
Attribute values are always HTML-escaped.
"""

import html

from kida.template import Markup

from perch.locator import ScriptTag, StyleTag


def site_url(path: str, base_url: str = "/") -> str:
    """Prefix a site-local *path* with *base_url*.

    Both ``js/app.js`` and ``/js/app.js`` are local to the site and get the
    prefix. URLs with a scheme and protocol-relative ``//host/...`` URLs
    are returned unchanged.
    """
    if path.startswith("//") or "://" in path:
        return path
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def _attrs(pairs: tuple[tuple[str, str], ...]) -> str:
    return "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in pairs)


def render_script(tag: ScriptTag, *, base_url: str = "/") -> Markup:
    """Render ``<script src=...></script>`` with any extra attributes."""
    pairs = (("src", site_url(tag.src, base_url)), *tag.attrs)
    return Markup(f"<script{_attrs(pairs)}></script>")


def render_style(tag: StyleTag, *, base_url: str = "/") -> Markup:
    """Render ``<link rel=... href=...>``."""
    pairs = (("rel", tag.rel), ("href", site_url(tag.href, base_url)))
    return Markup(f"<link{_attrs(pairs)}>")
