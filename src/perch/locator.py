"""Asset location — turns page data into script and stylesheet tags.

Development mode points the module loader at raw sources.  Production
mode points at the newest versioned build found on disk, falling back to
the unversioned name when none exists.
"""

from dataclasses import dataclass

from perch.builds import find_script_build, find_theme_build, relative_location
from perch.config import ClientConfig, Mode, PageEntry
from perch.pages import is_development
from perch.values import resolve_value

SKINS_DIR = "skins"


@dataclass(frozen=True, slots=True)
class ScriptTag:
    """A ``<script>`` to render. ``attrs`` keeps insertion order."""

    src: str
    attrs: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True, slots=True)
class StyleTag:
    """A ``<link>`` to render."""

    href: str
    rel: str = "stylesheet"


def mode_for(entry: PageEntry) -> Mode:
    return Mode.DEVELOPMENT if is_development(entry) else Mode.PRODUCTION


def locate_script(config: ClientConfig, entry: PageEntry) -> ScriptTag | None:
    """Resolve the page controller script for *entry*.

    Returns ``None`` when the entry names no page.
    """
    page = resolve_value(entry.page)
    if not page:
        return None

    mode = mode_for(entry)
    base = config.base_directory(mode)

    if mode is Mode.DEVELOPMENT:
        loader = "/" + config.require_key("loader").strip("/")
        location = relative_location(f"/{base}", loader)
        return ScriptTag(
            src=f"{config.require_key('require')}.js",
            attrs=(
                ("data-main", loader),
                ("data-page", f"{location}/{page}"),
            ),
        )

    build = find_script_build(config.scan_root() / base, page, order=config.version_order)
    return ScriptTag(src=f"/{base}/{build or page}.js")


def locate_style(config: ClientConfig, entry: PageEntry) -> StyleTag | None:
    """Resolve the theme stylesheet for *entry*.

    Needs both a theme and a page; returns ``None`` when either is missing.
    The stylesheet lives at ``/{base}/skins/{page}/{ext}/{theme}.{ext}``,
    where ``{page}`` is swapped for the newest ``{page}.<version>`` skin
    build in production.
    """
    theme = resolve_value(entry.theme)
    if not theme:
        return None
    page = resolve_value(entry.page)
    if not page:
        return None

    mode = mode_for(entry)
    base = config.base_directory(mode)
    ext = mode.extension
    stylesheet = f"{ext}/{theme}.{ext}"

    if mode is Mode.PRODUCTION:
        skins = config.scan_root() / base / SKINS_DIR
        page = find_theme_build(skins, page, stylesheet, order=config.version_order) or page
        return StyleTag(href=f"/{base}/{SKINS_DIR}/{page}/{stylesheet}")

    return StyleTag(href=f"/{base}/{SKINS_DIR}/{page}/{stylesheet}", rel=f"stylesheet/{ext}")
