"""Versioned build artifacts on disk.

A build step writes ``<page>.<version>.js`` next to older builds (and
``skins/<page>.<version>/`` for themes).  Picking the current one is a
chain of small pure steps:

1. list the directory
2. strip the known extension
3. split a trailing ``.<digits>`` version off the stem
4. keep stems whose remainder equals the logical name
5. sort and take the last

Only step 1 touches the filesystem.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Literal

logger = logging.getLogger("perch.assets")

_DIGITS = frozenset("0123456789")

type VersionOrder = Literal["name", "numeric"]


def strip_extension(name: str, extension: str) -> str | None:
    """Return *name* without ``.{extension}``, or ``None`` if it lacks it."""
    suffix = f".{extension}"
    if len(name) > len(suffix) and name.endswith(suffix):
        return name[: -len(suffix)]
    return None


def split_version(stem: str) -> tuple[str, int | None]:
    """Split a trailing ``.<digits>`` off *stem*.

    ``"home.10"`` -> ``("home", 10)``; ``"home"`` -> ``("home", None)``.
    Only ASCII digits count, and at least one is required.
    """
    head, dot, tail = stem.rpartition(".")
    if not dot or not tail or not _DIGITS.issuperset(tail):
        return stem, None
    return head, int(tail)


def relative_location(base: str, loader: str) -> str:
    """Drop every segment of *base* that also appears in *loader*.

    Segments are split on ``/`` and the survivors keep *base*'s order::

        relative_location("/js/src", "/js/lib/main")  -> "src"

    The loader resolves module paths against its own directory, so the
    shared leading segments are removed.
    """
    loader_segments = set(loader.split("/"))
    return "/".join(s for s in base.split("/") if s not in loader_segments)


def matching_builds(stems: Iterable[str], name: str) -> list[tuple[str, int]]:
    """Return ``(stem, version)`` for each stem that is a versioned build of *name*."""
    matches = []
    for stem in stems:
        head, version = split_version(stem)
        if version is not None and head == name:
            matches.append((stem, version))
    return matches


def latest_build(stems: Iterable[str], name: str, *, order: VersionOrder = "name") -> str | None:
    """Return the stem of the current build of *name*, or ``None``.

    ``order="name"`` sorts stems as strings, the order a directory scan
    yields. Versions that are not zero-padded then sort by text, so
    ``home.2`` comes after ``home.10``. ``order="numeric"`` sorts by the
    integer version instead.
    """
    matches = matching_builds(stems, name)
    if not matches:
        return None
    if order == "numeric":
        matches.sort(key=lambda m: (m[1], m[0]))
    else:
        matches.sort()
    return matches[-1][0]


def list_names(directory: Path) -> list[str]:
    """Sorted entry names in *directory*; empty if it does not exist."""
    try:
        return sorted(os.listdir(directory))
    except (FileNotFoundError, NotADirectoryError):
        return []


def find_script_build(directory: Path, page: str, *, order: VersionOrder = "name") -> str | None:
    """Stem of the current ``{page}.<version>.js`` in *directory*."""
    stems = (
        stem
        for stem in (strip_extension(n, "js") for n in list_names(directory))
        if stem is not None
    )
    found = latest_build(stems, page, order=order)
    if found is None:
        logger.debug("no build of %r in %s", page, directory)
    else:
        logger.debug("using build %r for %r", found, page)
    return found


def find_theme_build(
    skins: Path,
    page: str,
    stylesheet: str,
    *,
    order: VersionOrder = "name",
) -> str | None:
    """Name of the current ``{page}.<version>`` skin directory under *skins*.

    Only skin directories where *stylesheet* (a path relative to the skin
    directory, such as ``css/default.css``) exists are considered. Any
    entry at that path counts, file or directory.
    """
    candidates = [
        stem
        for stem, _ in matching_builds(list_names(skins), page)
        if (skins / stem / stylesheet).exists()
    ]
    found = latest_build(candidates, page, order=order)
    if found is None:
        logger.debug("no skin build of %r with %s in %s", page, stylesheet, skins)
    else:
        logger.debug("using skin build %r for %r", found, page)
    return found
