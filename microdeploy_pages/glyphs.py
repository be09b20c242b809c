"""Named icon glyphs rendered as inline SVG.

The page refers to icons by name only (``git-merge``, ``server`` and so on).
:class:`GlyphProvider` translates those names into :class:`GlyphHandle`
instances carrying ready-to-embed SVG markup, and raises
:class:`GlyphNotFoundError` for anything it does not know.

Examples
--------
>>> from microdeploy_pages.glyphs import DEFAULT_GLYPHS
>>> DEFAULT_GLYPHS.resolve("server").name
'server'
>>> "git-merge" in DEFAULT_GLYPHS
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .errors import ResolutionMiss

_SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round" aria-hidden="true" '
    'class="glyph glyph-{name}">{body}</svg>'
)

# Stroke outlines drawn on a 24x24 grid.
_OUTLINES: dict[str, str] = {
    "workflow": (
        '<rect width="8" height="8" x="3" y="3" rx="2"/>'
        '<path d="M7 11v4a2 2 0 0 0 2 2h4"/>'
        '<rect width="8" height="8" x="13" y="13" rx="2"/>'
    ),
    "github": (
        '<path d="M15 22v-4a4.8 4.8 0 0 0-1-3.5c3 0 6-2 6-5.5.08-1.25-.27-2.48'
        "-1-3.5.28-1.15.28-2.35 0-3.5 0 0-1 0-3 1.5-2.64-.5-5.36-.5-8 0C6 2 5 2 "
        "5 2c-.3 1.15-.3 2.35 0 3.5A5.403 5.403 0 0 0 4 9c0 3.5 3 5.5 6 5.5-.39"
        '.49-.68 1.05-.85 1.65-.17.6-.22 1.23-.15 1.85v4"/>'
        '<path d="M9 18c-4.51 2-5-2-7-2"/>'
    ),
    "git-merge": (
        '<circle cx="18" cy="18" r="3"/>'
        '<circle cx="6" cy="6" r="3"/>'
        '<path d="M6 21V9a9 9 0 0 0 9 9"/>'
    ),
    "box": (
        '<path d="M21 8a2 2 0 0 0-1-1.73l-7-4a2 2 0 0 0-2 0l-7 4A2 2 0 0 0 3 8v8'
        'a2 2 0 0 0 1 1.73l7 4a2 2 0 0 0 2 0l7-4A2 2 0 0 0 21 16Z"/>'
        '<path d="m3.3 7 8.7 5 8.7-5"/>'
        '<path d="M12 22V12"/>'
    ),
    "server": (
        '<rect width="20" height="8" x="2" y="2" rx="2" ry="2"/>'
        '<rect width="20" height="8" x="2" y="14" rx="2" ry="2"/>'
        '<line x1="6" x2="6.01" y1="6" y2="6"/>'
        '<line x1="6" x2="6.01" y1="18" y2="18"/>'
    ),
    "bar-chart": (
        '<line x1="12" x2="12" y1="20" y2="10"/>'
        '<line x1="18" x2="18" y1="20" y2="4"/>'
        '<line x1="6" x2="6" y1="20" y2="16"/>'
    ),
}


class GlyphNotFoundError(ResolutionMiss):
    """Raised when a glyph name is not known to the provider."""


@dc.dataclass(slots=True, frozen=True)
class GlyphHandle:
    """Renderable glyph: its name and inline SVG markup."""

    name: str
    svg: str


class GlyphProvider:
    """Look up glyph markup by symbolic name."""

    def __init__(self, outlines: typ.Mapping[str, str] | None = None) -> None:
        self._outlines = dict(_OUTLINES if outlines is None else outlines)

    def __contains__(self, name: object) -> bool:
        return name in self._outlines

    def names(self) -> list[str]:
        """Return the known glyph names in sorted order."""
        return sorted(self._outlines)

    def resolve(self, name: str) -> GlyphHandle:
        """Return the handle for ``name`` or raise :class:`GlyphNotFoundError`."""
        try:
            body = self._outlines[name]
        except KeyError as exc:
            msg = f"Unknown glyph '{name}'."
            raise GlyphNotFoundError(name, msg) from exc
        return GlyphHandle(name=name, svg=_SVG_TEMPLATE.format(name=name, body=body))


DEFAULT_GLYPHS = GlyphProvider()

__all__ = ["DEFAULT_GLYPHS", "GlyphHandle", "GlyphNotFoundError", "GlyphProvider"]
