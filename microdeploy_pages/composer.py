"""Compose the content catalog into an ordered page structure.

The composer is purely structural: it walks the catalog once, in the fixed
section order, and produces frozen dataclasses that templates (or tests) can
consume without knowing where the content came from. Glyph and asset lookups
are delegated to resolver callables. A lookup failure from either (any
``LookupError``, :class:`ResolutionMiss` included) or a ``None`` handle is
recorded and replaced with a placeholder, so one bad reference never blanks
the rest of the page.

Examples
--------
>>> from microdeploy_pages.catalog import default_catalog
>>> page = compose(default_catalog())
>>> [section.kind.value for section in page.sections]
['hero', 'features', 'architecture', 'documentation', 'steps', 'footer']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import SECTION_ORDER
from .assets import AssetHandle, AssetResolver
from .catalog import SectionKind
from .errors import ResolutionMiss
from .glyphs import DEFAULT_GLYPHS, GlyphHandle

if typ.TYPE_CHECKING:
    from .catalog import ArchitectureAsset, ContentCatalog, NavLink

GlyphResolver = typ.Callable[[str], GlyphHandle | None]
AssetResolverFn = typ.Callable[[str], AssetHandle | None]


@dc.dataclass(slots=True, frozen=True)
class ResolutionRecord:
    """A lookup that fell back to a placeholder during composition."""

    kind: str
    reference: str
    message: str


@dc.dataclass(slots=True, frozen=True)
class ComposedLink:
    """Navigation link with its optional glyph resolved."""

    label: str
    href: str
    external: bool
    glyph: GlyphHandle | None


@dc.dataclass(slots=True, frozen=True)
class ComposedHeader:
    """Top-of-page chrome."""

    brand_text: str
    brand_glyph: GlyphHandle | None
    links: tuple[ComposedLink, ...]


@dc.dataclass(slots=True, frozen=True)
class ComposedHero:
    """Hero headline block."""

    title: str
    description: str


@dc.dataclass(slots=True, frozen=True)
class ComposedCard:
    """Feature card; ``glyph`` is None when the glyph fell back to a placeholder."""

    title: str
    description: str
    glyph_name: str
    glyph: GlyphHandle | None

    @property
    def placeholder(self) -> bool:
        """Return True when the card renders without its glyph."""
        return self.glyph is None


@dc.dataclass(slots=True, frozen=True)
class ComposedAsset:
    """Architecture diagram reference."""

    uri: str
    alt_text: str
    handle: AssetHandle | None

    @property
    def placeholder(self) -> bool:
        """Return True when the asset could not be resolved."""
        return self.handle is None


@dc.dataclass(slots=True, frozen=True)
class ComposedSnippet:
    """Documentation code block; ``body`` is the catalog text, untouched."""

    key: str
    heading: str
    language: str
    body: str


@dc.dataclass(slots=True, frozen=True)
class ComposedStep:
    """Numbered implementation step."""

    number: int
    heading: str
    summary: str
    sub_steps: tuple[str, ...]


@dc.dataclass(slots=True, frozen=True)
class ComposedFooter:
    """Bottom-of-page chrome."""

    brand_text: str
    brand_glyph: GlyphHandle | None
    links: tuple[ComposedLink, ...]
    copyright_year: int
    rights_notice: str


SectionItem = (
    ComposedHero
    | ComposedCard
    | ComposedAsset
    | ComposedSnippet
    | ComposedStep
    | ComposedFooter
)


@dc.dataclass(slots=True, frozen=True)
class ComposedSection:
    """One page section and the items it displays, in order."""

    kind: SectionKind
    heading: str | None
    anchor: str | None
    items: tuple[SectionItem, ...]


@dc.dataclass(slots=True, frozen=True)
class PageStructure:
    """The fully composed page.

    Attributes
    ----------
    title : str
        Document title.
    header : ComposedHeader
        Brand and navigation chrome rendered above the sections.
    sections : tuple[ComposedSection, ...]
        Sections in the fixed top-to-bottom order.
    misses : tuple[ResolutionRecord, ...]
        Glyph and asset lookups that fell back to placeholders.
    """

    title: str
    header: ComposedHeader
    sections: tuple[ComposedSection, ...]
    misses: tuple[ResolutionRecord, ...]

    def section(self, kind: SectionKind | str) -> ComposedSection:
        """Return the composed section of ``kind``."""
        wanted = SectionKind(kind)
        for section in self.sections:
            if section.kind is wanted:
                return section
        msg = f"Page has no '{wanted}' section."
        raise KeyError(msg)


class PageComposer:
    """Map a :class:`ContentCatalog` onto the page layout."""

    def __init__(
        self,
        glyph_resolver: GlyphResolver | None = None,
        asset_resolver: AssetResolverFn | None = None,
    ) -> None:
        """Initialise the composer with its lookup collaborators.

        Parameters
        ----------
        glyph_resolver : Callable[[str], GlyphHandle], optional
            Translates glyph names into handles. Defaults to the built-in
            glyph set.
        asset_resolver : Callable[[str], AssetHandle], optional
            Translates asset URIs into handles. Defaults to
            :class:`AssetResolver`, which performs no network access.
        """
        self.glyph_resolver = glyph_resolver or DEFAULT_GLYPHS.resolve
        self.asset_resolver = asset_resolver or AssetResolver().resolve

    def compose(self, catalog: ContentCatalog) -> PageStructure:
        """Return the page structure for ``catalog``.

        The catalog is assumed valid; no invariants are re-checked. The only
        side effects are the resolver calls.
        """
        misses: list[ResolutionRecord] = []
        builders: dict[str, typ.Callable[[], tuple[SectionItem, ...]]] = {
            "hero": lambda: (
                ComposedHero(
                    title=catalog.hero.title, description=catalog.hero.description
                ),
            ),
            "features": lambda: tuple(
                ComposedCard(
                    title=card.title,
                    description=card.description,
                    glyph_name=card.glyph_name,
                    glyph=self._glyph(card.glyph_name, misses),
                )
                for card in catalog.list_features()
            ),
            "architecture": lambda: (
                self._asset(catalog.get_architecture_asset(), misses),
            ),
            "documentation": lambda: tuple(
                ComposedSnippet(
                    key=snippet.key,
                    heading=snippet.heading,
                    language=snippet.language,
                    body=snippet.body,
                )
                for snippet in catalog.list_snippets()
            ),
            "steps": lambda: tuple(
                ComposedStep(
                    number=number,
                    heading=step.heading,
                    summary=step.summary,
                    sub_steps=tuple(step.sub_steps),
                )
                for number, step in enumerate(catalog.list_steps(), start=1)
            ),
            "footer": lambda: (
                ComposedFooter(
                    brand_text=catalog.footer.brand_text,
                    brand_glyph=self._glyph(catalog.footer.brand_glyph, misses),
                    links=self._links(catalog.footer.links, misses),
                    copyright_year=catalog.footer.copyright_year,
                    rights_notice=catalog.footer.rights_notice,
                ),
            ),
        }

        header = ComposedHeader(
            brand_text=catalog.header.brand_text,
            brand_glyph=self._glyph(catalog.header.brand_glyph, misses),
            links=self._links(catalog.header.links, misses),
        )
        sections = []
        for name in SECTION_ORDER:
            kind = SectionKind(name)
            meta = catalog.section(kind)
            sections.append(
                ComposedSection(
                    kind=kind,
                    heading=meta.heading,
                    anchor=meta.anchor,
                    items=builders[name](),
                )
            )
        return PageStructure(
            title=catalog.title,
            header=header,
            sections=tuple(sections),
            misses=tuple(misses),
        )

    def _glyph(
        self, name: str, misses: list[ResolutionRecord]
    ) -> GlyphHandle | None:
        try:
            handle = self.glyph_resolver(name)
        except LookupError as exc:
            misses.append(ResolutionRecord("glyph", name, _miss_message(exc)))
            return None
        if handle is None:
            misses.append(ResolutionRecord("glyph", name, f"Unknown glyph '{name}'."))
        return handle

    def _asset(
        self, asset: ArchitectureAsset, misses: list[ResolutionRecord]
    ) -> ComposedAsset:
        try:
            handle: AssetHandle | None = self.asset_resolver(asset.source_uri)
        except LookupError as exc:
            misses.append(
                ResolutionRecord("asset", asset.source_uri, _miss_message(exc))
            )
            handle = None
        else:
            if handle is None:
                msg = f"Could not resolve '{asset.source_uri}'."
                misses.append(ResolutionRecord("asset", asset.source_uri, msg))
        return ComposedAsset(
            uri=asset.source_uri, alt_text=asset.alt_text, handle=handle
        )

    def _links(
        self, links: tuple[NavLink, ...], misses: list[ResolutionRecord]
    ) -> tuple[ComposedLink, ...]:
        return tuple(
            ComposedLink(
                label=link.label,
                href=link.href,
                external=link.external,
                glyph=self._glyph(link.glyph_name, misses) if link.glyph_name else None,
            )
            for link in links
        )


def _miss_message(exc: LookupError) -> str:
    """Return a readable message for a resolver failure."""
    if isinstance(exc, ResolutionMiss):
        return str(exc)
    return f"{type(exc).__name__}: {exc}"


def compose(
    catalog: ContentCatalog,
    glyph_resolver: GlyphResolver | None = None,
    asset_resolver: AssetResolverFn | None = None,
) -> PageStructure:
    """Compose ``catalog`` with the given resolvers in a single pass."""
    return PageComposer(glyph_resolver, asset_resolver).compose(catalog)


__all__ = [
    "ComposedAsset",
    "ComposedCard",
    "ComposedFooter",
    "ComposedHeader",
    "ComposedHero",
    "ComposedLink",
    "ComposedSection",
    "ComposedSnippet",
    "ComposedStep",
    "PageComposer",
    "PageStructure",
    "ResolutionRecord",
    "compose",
]
