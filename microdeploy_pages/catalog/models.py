"""Typed dataclasses describing the MicroDeploy content catalog."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import Path

from .._constants import DOCUMENTATION_ANCHOR, SECTION_ORDER


class CatalogConfigError(ValueError):
    """Raised when the content catalog is invalid or incomplete."""


class SectionKind(enum.StrEnum):
    """Content kinds a page section can group."""

    HERO = "hero"
    FEATURES = "features"
    ARCHITECTURE = "architecture"
    DOCUMENTATION = "documentation"
    STEPS = "steps"
    FOOTER = "footer"


@dc.dataclass(slots=True, frozen=True)
class FeatureCard:
    """Capability tile shown in the feature grid."""

    title: str
    description: str
    glyph_name: str


@dc.dataclass(slots=True, frozen=True)
class CodeSnippet:
    """Illustrative configuration file shown verbatim in the docs section.

    Attributes
    ----------
    key : str
        Stable identifier (for example ``pipeline-config``) used for anchors
        and tests.
    heading : str
        Block heading displayed above the snippet.
    language : str
        Pygments lexer name used when highlighting.
    body : str
        Snippet text. Whitespace is significant and never reformatted.
    """

    key: str
    heading: str
    language: str
    body: str


@dc.dataclass(slots=True, frozen=True)
class ImplementationStep:
    """One numbered stage of the implementation guide."""

    heading: str
    summary: str
    sub_steps: tuple[str, ...]


@dc.dataclass(slots=True, frozen=True)
class ArchitectureAsset:
    """Externally hosted architecture diagram."""

    source_uri: str
    alt_text: str


@dc.dataclass(slots=True, frozen=True)
class PageSection:
    """A named grouping of one content kind within the page layout."""

    kind: SectionKind
    heading: str | None = None
    anchor: str | None = None


@dc.dataclass(slots=True, frozen=True)
class NavLink:
    """Hyperlink rendered in the header or footer."""

    label: str
    href: str
    glyph_name: str | None = None
    external: bool = False


@dc.dataclass(slots=True, frozen=True)
class HeaderContent:
    """Brand identity and navigation shown at the top of the page."""

    brand_text: str
    brand_glyph: str
    links: tuple[NavLink, ...]


@dc.dataclass(slots=True, frozen=True)
class HeroContent:
    """Introductory headline and lede."""

    title: str
    description: str


@dc.dataclass(slots=True, frozen=True)
class FooterContent:
    """Footer identity, links and rights notice."""

    brand_text: str
    brand_glyph: str
    links: tuple[NavLink, ...]
    copyright_year: int
    rights_notice: str


@dc.dataclass(slots=True, frozen=True)
class ContentCatalog:
    """Immutable collection of every content entry the page displays.

    Construction validates the catalog invariants, so an instance that exists
    is always safe to compose. Accessors are pure and return the same tuples
    on every call.
    """

    title: str
    output: Path
    header: HeaderContent
    hero: HeroContent
    sections: tuple[PageSection, ...]
    features: tuple[FeatureCard, ...]
    snippets: tuple[CodeSnippet, ...]
    steps: tuple[ImplementationStep, ...]
    architecture: ArchitectureAsset
    footer: FooterContent

    def __post_init__(self) -> None:
        """Fail fast when any catalog invariant is violated."""
        for card in self.features:
            if not card.title.strip() or not card.description.strip():
                msg = f"Feature card {card.title!r} requires a title and description."
                raise CatalogConfigError(msg)
        for snippet in self.snippets:
            if not snippet.body.strip():
                msg = f"Code snippet '{snippet.key}' has an empty body."
                raise CatalogConfigError(msg)
        keys = [snippet.key for snippet in self.snippets]
        if len(set(keys)) != len(keys):
            msg = "Code snippet keys must be unique."
            raise CatalogConfigError(msg)
        for step in self.steps:
            if not step.heading.strip():
                msg = "Implementation steps require a heading."
                raise CatalogConfigError(msg)
        kinds = tuple(section.kind.value for section in self.sections)
        if kinds != SECTION_ORDER:
            expected = ", ".join(SECTION_ORDER)
            msg = f"Page sections must appear exactly in the order: {expected}."
            raise CatalogConfigError(msg)
        if self.section(SectionKind.DOCUMENTATION).anchor != DOCUMENTATION_ANCHOR:
            msg = f"The documentation section anchor must be '{DOCUMENTATION_ANCHOR}'."
            raise CatalogConfigError(msg)
        if not self.architecture.source_uri.strip():
            msg = "Architecture asset requires a 'source_uri'."
            raise CatalogConfigError(msg)

    def list_features(self) -> tuple[FeatureCard, ...]:
        """Return the feature cards in presentation order."""
        return self.features

    def list_snippets(self) -> tuple[CodeSnippet, ...]:
        """Return the code snippets in presentation order."""
        return self.snippets

    def list_steps(self) -> tuple[ImplementationStep, ...]:
        """Return the implementation steps in chronological order."""
        return self.steps

    def get_architecture_asset(self) -> ArchitectureAsset:
        """Return the architecture diagram reference."""
        return self.architecture

    def section(self, kind: SectionKind) -> PageSection:
        """Return the section metadata for ``kind``."""
        for entry in self.sections:
            if entry.kind is kind:
                return entry
        msg = f"No section of kind '{kind}' is configured."
        raise KeyError(msg)

    def glyph_names(self) -> list[str]:
        """Return every glyph name the catalog references, in document order."""
        names = [self.header.brand_glyph]
        names.extend(link.glyph_name for link in self.header.links if link.glyph_name)
        names.extend(card.glyph_name for card in self.features)
        names.append(self.footer.brand_glyph)
        names.extend(link.glyph_name for link in self.footer.links if link.glyph_name)
        return names


__all__ = [
    "ArchitectureAsset",
    "CatalogConfigError",
    "CodeSnippet",
    "ContentCatalog",
    "FeatureCard",
    "FooterContent",
    "HeaderContent",
    "HeroContent",
    "ImplementationStep",
    "NavLink",
    "PageSection",
    "SectionKind",
]
