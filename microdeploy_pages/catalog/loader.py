"""Load the content catalog YAML into typed dataclasses."""

from __future__ import annotations

import functools
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_links,
    _optional_str,
    _require_list,
    _require_mapping,
    _required_str,
)
from .models import (
    ArchitectureAsset,
    CatalogConfigError,
    CodeSnippet,
    ContentCatalog,
    FeatureCard,
    FooterContent,
    HeaderContent,
    HeroContent,
    ImplementationStep,
    PageSection,
    SectionKind,
)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[1] / "content" / "catalog.yaml"


def load_catalog(
    path: Path, *, glyphs: typ.Container[str] | None = None
) -> ContentCatalog:
    """Load and validate a content catalog file.

    Parameters
    ----------
    path : Path
        Filesystem path to the catalog YAML file.
    glyphs : Container[str], optional
        Known glyph names. When supplied, every glyph the catalog references
        must be a member, otherwise loading fails.

    Returns
    -------
    ContentCatalog
        Immutable catalog ready for composition.

    Raises
    ------
    FileNotFoundError
        If the catalog file does not exist at ``path``.
    CatalogConfigError
        If any required section or field is missing, empty, or references an
        unknown glyph.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from microdeploy_pages.catalog import DEFAULT_CATALOG_PATH, load_catalog
    >>> catalog = load_catalog(DEFAULT_CATALOG_PATH)
    >>> catalog.list_features()[0].title
    'CI/CD Pipeline'
    """
    if not path.exists():
        msg = f"Catalog file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    raw = _require_mapping(loaded, context="Top-level catalog structure")

    catalog = _build_catalog(raw)
    if glyphs is not None:
        missing = [name for name in catalog.glyph_names() if name not in glyphs]
        if missing:
            msg = f"Catalog references unknown glyphs: {', '.join(missing)}."
            raise CatalogConfigError(msg)
    return catalog


@functools.cache
def default_catalog() -> ContentCatalog:
    """Return the bundled MicroDeploy catalog, loaded once per process."""
    from ..glyphs import DEFAULT_GLYPHS

    return load_catalog(DEFAULT_CATALOG_PATH, glyphs=DEFAULT_GLYPHS)


def _build_catalog(raw: typ.Mapping[str, typ.Any]) -> ContentCatalog:
    """Build the catalog from the top-level YAML mapping."""
    site = _require_mapping(raw.get("site"), context="Catalog 'site' block")
    return ContentCatalog(
        title=_required_str(site, "title", context="Catalog 'site' block"),
        output=Path(site.get("output", "public/index.html")),
        header=_build_header(raw.get("header")),
        hero=_build_hero(raw.get("hero")),
        sections=_build_sections(raw.get("sections")),
        features=_build_features(raw.get("features")),
        snippets=_build_snippets(raw.get("snippets")),
        steps=_build_steps(raw.get("steps")),
        architecture=_build_architecture(raw.get("architecture")),
        footer=_build_footer(raw.get("footer")),
    )


def _build_header(payload: object) -> HeaderContent:
    """Build the header brand and navigation links."""
    data = _require_mapping(payload, context="Catalog 'header' block")
    return HeaderContent(
        brand_text=_required_str(data, "brand_text", context="Header"),
        brand_glyph=_required_str(data, "brand_glyph", context="Header"),
        links=_build_links(
            data.get("links"), context="Header links", default_external=False
        ),
    )


def _build_hero(payload: object) -> HeroContent:
    """Build the hero headline block."""
    data = _require_mapping(payload, context="Catalog 'hero' block")
    return HeroContent(
        title=_required_str(data, "title", context="Hero"),
        description=_required_str(data, "description", context="Hero"),
    )


def _build_sections(payload: object) -> tuple[PageSection, ...]:
    """Build the ordered section layout."""
    sections: list[PageSection] = []
    for entry in _require_list(payload, context="Catalog 'sections' list"):
        match entry:
            case {"kind": kind, **rest}:
                pass
            case _:
                msg = "Section entries require a 'kind'."
                raise CatalogConfigError(msg)
        try:
            section_kind = SectionKind(str(kind))
        except ValueError as exc:
            msg = f"Unknown section kind '{kind}'."
            raise CatalogConfigError(msg) from exc
        sections.append(
            PageSection(
                kind=section_kind,
                heading=_optional_str(rest.get("heading")),
                anchor=_optional_str(rest.get("anchor")),
            )
        )
    return tuple(sections)


def _build_features(payload: object) -> tuple[FeatureCard, ...]:
    """Build the feature grid cards."""
    cards: list[FeatureCard] = []
    for entry in _require_list(payload, context="Catalog 'features' list"):
        data = _require_mapping(entry, context="Feature entry")
        cards.append(
            FeatureCard(
                title=_required_str(data, "title", context="Feature card"),
                description=_required_str(data, "description", context="Feature card"),
                glyph_name=_required_str(data, "glyph", context="Feature card"),
            )
        )
    return tuple(cards)


def _build_snippets(payload: object) -> tuple[CodeSnippet, ...]:
    """Build the documentation code snippets, keeping bodies verbatim."""
    snippets: list[CodeSnippet] = []
    for entry in _require_list(payload, context="Catalog 'snippets' list"):
        data = _require_mapping(entry, context="Snippet entry")
        key = _required_str(data, "key", context="Code snippet")
        body = data.get("body")
        if not isinstance(body, str) or not body.strip():
            msg = f"Code snippet '{key}' has an empty body."
            raise CatalogConfigError(msg)
        snippets.append(
            CodeSnippet(
                key=key,
                heading=_required_str(data, "heading", context=f"Snippet '{key}'"),
                language=_optional_str(data.get("language")) or "text",
                body=body,
            )
        )
    return tuple(snippets)


def _build_steps(payload: object) -> tuple[ImplementationStep, ...]:
    """Build the implementation guide steps."""
    steps: list[ImplementationStep] = []
    for entry in _require_list(payload, context="Catalog 'steps' list"):
        data = _require_mapping(entry, context="Step entry")
        heading = _required_str(data, "heading", context="Implementation step")
        sub_steps = _require_list(
            data.get("sub_steps"), context=f"Step '{heading}' sub-steps"
        )
        steps.append(
            ImplementationStep(
                heading=heading,
                summary=_required_str(data, "summary", context=f"Step '{heading}'"),
                sub_steps=_build_sub_steps(sub_steps, heading=heading),
            )
        )
    return tuple(steps)


def _build_sub_steps(items: list[object], *, heading: str) -> tuple[str, ...]:
    """Return sub-step lines, rejecting anything YAML parsed as non-text."""
    lines: list[str] = []
    for index, item in enumerate(items, start=1):
        match item:
            case str() as text if text.strip():
                lines.append(text)
            case _:
                msg = (
                    f"Step '{heading}' sub-step {index} must be text, "
                    f"got {type(item).__name__}. Quote entries containing ': '."
                )
                raise CatalogConfigError(msg)
    return tuple(lines)


def _build_architecture(payload: object) -> ArchitectureAsset:
    """Build the architecture diagram reference."""
    data = _require_mapping(payload, context="Catalog 'architecture' block")
    return ArchitectureAsset(
        source_uri=_required_str(data, "source_uri", context="Architecture asset"),
        alt_text=_required_str(data, "alt_text", context="Architecture asset"),
    )


def _build_footer(payload: object) -> FooterContent:
    """Build the footer identity block."""
    data = _require_mapping(payload, context="Catalog 'footer' block")
    try:
        copyright_year = int(data.get("copyright_year"))
    except (TypeError, ValueError) as exc:
        msg = "Footer 'copyright_year' must be numeric."
        raise CatalogConfigError(msg) from exc
    return FooterContent(
        brand_text=_required_str(data, "brand_text", context="Footer"),
        brand_glyph=_required_str(data, "brand_glyph", context="Footer"),
        links=_build_links(
            data.get("links"), context="Footer links", default_external=False
        ),
        copyright_year=copyright_year,
        rights_notice=_required_str(data, "rights_notice", context="Footer"),
    )


__all__ = ["DEFAULT_CATALOG_PATH", "default_catalog", "load_catalog"]
