"""Load and validate the MicroDeploy content catalog.

This subpackage parses the catalog YAML file, checks every invariant once at
load time, and produces immutable dataclasses (:class:`ContentCatalog`,
:class:`FeatureCard`, :class:`CodeSnippet`, etc.) that the page composer
consumes. :func:`default_catalog` returns the bundled catalog, loaded once per
process; :func:`load_catalog` loads any other catalog file.

Examples
--------
>>> from microdeploy_pages.catalog import default_catalog
>>> catalog = default_catalog()
>>> [snippet.key for snippet in catalog.list_snippets()][0]
'pipeline-config'
"""

from .loader import DEFAULT_CATALOG_PATH, default_catalog, load_catalog
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
    NavLink,
    PageSection,
    SectionKind,
)

__all__ = [
    "DEFAULT_CATALOG_PATH",
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
    "default_catalog",
    "load_catalog",
]
