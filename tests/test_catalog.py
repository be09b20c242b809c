"""Unit tests for the content catalog loader and models.

These tests cover the bundled catalog (stable order, verbatim snippet bodies)
and the fail-fast validation performed when a catalog file is loaded.

Usage
-----
Run ``pytest tests/test_catalog.py -v``. Only pytest's built-in ``tmp_path``
fixture is required.
"""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

import pytest

from microdeploy_pages.catalog import (
    DEFAULT_CATALOG_PATH,
    CatalogConfigError,
    CodeSnippet,
    FeatureCard,
    PageSection,
    SectionKind,
    default_catalog,
    load_catalog,
)
from microdeploy_pages.glyphs import DEFAULT_GLYPHS

MINIMAL_CATALOG = """
site:
  title: Sample
  output: {output}
header:
  brand_text: Sample
  brand_glyph: workflow
  links:
    - label: Docs
      href: "#documentation"
hero:
  title: Hero title
  description: Hero description
sections:
  - kind: hero
  - kind: features
  - kind: architecture
    heading: Architecture
  - kind: documentation
    heading: Docs
    anchor: documentation
  - kind: steps
    heading: Steps
  - kind: footer
features:
  - title: Only card
    description: {description}
    glyph: {glyph}
architecture:
  source_uri: https://example.invalid/diagram.png
  alt_text: Diagram
snippets:
  - key: sample
    heading: Sample snippet
    language: yaml
    body: |
      key:
        nested: value
steps:
  - heading: First
    summary: Do the first thing.
    sub_steps:
      - one
      - two
footer:
  brand_text: Sample
  brand_glyph: workflow
  copyright_year: 2025
  rights_notice: All rights reserved.
  links:
    - label: Contact
      href: "#"
"""


def _write_catalog(
    tmp_path: Path, *, description: str = "Card text", glyph: str = "server"
) -> Path:
    path = tmp_path / "catalog.yaml"
    path.write_text(
        MINIMAL_CATALOG.format(
            output=tmp_path / "index.html", description=description, glyph=glyph
        ).lstrip(),
        encoding="utf-8",
    )
    return path


def test_default_feature_titles_in_order() -> None:
    """The bundled catalog lists the four capabilities in presentation order."""
    titles = [card.title for card in default_catalog().list_features()]
    assert titles == [
        "CI/CD Pipeline",
        "Containerization",
        "Kubernetes Orchestration",
        "Monitoring & Alerting",
    ]


def test_default_snippet_order() -> None:
    """Snippets follow pipeline, container, orchestration, metrics order."""
    keys = [snippet.key for snippet in default_catalog().list_snippets()]
    assert keys == [
        "pipeline-config",
        "container-build",
        "orchestration-manifest",
        "metrics-config",
    ]


def test_default_steps_have_ordered_sub_steps() -> None:
    """Each of the four steps carries its own ordered sub-step list."""
    steps = default_catalog().list_steps()
    assert len(steps) == 4
    assert steps[0].sub_steps[0] == "Create a `.gitlab-ci.yml` file in your repository root"
    assert steps[-1].sub_steps[-1] == (
        "Configure alerting rules and notification channels"
    )
    assert all(len(step.sub_steps) == 5 for step in steps)


def test_accessors_are_stable_across_calls() -> None:
    """Repeated accessor calls return equal sequences."""
    catalog = default_catalog()
    assert catalog.list_features() == catalog.list_features()
    assert catalog.list_snippets() == catalog.list_snippets()
    assert catalog.list_steps() == catalog.list_steps()
    assert catalog.get_architecture_asset() == catalog.get_architecture_asset()
    assert default_catalog() is catalog, "default catalog should load once"


def test_snippet_bodies_keep_indentation() -> None:
    """YAML literal blocks preserve nested indentation in snippet bodies."""
    manifest = default_catalog().list_snippets()[2]
    assert manifest.body.startswith("# kubernetes/deployment.yaml\napiVersion: apps/v1\n")
    assert "\n      containers:\n      - name: microservice\n" in manifest.body
    metrics = default_catalog().list_snippets()[3]
    assert r"regex: ([^:]+)(?::\d+)?;(\d+)" in metrics.body


def test_architecture_asset_is_passed_through() -> None:
    """The diagram URI is kept exactly as authored."""
    asset = default_catalog().get_architecture_asset()
    assert asset.source_uri.startswith("https://images.unsplash.com/photo-1558494949")
    assert "&auto=format&fit=crop&w=1000&q=80" in asset.source_uri
    assert asset.alt_text == "Architecture Diagram"


def test_default_catalog_glyphs_resolve() -> None:
    """Every glyph the bundled catalog references is known."""
    assert all(name in DEFAULT_GLYPHS for name in default_catalog().glyph_names())


def test_load_minimal_catalog(tmp_path: Path) -> None:
    """A minimal catalog loads and keeps the snippet body verbatim."""
    catalog = load_catalog(_write_catalog(tmp_path), glyphs=DEFAULT_GLYPHS)
    assert catalog.output == tmp_path / "index.html"
    assert catalog.list_snippets()[0].body == "key:\n  nested: value\n"
    assert catalog.section(SectionKind.DOCUMENTATION).anchor == "documentation"


def test_missing_file_raises(tmp_path: Path) -> None:
    """Loading a catalog that does not exist raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_catalog(tmp_path / "missing.yaml")


def test_empty_feature_description_is_rejected(tmp_path: Path) -> None:
    """A blank feature description is a configuration fault."""
    path = _write_catalog(tmp_path, description='""')
    with pytest.raises(CatalogConfigError, match="description"):
        load_catalog(path)


def test_unknown_glyph_is_rejected(tmp_path: Path) -> None:
    """Dangling glyph references fail when a glyph set is supplied."""
    path = _write_catalog(tmp_path, glyph="rocket")
    with pytest.raises(CatalogConfigError, match="rocket"):
        load_catalog(path, glyphs=DEFAULT_GLYPHS)


def test_unknown_glyph_allowed_without_glyph_set(tmp_path: Path) -> None:
    """Without a glyph set the loader does not check glyph names."""
    catalog = load_catalog(_write_catalog(tmp_path, glyph="rocket"))
    assert catalog.list_features()[0].glyph_name == "rocket"


def test_empty_snippet_body_is_rejected() -> None:
    """Constructing a catalog with a blank snippet body fails fast."""
    catalog = default_catalog()
    blank = CodeSnippet(key="blank", heading="Blank", language="text", body="  \n")
    with pytest.raises(CatalogConfigError, match="empty body"):
        dc.replace(catalog, snippets=(*catalog.snippets, blank))


def test_blank_feature_title_is_rejected() -> None:
    """Direct construction enforces non-empty feature titles too."""
    catalog = default_catalog()
    card = FeatureCard(title=" ", description="text", glyph_name="box")
    with pytest.raises(CatalogConfigError, match="title"):
        dc.replace(catalog, features=(card,))


def test_section_order_mismatch_is_rejected() -> None:
    """Sections must follow the fixed top-to-bottom order."""
    catalog = default_catalog()
    swapped = list(catalog.sections)
    swapped[1], swapped[2] = swapped[2], swapped[1]
    with pytest.raises(CatalogConfigError, match="order"):
        dc.replace(catalog, sections=tuple(swapped))


def test_documentation_anchor_is_required() -> None:
    """The documentation section keeps its stable fragment identifier."""
    catalog = default_catalog()
    sections = tuple(
        PageSection(kind=section.kind, heading=section.heading, anchor="docs")
        if section.kind is SectionKind.DOCUMENTATION
        else section
        for section in catalog.sections
    )
    with pytest.raises(CatalogConfigError, match="anchor"):
        dc.replace(catalog, sections=sections)


def test_unknown_section_kind_is_rejected(tmp_path: Path) -> None:
    """Section kinds outside the known set are reported by name."""
    path = _write_catalog(tmp_path)
    path.write_text(
        path.read_text(encoding="utf-8").replace("- kind: steps", "- kind: faq"),
        encoding="utf-8",
    )
    with pytest.raises(CatalogConfigError, match="faq"):
        load_catalog(path)


def test_bundled_catalog_path_exists() -> None:
    """The bundled catalog ships inside the package."""
    assert DEFAULT_CATALOG_PATH.is_file()
    assert DEFAULT_CATALOG_PATH.parent.name == "content"


def _bundled_copy(tmp_path: Path, old: str, new: str) -> Path:
    path = tmp_path / "catalog.yaml"
    text = DEFAULT_CATALOG_PATH.read_text(encoding="utf-8")
    assert old in text
    path.write_text(text.replace(old, new, 1), encoding="utf-8")
    return path


def test_mapping_sub_step_is_rejected(tmp_path: Path) -> None:
    """An unquoted ``key: value`` sub-step parses as a mapping and fails."""
    path = _bundled_copy(
        tmp_path,
        "- Include health check endpoints",
        "- Include health checks: /health and /ready",
    )
    with pytest.raises(CatalogConfigError, match="sub-step 3 must be text, got dict"):
        load_catalog(path)


def test_quoted_colon_sub_step_is_text(tmp_path: Path) -> None:
    """Quoting the same entry keeps it as a single line of text."""
    path = _bundled_copy(
        tmp_path,
        "- Include health check endpoints",
        '- "Include health checks: /health and /ready"',
    )
    steps = load_catalog(path).list_steps()
    assert "Include health checks: /health and /ready" in steps[1].sub_steps


@pytest.mark.parametrize(
    ("old", "new", "field"),
    [
        ("alt_text: Architecture Diagram", "alt_text: [Architecture, Diagram]", "alt_text"),
        ("brand_text: MicroDeploy", "brand_text: 42", "brand_text"),
    ],
)
def test_non_text_required_field_is_rejected(
    tmp_path: Path, old: str, new: str, field: str
) -> None:
    """Lists and numbers are never coerced into display text."""
    path = _bundled_copy(tmp_path, old, new)
    with pytest.raises(CatalogConfigError, match=f"'{field}' must be text"):
        load_catalog(path)


def test_non_text_link_label_is_rejected(tmp_path: Path) -> None:
    """Navigation labels must be text as well."""
    path = _write_catalog(tmp_path)
    path.write_text(
        path.read_text(encoding="utf-8").replace("label: Contact", "label: {a: b}"),
        encoding="utf-8",
    )
    with pytest.raises(CatalogConfigError, match="Footer links"):
        load_catalog(path)


def test_metrics_push_line_shows_plain_quotes() -> None:
    """The pushgateway label set displays unescaped quotes."""
    (pipeline,) = [
        snippet
        for snippet in default_catalog().list_snippets()
        if snippet.key == "pipeline-config"
    ]
    assert (
        '"deployment_success{service="microservice",version="$CI_COMMIT_SHA"} 1"'
        in pipeline.body
    )
    assert '\\"' not in pipeline.body
