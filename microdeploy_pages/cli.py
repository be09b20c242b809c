"""Cyclopts CLI entrypoint for building the MicroDeploy documentation page.

The ``pages`` console script defined here renders the static HTML page from
the content catalog, prints a textual outline of the composed page, and audits
the externally hosted architecture diagram. Typical usage involves running
``pages generate`` locally or in CI.

Examples
--------
Generate the page from the bundled catalog:

>>> from microdeploy_pages.cli import main
>>> main()  # doctest: +SKIP

Render a custom catalog into a different location:

>>> from microdeploy_pages.cli import app
>>> app(
...     ["generate", "--catalog", "catalog.yaml", "--output", "dist/index.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .assets import AssetProbe
from .catalog import default_catalog, load_catalog
from .composer import ComposedCard, ComposedSnippet, ComposedStep, PageComposer
from .glyphs import DEFAULT_GLYPHS
from .page import PageBuilder

if typ.TYPE_CHECKING:
    from .catalog import ContentCatalog

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load(catalog: Path | None) -> ContentCatalog:
    """Return the requested catalog, validated against the built-in glyphs."""
    if catalog is None:
        return default_catalog()
    return load_catalog(catalog, glyphs=DEFAULT_GLYPHS)


@app.command(help="Render the documentation page from the content catalog.")
def generate(
    *,
    catalog: typ.Annotated[
        Path | None,
        Parameter(help="Path to a catalog YAML file", env_var="INPUT_CATALOG"),
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output HTML path", env_var="INPUT_OUTPUT"),
    ] = None,
) -> None:
    """Render the page and report any placeholder substitutions.

    Parameters
    ----------
    catalog : Path or None, optional
        Catalog file to render; the bundled catalog is used when ``None``.
    output : Path or None, optional
        Destination HTML file; defaults to the catalog's ``site.output``.

    Raises
    ------
    CatalogConfigError
        If the catalog violates any content invariant. Nothing is written.
    """
    builder = PageBuilder(_load(catalog))
    path = builder.run(output)
    print(f"wrote {_format_path(path)}")
    if builder.structure is not None:
        for miss in builder.structure.misses:
            print(f"warning: {miss.kind} '{miss.reference}' used a placeholder")


@app.command(help="Print the composed section order and entries.")
def outline(
    *,
    catalog: typ.Annotated[
        Path | None,
        Parameter(help="Path to a catalog YAML file", env_var="INPUT_CATALOG"),
    ] = None,
) -> None:
    """Print each composed section followed by its entries."""
    structure = PageComposer().compose(_load(catalog))
    for section in structure.sections:
        label = section.heading or section.kind.value.title()
        print(f"[{section.kind.value}] {label}")
        for item in section.items:
            match item:
                case ComposedCard(title=title, placeholder=True):
                    print(f"  - {title} (no glyph)")
                case ComposedCard(title=title):
                    print(f"  - {title}")
                case ComposedSnippet(key=key, heading=heading):
                    print(f"  - {heading} [{key}]")
                case ComposedStep(number=number, heading=heading, sub_steps=subs):
                    print(f"  {number}. {heading} ({len(subs)} sub-steps)")
                case _:
                    continue


@app.command(name="check-asset", help="Probe the architecture diagram host.")
def check_asset(
    *,
    catalog: typ.Annotated[
        Path | None,
        Parameter(help="Path to a catalog YAML file", env_var="INPUT_CATALOG"),
    ] = None,
    timeout: typ.Annotated[
        float, Parameter(help="Request timeout in seconds", env_var="INPUT_TIMEOUT")
    ] = 10.0,
) -> None:
    """Report whether the architecture diagram URI is reachable.

    Exits with status 1 when the host does not answer with a success or
    redirect status.
    """
    asset = _load(catalog).get_architecture_asset()
    probe = AssetProbe(timeout=timeout)
    try:
        result = probe.check(asset.source_uri)
    finally:
        probe.close()
    if result.reachable:
        print(f"ok {result.status} {asset.source_uri}")
        return
    reason = result.error or f"status {result.status}"
    print(f"unreachable ({reason}) {asset.source_uri}")
    sys.exit(1)


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
