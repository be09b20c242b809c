"""MicroDeploy page rendering pipeline.

This module turns a :class:`~microdeploy_pages.catalog.ContentCatalog` into the
static ``public/index.html`` artefact. It composes the catalog into a
:class:`~microdeploy_pages.composer.PageStructure`, hands that structure to the
``page.jinja`` template, and writes the result to disk. The main entry point is
``PageBuilder``.

Typical usage mirrors the build pipeline:

>>> from microdeploy_pages.catalog import default_catalog
>>> builder = PageBuilder(default_catalog())
>>> output_path = builder.run()  # doctest: +SKIP
>>> print(output_path)  # doctest: +SKIP
public/index.html

The builder expects templates to reside under ``microdeploy_pages/templates``
unless a custom directory is provided. It relies on Jinja2 with autoescape
enabled and produces UTF-8 encoded files.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from .composer import PageComposer
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from .catalog import ContentCatalog
    from .composer import PageStructure


class PageBuilder:
    """Render the MicroDeploy page from the content catalog."""

    def __init__(
        self,
        catalog: ContentCatalog,
        *,
        composer: PageComposer | None = None,
        renderer: HtmlContentRenderer | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        catalog : ContentCatalog
            Validated catalog providing every piece of page content.
        composer : PageComposer, optional
            Composer carrying the glyph and asset resolvers. Defaults to a
            composer over the built-in glyph set.
        renderer : HtmlContentRenderer, optional
            Markdown and snippet renderer exposed to templates as filters.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``microdeploy_pages/templates``.

        Notes
        -----
        Instantiating the builder configures a Jinja2 ``Environment``
        (autoescape, trimmed blocks), registers the ``inline_md`` and
        ``highlight`` filters and eagerly loads ``page.jinja`` so later
        ``run`` calls only handle composition, rendering and writes.
        """
        self.catalog = catalog
        self.composer = composer or PageComposer()
        self.renderer = renderer or HtmlContentRenderer()
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["inline_md"] = lambda text: Markup(self.renderer.inline(text))
        self.env.filters["highlight"] = lambda code, language=None: Markup(
            self.renderer.code_block(code, language)
        )
        self.template = self.env.get_template("page.jinja")
        self.structure: PageStructure | None = None

    def render(self) -> str:
        """Compose the catalog and return the rendered HTML document."""
        self.structure = self.composer.compose(self.catalog)
        context = {
            "page": self.structure,
            "stylesheet": Markup(self.renderer.stylesheet),
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output: Path | None = None) -> Path:
        """Render and write the page HTML, returning the output path.

        Notes
        -----
        Parent directories are created as needed; filesystem errors while
        writing propagate to the caller. Resolution misses recorded during
        composition are available on :attr:`structure` afterwards.
        """
        output_path = output or self.catalog.output
        html = self.render()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        return output_path


__all__ = ["PageBuilder"]
