"""Utilities for rendering inline markdown and syntax-highlighted snippets."""

from __future__ import annotations

import re
from html import escape

from markdown import Markdown, markdown
from markdown.extensions import Extension
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
SINGLE_PARAGRAPH = re.compile(r"^<p>(.*)</p>$", re.DOTALL)


class EscapeRawHtml(Extension):
    """Treat raw HTML in catalog text as literal characters."""

    def extendMarkdown(self, md: Markdown) -> None:  # noqa: N802 - Markdown API
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")


class HtmlContentRenderer:
    """Render catalog text and code snippets with consistent styling."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer with the Pygments style used for snippets.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def inline(self, text: str) -> str:
        """Render a short markdown fragment without a wrapping paragraph.

        Raw HTML tags are escaped rather than passed through, so only markdown
        syntax (code spans, emphasis, links) produces markup.
        """
        normalized = (text or "").strip()
        if not normalized:
            return ""
        html = markdown(
            normalized, extensions=[EscapeRawHtml()], output_format="html"
        )
        match = SINGLE_PARAGRAPH.match(html)
        return match.group(1) if match else html

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into highlighted HTML with a language tag.

        Parameters
        ----------
        code : str
            Snippet to highlight. Leading and trailing newlines are kept so
            the highlighted text matches the source exactly.
        language : str, optional
            Pygments lexer name; defaults to ``"text"`` when not provided or
            when the lexer lookup fails.

        Returns
        -------
        str
            HTML containing the highlighted block with ``data-language``
            metadata applied.
        """
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang, stripnl=False, ensurenl=False)
        except ClassNotFound:
            lexer = get_lexer_by_name("text", stripnl=False, ensurenl=False)
        html = highlight(code, lexer, self._formatter)
        return self._attach_language_attribute(html, lang)

    @staticmethod
    def _attach_language_attribute(html: str, language: str) -> str:
        """Add a single language attribute to an already highlighted block."""
        safe_lang = escape(language or "text", quote=True)

        def _repl(match: re.Match[str]) -> str:
            return f'<div class="codehilite" data-language="{safe_lang}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, 1)


__all__ = ["HtmlContentRenderer"]
