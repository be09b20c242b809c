"""Build the MicroDeploy deployment-automation documentation page.

This package exposes the CLI entry points used by `uv run pages` to render the
static page from its content catalog.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from microdeploy_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
