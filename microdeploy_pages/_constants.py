"""Common literal values used across microdeploy_pages.

These constants keep the page layout order and anchors centralized so the
catalog loader, composer, templates and tests agree without drifting.

Examples
--------
>>> from microdeploy_pages import _constants
>>> _constants.SECTION_ORDER[0]
'hero'
>>> _constants.DOCUMENTATION_ANCHOR
'documentation'
"""

SECTION_ORDER = (
    "hero",
    "features",
    "architecture",
    "documentation",
    "steps",
    "footer",
)
DOCUMENTATION_ANCHOR = "documentation"
