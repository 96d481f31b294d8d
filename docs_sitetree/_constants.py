"""Common literal values used across docs_sitetree.

These constants keep the landing-page filename, recognised content suffixes,
and default paths centralized so the scanner, the landing page builder, and
tests can import the same values without drifting.

Examples
--------
>>> from docs_sitetree import _constants
>>> _constants.INDEX_FILENAME
'index.md'
>>> ".md" in _constants.CONTENT_SUFFIXES
True
"""

INDEX_FILENAME = "index.md"
CONTENT_SUFFIXES = (".md", ".markdown")
DEFAULT_CONTENT_ROOT = "docs"
DEFAULT_BASE = "/"
SORT_MODES = ("name", "none")
