"""Navigation and landing pages for a directory-driven documentation site.

This package derives the navigation bar and sidebars of the site from its
content directory tree and keeps a generated landing page in every
directory. The static-site tool reaches it through the build hooks; the
``sitetree`` console script runs the same steps by hand.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``IndexSynthesizer``: Rewrites every directory's landing page.
- ``TreeScanner``: Builds the ``{nav, sidebar}`` theme configuration.
- ``SiteTreeHooks``: Configuration-assembly and build-end hooks.

Examples
--------
>>> from docs_sitetree import main
>>> main()  # doctest: +SKIP
>>> from docs_sitetree import TreeScanner
>>> TreeScanner.__name__
'TreeScanner'
"""

from __future__ import annotations

from .cli import app, main
from .hooks import SiteTreeHooks
from .landing_pages import IndexSynthesizer
from .scanner import TreeScanner

__all__ = ["IndexSynthesizer", "SiteTreeHooks", "TreeScanner", "app", "main"]
