"""Load and validate the site tree configuration YAML.

This subpackage parses the project's ``sitetree.yaml`` file, applies defaults
for omitted keys, resolves the content root and output paths, and produces
strongly typed dataclasses (:class:`SiteTreeConfig`, :class:`LabelTable`,
etc.) that the scanner and the landing page builder consume. The primary
entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from docs_sitetree.config import load_site_config
>>> config = load_site_config(Path("config/sitetree.yaml"))  # doctest: +SKIP
>>> config.labels.label_for("JavaScript")  # doctest: +SKIP
'📜'
"""

from .loader import build_site_config, load_site_config
from .models import (
    LabelTable,
    LandingPageConfig,
    NavLinkConfig,
    SiteConfigError,
    SiteTreeConfig,
)

__all__ = [
    "LabelTable",
    "LandingPageConfig",
    "NavLinkConfig",
    "SiteConfigError",
    "SiteTreeConfig",
    "build_site_config",
    "load_site_config",
]
