"""Typed dataclasses describing docs_sitetree configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import CONTENT_SUFFIXES, DEFAULT_BASE, INDEX_FILENAME

DEFAULT_DIRECTORY_LABELS: dict[str, str] = {
    "前端": "🎨",
    "后端": "⚙️",
    "JavaScript": "📜",
    "TypeScript": "🔷",
    "Vue": "💚",
    "React": "⚛️",
    "CSS": "🖌️",
    "HTML": "🧱",
    "Node": "🟩",
    "Python": "🐍",
    "Git": "🌿",
    "Linux": "🐧",
    "Docker": "🐳",
    "算法": "🧮",
    "工具": "🧰",
}
DEFAULT_ARTICLE_MARKERS = ("📝", "📄", "📘", "🔖")


class SiteConfigError(ValueError):
    """Raised when the site tree configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class LabelTable:
    """Decorative labels keyed by exact directory name.

    Directory titles and sub-section entries share ``directories`` but fall
    back to their own defaults, so an unknown name never renders without a
    label.
    """

    default: str = "📁"
    subsection_default: str = "📂"
    directories: dict[str, str] = dc.field(
        default_factory=lambda: dict(DEFAULT_DIRECTORY_LABELS)
    )
    article_markers: tuple[str, ...] = DEFAULT_ARTICLE_MARKERS

    def label_for(self, name: str) -> str:
        """Return the title label for the directory ``name``."""
        return self.directories.get(name) or self.default

    def subsection_label_for(self, name: str) -> str:
        """Return the label shown next to ``name`` in a sub-section list."""
        return self.directories.get(name) or self.subsection_default

    def marker_for(self, position: int) -> str:
        """Return the article marker for the zero-based ``position``."""
        return self.article_markers[position % len(self.article_markers)]


@dc.dataclass(slots=True)
class LandingPageConfig:
    """Fixed copy used by generated landing pages.

    ``welcome`` may contain a ``{name}`` placeholder for the directory name.
    Any other braces are copied through unchanged.
    """

    welcome: str = "Welcome to **{name}**! Pick a topic below to start reading."
    coming_soon_text: str = "Writing for this section is on its way. Check back soon!"
    coming_soon_image: str = "/images/coming-soon.svg"
    help_label: str = "Spotted a mistake or have a question? Get in touch"
    help_url: str = "/contact"


@dc.dataclass(slots=True)
class NavLinkConfig:
    """Static navigation link used when no content tree is available."""

    label: str
    link: str


@dc.dataclass(slots=True)
class SiteTreeConfig:
    """A fully resolved site tree configuration.

    Attributes
    ----------
    content_root : Path
        Directory scanned for categories and content files.
    base : str
        URL prefix the content root is served under (``"/"`` or ``"/mds"``).
    index_filename : str
        Reserved landing page file name present in every directory.
    content_suffixes : tuple[str, ...]
        File suffixes recognised as articles.
    sort : str
        ``"name"`` to order entries by name, ``"none"`` to keep the
        filesystem enumeration order.
    collapsed : bool
        Initial state of nested sidebar groups.
    output : Path or None
        Where the theme navigation JSON is written at build end.
    default_nav : list[NavLinkConfig]
        Navigation used when the content root is missing; empty means the
        built-in two-item fallback.
    labels : LabelTable
        Decorative labels for landing pages.
    landing_page : LandingPageConfig
        Fixed landing page copy.
    """

    content_root: Path
    base: str = DEFAULT_BASE
    index_filename: str = INDEX_FILENAME
    content_suffixes: tuple[str, ...] = CONTENT_SUFFIXES
    sort: str = "name"
    collapsed: bool = True
    output: Path | None = None
    default_nav: list[NavLinkConfig] = dc.field(default_factory=list)
    labels: LabelTable = dc.field(default_factory=LabelTable)
    landing_page: LandingPageConfig = dc.field(default_factory=LandingPageConfig)

    def fallback_nav(self) -> list[NavLinkConfig]:
        """Return the configured default nav or the built-in two-item nav.

        ``Notes`` points at the URL base the content is served under. When the
        content is served from the site root (``base == "/"``) that is the
        same page as ``Home``, and both links are kept so the bar keeps its
        shape; configure ``default_nav`` for distinct targets.
        """
        if self.default_nav:
            return list(self.default_nav)
        base = self.base.rstrip("/")
        return [
            NavLinkConfig(label="Home", link="/"),
            NavLinkConfig(label="Notes", link=f"{base}/"),
        ]


__all__ = [
    "DEFAULT_ARTICLE_MARKERS",
    "DEFAULT_DIRECTORY_LABELS",
    "LabelTable",
    "LandingPageConfig",
    "NavLinkConfig",
    "SiteConfigError",
    "SiteTreeConfig",
]
