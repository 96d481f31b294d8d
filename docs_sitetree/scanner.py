"""Derive the navigation bar and sidebars from the content directory tree.

Every directory directly under the content root is a *category*. A category
without sub-directories becomes a plain navigation link to its landing page;
a category with sub-directories becomes a dropdown over them. Each category
also gets a sidebar covering its whole subtree, and each of its immediate
sub-directories gets its own sidebar so the renderer can pick whichever
prefix matches the current page.

Typical usage:

>>> from pathlib import Path
>>> from docs_sitetree.config import SiteTreeConfig
>>> from docs_sitetree.scanner import TreeScanner
>>> config = SiteTreeConfig(content_root=Path("docs"))  # doctest: +SKIP
>>> navigation = TreeScanner(config).scan()  # doctest: +SKIP
>>> sorted(navigation.sidebar)  # doctest: +SKIP
['/JavaScript/', '/JavaScript/ES6/']

Scanning is read-only and recomputed from disk on every call. Listing
failures are logged: a failing root yields the fallback navigation and an
empty sidebar, a failing subtree is left out.
"""

from __future__ import annotations

import logging
import typing as typ

from .fs import ContentNode, FilesystemAccessError, list_directory
from .models import (
    NavDropdown,
    NavEntry,
    NavLink,
    SidebarGroup,
    SidebarItem,
    SidebarLink,
    SidebarSection,
    ThemeNavigation,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteTreeConfig

logger = logging.getLogger(__name__)


def join_url(base: str, *segments: str, trailing_slash: bool = True) -> str:
    """Join URL path ``segments`` under ``base``.

    >>> join_url("/", "A", "B")
    '/A/B/'
    >>> join_url("/mds", "A", "c", trailing_slash=False)
    '/mds/A/c'
    """
    parts = [segment.strip("/") for segment in segments if segment.strip("/")]
    url = base.rstrip("/") + "/" + "/".join(parts)
    if trailing_slash and not url.endswith("/"):
        url += "/"
    return url


class TreeScanner:
    """Build :class:`ThemeNavigation` from a content root."""

    def __init__(self, config: SiteTreeConfig) -> None:
        self.config = config

    def scan(self) -> ThemeNavigation:
        """Scan the content root and return its navigation and sidebars.

        Returns
        -------
        ThemeNavigation
            One nav entry per category plus sidebar sections keyed by URL
            path. When the content root is missing or unreadable the fallback
            navigation is returned with an empty sidebar mapping.
        """
        root = self.config.content_root
        if not root.is_dir():
            logger.info("Content root %s does not exist; using default nav", root)
            return self._fallback()
        try:
            categories = list_directory(root, self.config).subdirectories
        except FilesystemAccessError as exc:
            logger.warning("Failed to scan content root %s: %s", exc.path, exc.reason)
            return self._fallback()

        navigation = ThemeNavigation()
        for category in categories:
            try:
                listing = list_directory(category.path, self.config)
            except FilesystemAccessError as exc:
                logger.warning("Skipping category %s: %s", exc.path, exc.reason)
                continue
            navigation.nav.append(self._nav_entry(category, listing.subdirectories))

            category_url = join_url(self.config.base, category.name)
            navigation.sidebar[category_url] = [
                SidebarSection(
                    label=category.name,
                    items=self.scan_directory(category.path, category_url),
                )
            ]
            for subdirectory in listing.subdirectories:
                self._register_subsection(navigation, category, subdirectory)
        return navigation

    def scan_directory(self, directory: Path, url: str) -> list[SidebarItem]:
        """Return sidebar items for ``directory`` served under ``url``.

        Sub-directories come first: a sub-directory with items becomes a
        nested group, one with only a landing page becomes a link, and one
        with neither is dropped. Articles follow as leaves linking to their
        extension-less names.
        """
        try:
            listing = list_directory(directory, self.config)
        except FilesystemAccessError as exc:
            logger.warning("Skipping unreadable directory %s: %s", exc.path, exc.reason)
            return []

        items: list[SidebarItem] = []
        for subdirectory in listing.subdirectories:
            sub_url = join_url(url, subdirectory.name)
            children = self.scan_directory(subdirectory.path, sub_url)
            if children:
                items.append(
                    SidebarGroup(
                        label=subdirectory.name,
                        collapsed=self.config.collapsed,
                        items=children,
                    )
                )
            elif self._has_landing_page(subdirectory.path):
                items.append(SidebarLink(label=subdirectory.name, link=sub_url))
        for article in listing.content_files:
            items.append(
                SidebarLink(
                    label=article.stem,
                    link=join_url(url, article.stem, trailing_slash=False),
                )
            )
        return items

    def _register_subsection(
        self,
        navigation: ThemeNavigation,
        category: ContentNode,
        subdirectory: ContentNode,
    ) -> None:
        """Register a sidebar for one sub-directory of ``category`` if it has content."""
        url = join_url(self.config.base, category.name, subdirectory.name)
        items = self.scan_directory(subdirectory.path, url)
        if items or self._has_landing_page(subdirectory.path):
            navigation.sidebar[url] = [
                SidebarSection(label=subdirectory.name, items=items)
            ]

    def _nav_entry(
        self, category: ContentNode, subdirectories: list[ContentNode]
    ) -> NavEntry:
        if not subdirectories:
            return NavLink(
                label=category.name, link=join_url(self.config.base, category.name)
            )
        return NavDropdown(
            label=category.name,
            items=[
                NavLink(
                    label=sub.name,
                    link=join_url(self.config.base, category.name, sub.name),
                )
                for sub in subdirectories
            ],
        )

    def _has_landing_page(self, directory: Path) -> bool:
        return (directory / self.config.index_filename).is_file()

    def _fallback(self) -> ThemeNavigation:
        nav: list[NavEntry] = [
            NavLink(label=link.label, link=link.link)
            for link in self.config.fallback_nav()
        ]
        return ThemeNavigation(nav=nav, sidebar={})


def scan_content_tree(config: SiteTreeConfig) -> ThemeNavigation:
    """Scan ``config.content_root``; shorthand for ``TreeScanner(config).scan()``."""
    return TreeScanner(config).scan()


__all__ = ["TreeScanner", "join_url", "scan_content_tree"]
