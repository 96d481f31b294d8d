"""Navigation and sidebar dataclasses produced by the tree scanner.

Field names follow the package's vocabulary (``label``); ``to_dict`` emits the
key names the site theme expects (``text``, ``link``, ``items``,
``collapsed``).
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(slots=True)
class NavLink:
    """Top-level navigation entry that links straight to a page."""

    label: str
    link: str

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the theme representation of the link."""
        return {"text": self.label, "link": self.link}


@dc.dataclass(slots=True)
class NavDropdown:
    """Top-level navigation entry listing a category's sub-directories."""

    label: str
    items: list[NavLink] = dc.field(default_factory=list)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the theme representation of the dropdown."""
        return {"text": self.label, "items": [item.to_dict() for item in self.items]}


NavEntry = NavLink | NavDropdown


@dc.dataclass(slots=True)
class SidebarLink:
    """Sidebar leaf pointing at an article or a directory landing page."""

    label: str
    link: str

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the theme representation of the leaf."""
        return {"text": self.label, "link": self.link}


@dc.dataclass(slots=True)
class SidebarGroup:
    """Collapsible sidebar group for a sub-directory with content."""

    label: str
    collapsed: bool
    items: list[SidebarItem] = dc.field(default_factory=list)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the theme representation of the group."""
        return {
            "text": self.label,
            "collapsed": self.collapsed,
            "items": [item.to_dict() for item in self.items],
        }


SidebarItem = SidebarLink | SidebarGroup


@dc.dataclass(slots=True)
class SidebarSection:
    """Sidebar shown for every page under one URL path prefix."""

    label: str
    items: list[SidebarItem] = dc.field(default_factory=list)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the theme representation of the section."""
        return {"text": self.label, "items": [item.to_dict() for item in self.items]}


@dc.dataclass(slots=True)
class ThemeNavigation:
    """Navigation bar and sidebar mapping handed to the site renderer.

    Attributes
    ----------
    nav : list[NavEntry]
        One entry per category, in scan order.
    sidebar : dict[str, list[SidebarSection]]
        Sidebar sections keyed by URL path prefix (``/A/``, ``/A/B/``). Each
        value holds a single section so the mapping matches the theme's
        multi-sidebar shape.
    """

    nav: list[NavEntry] = dc.field(default_factory=list)
    sidebar: dict[str, list[SidebarSection]] = dc.field(default_factory=dict)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the ``{nav, sidebar}`` object consumed by the theme config."""
        return {
            "nav": [entry.to_dict() for entry in self.nav],
            "sidebar": {
                path: [section.to_dict() for section in sections]
                for path, sections in self.sidebar.items()
            },
        }


__all__ = [
    "NavDropdown",
    "NavEntry",
    "NavLink",
    "SidebarGroup",
    "SidebarItem",
    "SidebarLink",
    "SidebarSection",
    "ThemeNavigation",
]
