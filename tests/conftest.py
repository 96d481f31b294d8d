"""Shared fixtures for building throwaway content trees.

``write_tree`` materializes a nested mapping under a directory: mapping
values become sub-directories and string values become files with that
content. ``site_config`` returns a :class:`SiteTreeConfig` rooted at
``tmp_path / "docs"`` with the built-in defaults.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from docs_sitetree.config import SiteTreeConfig

TreeLayout = typ.Mapping[str, typ.Any]


def _write_tree(root: Path, layout: TreeLayout) -> Path:
    """Create directories and files described by ``layout`` under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        target = root / name
        if isinstance(value, str):
            target.write_text(value, encoding="utf-8")
        else:
            _write_tree(target, value)
    return root


@pytest.fixture
def write_tree() -> typ.Callable[[Path, TreeLayout], Path]:
    """Return the helper that materializes a nested layout on disk."""
    return _write_tree


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Return the (not yet created) content root used by ``site_config``."""
    return tmp_path / "docs"


@pytest.fixture
def site_config(content_root: Path) -> SiteTreeConfig:
    """Return a default configuration for the temporary content root."""
    return SiteTreeConfig(content_root=content_root)
