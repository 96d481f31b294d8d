"""Load site tree configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import CONTENT_SUFFIXES, DEFAULT_CONTENT_ROOT, INDEX_FILENAME
from .helpers import (
    _build_label_table,
    _build_landing_page_config,
    _build_nav_links,
    _normalize_base,
    _normalize_suffixes,
    _optional_str,
    _resolve_path,
    _validate_sort,
)
from .models import SiteConfigError, SiteTreeConfig


def load_site_config(path: Path) -> SiteTreeConfig:
    """Load the YAML configuration describing the content tree and labels.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/sitetree.yaml``). Relative ``content_root`` and ``output``
        values are resolved against the file's parent directory.

    Returns
    -------
    SiteTreeConfig
        Parsed configuration with defaults applied for omitted keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level structure is not a mapping or a value is invalid
        (unknown sort mode, empty suffix list, malformed default nav).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docs_sitetree.config import load_site_config
    >>> config = load_site_config(Path("config/sitetree.yaml"))  # doctest: +SKIP
    >>> config.index_filename  # doctest: +SKIP
    'index.md'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    return build_site_config(raw, relative_to=path.parent)


def build_site_config(
    raw: typ.Mapping[str, typ.Any], *, relative_to: Path | None = None
) -> SiteTreeConfig:
    """Build a SiteTreeConfig from an already parsed mapping."""
    anchor = relative_to or Path.cwd()
    content_root = _resolve_path(
        raw.get("content_root") or DEFAULT_CONTENT_ROOT, anchor
    )
    output_raw = _optional_str(raw.get("output"))
    output = _resolve_path(output_raw, anchor) if output_raw else None

    index_filename = _optional_str(raw.get("index_filename")) or INDEX_FILENAME
    if "/" in index_filename:
        msg = f"'index_filename' must be a bare file name, got '{index_filename}'."
        raise SiteConfigError(msg)

    collapsed = raw.get("collapsed", True)
    if not isinstance(collapsed, bool):
        msg = "'collapsed' must be true or false."
        raise SiteConfigError(msg)

    return SiteTreeConfig(
        content_root=content_root,
        base=_normalize_base(raw.get("base")),
        index_filename=index_filename,
        content_suffixes=_normalize_suffixes(
            raw.get("content_suffixes"), CONTENT_SUFFIXES
        ),
        sort=_validate_sort(raw.get("sort")),
        collapsed=collapsed,
        output=output,
        default_nav=_build_nav_links(raw.get("default_nav")),
        labels=_build_label_table(raw.get("labels")),
        landing_page=_build_landing_page_config(raw.get("landing_page")),
    )


__all__ = ["build_site_config", "load_site_config"]
