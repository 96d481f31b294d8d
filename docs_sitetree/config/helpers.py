"""Utility helpers shared by the docs_sitetree configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .._constants import SORT_MODES
from .models import (
    LabelTable,
    LandingPageConfig,
    NavLinkConfig,
    SiteConfigError,
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(value: object, relative_to: Path) -> Path:
    """Resolve ``value`` against ``relative_to`` unless it is already absolute."""
    path = Path(str(value)).expanduser()
    if path.is_absolute():
        return path
    return relative_to / path


def _normalize_base(value: object | None) -> str:
    """Return a URL base with a single leading slash and no trailing slash."""
    text = _optional_str(value) or "/"
    stripped = text.strip("/")
    return f"/{stripped}" if stripped else "/"


def _normalize_suffixes(value: object | None, fallback: tuple[str, ...]) -> tuple[str, ...]:
    """Normalize suffix definitions into lowercase dotted suffixes."""
    match value:
        case None:
            return fallback
        case str() as text:
            candidates: list[object] = text.split()
        case list() | tuple():
            candidates = list(value)
        case _:
            msg = "'content_suffixes' must be a string or a list of strings."
            raise SiteConfigError(msg)
    normalized: list[str] = []
    for candidate in candidates:
        text = str(candidate).strip().lower()
        if not text:
            continue
        if not text.startswith("."):
            text = f".{text}"
        if text not in normalized:
            normalized.append(text)
    if not normalized:
        msg = "'content_suffixes' must name at least one suffix."
        raise SiteConfigError(msg)
    return tuple(normalized)


def _validate_sort(value: object | None) -> str:
    """Return the sort mode, rejecting unknown values."""
    mode = (_optional_str(value) or "name").lower()
    if mode not in SORT_MODES:
        allowed = ", ".join(SORT_MODES)
        msg = f"Unknown sort mode '{mode}'. Expected one of: {allowed}"
        raise SiteConfigError(msg)
    return mode


def _build_nav_links(payload: object | None) -> list[NavLinkConfig]:
    """Build default navigation links from a list of ``{text, link}`` mappings."""
    if not payload:
        return []
    if not isinstance(payload, list):
        msg = "'default_nav' must be a list of {text, link} mappings."
        raise SiteConfigError(msg)
    links: list[NavLinkConfig] = []
    for entry in payload:
        if not isinstance(entry, dict):
            msg = f"Each 'default_nav' entry must be a mapping, got {entry!r}."
            raise SiteConfigError(msg)
        label = _optional_str(entry.get("text") or entry.get("label"))
        link = _optional_str(entry.get("link"))
        if not label or not link:
            msg = "Each 'default_nav' entry needs both 'text' and 'link'."
            raise SiteConfigError(msg)
        links.append(NavLinkConfig(label=label, link=link))
    return links


def _build_label_table(payload: typ.Mapping[str, typ.Any] | None) -> LabelTable:
    """Build a LabelTable, layering configured labels over the built-in table."""
    base = LabelTable()
    if not payload:
        return base
    directories = dict(base.directories)
    extra = payload.get("directories") or {}
    if not isinstance(extra, dict):
        msg = "'labels.directories' must be a mapping of name to label."
        raise SiteConfigError(msg)
    for name, label in extra.items():
        directories[str(name)] = str(label)

    markers = payload.get("article_markers")
    if markers is None:
        article_markers = base.article_markers
    elif not isinstance(markers, list | tuple):
        msg = "'labels.article_markers' must be a list of markers."
        raise SiteConfigError(msg)
    else:
        article_markers = tuple(str(marker) for marker in markers if str(marker))
        if not article_markers:
            msg = "'labels.article_markers' must contain at least one marker."
            raise SiteConfigError(msg)

    return LabelTable(
        default=_optional_str(payload.get("default")) or base.default,
        subsection_default=(
            _optional_str(payload.get("subsection_default")) or base.subsection_default
        ),
        directories=directories,
        article_markers=article_markers,
    )


def _build_landing_page_config(
    payload: typ.Mapping[str, typ.Any] | None,
) -> LandingPageConfig:
    """Build the landing page copy, keeping defaults for omitted or blank keys."""
    base = LandingPageConfig()
    if not payload:
        return base
    if not isinstance(payload, dict):
        msg = "'landing_page' must be a mapping."
        raise SiteConfigError(msg)
    return LandingPageConfig(
        welcome=_optional_str(payload.get("welcome")) or base.welcome,
        coming_soon_text=(
            _optional_str(payload.get("coming_soon_text")) or base.coming_soon_text
        ),
        coming_soon_image=(
            _optional_str(payload.get("coming_soon_image")) or base.coming_soon_image
        ),
        help_label=_optional_str(payload.get("help_label")) or base.help_label,
        help_url=_optional_str(payload.get("help_url")) or base.help_url,
    )


__all__ = [
    "_build_label_table",
    "_build_landing_page_config",
    "_build_nav_links",
    "_normalize_base",
    "_normalize_suffixes",
    "_optional_str",
    "_resolve_path",
    "_validate_sort",
]
