"""Build hooks called by the static-site tool.

The site tool calls one hook while assembling its configuration and another
once the build has finished. Both rewrite the landing pages first, so every
directory has one, and then scan the tree for the navigation bar and
sidebars. Nothing is cached between calls.

Examples
--------
>>> from pathlib import Path
>>> from docs_sitetree.config import SiteTreeConfig
>>> from docs_sitetree.hooks import SiteTreeHooks
>>> hooks = SiteTreeHooks(SiteTreeConfig(content_root=Path("docs")))  # doctest: +SKIP
>>> theme = hooks.on_config()  # doctest: +SKIP
>>> sorted(theme)  # doctest: +SKIP
['nav', 'sidebar']
"""

from __future__ import annotations

import logging
import typing as typ

import msgspec.json as msgspec_json

from .fs import FilesystemAccessError
from .landing_pages import IndexSynthesizer
from .scanner import TreeScanner

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteTreeConfig
    from .models import ThemeNavigation

logger = logging.getLogger(__name__)


class SiteTreeHooks:
    """Configuration-assembly and build-end hooks for one content tree."""

    def __init__(self, config: SiteTreeConfig) -> None:
        self.config = config

    def refresh(self) -> ThemeNavigation:
        """Rewrite landing pages, then scan the tree for navigation."""
        written = IndexSynthesizer(self.config).run()
        logger.info(
            "Refreshed %d landing pages under %s",
            len(written),
            self.config.content_root,
        )
        return TreeScanner(self.config).scan()

    def on_config(self) -> dict[str, typ.Any]:
        """Return the ``{nav, sidebar}`` theme configuration for the build."""
        return self.refresh().to_dict()

    def on_build_end(self) -> dict[str, typ.Any]:
        """Refresh after the build and persist the theme configuration if configured."""
        theme = self.refresh().to_dict()
        if self.config.output is not None:
            try:
                write_theme_config(theme, self.config.output)
            except FilesystemAccessError as exc:
                logger.warning(
                    "Failed to write theme configuration %s: %s", exc.path, exc.reason
                )
        return theme


def write_theme_config(theme: typ.Mapping[str, typ.Any], output: Path) -> Path:
    """Write ``theme`` as formatted UTF-8 JSON to ``output``.

    Raises
    ------
    FilesystemAccessError
        If the parent directory cannot be created or the file written.
    """
    payload = msgspec_json.format(msgspec_json.encode(theme), indent=2)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(payload + b"\n")
    except OSError as exc:
        raise FilesystemAccessError(output, exc.strerror or str(exc)) from exc
    logger.debug("Wrote theme configuration %s", output)
    return output


def on_config(config: SiteTreeConfig) -> dict[str, typ.Any]:
    """Configuration-assembly hook for hosts that expect a plain callable."""
    return SiteTreeHooks(config).on_config()


def on_build_end(config: SiteTreeConfig) -> dict[str, typ.Any]:
    """Build-end hook for hosts that expect a plain callable."""
    return SiteTreeHooks(config).on_build_end()


__all__ = ["SiteTreeHooks", "on_build_end", "on_config", "write_theme_config"]
