"""Cyclopts CLI entrypoint for refreshing the site tree outside the build tool.

The ``sitetree`` console script defined here rewrites the landing page of
every content directory, derives the navigation bar and sidebars from the
content tree, and writes the resulting theme configuration JSON that the site
tool imports. Typical usage involves running ``sitetree generate`` locally or
in CI before building the site, and ``sitetree nav`` to inspect the derived
navigation.

Examples
--------
Refresh landing pages and write the theme configuration:

>>> from docs_sitetree.cli import main
>>> main()  # doctest: +SKIP

Print the navigation derived from a custom content root:

>>> from docs_sitetree.cli import app
>>> app(["nav", "--content-root", "docs/mds", "--base", "/mds"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from .config import SiteTreeConfig, build_site_config, load_site_config
from .config.helpers import _normalize_base
from .hooks import SiteTreeHooks, write_theme_config
from .landing_pages import IndexSynthesizer
from .scanner import TreeScanner

DEFAULT_CONFIG = Path("config/sitetree.yaml")
DEFAULT_OUTPUT = Path("docs/.vitepress/sitetree.json")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(name="sitetree", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to the site tree config", env_var="INPUT_CONFIG"),
]
ContentRootOption = typ.Annotated[
    Path | None,
    Parameter(help="Override the content root", env_var="INPUT_CONTENT_ROOT"),
]
BaseOption = typ.Annotated[
    str | None,
    Parameter(help="Override the URL base of the content root", env_var="INPUT_BASE"),
]
LogLevelOption = typ.Annotated[
    str, Parameter(help="Logging level", env_var="INPUT_LOG_LEVEL")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def _resolve_config(
    config: Path | None, content_root: Path | None, base: str | None
) -> SiteTreeConfig:
    """Load the configured site tree and apply command-line overrides.

    Without ``--config`` the default ``config/sitetree.yaml`` is used when it
    exists; otherwise the built-in defaults apply.
    """
    if config is not None:
        site_config = load_site_config(config)
    elif DEFAULT_CONFIG.exists():
        site_config = load_site_config(DEFAULT_CONFIG)
    else:
        site_config = build_site_config({})
    overrides: dict[str, typ.Any] = {}
    if content_root is not None:
        overrides["content_root"] = content_root
    if base is not None:
        overrides["base"] = _normalize_base(base)
    if overrides:
        site_config = dc.replace(site_config, **overrides)
    return site_config


@app.command(help="Rewrite landing pages and write the theme navigation JSON.")
def generate(
    *,
    config: ConfigOption = None,
    content_root: ContentRootOption = None,
    base: BaseOption = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Where to write the theme JSON", env_var="INPUT_OUTPUT"),
    ] = None,
    log_level: LogLevelOption = "INFO",
) -> None:
    """Refresh landing pages and persist the derived navigation.

    Parameters
    ----------
    config : Path or None, optional
        Path to the ``sitetree.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    content_root : Path or None, optional
        Override for the content root named in the configuration.
    base : str or None, optional
        Override for the URL base the content root is served under.
    output : Path or None, optional
        Destination for the theme JSON; falls back to the configured
        ``output`` and then to ``docs/.vitepress/sitetree.json``.
    log_level : str, optional
        Logging level name, ``INFO`` by default.

    Returns
    -------
    None
        Writes landing pages and the theme JSON, printing each written path.
    """
    _configure_logging(log_level)
    site_config = _resolve_config(config, content_root, base)
    target = output or site_config.output or DEFAULT_OUTPUT
    for path in IndexSynthesizer(site_config).run():
        print(f"wrote {_format_path(path)}")
    theme = TreeScanner(site_config).scan().to_dict()
    written = write_theme_config(theme, target)
    print(f"wrote {_format_path(written)}")


@app.command(help="Rewrite the landing page of every content directory.")
def indexes(
    *,
    config: ConfigOption = None,
    content_root: ContentRootOption = None,
    log_level: LogLevelOption = "INFO",
) -> None:
    """Rewrite landing pages only, printing each written path."""
    _configure_logging(log_level)
    site_config = _resolve_config(config, content_root, None)
    for path in IndexSynthesizer(site_config).run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the navigation and sidebars derived from the content tree.")
def nav(
    *,
    config: ConfigOption = None,
    content_root: ContentRootOption = None,
    base: BaseOption = None,
    refresh: typ.Annotated[
        bool, Parameter(help="Rewrite landing pages before scanning")
    ] = False,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Print the theme configuration JSON without writing it to disk."""
    _configure_logging(log_level)
    site_config = _resolve_config(config, content_root, base)
    if refresh:
        theme = SiteTreeHooks(site_config).on_config()
    else:
        theme = TreeScanner(site_config).scan().to_dict()
    payload = msgspec_json.format(msgspec_json.encode(theme), indent=2)
    print(payload.decode("utf-8"))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``sitetree`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
