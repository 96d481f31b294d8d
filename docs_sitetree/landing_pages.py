"""Landing page generation for every directory of the content tree.

Each directory, the content root included, owns a reserved landing page
(``index.md`` by default) listing its sub-sections and articles. The
:class:`IndexSynthesizer` walks the tree and rewrites that page from the
``landing_page.md.jinja`` template on every run, so the output only depends
on the directory name, its children, and the configured labels. Running it
twice without touching the tree leaves every page byte-identical.

Typical usage mirrors the build hooks:

>>> from pathlib import Path
>>> from docs_sitetree.config import SiteTreeConfig
>>> from docs_sitetree.landing_pages import IndexSynthesizer
>>> config = SiteTreeConfig(content_root=Path("docs"))  # doctest: +SKIP
>>> written = IndexSynthesizer(config).run()  # doctest: +SKIP
>>> written[0].name  # doctest: +SKIP
'index.md'

Side effects are limited to reading directory listings and writing UTF-8
landing pages. A directory that cannot be listed or written is logged and
skipped; the walk continues with its siblings.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .fs import DirectoryListing, FilesystemAccessError, list_directory

if typ.TYPE_CHECKING:
    from .config import SiteTreeConfig

logger = logging.getLogger(__name__)


class IndexSynthesizer:
    """Rewrite the landing page of every directory under the content root."""

    def __init__(
        self, config: SiteTreeConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the synthesizer and its Jinja environment.

        Parameters
        ----------
        config : SiteTreeConfig
            Supplies the content root, landing page name, labels, and the
            fixed landing page copy.
        templates_dir : Path, optional
            Directory containing ``landing_page.md.jinja``. Defaults to
            ``docs_sitetree/templates``.
        """
        self.config = config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template("landing_page.md.jinja")

    def run(self) -> list[Path]:
        """Write landing pages for the whole tree and return the paths written."""
        root = self.config.content_root
        if not root.is_dir():
            logger.info("Content root %s does not exist; no landing pages written", root)
            return []
        written: list[Path] = []
        self._visit(root, written)
        return written

    def render(self, name: str, listing: DirectoryListing) -> str:
        """Return the landing page markdown for directory ``name``.

        Parameters
        ----------
        name : str
            Directory name used in the title and welcome sentence.
        listing : DirectoryListing
            The directory's immediate sub-directories and articles.

        Returns
        -------
        str
            Markdown text ending with a newline.
        """
        labels = self.config.labels
        page = self.config.landing_page
        subsections = [
            {"name": node.name, "label": labels.subsection_label_for(node.name)}
            for node in listing.subdirectories
        ]
        articles = [
            {"title": node.stem, "marker": labels.marker_for(position)}
            for position, node in enumerate(listing.content_files)
        ]
        text = self.template.render(
            name=name,
            title_label=labels.label_for(name),
            welcome=page.welcome.replace("{name}", name),
            subsections=subsections,
            articles=articles,
            page=page,
        )
        if not text.endswith("\n"):
            text += "\n"
        return text

    def _visit(self, directory: Path, written: list[Path]) -> None:
        try:
            listing = list_directory(directory, self.config)
        except FilesystemAccessError as exc:
            logger.warning("Skipping landing pages under %s: %s", exc.path, exc.reason)
            return

        try:
            written.append(self._write(directory, listing))
        except FilesystemAccessError as exc:
            logger.warning("Failed to write landing page %s: %s", exc.path, exc.reason)

        for subdirectory in listing.subdirectories:
            self._visit(subdirectory.path, written)

    def _write(self, directory: Path, listing: DirectoryListing) -> Path:
        """Render and write the landing page for ``directory``."""
        target = directory / self.config.index_filename
        text = self.render(directory.name, listing)
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise FilesystemAccessError(target, exc.strerror or str(exc)) from exc
        logger.debug("Wrote landing page %s", target)
        return target


def synthesize_index_pages(config: SiteTreeConfig) -> list[Path]:
    """Rewrite every landing page; shorthand for ``IndexSynthesizer(config).run()``."""
    return IndexSynthesizer(config).run()


__all__ = ["IndexSynthesizer", "synthesize_index_pages"]
