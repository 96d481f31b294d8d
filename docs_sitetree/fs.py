"""Classify the entries of a content directory.

Both the navigation scanner and the landing page builder see the content tree
through :func:`list_directory`, so the rules for what counts as a
sub-directory, an article, or the landing page live in one place. Any
``OSError`` raised while listing is re-raised as
:class:`FilesystemAccessError` carrying the offending path, which callers
catch, log, and replace with a safe default.

Examples
--------
>>> from pathlib import Path
>>> from docs_sitetree.config import SiteTreeConfig
>>> from docs_sitetree.fs import list_directory
>>> config = SiteTreeConfig(content_root=Path("docs"))  # doctest: +SKIP
>>> listing = list_directory(config.content_root, config)  # doctest: +SKIP
>>> [node.name for node in listing.subdirectories]  # doctest: +SKIP
['JavaScript', 'Vue']
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ
from pathlib import Path

if typ.TYPE_CHECKING:
    from .config import SiteTreeConfig


class FilesystemAccessError(OSError):
    """Raised when a directory cannot be listed or a file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class NodeKind(enum.Enum):
    """Kinds of entries the site tree cares about."""

    DIRECTORY = "directory"
    CONTENT_FILE = "content_file"


@dc.dataclass(frozen=True, slots=True)
class ContentNode:
    """A directory or article found under the content root."""

    name: str
    kind: NodeKind
    relative_path: str
    path: Path

    @property
    def stem(self) -> str:
        """Return the name without its suffix (articles) or the name itself."""
        if self.kind is NodeKind.CONTENT_FILE:
            return self.path.stem
        return self.name


@dc.dataclass(slots=True)
class DirectoryListing:
    """Immediate children of one directory, split by kind."""

    directory: Path
    subdirectories: list[ContentNode] = dc.field(default_factory=list)
    content_files: list[ContentNode] = dc.field(default_factory=list)
    has_landing_page: bool = False

    @property
    def is_empty(self) -> bool:
        """Return True when the directory has neither sub-directories nor articles."""
        return not self.subdirectories and not self.content_files


def relative_path(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` as a slash-separated string."""
    try:
        rel = path.relative_to(root)
    except ValueError:
        return path.as_posix()
    text = rel.as_posix()
    return "" if text == "." else text


def list_directory(directory: Path, config: SiteTreeConfig) -> DirectoryListing:
    """List ``directory`` into sub-directories and content files.

    Parameters
    ----------
    directory : Path
        Directory to list; must live under ``config.content_root`` for the
        recorded relative paths to be meaningful.
    config : SiteTreeConfig
        Supplies the landing page name, recognised suffixes, and ordering.

    Returns
    -------
    DirectoryListing
        Sub-directories and articles in the configured order. Dot-prefixed
        entries and files with other suffixes are ignored; the landing page is
        reported through ``has_landing_page`` rather than as an article.

    Raises
    ------
    FilesystemAccessError
        If the directory is missing or cannot be read.
    """
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise FilesystemAccessError(directory, exc.strerror or str(exc)) from exc
    if config.sort == "name":
        entries.sort(key=lambda entry: entry.name)

    listing = DirectoryListing(directory=directory)
    root = config.content_root
    for entry in entries:
        if entry.name.startswith("."):
            continue
        if entry.name == config.index_filename:
            listing.has_landing_page = listing.has_landing_page or entry.is_file()
            continue
        if entry.is_dir():
            listing.subdirectories.append(
                ContentNode(
                    name=entry.name,
                    kind=NodeKind.DIRECTORY,
                    relative_path=relative_path(entry, root),
                    path=entry,
                )
            )
        elif entry.is_file() and entry.suffix.lower() in config.content_suffixes:
            listing.content_files.append(
                ContentNode(
                    name=entry.name,
                    kind=NodeKind.CONTENT_FILE,
                    relative_path=relative_path(entry, root),
                    path=entry,
                )
            )
    return listing


__all__ = [
    "ContentNode",
    "DirectoryListing",
    "FilesystemAccessError",
    "NodeKind",
    "list_directory",
    "relative_path",
]
