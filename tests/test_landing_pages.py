"""Unit tests for landing page generation.

The generated pages are rendered to HTML with Python-Markdown and inspected
with BeautifulSoup so assertions target the links a reader would see rather
than raw template whitespace.

Usage
-----
Run ``pytest tests/test_landing_pages.py -v``.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

import pytest
from bs4 import BeautifulSoup
from markdown import markdown

from docs_sitetree.config import LabelTable
from docs_sitetree.fs import FilesystemAccessError
from docs_sitetree.landing_pages import IndexSynthesizer, synthesize_index_pages

if typ.TYPE_CHECKING:
    from pathlib import Path

    from docs_sitetree.config import SiteTreeConfig

WriteTree = typ.Callable[..., typ.Any]


def _soup(path: Path) -> BeautifulSoup:
    html = markdown(path.read_text(encoding="utf-8"))
    return BeautifulSoup(html, "html.parser")


def _headings(path: Path) -> list[str]:
    return [tag.get_text(strip=True) for tag in _soup(path).find_all("h2")]


def test_every_directory_gets_a_landing_page(
    site_config: SiteTreeConfig, content_root: Path, write_tree: WriteTree
) -> None:
    """The root and each nested directory receive an index page."""
    write_tree(content_root, {"A": {"B": {"c.md": "c"}}, "D": {}})
    written = IndexSynthesizer(site_config).run()
    expected = {
        content_root / "index.md",
        content_root / "A" / "index.md",
        content_root / "A" / "B" / "index.md",
        content_root / "D" / "index.md",
    }
    assert set(written) == expected, f"Unexpected pages: {sorted(written)}"
    assert all(path.is_file() for path in expected)


def test_second_run_is_byte_identical(
    site_config: SiteTreeConfig, content_root: Path, write_tree: WriteTree
) -> None:
    """Regenerating without tree changes leaves every page untouched."""
    write_tree(
        content_root,
        {"JavaScript": {"closures.md": "x", "ES6": {"let.md": "y"}}, "Empty": {}},
    )
    first = {
        path: path.read_bytes() for path in synthesize_index_pages(site_config)
    }
    second = {
        path: path.read_bytes() for path in synthesize_index_pages(site_config)
    }
    assert first == second, "Second run should reproduce the first run exactly"


def test_articles_are_listed_once_without_extension(
    site_config: SiteTreeConfig, content_root: Path, write_tree: WriteTree
) -> None:
    """Each article gets exactly one extension-less link; the index is excluded."""
    write_tree(
        content_root,
        {
            "index.md": "old landing page",
            "closures.md": "x",
            "promises.markdown": "y",
            "diagram.png": "binary",
        },
    )
    IndexSynthesizer(site_config).run()
    page = content_root / "index.md"
    article_links = [
        anchor["href"]
        for anchor in _soup(page).find_all("a")
        if anchor["href"].startswith("./")
    ]
    assert sorted(article_links) == ["./closures", "./promises"], (
        f"Expected one link per article, got {article_links!r}"
    )
    assert "./index" not in article_links
    assert "Articles" in " ".join(_headings(page))


def test_subsections_link_to_directories(
    site_config: SiteTreeConfig, content_root: Path, write_tree: WriteTree
) -> None:
    """Sub-directories appear in a sub-sections block with trailing slashes."""
    write_tree(content_root, {"Vue": {"pinia.md": "x"}, "Misc": {}})
    IndexSynthesizer(site_config).run()
    text = (content_root / "index.md").read_text(encoding="utf-8")
    assert "- 📂 [Misc](./Misc/)" in text, "Unknown names use the sub-section default"
    assert "- 💚 [Vue](./Vue/)" in text, "Known names use their mapped label"
    assert "Articles" not in text


def test_empty_directory_shows_placeholder(
    site_config: SiteTreeConfig, content_root: Path, write_tree: WriteTree
) -> None:
    """Directories without children only show the coming soon block."""
    write_tree(content_root, {"Later": {}})
    IndexSynthesizer(site_config).run()
    page = content_root / "Later" / "index.md"
    headings = _headings(page)
    assert any("Coming soon" in heading for heading in headings)
    assert not any("Sub-sections" in heading for heading in headings)
    assert not any("Articles" in heading for heading in headings)
    image = _soup(page).find("img")
    assert image is not None, "Expected the coming soon image"
    assert image["src"] == site_config.landing_page.coming_soon_image


def test_footer_links_to_help(
    site_config: SiteTreeConfig, content_root: Path, write_tree: WriteTree
) -> None:
    """Every page ends with the help link."""
    write_tree(content_root, {})
    IndexSynthesizer(site_config).run()
    anchors = _soup(content_root / "index.md").find_all("a")
    assert anchors[-1]["href"] == site_config.landing_page.help_url


def test_known_directory_gets_mapped_label(
    site_config: SiteTreeConfig, content_root: Path, write_tree: WriteTree
) -> None:
    """``JavaScript`` is titled with its mapped label."""
    write_tree(content_root, {"JavaScript": {"closures.md": "x"}})
    IndexSynthesizer(site_config).run()
    title = (content_root / "JavaScript" / "index.md").read_text(
        encoding="utf-8"
    ).splitlines()[0]
    expected_label = site_config.labels.directories["JavaScript"]
    assert title == f"# {expected_label} JavaScript", f"Unexpected title {title!r}"


def test_unknown_directory_gets_default_label(
    site_config: SiteTreeConfig, content_root: Path, write_tree: WriteTree
) -> None:
    """Unrecognised names fall back to the default label, never a blank one."""
    write_tree(content_root, {"Scratch": {}})
    IndexSynthesizer(site_config).run()
    title = (content_root / "Scratch" / "index.md").read_text(
        encoding="utf-8"
    ).splitlines()[0]
    assert title == f"# {site_config.labels.default} Scratch"


def test_article_markers_cycle(
    site_config: SiteTreeConfig, content_root: Path, write_tree: WriteTree
) -> None:
    """Markers repeat once every marker has been used."""
    config = dc.replace(site_config, labels=LabelTable(article_markers=("*", "+")))
    write_tree(content_root, {name: name for name in ("a.md", "b.md", "c.md")})
    IndexSynthesizer(config).run()
    text = (content_root / "index.md").read_text(encoding="utf-8")
    assert "- * [a](./a)" in text
    assert "- + [b](./b)" in text
    assert "- * [c](./c)" in text


def test_missing_root_writes_nothing(site_config: SiteTreeConfig) -> None:
    """A missing content root is skipped without raising."""
    assert IndexSynthesizer(site_config).run() == []


def test_write_failure_does_not_stop_the_walk(
    site_config: SiteTreeConfig,
    content_root: Path,
    write_tree: WriteTree,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """A directory whose page cannot be written is logged and skipped."""
    write_tree(
        content_root,
        {"broken": {"child": {"a.md": "a"}}, "fine": {"b.md": "b"}},
    )
    original = IndexSynthesizer._write

    def _flaky(self: IndexSynthesizer, directory: Path, listing: typ.Any) -> Path:
        if directory.name == "broken":
            raise FilesystemAccessError(directory / "index.md", "Permission denied")
        return original(self, directory, listing)

    monkeypatch.setattr(IndexSynthesizer, "_write", _flaky)
    with caplog.at_level(logging.WARNING, logger="docs_sitetree.landing_pages"):
        written = IndexSynthesizer(site_config).run()

    assert not (content_root / "broken" / "index.md").exists()
    assert content_root / "broken" / "child" / "index.md" in written
    assert content_root / "fine" / "index.md" in written
    assert "broken" in caplog.text, "Expected the failing path to be logged"


def test_welcome_copy_with_literal_braces_renders(
    site_config: SiteTreeConfig, content_root: Path, write_tree: WriteTree
) -> None:
    """Only ``{name}`` is substituted; other braces in the copy pass through."""
    page = dc.replace(
        site_config.landing_page, welcome="Welcome to {name}! Use {curly} braces"
    )
    config = dc.replace(site_config, landing_page=page)
    write_tree(content_root, {"A": {"b.md": "b"}, "C": {}})

    written = IndexSynthesizer(config).run()

    assert len(written) == 3, f"Every directory should be written, got {written}"
    lines = (content_root / "A" / "index.md").read_text(encoding="utf-8").splitlines()
    assert lines[2] == "Welcome to A! Use {curly} braces"
