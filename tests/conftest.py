"""Shared pytest fixtures and test helpers for homesite tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from homesite.config.settings import HomesiteSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's HOMESITE_* environment out of every test."""
    monkeypatch.delenv("HOMESITE_CONFIG", raising=False)
    monkeypatch.delenv("HOMESITE_DISABLE_FILTER", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    site = logging.getLogger("homesite")
    site_level = site.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    site.setLevel(site_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Temporary content root with the default directory layout."""
    (tmp_path / "projects").mkdir()
    (tmp_path / "posts" / "wishlist").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def settings(content_root: Path) -> HomesiteSettings:
    """Settings rooted at the temporary content root."""
    return HomesiteSettings.from_cli(content_root=content_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_project(
    root: Path,
    slug: str,
    *,
    name: str | None = None,
    description: str = "A project.",
    created_at: str = "2024-01-01",
    links: dict[str, str] | None = None,
    body: str = "Some *text*.\n",
) -> Path:
    """Write a project document under ``root/projects``."""
    lines = [
        "---",
        f"name: {name or slug.title()}",
        f"description: {description}",
        f"created_at: {created_at}",
    ]
    if links:
        lines.append("links:")
        lines.extend(f"  {title}: {url}" for title, url in links.items())
    lines.append("---")
    path = root / "projects" / f"{slug}.md"
    path.write_text("\n".join(lines) + "\n" + body, encoding="utf-8")
    return path


def write_wishlist_post(
    root: Path,
    slug: str,
    *,
    name: str | None = None,
    created_at: str = "2024-01-01",
    body: str = "I would like this.\n",
) -> Path:
    """Write a wishlist post under ``root/posts/wishlist``."""
    text = f"---\nname: {name or slug.title()}\ncreated_at: {created_at}\n---\n{body}"
    path = root / "posts" / "wishlist" / f"{slug}.md"
    path.write_text(text, encoding="utf-8")
    return path
