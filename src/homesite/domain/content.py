"""Documents: typed frontmatter plus Markdown or rendered HTML content.

A :class:`Document` is generic over its frontmatter schema ``F`` and a
caller-supplied metadata type ``M``:

- ``frontmatter`` is decoded once at load time and never changes.
- ``metadata`` is out-of-band data (e.g. a slug derived from the file
  name), never parsed from the document itself.
- ``content`` starts as :class:`Markdown` holding the *whole* file,
  frontmatter included. :meth:`Document.render` turns it into
  :class:`Html` exactly once.

INVARIANT: content only ever moves Markdown -> Html, at most once per
document. A second ``render()`` is a caller error, not a no-op.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from homesite.domain.errors import (
    AlreadyRenderedError,
    DocumentReadError,
    ExtractError,
    FrontmatterLoadError,
    RenderFailureError,
)
from homesite.domain.frontmatter import extract_frontmatter
from homesite.infrastructure.markdown import render_html

if TYPE_CHECKING:
    from markdown_it import MarkdownIt

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Content state
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Markdown:
    """Raw, unrendered Markdown text."""

    text: str

    def is_html(self) -> bool:
        return False

    def is_markdown(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Html:
    """Rendered HTML text."""

    text: str

    def is_html(self) -> bool:
        return True

    def is_markdown(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.text


type Content = Markdown | Html


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProjectMetadata:
    """Out-of-band data for a project page."""

    slug: str

    @property
    def url(self) -> str:
        return f"/projects/{self.slug}"

    @classmethod
    def for_path(cls, path: Path) -> ProjectMetadata:
        return cls(slug=slug_for(path))


def slug_for(path: Path) -> str:
    """The URL slug for a document file: its file stem."""
    return path.stem


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


class Document[F, M]:
    """A document with frontmatter of type ``F`` and metadata of type ``M``."""

    __slots__ = ("_content", "_frontmatter", "_metadata", "_path")

    def __init__(
        self,
        frontmatter: F,
        content: Content,
        metadata: M,
        *,
        path: Path | None = None,
    ) -> None:
        self._frontmatter = frontmatter
        self._content = content
        self._metadata = metadata
        self._path = path

    @classmethod
    def from_text(
        cls,
        text: str,
        schema: type[F],
        metadata: M,
        *,
        path: Path | None = None,
    ) -> Document[F, M]:
        """Build a document from already-read text.

        Raises:
            FrontmatterLoadError: If the frontmatter cannot be extracted.
        """
        try:
            frontmatter = extract_frontmatter(text, schema)
        except ExtractError as exc:
            raise FrontmatterLoadError(path, exc) from exc
        return cls(frontmatter, Markdown(text), metadata, path=path)

    @classmethod
    def load(cls, path: Path, schema: type[F], metadata: M) -> Document[F, M]:
        """Read *path* and build a document from its contents.

        Raises:
            DocumentReadError: If the file cannot be read as UTF-8 text.
            FrontmatterLoadError: If the frontmatter cannot be extracted.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentReadError(path, exc) from exc
        logger.debug("Loaded document %s", path)
        return cls.from_text(text, schema, metadata, path=path)

    @property
    def frontmatter(self) -> F:
        return self._frontmatter

    @property
    def metadata(self) -> M:
        return self._metadata

    @property
    def content(self) -> Content:
        return self._content

    @property
    def path(self) -> Path | None:
        return self._path

    def render(self, md: MarkdownIt | None = None) -> None:
        """Render the Markdown content to HTML in place.

        Raises:
            AlreadyRenderedError: If the content is already HTML. The
                content is left unchanged.
            RenderFailureError: If the Markdown renderer fails.
        """
        match self._content:
            case Html():
                raise AlreadyRenderedError
            case Markdown(text=text):
                try:
                    html = render_html(text, md)
                except Exception as exc:
                    raise RenderFailureError(exc) from exc
                self._content = Html(html)

    def __repr__(self) -> str:
        return (
            f"Document(frontmatter={self._frontmatter!r}, "
            f"content={self._content!r}, metadata={self._metadata!r})"
        )
