"""Document pipeline errors.

The core never recovers from these. Services decide whether a failure
skips one file or fails the whole request.
"""

from __future__ import annotations

from pathlib import Path


class DocumentError(Exception):
    """Root of every error raised by the document pipeline."""


# ---------------------------------------------------------------------------
# Frontmatter extraction
# ---------------------------------------------------------------------------


class ExtractError(DocumentError):
    """Frontmatter could not be extracted from a document."""


class InvalidDocumentError(ExtractError):
    """The parsed tree does not have a root node."""

    def __init__(self, node_type: str) -> None:
        super().__init__(f"invalid markdown document: root node is {node_type!r}")
        self.node_type = node_type


class MissingFrontmatterError(ExtractError):
    """The first node of the document is not a frontmatter block."""

    def __init__(self) -> None:
        super().__init__("frontmatter not found")


class FrontmatterDecodeError(ExtractError):
    """The frontmatter block does not decode into the requested schema."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"could not decode frontmatter: {cause}")
        self.cause = cause


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class LoadError(DocumentError):
    """A document could not be loaded from *path*."""

    def __init__(self, path: Path | None, message: str) -> None:
        super().__init__(message)
        self.path = path


class DocumentReadError(LoadError):
    """The document file could not be read."""

    def __init__(self, path: Path, cause: OSError | UnicodeDecodeError) -> None:
        reason = cause.strerror if isinstance(cause, OSError) and cause.strerror else cause
        super().__init__(path, f"could not read {path}: {reason}")
        self.cause = cause

    @property
    def not_found(self) -> bool:
        return isinstance(self.cause, FileNotFoundError)


class FrontmatterLoadError(LoadError):
    """The document was read but its frontmatter failed to extract."""

    def __init__(self, path: Path | None, error: ExtractError) -> None:
        where = f" in {path}" if path is not None else ""
        super().__init__(path, f"{error}{where}")
        self.error = error


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class RenderError(DocumentError):
    """A document could not be rendered to HTML."""


class RenderFailureError(RenderError):
    """The Markdown renderer failed."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"could not render markdown: {cause}")
        self.cause = cause


class AlreadyRenderedError(RenderError):
    """``render()`` was called on a document whose content is already HTML."""

    def __init__(self) -> None:
        super().__init__("document content already rendered")
