"""Filesystem operations for site content.

Documents live as flat ``*.md`` files in one directory per listing.
A file whose stem starts with ``_`` is hidden (unpublished) and skipped
by discovery unless the caller asks for hidden files explicitly.
"""

from __future__ import annotations

from pathlib import Path

DOCUMENT_SUFFIX = ".md"
HIDDEN_PREFIX = "_"


def is_hidden(path: Path) -> bool:
    """True if *path* is marked hidden by a leading underscore in its stem."""
    return path.stem.startswith(HIDDEN_PREFIX)


def find_documents(directory: Path, *, include_hidden: bool = False) -> list[Path]:
    """Discover the Markdown documents directly inside *directory*.

    Subdirectories are not searched. Hidden documents are skipped unless
    *include_hidden* is set.

    Raises:
        FileNotFoundError: If *directory* does not exist.
        NotADirectoryError: If *directory* is not a directory.
    """
    results: list[Path] = []
    for path in directory.iterdir():
        if not path.is_file() or path.suffix != DOCUMENT_SUFFIX:
            continue
        if not include_hidden and is_hidden(path):
            continue
        results.append(path)
    return sorted(results)


def resolve_document_path(directory: Path, slug: str) -> Path:
    """Resolve the file path for the document named *slug*.

    Raises:
        ValueError: If *slug* is empty or the path escapes *directory*.
    """
    if not slug or slug in (".", ".."):
        msg = f"Invalid document slug: {slug!r}"
        raise ValueError(msg)

    result = directory / f"{slug}{DOCUMENT_SUFFIX}"

    # Guard against path traversal via a crafted slug
    if not result.resolve().is_relative_to(directory.resolve()):
        msg = f"Path escapes content directory: {result}"
        raise ValueError(msg)

    return result


def read_text(path: Path) -> str:
    """Read a UTF-8 text file.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    return path.read_text(encoding="utf-8")
