"""BaseService: shared document loading for the site services.

Every service receives the resolved :class:`HomesiteSettings` at
construction time. The hidden-file filter is fixed then too, so nothing
below the service reads process state while loading documents.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from homesite.domain.content import Document
from homesite.domain.errors import (
    DocumentError,
    DocumentReadError,
    LoadError,
    RenderError,
)
from homesite.infrastructure.filesystem import find_documents
from homesite.services.result import ErrorCode

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from homesite.config.settings import HomesiteSettings

logger = logging.getLogger(__name__)


def error_code_for(exc: DocumentError) -> ErrorCode:
    """Map a document pipeline error to a service error code."""
    match exc:
        case DocumentReadError(not_found=True):
            return ErrorCode.NOT_FOUND
        case DocumentReadError():
            return ErrorCode.IO_ERROR
        case RenderError():
            return ErrorCode.RENDER_FAILED
        case _:
            return ErrorCode.INVALID_DOCUMENT


class BaseService:
    """Base for the site services.

    Args:
        settings: Resolved settings.
        include_hidden: Override for the hidden-file filter. Defaults to
            ``settings.disable_filter``.
    """

    def __init__(
        self,
        settings: HomesiteSettings,
        *,
        include_hidden: bool | None = None,
    ) -> None:
        self._settings = settings
        if include_hidden is None:
            include_hidden = settings.disable_filter
        self._include_hidden = include_hidden

    @property
    def include_hidden(self) -> bool:
        return self._include_hidden

    def _load_documents[F, M](
        self,
        directory: Path,
        schema: type[F],
        metadata_for: Callable[[Path], M],
    ) -> tuple[list[Document[F, M]], list[str]]:
        """Load every visible document in *directory*.

        Documents that fail to load are skipped: each one is logged and
        reported as a warning instead of failing the listing.

        Raises:
            OSError: If *directory* itself cannot be listed.
        """
        paths = find_documents(directory, include_hidden=self._include_hidden)
        logger.debug("Found %d document(s) in %s", len(paths), directory)

        documents: list[Document[F, M]] = []
        warnings: list[str] = []
        for path in paths:
            try:
                documents.append(Document.load(path, schema, metadata_for(path)))
            except LoadError as exc:
                logger.warning("Skipping document %s: %s", path, exc)
                warnings.append(f"Skipped {path.name}: {exc}")

        logger.debug("Loaded %d of %d document(s)", len(documents), len(paths))
        return documents, warnings


class Dated(Protocol):
    @property
    def created_at(self) -> str: ...


def newest_first[F: Dated, M](documents: list[Document[F, M]]) -> list[Document[F, M]]:
    """Sort documents by their ``created_at`` frontmatter, newest first.

    Dates are compared as strings, so ISO dates sort correctly.
    """
    return sorted(documents, key=lambda doc: doc.frontmatter.created_at, reverse=True)
