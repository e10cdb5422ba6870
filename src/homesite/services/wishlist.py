"""WishlistService: every wishlist post, rendered, on one page."""

from __future__ import annotations

import logging

from homesite.config.logging import log_context
from homesite.domain.content import Document, slug_for
from homesite.domain.errors import RenderError
from homesite.domain.frontmatter import WishlistFrontmatter
from homesite.services.base import BaseService, newest_first
from homesite.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)

type WishlistDocument = Document[WishlistFrontmatter, str]


class WishlistService(BaseService):
    """Load and render the posts in the configured wishlist directory."""

    def list_wishlist(self) -> ServiceResult:
        """All visible wishlist posts, newest first, rendered to HTML."""
        op = "list_wishlist"
        directory = self._settings.wishlist_dir
        with log_context(op=op):
            try:
                documents, warnings = self._load_documents(
                    directory, WishlistFrontmatter, slug_for
                )
            except FileNotFoundError:
                logger.error("Wishlist directory not found: %s", directory)
                return ServiceResult.failure(
                    op,
                    ErrorCode.NOT_FOUND,
                    f"Wishlist directory not found: {directory}",
                    path=str(directory),
                )
            except OSError as exc:
                logger.error("Could not read wishlist directory %s: %s", directory, exc)
                return ServiceResult.failure(
                    op, ErrorCode.IO_ERROR, str(exc), path=str(directory)
                )

            rendered: list[WishlistDocument] = []
            for doc in newest_first(documents):
                try:
                    doc.render()
                except RenderError as exc:
                    logger.warning("Skipping wishlist post %s: %s", doc.metadata, exc)
                    warnings.append(f"Skipped {doc.metadata}: {exc}")
                    continue
                if doc.content.is_html():
                    rendered.append(doc)

            items = [
                {
                    "slug": doc.metadata,
                    **doc.frontmatter.model_dump(mode="json"),
                    "html": str(doc.content),
                }
                for doc in rendered
            ]
            return ServiceResult.success(
                op,
                {"count": len(items), "items": items},
                warnings=warnings,
            )
