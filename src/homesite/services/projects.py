"""ProjectService: the project list and single project pages."""

from __future__ import annotations

import logging
from typing import Any

from homesite.config.logging import log_context
from homesite.domain.content import Document, ProjectMetadata
from homesite.domain.errors import DocumentError
from homesite.domain.frontmatter import ProjectFrontmatter
from homesite.infrastructure.filesystem import resolve_document_path
from homesite.services.base import BaseService, error_code_for, newest_first
from homesite.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)

type ProjectDocument = Document[ProjectFrontmatter, ProjectMetadata]


def _summary(doc: ProjectDocument) -> dict[str, Any]:
    """Listing entry for one project."""
    return {
        "slug": doc.metadata.slug,
        "url": doc.metadata.url,
        **doc.frontmatter.model_dump(mode="json"),
    }


class ProjectService(BaseService):
    """Load project documents from the configured projects directory."""

    def list_projects(self) -> ServiceResult:
        """All visible projects, newest first, without rendered content."""
        op = "list_projects"
        directory = self._settings.projects_dir
        with log_context(op=op):
            try:
                documents, warnings = self._load_documents(
                    directory, ProjectFrontmatter, ProjectMetadata.for_path
                )
            except FileNotFoundError:
                logger.error("Projects directory not found: %s", directory)
                return ServiceResult.failure(
                    op,
                    ErrorCode.NOT_FOUND,
                    f"Projects directory not found: {directory}",
                    path=str(directory),
                )
            except OSError as exc:
                logger.error("Could not read projects directory %s: %s", directory, exc)
                return ServiceResult.failure(
                    op, ErrorCode.IO_ERROR, str(exc), path=str(directory)
                )

            items = [_summary(doc) for doc in newest_first(documents)]
            return ServiceResult.success(
                op,
                {"count": len(items), "items": items},
                warnings=warnings,
            )

    def get_project(self, slug: str) -> ServiceResult:
        """One project with its content rendered to HTML."""
        op = "get_project"
        with log_context(op=op, slug=slug):
            try:
                path = resolve_document_path(self._settings.projects_dir, slug)
            except ValueError as exc:
                return ServiceResult.failure(op, ErrorCode.NOT_FOUND, str(exc), slug=slug)

            try:
                doc: ProjectDocument = Document.load(
                    path, ProjectFrontmatter, ProjectMetadata.for_path(path)
                )
                doc.render()
            except DocumentError as exc:
                code = error_code_for(exc)
                if code == ErrorCode.NOT_FOUND:
                    logger.info("Project not found: %s", slug)
                    message = f"No project named {slug!r}"
                else:
                    logger.error("Could not load project %s: %s", slug, exc)
                    message = str(exc)
                return ServiceResult.failure(op, code, message, slug=slug)

            return ServiceResult.success(
                op,
                {**_summary(doc), "html": str(doc.content)},
            )
