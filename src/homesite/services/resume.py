"""ResumeService: the résumé page data."""

from __future__ import annotations

import logging

from homesite.config.logging import log_context
from homesite.domain.errors import FrontmatterDecodeError
from homesite.domain.frontmatter import decode_frontmatter
from homesite.domain.resume import Resume
from homesite.infrastructure.filesystem import read_text
from homesite.services.base import BaseService
from homesite.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class ResumeService(BaseService):
    """Load the résumé from its YAML data file."""

    def get_resume(self) -> ServiceResult:
        op = "get_resume"
        path = self._settings.resume_file
        with log_context(op=op):
            try:
                raw = read_text(path)
            except FileNotFoundError:
                logger.error("Resume file not found: %s", path)
                return ServiceResult.failure(
                    op, ErrorCode.NOT_FOUND, f"Resume file not found: {path}", path=str(path)
                )
            except (OSError, UnicodeDecodeError) as exc:
                logger.error("Could not read resume file %s: %s", path, exc)
                return ServiceResult.failure(op, ErrorCode.IO_ERROR, str(exc), path=str(path))

            try:
                resume = decode_frontmatter(raw, Resume)
            except FrontmatterDecodeError as exc:
                logger.error("Could not parse resume file %s: %s", path, exc)
                return ServiceResult.failure(
                    op, ErrorCode.INVALID_DOCUMENT, str(exc), path=str(path)
                )

            return ServiceResult.success(op, resume.model_dump(mode="json"))
