"""ServiceResult and ServiceError: the service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI (and any page handler built on top) consumes this type and
decides how an error surfaces: not-found, server error, or exit code.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Error codes a service operation can report."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_DOCUMENT = "INVALID_DOCUMENT"
    RENDER_FAILED = "RENDER_FAILED"
    IO_ERROR = "IO_ERROR"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"list_projects"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as documents skipped by a listing.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @property
    def not_found(self) -> bool:
        return self.error is not None and self.error.code == ErrorCode.NOT_FOUND

    @classmethod
    def success(
        cls,
        op: str,
        data: dict[str, Any] | None = None,
        *,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data or {}, warnings=warnings or [])

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
