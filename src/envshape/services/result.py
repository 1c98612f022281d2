"""Outcome of a CLI-facing operation.

``build_config`` raises; :class:`LoadService` catches and reports through
:class:`ServiceResult` so the command layer only decides where to print.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(StrEnum):
    VALIDATION_FAILED = "VALIDATION_FAILED"
    SCHEMA_NOT_FOUND = "SCHEMA_NOT_FOUND"
    UNSUPPORTED_SCHEMA = "UNSUPPORTED_SCHEMA"


class ServiceError(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """``data`` is keyed per operation; ``error`` is set iff ``ok`` is false."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
