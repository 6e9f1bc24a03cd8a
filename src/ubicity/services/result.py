"""ServiceResult and ServiceError — what every ubicity service returns.

Record-level problems (a failed validation, an empty streak list) are
data on an ``ok`` result.  ``ok=False`` is reserved for calls that could
not run at all: undecodable input or an unknown learner.
"""

from __future__ import annotations

from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, Field

ErrorCode: TypeAlias = Literal["PARSE_ERROR", "NOT_FOUND"]


class ServiceError(BaseModel):
    """Why a call failed; ``detail`` carries machine-readable context."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Envelope for a service call.

    Attributes:
        ok: False only when the call could not run.
        op: Operation name, also the renderer key (e.g. ``"network"``).
        data: Operation payload.  List-shaped ops put rows under ``items``.
        warnings: Non-fatal notes, such as records skipped for a bad timestamp.
        error: Set when ``ok`` is False.
        meta: Input echoes (record counts, options in effect).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail)
        return cls(ok=False, op=op, error=error)
