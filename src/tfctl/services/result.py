"""ServiceResult and ServiceError, the envelope every operation returns.

INVARIANT: Service methods never raise for expected failures. Every
:class:`~tfctl.domain.errors.TokenFactoryError` becomes ``ok=False`` with a
structured :class:`ServiceError`; anything else propagates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from tfctl.domain.errors import TokenFactoryError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: TokenFactoryError) -> ServiceError:
        return cls(code=exc.code, message=str(exc), detail=exc.detail)


class ServiceResult(BaseModel):
    """Uniform return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"execute"``, ``"get_denom"``, ...).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as a failed plugin hook.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: TokenFactoryError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
