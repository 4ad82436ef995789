"""ServiceResult and ServiceError — what DigitService hands back.

INVARIANT: DigitService never raises a DigitsError; the failure is
carried in ``error`` with the exception's ``code``, message and detail.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from intdigits.domain.errors import DigitsError


class ServiceError(BaseModel):
    """A DigitsError flattened into data."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: DigitsError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Outcome of one conversion.

    Attributes:
        ok: Whether the conversion succeeded.
        op: ``"decompose"`` or ``"recompose"``.
        data: Input, width and output of a successful conversion.
        warnings: Accepted-but-notable input, such as leading zeros.
        error: The conversion failure if ``ok`` is False.
        meta: Timing (``duration_ms``).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls,
        op: str,
        data: dict[str, Any],
        *,
        duration_ms: float,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=True,
            op=op,
            data=data,
            warnings=warnings or [],
            meta={"duration_ms": round(duration_ms, 3)},
        )

    @classmethod
    def failure(cls, op: str, exc: DigitsError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
