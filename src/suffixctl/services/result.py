"""ServiceResult and ServiceError, the envelope every service call returns.

INVARIANT: service methods never raise for bad input. A name that cannot
be resolved comes back as ``ok=False`` with an :class:`ErrorCode`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure reasons."""

    INVALID_INPUT = "INVALID_INPUT"
    NOT_ALLOWED = "NOT_ALLOWED"


class ServiceError(BaseModel):
    """Why an operation failed, plus the offending input in ``detail``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, used to pick a renderer (e.g. ``"parse"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal notes, e.g. the default rule decided the suffix.
        error: Set when ``ok`` is False.
        meta: Lookup options in effect.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
