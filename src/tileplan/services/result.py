"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI and any embedding UI consume this type; unit and validation
errors from the domain never cross the service boundary. Degenerate
geometry is not an error: it comes back ``ok`` with a warning.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure reasons carried in ``ServiceError.code``."""

    INVALID_UNIT = "INVALID_UNIT"  # unit tag outside mm/cm/m/in/ft
    INVALID_INPUT = "INVALID_INPUT"  # anything else the request got wrong


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name; one of ``"plan"``, ``"layout"``, ``"convert"``,
            ``"patterns"``. Renderers dispatch on it.
        data: Payload validated against the op's contract model in
            :mod:`tileplan.services.contracts`.
        warnings: Non-fatal issues, such as "no preview available" or a
            high share of cut tiles.
        error: Structured error if ``ok`` is False.
        meta: Telemetry span tree when ``--verbose`` is on, else None.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
