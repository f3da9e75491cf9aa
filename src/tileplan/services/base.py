"""BaseService — shared foundation for tileplan services.

Services receive the resolved settings at construction time and keep no
other state, so one instance can serve any number of calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tileplan.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from tileplan.config.settings import TilePlanSettings


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class PlanService(BaseService):
            def plan(self, request: PlanRequest) -> ServiceResult:
                units = self._settings.units
                ...
    """

    def __init__(self, settings: TilePlanSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(op: str, code: ErrorCode, message: str, **detail: object) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=dict(detail)),
        )
