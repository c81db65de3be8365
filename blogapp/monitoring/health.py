"""
Health checks with dependency validation.

- /health/live (Liveness): basic app responsiveness, no external deps
- /health/ready (Readiness): database and disk checks
- /health (Combined): readiness plus the application name

Response Format
---------------
{
    "status": "ready" | "not_ready" | "live",
    "timestamp": "2025-01-01T12:00:00.000Z",
    "version": "1.0.0",
    "checks": {
        "database": {"status": "pass", "response_ms": 15},
        "disk": {"status": "pass", "usage_percent": 45}
    }
}
"""

from asyncio import wait_for
from dataclasses import dataclass, field
from enum import StrEnum
from time import perf_counter
from typing import Any

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from psutil import disk_usage
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import HTTP_200_OK, HTTP_503_SERVICE_UNAVAILABLE

from blogapp.configs import settings
from blogapp.db.database import transaction
from blogapp.utils.helpers import today_str

DATABASE_CHECK_TIMEOUT = 2.0


class CheckStatus(StrEnum):
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


class OverallStatus(StrEnum):
    READY = "ready"
    NOT_READY = "not_ready"
    LIVE = "live"


@dataclass
class ComponentCheck:
    """
    Result of an individual health check component.

    Attributes
    ----------
    status : CheckStatus
        Status of the check (pass, fail, warn)
    response_ms : int | None
        Response time in milliseconds
    message : str | None
        Optional message or error details
    details : dict[str, Any]
        Additional check-specific details
    """

    status: CheckStatus
    response_ms: int | None = None
    message: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"status": self.status.value}
        if self.response_ms is not None:
            result["response_ms"] = self.response_ms
        if self.message is not None:
            result["message"] = self.message
        if self.details:
            result.update(self.details)
        return result


@dataclass
class HealthStatus:
    status: OverallStatus
    timestamp: str
    version: str
    checks: dict[str, ComponentCheck] = field(default_factory=dict)

    @property
    def is_healthy(self) -> bool:
        return self.status in (OverallStatus.READY, OverallStatus.LIVE)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "timestamp": self.timestamp,
            "version": self.version,
            "checks": {name: check.to_dict() for name, check in self.checks.items()},
        }


class HealthChecker:
    """Runs liveness and readiness probes for the application."""

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def check_liveness(self) -> HealthStatus:
        return HealthStatus(
            status=OverallStatus.LIVE,
            timestamp=today_str(),
            version=self.version,
        )

    async def check_readiness(self) -> HealthStatus:
        """
        Verify the database answers and the disk is not full.

        Returns:
            HealthStatus with readiness information.
        """
        checks = {
            "database": await self._check_database(),
            "disk": self._check_disk(),
        }
        failed = any(check.status == CheckStatus.FAIL for check in checks.values())
        return HealthStatus(
            status=OverallStatus.NOT_READY if failed else OverallStatus.READY,
            timestamp=today_str(),
            version=self.version,
            checks=checks,
        )

    async def _check_database(self) -> ComponentCheck:
        start = perf_counter()
        try:
            async with transaction() as session:
                await wait_for(
                    session.execute(text("SELECT 1")),
                    timeout=DATABASE_CHECK_TIMEOUT,
                )
        except TimeoutError:
            return ComponentCheck(
                status=CheckStatus.FAIL,
                response_ms=int((perf_counter() - start) * 1000),
                message="Database check timed out",
            )
        except (SQLAlchemyError, OSError) as e:
            return ComponentCheck(
                status=CheckStatus.FAIL,
                response_ms=int((perf_counter() - start) * 1000),
                message=f"Database check failed: {e!s}",
            )
        return ComponentCheck(
            status=CheckStatus.PASS,
            response_ms=int((perf_counter() - start) * 1000),
        )

    def _check_disk(self) -> ComponentCheck:
        try:
            usage_percent = disk_usage("/").percent
        except OSError as e:
            return ComponentCheck(
                status=CheckStatus.WARN,
                message=f"Could not check disk: {e!s}",
            )

        # >90% usage warns, >95% fails
        if usage_percent > 95:
            status = CheckStatus.FAIL
        elif usage_percent > 90:
            status = CheckStatus.WARN
        else:
            status = CheckStatus.PASS
        return ComponentCheck(status=status, details={"usage_percent": usage_percent})


def _respond(health: HealthStatus, **extra: Any) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=HTTP_200_OK if health.is_healthy else HTTP_503_SERVICE_UNAVAILABLE,
        content={**health.to_dict(), **extra},
    )


def setup_health_routes(app: FastAPI, version: str = "1.0.0") -> None:
    """Register the health endpoints on ``app``."""
    checker = HealthChecker(version)

    @app.get("/health/live", tags=["Health"], summary="Liveness probe")
    async def liveness() -> ORJSONResponse:
        return _respond(checker.check_liveness())

    @app.get("/health/ready", tags=["Health"], summary="Readiness probe")
    async def readiness() -> ORJSONResponse:
        return _respond(await checker.check_readiness())

    @app.get("/health", tags=["Health"], summary="Health check")
    async def health() -> ORJSONResponse:
        return _respond(await checker.check_readiness(), service=settings.APP_NAME)
