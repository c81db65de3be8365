"""Field-level validation errors rendered as ``{"errorsMessages": [...]}``."""

from logging import getLogger
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from blogapp.configs import file_logger
from blogapp.errors.base import BaseAppError
from blogapp.utils.helpers import host

logger = file_logger(getLogger(__name__))


class ValidationError(BaseAppError):
    """Malformed or policy-violating input, reported per field."""

    def __init__(
        self,
        detail: str = "Validation Error",
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)
        self.errors = errors or []

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        """Build an error carrying a single field message."""
        return cls(detail=message, errors=[{"message": message, "field": field}])


def _field_name(loc: tuple[Any, ...]) -> str:
    # ("body", "banReason") -> "banReason"; ("body",) -> ""
    parts = [str(part) for part in loc[1:] if not isinstance(part, int)]
    return parts[-1] if parts else ""


def format_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """
    Reduce pydantic errors to one ``{message, field}`` entry per field.

    Args:
        errors: Raw error dicts from ``RequestValidationError.errors()``.

    Returns:
        list[dict[str, str]]: Formatted errors in first-seen field order.
    """
    formatted: list[dict[str, str]] = []
    seen: set[str] = set()
    for error in errors:
        field = _field_name(tuple(error.get("loc", ())))
        if field in seen:
            continue
        seen.add(field)
        message = str(error.get("msg", "Invalid value"))
        formatted.append({"message": message, "field": field})
    return formatted


async def app_validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """Render a service-level ``ValidationError``."""
    errors = exc.errors if isinstance(exc, ValidationError) else []
    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {errors}",
    )
    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"errorsMessages": errors},
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors with the field-level response format.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    raw = exc.errors() if isinstance(exc, RequestValidationError) else []
    formatted_errors = format_errors(list(raw))

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"errorsMessages": formatted_errors},
    )
