# tests/errors/test_errors.py
"""Tests for application errors and their exception handlers."""

from unittest.mock import MagicMock

import orjson
import pytest
from fastapi.exceptions import RequestValidationError

from blogapp.errors import (
    BaseAppError,
    DuplicateEntryError,
    ForbiddenError,
    InvalidCredentialsError,
    RecordNotFoundError,
    ValidationError,
    app_validation_exception_handler,
    create_exception_handler,
    validation_exception_handler,
)
from blogapp.errors.validation import format_errors


@pytest.fixture
def request_mock() -> MagicMock:
    request = MagicMock()
    request.client.host = "192.168.1.1"
    request.url.path = "/blogs"
    return request


class TestBaseAppError:
    def test_default_values(self) -> None:
        error = BaseAppError()

        assert error.detail == "Internal Server Error"
        assert error.status_code == 500
        assert str(error) == "Internal Server Error"

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (RecordNotFoundError(), 404),
            (DuplicateEntryError(field="login"), 409),
            (ForbiddenError(), 403),
            (InvalidCredentialsError(), 401),
            (ValidationError(), 400),
        ],
    )
    def test_status_codes(self, error: BaseAppError, status_code: int) -> None:
        assert error.status_code == status_code


class TestCreateExceptionHandler:
    @pytest.mark.asyncio
    async def test_renders_detail_and_logs(self, request_mock: MagicMock) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(request_mock, RecordNotFoundError("Blog not found"))

        assert response.status_code == 404
        assert orjson.loads(response.body) == {"detail": "Blog not found"}
        logger.warning.assert_called_once_with(
            "Blog not found for ip: 192.168.1.1 for endpoint /blogs",
        )

    @pytest.mark.asyncio
    async def test_includes_public_attributes(self, request_mock: MagicMock) -> None:
        handler = create_exception_handler(MagicMock())

        response = await handler(request_mock, DuplicateEntryError("Duplicate", field="email"))

        assert orjson.loads(response.body) == {"detail": "Duplicate", "field": "email"}

    @pytest.mark.asyncio
    async def test_unknown_exception_is_500(self, request_mock: MagicMock) -> None:
        handler = create_exception_handler(MagicMock())

        response = await handler(request_mock, RuntimeError("boom"))

        assert response.status_code == 500
        assert orjson.loads(response.body)["detail"] == "Internal Server Error"


class TestFormatErrors:
    def test_one_entry_per_field(self) -> None:
        raw = [
            {"loc": ("body", "name"), "msg": "too long"},
            {"loc": ("body", "name"), "msg": "bad pattern"},
            {"loc": ("body", "websiteUrl"), "msg": "bad url"},
        ]

        assert format_errors(raw) == [
            {"message": "too long", "field": "name"},
            {"message": "bad url", "field": "websiteUrl"},
        ]

    def test_nested_and_indexed_locations(self) -> None:
        raw = [
            {"loc": ("query", "pageSize"), "msg": "bad"},
            {"loc": ("body", "items", 0, "title"), "msg": "missing"},
            {"loc": ("body",), "msg": "invalid json"},
        ]

        assert [e["field"] for e in format_errors(raw)] == ["pageSize", "title", ""]


class TestValidationHandlers:
    @pytest.mark.asyncio
    async def test_request_validation_error(self, request_mock: MagicMock) -> None:
        exc = RequestValidationError(
            [{"loc": ("body", "title"), "msg": "Field required", "type": "missing"}],
        )

        response = await validation_exception_handler(request_mock, exc)

        assert response.status_code == 400
        assert orjson.loads(response.body) == {
            "errorsMessages": [{"message": "Field required", "field": "title"}],
        }

    @pytest.mark.asyncio
    async def test_service_validation_error(self, request_mock: MagicMock) -> None:
        exc = ValidationError.for_field("banReason", "banReason is required to ban")

        response = await app_validation_exception_handler(request_mock, exc)

        assert response.status_code == 400
        assert orjson.loads(response.body) == {
            "errorsMessages": [{"message": "banReason is required to ban", "field": "banReason"}],
        }
