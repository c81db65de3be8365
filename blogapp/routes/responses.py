"""OpenAPI response examples shared by the routers."""

from typing import Any

BAD_REQUEST: dict[int | str, dict[str, Any]] = {
    400: {
        "description": "Invalid input",
        "content": {
            "application/json": {
                "example": {"errorsMessages": [{"message": "Field required", "field": "name"}]},
            },
        },
    },
}

UNAUTHORIZED: dict[int | str, dict[str, Any]] = {
    401: {
        "description": "Missing or invalid bearer token",
        "content": {"application/json": {"example": {"detail": "Could not validate credentials"}}},
    },
}

FORBIDDEN: dict[int | str, dict[str, Any]] = {
    403: {
        "description": "Forbidden",
        "content": {"application/json": {"example": {"detail": "Blog belongs to another user"}}},
    },
}

NOT_FOUND: dict[int | str, dict[str, Any]] = {
    404: {
        "description": "Not found",
        "content": {"application/json": {"example": {"detail": "Blog with ID <uuid> not found"}}},
    },
}

RATE_LIMITED: dict[int | str, dict[str, Any]] = {
    429: {
        "description": "Rate limit exceeded",
        "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
    },
}

NO_CONTENT: dict[int | str, dict[str, Any]] = {204: {"description": "No Content"}}

# Per-client limits
READ_LIMIT = "120/minute"
WRITE_LIMIT = "30/minute"
AUTH_LIMIT = "5/minute"
