# blogapp/main.py

"""Blog Platform Backend: public browsing, blogger content management and super-admin moderation."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse, Response
from slowapi.errors import RateLimitExceeded

from blogapp import __version__
from blogapp.configs import settings
from blogapp.errors import (
    BaseAppError,
    DatabaseError,
    ForbiddenError,
    PasswordHashingError,
    UserAuthenticationError,
    ValidationError,
    app_exception_handler,
    app_validation_exception_handler,
    auth_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from blogapp.managers import (
    get_system_metrics,
    limiter,
    metrics_manager,
    rate_limit_exceeded_handler,
)
from blogapp.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from blogapp.monitoring import setup_health_routes
from blogapp.routes import (
    auth_router,
    blogger_router,
    blogs_router,
    posts_router,
    sa_router,
    testing_router,
)
from blogapp.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Blogs, posts and their moderation",
    version=__version__,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)

routes = [
    auth_router,
    blogs_router,
    posts_router,
    blogger_router,
    sa_router,
]
if settings.testing_routes_enabled:
    routes.append(testing_router)

_ = [app.include_router(router) for router in routes]

errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (RequestValidationError, validation_exception_handler),
    (ValidationError, app_validation_exception_handler),
    (UserAuthenticationError, auth_exception_handler),
    (ForbiddenError, auth_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (BaseAppError, app_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter

setup_health_routes(app, version=__version__)


@app.get(
    "/metrics",
    tags=["Metrics"],
    response_class=ORJSONResponse,
    summary="Get metrics",
    description="API request counters, response times, moderation counters and system load.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "timestamp": "2025-01-01T00:00:00.000Z",
                        "api_metrics": {"request_counts": {"/blogs": 10}},
                        "system_metrics": {"cpu_percent": 0.42},
                    },
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="get_metrics",
)
@limiter.limit("5/minute")
async def get_metrics(request: Request, response: Response) -> ORJSONResponse:
    """
    Get API performance metrics.

    Notes
    -----
    Rate limited to 5 requests per minute.
    """
    return ORJSONResponse(
        content={
            "timestamp": today_str(),
            "api_metrics": metrics_manager.get_metrics(),
            "system_metrics": await get_system_metrics(),
        },
    )


if __name__ == "__main__":
    from uvicorn import run

    run(app, host="127.0.0.1", port=8000, log_level="info")
