"""Route timing decorator feeding the in-process metrics manager."""

from collections.abc import Awaitable, Callable
from functools import wraps

from blogapp.managers.metrics import MetricsManager, RequestTimer

type AsyncHandler[**P, R] = Callable[P, Awaitable[R]]


def timed[**P, R](
    endpoint: str | None = None,
    metrics: MetricsManager | None = None,
) -> Callable[[AsyncHandler[P, R]], AsyncHandler[P, R]]:
    """
    Count calls, errors and durations of an async route handler.

    Args:
        endpoint: Metrics key, usually the route template (defaults to the
            function name).
        metrics: Optional metrics manager (defaults to the global instance).

    Example:
        @timed("/blogs")
        async def get_blogs(...) -> Page[BlogView]:
            ...
    """

    def decorator(func: AsyncHandler[P, R]) -> AsyncHandler[P, R]:
        key = endpoint or func.__name__

        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            async with RequestTimer(key, metrics):
                return await func(*args, **kwargs)

        return wrapper

    return decorator
