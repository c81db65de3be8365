# tests/managers/test_metrics.py
"""Tests for the in-process metrics manager and the timing decorator."""

import pytest

from blogapp.decorators import timed
from blogapp.managers.metrics import MetricsManager, RequestTimer, get_system_metrics


@pytest.fixture
def metrics() -> MetricsManager:
    return MetricsManager()


class TestMetricsManager:
    def test_counts(self, metrics: MetricsManager) -> None:
        metrics.record_request("/blogs")
        metrics.record_request("/blogs")
        metrics.record_error("/blogs")
        metrics.record_moderation("user.ban")
        metrics.record_rate_limit_hit()

        snapshot = metrics.get_metrics()

        assert snapshot["request_counts"] == {"/blogs": 2}
        assert snapshot["error_counts"] == {"/blogs": 1}
        assert snapshot["moderation_counts"] == {"user.ban": 1}
        assert snapshot["rate_limit_hits"] == 1

    def test_average_response_time(self, metrics: MetricsManager) -> None:
        metrics.record_response_time("/posts", 1.0)
        metrics.record_response_time("/posts", 3.0)

        assert metrics.get_metrics()["avg_response_times"] == {"/posts": 2.0}

    def test_reset(self, metrics: MetricsManager) -> None:
        metrics.record_request("/blogs")
        metrics.record_moderation("blog.ban")

        metrics.reset_metrics()

        snapshot = metrics.get_metrics()
        assert snapshot["request_counts"] == {}
        assert snapshot["moderation_counts"] == {}
        assert snapshot["rate_limit_hits"] == 0


class TestRequestTimer:
    def test_records_request_and_time(self, metrics: MetricsManager) -> None:
        with RequestTimer("/blogs", metrics):
            pass

        snapshot = metrics.get_metrics()
        assert snapshot["request_counts"] == {"/blogs": 1}
        assert "/blogs" in snapshot["avg_response_times"]
        assert snapshot["error_counts"] == {}

    def test_records_error_on_exception(self, metrics: MetricsManager) -> None:
        with pytest.raises(RuntimeError), RequestTimer("/blogs", metrics):
            raise RuntimeError

        assert metrics.get_metrics()["error_counts"] == {"/blogs": 1}


class TestTimedDecorator:
    @pytest.mark.asyncio
    async def test_wraps_handler(self, metrics: MetricsManager) -> None:
        @timed("/custom", metrics=metrics)
        async def handler(value: int) -> int:
            return value * 2

        assert await handler(21) == 42
        assert handler.__name__ == "handler"
        assert metrics.get_metrics()["request_counts"] == {"/custom": 1}

    @pytest.mark.asyncio
    async def test_defaults_to_function_name(self, metrics: MetricsManager) -> None:
        @timed(metrics=metrics)
        async def list_things() -> None:
            return None

        await list_things()

        assert metrics.get_metrics()["request_counts"] == {"list_things": 1}


@pytest.mark.asyncio
async def test_system_metrics_shape() -> None:
    result = await get_system_metrics()

    assert "cpu_percent" in result
    assert "memory" in result
