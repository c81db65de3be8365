# tests/utils/test_helpers.py
"""Tests for blogapp/utils/helpers.py."""

from datetime import UTC, datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from blogapp.utils.helpers import host, pages_count, to_iso, utc_now


class TestToIso:
    def test_none(self) -> None:
        assert to_iso(None) is None

    def test_aware_utc(self) -> None:
        value = datetime(2026, 3, 4, 5, 6, 7, 891234, tzinfo=UTC)

        assert to_iso(value) == "2026-03-04T05:06:07.891Z"

    def test_naive_is_treated_as_utc(self) -> None:
        assert to_iso(datetime(2026, 3, 4, 5, 6, 7)) == "2026-03-04T05:06:07.000Z"

    def test_other_offsets_are_converted(self) -> None:
        value = datetime(2026, 3, 4, 7, 0, 0, tzinfo=timezone(timedelta(hours=2)))

        assert to_iso(value) == "2026-03-04T05:00:00.000Z"


@pytest.mark.parametrize(
    ("total", "size", "expected"),
    [
        (0, 1, 0),
        (1, 1, 1),
        (9, 10, 1),
        (10, 10, 1),
        (21, 10, 3),
        (-5, 10, 0),
        (2**53 + 1, 1, 2**53 + 1),
    ],
)
def test_pages_count(total: int, size: int, expected: int) -> None:
    assert pages_count(total, size) == expected


def test_utc_now_is_aware() -> None:
    assert utc_now().tzinfo is UTC


def test_host() -> None:
    request = MagicMock()
    request.client.host = "10.0.0.1"
    assert host(request) == "10.0.0.1"

    request.client = None
    assert host(request) == "unknown"
