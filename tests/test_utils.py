"""
Tests for shared utilities.
"""

import asyncio
import json
from datetime import datetime, timezone

import pytest

from workout_mcp.errors import UpstreamError, UpstreamTimeoutError
from workout_mcp.utils import coerce_int, to_json, with_deadline


class TestWithDeadline:
    @pytest.mark.asyncio
    async def test_returns_value(self):
        async def quick():
            return 42
        assert await with_deadline(quick(), 1) == 42

    @pytest.mark.asyncio
    async def test_timeout(self):
        with pytest.raises(UpstreamTimeoutError, match="user lookup timed out"):
            await with_deadline(asyncio.sleep(10), 0.01, "user lookup")

    @pytest.mark.asyncio
    async def test_timeout_is_upstream_error(self):
        with pytest.raises(UpstreamError):
            await with_deadline(asyncio.sleep(10), 0.01)

    @pytest.mark.asyncio
    async def test_no_deadline(self):
        async def quick():
            return "ok"
        assert await with_deadline(quick(), None) == "ok"
        assert await with_deadline(quick(), 0) == "ok"


class TestToJson:
    def test_pretty_printed(self):
        assert to_json({"a": 1}) == '{\n  "a": 1\n}'

    def test_timestamps_stringified(self):
        ts = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        data = json.loads(to_json({"createdAt": ts}))
        assert data["createdAt"] == str(ts)

    def test_unicode_kept(self):
        assert "Übung" in to_json({"name": "Übung"})


class TestCoerceInt:
    @pytest.mark.parametrize("value,expected", [(5, 5), ("12", 12), (" 3 ", 3), (4.0, 4), ("-2", -2)])
    def test_valid(self, value, expected):
        assert coerce_int(value) == expected

    @pytest.mark.parametrize("value", [True, False, "abc", 1.5, "1.5", None, [1]])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            coerce_int(value)

