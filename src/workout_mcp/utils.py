"""
Shared utility functions for the workout MCP server.

Deadlines for outbound calls and JSON rendering of store records.
"""

import asyncio
import json
from typing import Awaitable, Optional, TypeVar

from workout_mcp.errors import UpstreamTimeoutError

T = TypeVar("T")


async def with_deadline(awaitable: Awaitable[T], seconds: Optional[float], what: str = "upstream call") -> T:
    """Await an outbound call, bounded by a deadline.

    Args:
        awaitable: The pending outbound call
        seconds: Deadline in seconds; None or 0 disables the bound
        what: Short label used in the timeout message

    Returns:
        Whatever the awaitable returns

    Raises:
        UpstreamTimeoutError: If the deadline expires first
    """
    if not seconds:
        return await awaitable
    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except asyncio.TimeoutError as e:
        raise UpstreamTimeoutError(f"{what} timed out after {seconds:g}s") from e


def to_json(data) -> str:
    """Pretty-print records, stringifying values JSON can't encode (timestamps, refs)."""
    return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def coerce_int(value) -> int:
    """Accept ints and decimal-digit strings. Booleans and floats with a fraction are rejected.

    Raises:
        ValueError: If the value is not an integer
    """
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise ValueError(f"expected an integer, got {value!r}")
