"""
Exercise catalog: what can be trained?
"""

from workout_mcp.errors import UpstreamError
from workout_mcp.results import ErrorKind, ToolResult
from workout_mcp.sdk.store import FitnessStore
from workout_mcp.sdk.types import DEFAULT_EXERCISE_LIMIT
from workout_mcp.utils import to_json


async def list_exercises(store: FitnessStore, limit: int = DEFAULT_EXERCISE_LIMIT) -> ToolResult:
    """Up to `limit` exercise records, prefixed with how many were found."""
    try:
        exercises = await store.list_exercises(limit)
    except UpstreamError as e:
        return ToolResult.error(ErrorKind.UPSTREAM_FAILURE, f"Error fetching exercises: {e}")
    return ToolResult.ok(f"Found {len(exercises)} exercises:\n\n{to_json(exercises)}")
