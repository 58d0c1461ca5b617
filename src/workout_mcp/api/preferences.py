"""
User preferences: who is training?

A missing user is a normal outcome and comes back as a NOT_FOUND result.
"""

from workout_mcp.errors import UpstreamError
from workout_mcp.results import ErrorKind, ToolResult
from workout_mcp.sdk.store import FitnessStore
from workout_mcp.utils import to_json


def user_not_found(user_id: str) -> ToolResult:
    return ToolResult.not_found(f"User {user_id} not found")


async def get_user_preferences(store: FitnessStore, user_id: str) -> ToolResult:
    """The stored user record, rendered as JSON."""
    try:
        user = await store.get_user(user_id)
    except UpstreamError as e:
        return ToolResult.error(ErrorKind.UPSTREAM_FAILURE, f"Error fetching user preferences: {e}")
    if user is None:
        return user_not_found(user_id)
    return ToolResult.ok(f"User preferences for {user_id}:\n\n{to_json(user)}")
