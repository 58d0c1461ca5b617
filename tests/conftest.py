"""
Shared pytest fixtures for workout MCP testing.

External services are replaced with mocks: the store, the completion
client and the token verifier all take their collaborators by injection.
"""
import pytest
from unittest.mock import AsyncMock, Mock

from workout_mcp.dispatcher import create_dispatcher
from workout_mcp.errors import InvalidTokenError, UnauthenticatedError
from workout_mcp.sdk.identity import VerifiedIdentity


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns either a list of TextContent or a tuple
    (list_of_TextContent, metadata_dict). This helper extracts the text from
    the first TextContent item.
    """
    # Handle tuple return: (content_list, metadata)
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


SAMPLE_EXERCISES = [
    {"id": "ex1", "name": "Squat", "muscle": "quadriceps", "equipment": "barbell"},
    {"id": "ex2", "name": "Push-up", "muscle": "chest", "equipment": "body only"},
    {"id": "ex3", "name": "Plank", "muscle": None, "equipment": None},
]

SAMPLE_USER = {
    "displayName": "Test User",
    "preferences": {
        "experienceLevel": "intermediate",
        "goal": "strength",
        "activityLevel": "moderate",
        "medicalConditions": "none",
    },
}


@pytest.fixture
def mock_store():
    """A FitnessStore stand-in holding three exercises and one user."""
    store = Mock()
    store.list_exercises = AsyncMock(side_effect=lambda limit: SAMPLE_EXERCISES[:limit])
    store.get_user = AsyncMock(return_value=SAMPLE_USER)
    return store


@pytest.fixture
def mock_completions():
    """A CompletionClient stand-in that always returns the same plan."""
    completions = Mock()
    completions.complete = AsyncMock(return_value="Warm up, then 3x10 squats.")
    return completions


@pytest.fixture
def dispatcher(mock_store, mock_completions):
    return create_dispatcher(mock_store, mock_completions)


@pytest.fixture
def mock_verifier():
    """Token verifier: no token is unauthenticated, "bad-token" is rejected,
    anything else verifies as user "abc"."""

    async def verify(token):
        if not token:
            raise UnauthenticatedError("Missing Firebase ID token")
        if token == "bad-token":
            raise InvalidTokenError("Invalid Firebase ID token")
        return VerifiedIdentity(subject_id="abc")

    verifier = Mock()
    verifier.verify = AsyncMock(side_effect=verify)
    return verifier
