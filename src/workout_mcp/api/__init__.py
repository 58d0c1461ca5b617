"""
High-Level API: the operations behind every tool.

Every function takes its service clients explicitly and returns a
ToolResult. Upstream failures are caught here and never propagate.

Modules:
    health         : Is the server up?
    exercises      : What can be trained?
    preferences    : Who is training?
    recommendations: What should I do today?
"""

from workout_mcp.api.health import health_check, health_status
from workout_mcp.api.exercises import list_exercises
from workout_mcp.api.preferences import get_user_preferences
from workout_mcp.api.recommendations import build_prompt, generate_workout_recommendation

__all__ = [
    "health_check", "health_status",
    "list_exercises",
    "get_user_preferences",
    "build_prompt", "generate_workout_recommendation",
]
