"""
Liveness: is the server up?
"""

from datetime import datetime, timezone

from workout_mcp.results import ToolResult

HEALTHY_TEXT = "MCP Server is healthy and running!"


async def health_check() -> ToolResult:
    """Static liveness check. Touches no external service."""
    return ToolResult.ok(HEALTHY_TEXT)


def health_status() -> dict:
    """Payload for the REST liveness endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
