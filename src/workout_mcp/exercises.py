"""
Exercise catalog tool for the workout MCP server.

Lists exercises from the catalog collection.
"""

from workout_mcp.dispatcher import ToolDispatcher
from workout_mcp.sdk.types import DEFAULT_EXERCISE_LIMIT


def register_tools(app, dispatcher: ToolDispatcher):
    """Register exercise tools with the MCP app."""
    tool = dispatcher.get_tool("get_exercises")

    @app.tool(name=tool.name, description=tool.description)
    async def get_exercises(limit: int = DEFAULT_EXERCISE_LIMIT) -> str:
        """
        Args:
            limit: Maximum number of exercises to return (default: 20)

        Returns:
            Count of exercises found, followed by the records as JSON
        """
        result = await dispatcher.invoke(tool.name, {"limit": limit})
        return result.text

    return app
