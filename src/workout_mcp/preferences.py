"""
User preferences tool for the workout MCP server.

Stdio callers are trusted, so the user id is taken as given.
"""

from workout_mcp.dispatcher import ToolDispatcher


def register_tools(app, dispatcher: ToolDispatcher):
    """Register user preference tools with the MCP app."""
    tool = dispatcher.get_tool("get_user_preferences")

    @app.tool(name=tool.name, description=tool.description)
    async def get_user_preferences(userId: str) -> str:
        """
        Args:
            userId: The user's ID

        Returns:
            The user's stored preferences as JSON, or a "not found" message
        """
        result = await dispatcher.invoke(tool.name, {"userId": userId})
        return result.text

    return app
