"""
Health tool for the workout MCP server.
"""

from workout_mcp.dispatcher import ToolDispatcher


def register_tools(app, dispatcher: ToolDispatcher):
    """Register the health tool with the MCP app."""
    tool = dispatcher.get_tool("health_check")

    @app.tool(name=tool.name, description=tool.description)
    async def health_check() -> str:
        result = await dispatcher.invoke(tool.name)
        return result.text

    return app
