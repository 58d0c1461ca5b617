"""
Workout recommendation tool for the workout MCP server.

Asks the completion service for a plan built from the user's preferences
and the exercise catalog.
"""

from workout_mcp.dispatcher import ToolDispatcher
from workout_mcp.sdk.types import DEFAULT_TIME_AVAILABLE, DEFAULT_WORKOUT_TYPE


def register_tools(app, dispatcher: ToolDispatcher):
    """Register recommendation tools with the MCP app."""
    tool = dispatcher.get_tool("generate_workout_recommendation")

    @app.tool(name=tool.name, description=tool.description)
    async def generate_workout_recommendation(
        userId: str,
        workoutType: str = DEFAULT_WORKOUT_TYPE,
        timeAvailable: int = DEFAULT_TIME_AVAILABLE,
    ) -> str:
        """
        Args:
            userId: The user's ID
            workoutType: Kind of workout, e.g. "upper body" (default: "full body")
            timeAvailable: Minutes available for the session (default: 45)

        Returns:
            The generated workout plan as text
        """
        result = await dispatcher.invoke(
            tool.name,
            {"userId": userId, "workoutType": workoutType, "timeAvailable": timeAvailable},
        )
        return result.text

    return app
