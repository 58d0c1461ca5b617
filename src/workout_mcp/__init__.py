"""
Workout MCP Server

Exposes a workout data API backed by Firestore, with AI-generated workout
recommendations from OpenAI, over two transports:
- stdio: MCP tool calls for a local, trusted client (default)
- rest: HTTP facade whose tool calls require a Firebase ID token

Both transports route through the same ToolDispatcher.
"""

import logging
from typing import Optional

from fastmcp import FastMCP

from workout_mcp import exercises
from workout_mcp import health
from workout_mcp import preferences
from workout_mcp import recommendations
from workout_mcp.clients import Services, create_services
from workout_mcp.config import Settings, load_settings
from workout_mcp.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "workout-mcp-server"
__version__ = "0.1.0"


def create_app(dispatcher: ToolDispatcher, app: Optional[FastMCP] = None) -> FastMCP:
    """Create the MCP app with all tools registered against the dispatcher."""
    if app is None:
        app = FastMCP(SERVER_NAME)

    app = health.register_tools(app, dispatcher)
    app = exercises.register_tools(app, dispatcher)
    app = preferences.register_tools(app, dispatcher)
    app = recommendations.register_tools(app, dispatcher)

    return app


def configure_logging(level: str = "INFO") -> None:
    """Log to stderr; stdout belongs to the stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(settings: Settings, services: Optional[Services] = None) -> None:
    """Start the configured transport and block until it exits."""
    if services is None:
        services = create_services(settings)
    dispatcher = services.dispatcher()

    if settings.transport == "rest":
        import uvicorn

        from workout_mcp.rest_api import create_rest_app

        rest_app = create_rest_app(dispatcher, services.verifier)
        logger.info(f"REST API listening on http://{settings.host}:{settings.port}")
        uvicorn.run(rest_app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    else:
        app = create_app(dispatcher)
        logger.info("Workout MCP server running on stdio")
        app.run()


def main():
    """Load settings from the environment and run the configured transport.

    Environment variables are documented in workout_mcp.config.
    """
    settings = load_settings()
    configure_logging(settings.log_level)
    run(settings)


if __name__ == "__main__":
    main()
