"""
REST facade for the workout MCP tools.

Endpoints:
- GET  /           HTML index
- GET  /health     liveness, no backend calls
- GET  /tools      tool catalog
- POST /call-tool  authenticated tool call

/call-tool requires 'Authorization: Bearer <Firebase ID token>'. The verified
uid is bound to the tool's userId argument, so callers can only read their
own records.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Header, Request
from fastapi.responses import HTMLResponse, JSONResponse

from workout_mcp import api
from workout_mcp.dispatcher import ToolDispatcher
from workout_mcp.errors import AuthError, IdentityMismatchError, UnknownToolError
from workout_mcp.registry import tools_listing
from workout_mcp.sdk.identity import bearer_token

logger = logging.getLogger(__name__)

INDEX_HTML = """
<h2>Workout MCP Server</h2>
<p>Available endpoints:</p>
<ul>
  <li><code>GET /health</code> &ndash; Check server status</li>
  <li><code>GET /tools</code> &ndash; List available tools</li>
  <li><code>POST /call-tool</code> &ndash; Call a tool by name (requires a Firebase ID token)</li>
</ul>
"""


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_rest_app(dispatcher: ToolDispatcher, verifier) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        dispatcher: Tool dispatcher over the live (or fake) services
        verifier: Object with `async verify(token) -> VerifiedIdentity`

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(title="Workout MCP REST API", version="0.1.0")

    @app.get("/", response_class=HTMLResponse)
    async def index():
        return INDEX_HTML

    @app.get("/health")
    async def health():
        return api.health_status()

    @app.get("/tools")
    async def tools():
        return tools_listing()

    @app.post("/call-tool")
    async def call_tool(request: Request, authorization: Optional[str] = Header(None)):
        try:
            identity = await verifier.verify(bearer_token(authorization))
        except AuthError as e:
            return _error(401, str(e))

        try:
            body = await request.json()
        except ValueError:
            return _error(400, "Request body must be JSON")
        if not isinstance(body, dict) or not isinstance(body.get("name"), str):
            return _error(400, "Request body must include a tool name")
        arguments = body.get("arguments") or {}
        if not isinstance(arguments, dict):
            return _error(400, "arguments must be an object")

        try:
            result = await dispatcher.invoke(
                body["name"], arguments, caller_subject_id=identity.subject_id
            )
        except IdentityMismatchError:
            return _error(403, "User ID mismatch")
        except UnknownToolError as e:
            return _error(404, str(e))

        return result.to_envelope()

    return app
