"""
Exception types for the workout MCP server.

Dispatch and authentication errors propagate to the transport, which maps
them to status codes. Upstream errors never leave an operation: they are
caught there and rendered as text.
"""


class WorkoutMCPError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(WorkoutMCPError):
    """Required configuration is missing or malformed. Fatal at startup."""


class AuthError(WorkoutMCPError):
    """Bearer token could not be turned into a verified identity."""


class UnauthenticatedError(AuthError):
    """No bearer token was supplied."""


class InvalidTokenError(AuthError):
    """The identity provider rejected the token."""


class IdentityMismatchError(WorkoutMCPError):
    """The caller asked for a subject other than their own."""

    def __init__(self, caller_subject_id: str, requested_subject_id: str):
        super().__init__(
            f"Caller {caller_subject_id} may not act for {requested_subject_id}"
        )
        self.caller_subject_id = caller_subject_id
        self.requested_subject_id = requested_subject_id


class UnknownToolError(WorkoutMCPError, LookupError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class UpstreamError(WorkoutMCPError):
    """Document store, identity provider or completion service failed."""


class UpstreamTimeoutError(UpstreamError):
    """An outbound call did not finish before its deadline."""
