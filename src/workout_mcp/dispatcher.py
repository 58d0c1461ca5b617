"""
Tool dispatcher.

Routes a (name, arguments) call to its operation. Before the operation runs,
the arguments pass through a chain of pre-invocation hooks; each hook reads
the caller's identity and returns an amended copy of the arguments.

The default chain holds one hook, bind_caller_subject, which is what lets an
authenticated transport restrict callers to their own records without every
operation re-checking. A transport with no caller identity (stdio) passes
caller_subject_id=None and the hook leaves the arguments alone.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, Mapping, Optional, Sequence

from workout_mcp import api
from workout_mcp.errors import IdentityMismatchError, UnknownToolError
from workout_mcp.registry import TOOLS, ToolDescriptor
from workout_mcp.results import ErrorKind, ToolResult
from workout_mcp.sdk.completions import CompletionClient
from workout_mcp.sdk.store import FitnessStore
from workout_mcp.sdk.types import (
    DEFAULT_EXERCISE_LIMIT,
    DEFAULT_TIME_AVAILABLE,
    DEFAULT_WORKOUT_TYPE,
)

logger = logging.getLogger(__name__)

Arguments = Dict[str, Any]
Handler = Callable[[Arguments], Awaitable[ToolResult]]
Hook = Callable[[ToolDescriptor, Arguments, Optional[str]], Arguments]


def bind_caller_subject(
    tool: ToolDescriptor, arguments: Arguments, caller_subject_id: Optional[str]
) -> Arguments:
    """Pin the tool's subject field to the verified caller.

    No-op when the tool has no subject field or there is no caller identity.
    An explicit subject that differs from the caller is refused; an absent
    or empty one is filled in.

    Raises:
        IdentityMismatchError: If the arguments name another subject
    """
    if tool.subject_field is None or not caller_subject_id:
        return arguments

    requested = arguments.get(tool.subject_field)
    if requested and requested != caller_subject_id:
        logger.warning(
            f"Identity mismatch on {tool.name}: caller {caller_subject_id} "
            f"requested {requested}"
        )
        raise IdentityMismatchError(caller_subject_id, str(requested))

    bound = dict(arguments)
    bound[tool.subject_field] = caller_subject_id
    return bound


DEFAULT_HOOKS: Sequence[Hook] = (bind_caller_subject,)


class ToolDispatcher:
    """
    Maps tool names to operation handlers.

    Every registered tool must have a handler. The dispatcher does not look
    inside the ToolResult a handler returns.
    """

    def __init__(
        self,
        handlers: Mapping[str, Handler],
        tools: Iterable[ToolDescriptor] = TOOLS,
        hooks: Sequence[Hook] = DEFAULT_HOOKS,
    ):
        self._tools = {tool.name: tool for tool in tools}
        missing = sorted(set(self._tools) - set(handlers))
        if missing:
            raise ValueError(f"No handler for tools: {', '.join(missing)}")
        self._handlers = {name: handlers[name] for name in self._tools}
        self._hooks = tuple(hooks)

    def list_tools(self) -> tuple:
        return tuple(self._tools.values())

    def get_tool(self, name: str) -> ToolDescriptor:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    async def invoke(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
        caller_subject_id: Optional[str] = None,
    ) -> ToolResult:
        """
        Run a tool.

        Args:
            name: Registered tool name
            arguments: Raw arguments from the transport (not mutated)
            caller_subject_id: Verified caller, or None on trusted transports

        Returns:
            The operation's ToolResult; invalid arguments come back as an
            INVALID_ARGUMENTS error result

        Raises:
            UnknownToolError: If the name is not registered
            IdentityMismatchError: If the arguments name another subject
        """
        tool = self.get_tool(name)

        args = dict(arguments or {})
        for hook in self._hooks:
            args = hook(tool, args, caller_subject_id)

        try:
            args = tool.validate(args)
        except ValueError as e:
            logger.info(f"Rejected {name} call: {e}")
            return ToolResult.error(ErrorKind.INVALID_ARGUMENTS, str(e))

        logger.info(f"Dispatching {name}")
        return await self._handlers[name](args)


def create_dispatcher(
    store: FitnessStore,
    completions: CompletionClient,
    hooks: Sequence[Hook] = DEFAULT_HOOKS,
) -> ToolDispatcher:
    """Wire every registered tool to its operation over the given clients."""

    async def health_check(args: Arguments) -> ToolResult:
        return await api.health_check()

    async def get_exercises(args: Arguments) -> ToolResult:
        # limit=0 means "use the default"
        return await api.list_exercises(store, args.get("limit") or DEFAULT_EXERCISE_LIMIT)

    async def get_user_preferences(args: Arguments) -> ToolResult:
        return await api.get_user_preferences(store, args["userId"])

    async def generate_workout_recommendation(args: Arguments) -> ToolResult:
        return await api.generate_workout_recommendation(
            store,
            completions,
            args["userId"],
            workout_type=args.get("workoutType", DEFAULT_WORKOUT_TYPE),
            time_available=args.get("timeAvailable", DEFAULT_TIME_AVAILABLE),
        )

    handlers = {
        "health_check": health_check,
        "get_exercises": get_exercises,
        "get_user_preferences": get_user_preferences,
        "generate_workout_recommendation": generate_workout_recommendation,
    }
    return ToolDispatcher(handlers, hooks=hooks)
