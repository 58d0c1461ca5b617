"""
Tool registry.

The static catalog of tools both transports expose. Descriptors are
immutable and defined at import time; there is no way to add or remove a
tool at runtime.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from workout_mcp.errors import UnknownToolError
from workout_mcp.sdk.types import (
    DEFAULT_EXERCISE_LIMIT,
    DEFAULT_TIME_AVAILABLE,
    DEFAULT_WORKOUT_TYPE,
)
from workout_mcp.utils import coerce_int

SUBJECT_FIELD = "userId"

STRING = "string"
INTEGER = "integer"


@dataclass(frozen=True)
class FieldSpec:
    """One input field of a tool."""
    name: str
    type: str
    description: str
    required: bool = False
    default: Any = None
    minimum: Optional[int] = None

    def coerce(self, value):
        """Normalize a supplied value to this field's type.

        Raises:
            ValueError: If the value does not fit the declared type
        """
        if self.type == INTEGER:
            number = coerce_int(value)
            if self.minimum is not None and number < self.minimum:
                raise ValueError(f"must be at least {self.minimum}, got {number}")
            return number
        if not isinstance(value, str):
            raise ValueError(f"expected a string, got {value!r}")
        return value

    def to_schema(self) -> dict:
        schema = {"type": self.type, "description": self.description}
        if self.default is not None:
            schema["default"] = self.default
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        return schema


@dataclass(frozen=True)
class ToolDescriptor:
    """A named operation with its declared input schema."""
    name: str
    description: str
    fields: Tuple[FieldSpec, ...] = ()
    subject_field: Optional[str] = None

    @property
    def required(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.required)

    def input_schema(self) -> dict:
        schema = {
            "type": "object",
            "properties": {f.name: f.to_schema() for f in self.fields},
        }
        if self.required:
            schema["required"] = list(self.required)
        return schema

    def to_dict(self) -> dict:
        """MCP tools/list entry."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }

    def validate(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """Check and normalize arguments against the declared fields.

        Unknown fields are dropped. Missing optional fields are left out so
        the operation's own defaults apply. Empty strings count as missing.

        Raises:
            ValueError: On a missing required field or a mistyped value
        """
        normalized = {}
        for f in self.fields:
            value = arguments.get(f.name)
            if value is None or value == "":
                if f.required:
                    raise ValueError(f"Missing required argument: {f.name}")
                continue
            try:
                normalized[f.name] = f.coerce(value)
            except ValueError as e:
                raise ValueError(f"Invalid argument {f.name}: {e}") from e
        return normalized


TOOLS: Tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="health_check",
        description="Simple health check. Confirms the server is up without touching any backend.",
    ),
    ToolDescriptor(
        name="get_exercises",
        description="Fetch exercises from the exercise catalog.",
        fields=(
            FieldSpec(
                "limit", INTEGER,
                f"Maximum number of exercises to return (default: {DEFAULT_EXERCISE_LIMIT})",
                default=DEFAULT_EXERCISE_LIMIT,
                minimum=0,
            ),
        ),
    ),
    ToolDescriptor(
        name="get_user_preferences",
        description="Fetch a user's stored profile and training preferences.",
        fields=(
            FieldSpec(SUBJECT_FIELD, STRING, "The user's ID", required=True),
        ),
        subject_field=SUBJECT_FIELD,
    ),
    ToolDescriptor(
        name="generate_workout_recommendation",
        description=(
            "Generate a personalized workout plan from the user's preferences "
            "and the exercise catalog."
        ),
        fields=(
            FieldSpec(SUBJECT_FIELD, STRING, "The user's ID", required=True),
            FieldSpec(
                "workoutType", STRING,
                f"Kind of workout, e.g. 'upper body' (default: {DEFAULT_WORKOUT_TYPE})",
                default=DEFAULT_WORKOUT_TYPE,
            ),
            FieldSpec(
                "timeAvailable", INTEGER,
                f"Minutes available for the session (default: {DEFAULT_TIME_AVAILABLE})",
                default=DEFAULT_TIME_AVAILABLE,
                minimum=1,
            ),
        ),
        subject_field=SUBJECT_FIELD,
    ),
)

_BY_NAME = {tool.name: tool for tool in TOOLS}


def list_tools() -> Tuple[ToolDescriptor, ...]:
    """All registered tools, in catalog order."""
    return TOOLS


def get_tool(name: str) -> ToolDescriptor:
    """Look up a descriptor by name.

    Raises:
        UnknownToolError: If no tool has that name
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownToolError(name) from None


def tools_listing() -> dict:
    """The {"tools": [...]} payload answering capability discovery."""
    return {"tools": [tool.to_dict() for tool in TOOLS]}
