"""Core value types shared by the registry, dispatcher and MCP adapter.

ToolDescriptor describes a tool on the wire, ToolRequest is a single
invocation, and ToolResult (Success | Failure) is what every handler and
the dispatcher hand back. Content blocks are the SDK's own TextContent so
they can be passed to the client without conversion.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for
from mcp import types


@dataclass(frozen=True)
class ToolDescriptor:
    """Wire-visible description of a tool.

    Attributes:
        name: Unique tool identifier exposed to MCP clients.
        description: Shown to the AI to understand when/how to use the tool.
        input_schema: JSON Schema describing the accepted arguments. Must be
            an object schema.

    Raises:
        ValueError: If the name is empty or the schema is not a valid
            JSON Schema object description.
    """

    name: str
    description: str
    input_schema: dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Tool name must not be empty")

        if self.input_schema.get("type") != "object":
            raise ValueError(
                f"Input schema for {self.name} must describe an object, "
                f"got type={self.input_schema.get('type')!r}"
            )

        try:
            validator_for(self.input_schema).check_schema(self.input_schema)
        except SchemaError as e:
            raise ValueError(f"Invalid input schema for {self.name}: {e.message}") from e

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


@dataclass
class ToolRequest:
    """Request to execute a registered tool.

    Attributes:
        tool_name: Name of the tool to execute (e.g., "get_presentations").
        arguments: Tool-specific arguments as a dictionary. ``None`` is
            treated as no arguments.
        request_id: Identifier used to correlate log lines. A UUID is
            generated when not supplied.

    Example:
        >>> request = ToolRequest(
        ...     tool_name="get_presentations",
        ...     arguments={"operation": "list"},
        ... )
    """

    tool_name: str
    arguments: Optional[Mapping[str, Any]] = None
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        self.arguments = dict(self.arguments or {})


def text_block(text: str) -> types.TextContent:
    return types.TextContent(type="text", text=text)


@dataclass(frozen=True)
class Success:
    """Tool completed normally. ``contents`` keeps handler order."""

    contents: tuple[types.TextContent, ...] = ()

    is_error = False

    @property
    def texts(self) -> list[str]:
        return [block.text for block in self.contents]

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(content=list(self.contents), isError=False)


@dataclass(frozen=True)
class Failure:
    """Tool could not complete. Always carries readable text for the client."""

    contents: tuple[types.TextContent, ...] = ()

    is_error = True

    @classmethod
    def from_message(cls, message: str) -> "Failure":
        return cls((text_block(message),))

    @property
    def texts(self) -> list[str]:
        return [block.text for block in self.contents]

    @property
    def message(self) -> str:
        return "\n".join(self.texts)

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(content=list(self.contents), isError=True)


ToolResult = Union[Success, Failure]
