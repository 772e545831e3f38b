# handler_wrappers.py
"""Shared wrappers and helpers for tool handlers.

This module provides the wrappers the @Tool decorator stacks around a tool
function:
- Argument validation against the tool's pydantic parameter model
- Response normalization into a ToolResult

Error Handling Strategy:
    Handler functions can raise HandlerError for structured errors with hints,
    or any other exception for unexpected failures. Neither is caught here:
    the RequestProcessor is the single boundary that turns exceptions into
    Failure results, so a tool can never crash the server.
"""

from typing import Any, Callable, Optional
from functools import wraps
import logging

from mcp import types
from pydantic import BaseModel, ValidationError

from .models import Failure, Success, ToolResult, text_block

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# HandlerError - Custom exception for handler failures with structured error info
# ------------------------------------------------------------------------------
# Raise this in tool functions to return a clean error to the AI client.
# - message: What went wrong
# - hint: Actionable suggestion for the AI (optional)
# - **data: Extra context like year, operation, etc. (optional)
#
# Example: raise HandlerError("No such year", hint="Use a four digit year", year=25)
# ------------------------------------------------------------------------------
class HandlerError(Exception):
    """Structured error for tool handlers.

    Raise this exception to signal an expected error to the AI client with
    optional hints and additional context data. The RequestProcessor formats
    it with format_handler_error() and returns it as a Failure result.

    Args:
        message: Description of what went wrong
        hint: Actionable suggestion for the AI (optional)
        **data: Extra context (optional)
    """
    def __init__(self, message: str, hint: Optional[str] = None, **data: Any):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.data = data


class InvalidArgumentsError(HandlerError):
    """Arguments did not match the tool's parameter model."""


def format_handler_error(error: HandlerError) -> str:
    """Render a HandlerError as the text shown to the client."""
    msg = error.message
    if error.hint:
        msg += f" (hint: {error.hint})"
    if error.data:
        msg += f" (context: {error.data})"
    return msg


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "arguments"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


# ------------------------------------------------------------------------------
# _validate_params - Validate raw arguments against the tool's pydantic model
# ------------------------------------------------------------------------------
# The wrapped function receives the validated model instance instead of the
# raw dict. ValidationError becomes InvalidArgumentsError so the client sees
# which field is wrong rather than a generic fault.
# ------------------------------------------------------------------------------
def _validate_params(
    func: Callable[..., Any],
    tool_name: str,
    params: Optional[type[BaseModel]],
) -> Callable[[dict[str, Any]], Any]:
    @wraps(func)
    def wrapper(arguments: dict[str, Any]) -> Any:
        if params is None:
            if arguments:
                raise InvalidArgumentsError(
                    f"Invalid arguments for {tool_name}: tool takes no arguments",
                    received=sorted(arguments),
                )
            return func()
        try:
            validated = params.model_validate(arguments)
        except ValidationError as e:
            raise InvalidArgumentsError(
                f"Invalid arguments for {tool_name}: {_describe_validation_error(e)}"
            ) from e
        return func(validated)

    return wrapper


# ------------------------------------------------------------------------------
# _auto_response - Normalize return values to a ToolResult
# ------------------------------------------------------------------------------
#   - Success / Failure -> pass through unchanged
#   - None -> Success with no content
#   - str / TextContent -> Success with one block
#   - list/tuple of str or TextContent -> Success with one block per item
# ------------------------------------------------------------------------------
def _to_block(item: Any) -> types.TextContent:
    if isinstance(item, types.TextContent):
        return item
    if isinstance(item, str):
        return text_block(item)
    raise TypeError(f"Unsupported content block: {type(item).__name__}")


def _auto_response(func: Callable[..., Any]) -> Callable[..., ToolResult]:
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> ToolResult:
        result = func(*args, **kwargs)

        if isinstance(result, (Success, Failure)):
            return result

        if result is None:
            return Success()

        if isinstance(result, (str, types.TextContent)):
            return Success((_to_block(result),))

        if isinstance(result, (list, tuple)):
            return Success(tuple(_to_block(item) for item in result))

        raise TypeError(f"Unsupported tool return type: {type(result).__name__}")

    return wrapper
