from typing import Any, Callable, Optional
import logging

from pydantic import BaseModel

from .handler_registry import ToolRegistry
from .handler_wrappers import _auto_response, _validate_params
from .models import ToolDescriptor

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Tool - Decorator class that registers functions as MCP tools
# ------------------------------------------------------------------------------
# Usage:
#   @Tool(registry, "tool_name", "Description for AI", params=MyParams)
#   def my_tool(params: MyParams) -> list[str]:
#       ...
#
# Parameters:
#   - registry: ToolRegistry the tool is added to
#   - name: Unique tool identifier exposed to MCP clients
#   - description: Shown to AI to understand when/how to use the tool
#   - params: pydantic model describing the arguments. Its JSON schema is the
#     tool's inputSchema. None means the tool takes no arguments.
#   - error_prefix: Text put in front of unexpected failures
#
# What happens at registration time:
#   1. Wraps function with _auto_response (normalizes return values)
#   2. Wraps with _validate_params (raw dict -> validated model)
#   3. Registers descriptor + wrapped handler with the registry
# ------------------------------------------------------------------------------
class Tool:
    def __init__(
        self,
        registry: ToolRegistry,
        name: str,
        description: str,
        handler: Optional[Callable[..., Any]] = None,
        *,
        params: Optional[type[BaseModel]] = None,
        error_prefix: Optional[str] = None,
    ):
        self.registry = registry
        self.name = name
        self.description = description
        self.params = params
        self.error_prefix = error_prefix

        # Support both @Tool(...) decorator and Tool(..., handler=fn) direct call
        if handler is not None:
            self._register(handler)

    # Called when used as @Tool(...) decorator
    def __call__(self, func: Callable[..., Any]) -> Callable[..., Any]:
        self._register(func)
        return func  # Return original so it can be called directly for testing

    def _register(self, func: Callable[..., Any]) -> None:
        descriptor = ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=input_schema_for(self.params),
        )

        # Execution order: _validate_params -> _auto_response -> func
        wrapped = _auto_response(func)
        wrapped = _validate_params(wrapped, self.name, self.params)

        self.registry.register(descriptor, wrapped, error_prefix=self.error_prefix)
        logger.debug("Registered tool %s", self.name)


# ------------------------------------------------------------------------------
# input_schema_for - JSON schema advertised in tools/list
# ------------------------------------------------------------------------------
# pydantic emits "additionalProperties": false for models configured with
# extra="forbid", which keeps the wire schema in line with what validation
# actually accepts.
# ------------------------------------------------------------------------------
def input_schema_for(params: Optional[type[BaseModel]]) -> dict[str, Any]:
    if params is None:
        return {"type": "object", "properties": {}, "additionalProperties": False}
    return params.model_json_schema()
