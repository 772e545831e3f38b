"""Request processor that dispatches tool invocations to registered handlers.

This module provides the RequestProcessor class, the single boundary between
the MCP adapter and tool code. Every invocation produces a well-formed
ToolResult: unknown tools, malformed arguments and handler faults all come
back as Failure results instead of exceptions.

Thread Safety:
    - Stateless across calls; the registry is only read
    - handle() may run concurrently from several worker threads
    - handle_async() moves handler execution off the event loop so a slow
      handler never holds up other requests
"""

import asyncio
import logging

from .handler_registry import RegisteredTool, ToolRegistry
from .handler_wrappers import HandlerError, format_handler_error
from .models import Failure, ToolRequest, ToolResult

logger = logging.getLogger(__name__)


class RequestProcessor:
    """Dispatches ToolRequests against a ToolRegistry.

    Usage:
        >>> registry = ToolRegistry()
        >>> register_all_tools(registry)
        >>> processor = RequestProcessor(registry)
        >>> result = processor.handle(ToolRequest("get_presentations"))
        >>> result.is_error
        False

    Attributes:
        _registry: Registry of tools, shared read-only with the MCP adapter.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def handle(self, request: ToolRequest) -> ToolResult:
        """Execute a single tool request and return its result.

        Args:
            request: Tool request containing the tool name and arguments.

        Returns:
            Success with the handler's content blocks, or Failure with a
            human-readable message.

        Error Handling:
            - Unknown tool name -> Failure("Unknown tool: <name>")
            - HandlerError (including invalid arguments) -> Failure with the
              formatted message and hint
            - Any other exception is logged with its traceback and returned
              as Failure; it never propagates to the transport
        """
        entry = self._registry.lookup(request.tool_name)
        if entry is None:
            logger.warning(
                "Unknown tool requested: %s (request %s)",
                request.tool_name,
                request.request_id,
            )
            return Failure.from_message(f"Unknown tool: {request.tool_name}")

        logger.debug(
            "Dispatching %s (request %s) with arguments %s",
            request.tool_name,
            request.request_id,
            request.arguments,
        )

        try:
            return entry.handler(request.arguments)
        except HandlerError as e:
            logger.warning("Handler error in %s: %s (hint: %s)", entry.name, e.message, e.hint)
            return Failure.from_message(format_handler_error(e))
        except Exception as e:
            logger.exception("Error executing %s tool", entry.name)
            return Failure.from_message(f"{_error_prefix(entry)}: {e}")

    async def handle_async(self, request: ToolRequest) -> ToolResult:
        """Run handle() in a worker thread.

        Uses asyncio.to_thread so blocking handler work does not stall the
        event loop serving other MCP requests.
        """
        return await asyncio.to_thread(self.handle, request)


def _error_prefix(entry: RegisteredTool) -> str:
    return entry.error_prefix or f"Error executing {entry.name}"
