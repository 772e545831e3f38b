"""
Presentations MCP Server - Model Context Protocol server for Java presentations.

Exposes a fixed set of presentation records to AI assistants as MCP tools
(get_presentations, get_presentations_by_year) over stdio or streamable HTTP.
"""

__version__ = "0.0.1"

from .config import Config
from .connection_manager import ConnectionManager, ServerState, StartupError
from .handler_registry import RegisteredTool, ToolRegistry
from .handler_wrappers import HandlerError, InvalidArgumentsError
from .models import Failure, Success, ToolDescriptor, ToolRequest, ToolResult
from .request_processor import RequestProcessor
from .tool_decorator import Tool

__all__ = [
    "Config",
    "ConnectionManager",
    "Failure",
    "HandlerError",
    "InvalidArgumentsError",
    "RegisteredTool",
    "RequestProcessor",
    "ServerState",
    "StartupError",
    "Success",
    "Tool",
    "ToolDescriptor",
    "ToolRegistry",
    "ToolRequest",
    "ToolResult",
]
