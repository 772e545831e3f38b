"""MCP server adapter exposing the tool registry over stdio or HTTP.

This module binds the ToolRegistry and RequestProcessor to the official MCP
SDK's low-level Server. The SDK owns JSON-RPC framing, the initialize
handshake and capability negotiation; this module only answers tools/list,
tools/call and logging/setLevel.

Architecture:
    - stdio transport (default): mcp.server.stdio.stdio_server()
    - HTTP transport: StreamableHTTPSessionManager mounted in a Starlette
      app and served by uvicorn
    - Tool calls run through RequestProcessor.handle_async, which executes
      the handler in a worker thread

Capabilities:
    - tools: declared because a tools/list handler is registered
    - logging: declared because a logging/setLevel handler is registered
"""

import contextlib
import logging
import weakref
from typing import Any, AsyncIterator, Optional

import uvicorn
from mcp import types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.session import ServerSession
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.routing import Mount

from .config import Config
from .handler_registry import ToolRegistry
from .models import ToolRequest
from .request_processor import RequestProcessor

logger = logging.getLogger(__name__)

# Severity order of MCP log levels (RFC 5424 names)
_LEVEL_ORDER: tuple[types.LoggingLevel, ...] = (
    "debug",
    "info",
    "notice",
    "warning",
    "error",
    "critical",
    "alert",
    "emergency",
)


class McpServer:
    """MCP protocol front end for a frozen ToolRegistry.

    Attributes:
        _config: Server configuration (identity, transport, HTTP host/port)
        _registry: Registry of tools, read-only while serving
        _processor: Dispatcher that turns every call into a ToolResult
        _server: Underlying SDK server
        _client_log_levels: Minimum level each client session asked for via
            logging/setLevel. Sessions that never asked are absent.
    """

    def __init__(
        self,
        config: Config,
        registry: ToolRegistry,
        processor: Optional[RequestProcessor] = None,
    ) -> None:
        self._config = config
        self._registry = registry
        self._processor = processor or RequestProcessor(registry)
        self._client_log_levels: weakref.WeakKeyDictionary[ServerSession, types.LoggingLevel] = (
            weakref.WeakKeyDictionary()
        )
        self._server: Server = Server(
            config.server_name,
            version=config.server_version,
        )
        self._install_handlers()

    @property
    def server(self) -> Server:
        return self._server

    def capabilities(self) -> types.ServerCapabilities:
        return self._server.get_capabilities(
            notification_options=NotificationOptions(),
            experimental_capabilities={},
        )

    def _install_handlers(self) -> None:
        server = self._server

        @server.list_tools()
        async def list_tools() -> list[types.Tool]:
            return [d.to_mcp_tool() for d in self._registry.descriptors()]

        # Input validation happens in the dispatcher so malformed arguments
        # produce the same Failure shape as every other error.
        @server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: Optional[dict[str, Any]]) -> types.CallToolResult:
            request = ToolRequest(tool_name=name, arguments=arguments)
            await self._notify_client("info", f"Executing {name} tool")

            result = await self._processor.handle_async(request)

            if result.is_error:
                await self._notify_client("error", f"{name} failed: {result.message}")
            return result.to_call_tool_result()

        @server.set_logging_level()
        async def set_logging_level(level: types.LoggingLevel) -> None:
            logger.info("Client set log level to %s", level)
            self._client_log_levels[self._server.request_context.session] = level

    async def _notify_client(self, level: types.LoggingLevel, message: str) -> None:
        """Send a notifications/message to the client if it opted in at this level."""
        try:
            session = self._server.request_context.session
        except LookupError:
            return
        threshold = self._client_log_levels.get(session)
        if threshold is None:
            return
        if _LEVEL_ORDER.index(level) < _LEVEL_ORDER.index(threshold):
            return
        await session.send_log_message(level=level, data=message, logger=self._config.server_name)

    async def run_stdio(self) -> None:
        """Serve over stdin/stdout until the client closes the pipe."""
        async with stdio_server() as (read_stream, write_stream):
            await self._server.run(
                read_stream,
                write_stream,
                self._server.create_initialization_options(),
            )

    def http_app(self) -> Starlette:
        """Build the Starlette ASGI app for the streamable HTTP transport."""
        session_manager = StreamableHTTPSessionManager(app=self._server)

        async def handle_streamable_http(scope: Any, receive: Any, send: Any) -> None:
            await session_manager.handle_request(scope, receive, send)

        @contextlib.asynccontextmanager
        async def lifespan(app: Starlette) -> AsyncIterator[None]:
            async with session_manager.run():
                yield

        return Starlette(
            routes=[Mount(self._config.http_path, app=handle_streamable_http)],
            lifespan=lifespan,
        )

    async def run_http(self) -> None:
        """Serve streamable HTTP with uvicorn until interrupted."""
        config = uvicorn.Config(
            self.http_app(),
            host=self._config.http_host,
            port=self._config.http_port,
            log_level="warning",
        )
        server = uvicorn.Server(config)
        await server.serve()

    async def run(self) -> None:
        if self._config.transport == "http":
            await self.run_http()
        else:
            await self.run_stdio()
