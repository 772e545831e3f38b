"""Server lifecycle orchestration.

This module provides the ConnectionManager class which owns the process-scoped
objects (registry, dispatcher, MCP server) and moves them through the server
lifecycle:

    UNINITIALIZED -> READY -> SERVING -> TERMINATED

- start(): validates config, registers all tools, freezes the registry and
  builds the MCP server (READY)
- serve(): attaches the transport and blocks until it closes (SERVING)
- stop() or transport close: TERMINATED

Startup failures raise from start() before any transport is attached.
"""

import asyncio
import enum
import logging
from typing import Optional

from .config import Config
from .handler_registry import ToolRegistry
from .mcp_server import McpServer
from .primitives import register_all_tools
from .primitives.essential.presentations import PresentationTools
from .request_processor import RequestProcessor

logger = logging.getLogger(__name__)


class ServerState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    SERVING = "serving"
    TERMINATED = "terminated"


class StartupError(Exception):
    """Server could not reach the READY state."""


class ConnectionManager:
    """Manages registry, dispatcher and MCP server lifecycle.

    Usage:
        >>> manager = ConnectionManager(Config())
        >>> manager.start()   # READY: tools registered, registry frozen
        >>> manager.serve()   # SERVING until the client disconnects

    Attributes:
        _config: Current configuration (identity, transport, host/port)
        _presentation_tools: Data source handed to the presentation tools
        _registry: Tool registry (None until started)
        _server: MCP server (None until started)
    """

    def __init__(
        self,
        config: Config,
        presentation_tools: Optional[PresentationTools] = None,
    ) -> None:
        self._config = config
        self._presentation_tools = presentation_tools
        self._registry: Optional[ToolRegistry] = None
        self._processor: Optional[RequestProcessor] = None
        self._server: Optional[McpServer] = None
        self._state = ServerState.UNINITIALIZED

    @property
    def state(self) -> ServerState:
        return self._state

    @property
    def registry(self) -> Optional[ToolRegistry]:
        return self._registry

    @property
    def processor(self) -> Optional[RequestProcessor]:
        return self._processor

    @property
    def server(self) -> Optional[McpServer]:
        return self._server

    def start(self) -> None:
        """Build registry, dispatcher and server.

        Idempotency:
            If already READY or SERVING, this method is a no-op.

        Raises:
            StartupError: If the configuration is invalid or the manager has
                already terminated.
        """
        if self._state in (ServerState.READY, ServerState.SERVING):
            return
        if self._state is ServerState.TERMINATED:
            raise StartupError("Server has terminated and cannot be restarted")

        valid, error = self._config.is_valid_for_mode()
        if not valid:
            raise StartupError(f"Invalid configuration: {error}")

        registry = ToolRegistry()
        register_all_tools(registry, self._presentation_tools)
        registry.freeze()

        self._registry = registry
        self._processor = RequestProcessor(registry)
        self._server = McpServer(self._config, registry, self._processor)
        self._state = ServerState.READY

        logger.info("Starting Java MCP Server...")
        logger.info(
            "Server is ready to accept connections via %s transport",
            self._config.transport,
        )
        logger.info("Available tools: %s", ", ".join(registry.names()))

    async def serve_async(self) -> None:
        """Run the transport until it closes, then mark the server TERMINATED."""
        self.start()
        if self._server is None:
            raise StartupError("Server was not built during startup")

        self._state = ServerState.SERVING
        try:
            await self._server.run()
        finally:
            self.stop()

    def serve(self) -> None:
        """Blocking entry point used by the CLI."""
        try:
            asyncio.run(self.serve_async())
        except KeyboardInterrupt:
            logger.info("Interrupted, shutting down")
            self.stop()

    def stop(self) -> None:
        """Mark the server TERMINATED. Safe to call multiple times."""
        if self._state is ServerState.TERMINATED:
            return
        self._state = ServerState.TERMINATED
        logger.info("Java MCP Server stopped")
