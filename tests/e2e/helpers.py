"""Helper functions for E2E tests using a real MCP client session.

The server under test is the same McpServer the CLI runs; the client talks to
it over the SDK's in-memory transport, so every call goes through the full
initialize handshake, JSON-RPC encoding and capability negotiation.
"""
from __future__ import annotations

import contextlib
from typing import Any, AsyncIterator, Optional

from mcp import ClientSession, types
from mcp.server.lowlevel import Server
from mcp.shared.memory import create_connected_server_and_client_session

from presentations_mcp_server.config import Config
from presentations_mcp_server.connection_manager import ConnectionManager
from presentations_mcp_server.primitives.essential.presentations import PresentationTools


def started_server(
    presentation_tools: Optional[PresentationTools] = None,
    config: Optional[Config] = None,
) -> Server:
    """Build a READY server the way the CLI does and return the SDK server."""
    manager = ConnectionManager(config or Config(), presentation_tools)
    manager.start()
    return manager.server.server


@contextlib.asynccontextmanager
async def client_session(server: Server, logging_callback: Any = None) -> AsyncIterator[ClientSession]:
    """Open one more initialized client session against an existing server."""
    async with create_connected_server_and_client_session(
        server,
        logging_callback=logging_callback,
    ) as session:
        yield session


@contextlib.asynccontextmanager
async def connected_session(
    presentation_tools: Optional[PresentationTools] = None,
    config: Optional[Config] = None,
    logging_callback: Any = None,
) -> AsyncIterator[ClientSession]:
    """Start a server and yield an initialized client session connected to it.

    Args:
        presentation_tools: Data source for the presentation tools.
        config: Server configuration (identity etc.).
        logging_callback: Receives notifications/message log entries.
    """
    server = started_server(presentation_tools, config)
    async with client_session(server, logging_callback) as session:
        yield session


def texts(result: types.CallToolResult) -> list[str]:
    """Extract text blocks from a tools/call result."""
    return [block.text for block in result.content if isinstance(block, types.TextContent)]


async def tool_names(session: ClientSession) -> list[str]:
    result = await session.list_tools()
    return [tool.name for tool in result.tools]
