"""Tests for the server lifecycle."""
from __future__ import annotations

import pytest

from presentations_mcp_server.config import Config
from presentations_mcp_server.connection_manager import (
    ConnectionManager,
    ServerState,
    StartupError,
)
from presentations_mcp_server.primitives.essential.presentations import PresentationTools

from .sample_data import TWO_PRESENTATIONS


class TestLifecycle:
    """UNINITIALIZED -> READY -> SERVING -> TERMINATED."""

    def test_initial_state(self):
        """A new manager has built nothing yet."""
        manager = ConnectionManager(Config())
        assert manager.state is ServerState.UNINITIALIZED
        assert manager.registry is None
        assert manager.server is None

    def test_start_populates_and_freezes_registry(self, caplog):
        """start() registers both tools, freezes the registry and logs startup."""
        manager = ConnectionManager(Config())
        with caplog.at_level("INFO", logger="presentations_mcp_server"):
            manager.start()

        assert manager.state is ServerState.READY
        assert manager.registry.frozen
        assert manager.registry.names() == ["get_presentations", "get_presentations_by_year"]
        assert "Starting Java MCP Server..." in caplog.text
        assert "via stdio transport" in caplog.text
        assert "Available tools: get_presentations, get_presentations_by_year" in caplog.text

    def test_start_is_idempotent(self):
        """A second start() keeps the existing registry."""
        manager = ConnectionManager(Config())
        manager.start()
        registry = manager.registry

        manager.start()
        assert manager.registry is registry

    def test_invalid_config_fails_startup(self):
        """An invalid config raises StartupError and leaves the state unchanged."""
        manager = ConnectionManager(Config(transport="http", http_port=70000))

        with pytest.raises(StartupError, match="Port must be between 1 and 65535"):
            manager.start()
        assert manager.state is ServerState.UNINITIALIZED

    def test_stop_terminates(self):
        """stop() is final and can be called twice."""
        manager = ConnectionManager(Config())
        manager.start()
        manager.stop()
        manager.stop()  # idempotent

        assert manager.state is ServerState.TERMINATED
        with pytest.raises(StartupError, match="terminated"):
            manager.start()

    def test_custom_presentations(self):
        """An injected data source reaches the tools."""
        manager = ConnectionManager(Config(), PresentationTools(TWO_PRESENTATIONS))
        manager.start()

        from presentations_mcp_server.models import ToolRequest

        result = manager.processor.handle(ToolRequest("get_presentations"))
        assert len(result.contents) == 2

    @pytest.mark.anyio
    async def test_serve_async_reaches_terminated(self, monkeypatch):
        """The transport runs in SERVING and the manager ends TERMINATED."""
        manager = ConnectionManager(Config())
        states = []

        async def fake_run(self):
            states.append(manager.state)

        monkeypatch.setattr("presentations_mcp_server.mcp_server.McpServer.run", fake_run)
        await manager.serve_async()

        assert states == [ServerState.SERVING]
        assert manager.state is ServerState.TERMINATED

    @pytest.mark.anyio
    async def test_transport_failure_still_terminates(self, monkeypatch):
        """A transport error propagates and still terminates the manager."""
        manager = ConnectionManager(Config())

        async def broken_run(self):
            raise OSError("stdin closed")

        monkeypatch.setattr("presentations_mcp_server.mcp_server.McpServer.run", broken_run)
        with pytest.raises(OSError):
            await manager.serve_async()

        assert manager.state is ServerState.TERMINATED

    @pytest.mark.anyio
    async def test_serve_without_server_raises_startup_error(self, monkeypatch):
        """Serving fails with StartupError if startup left no server behind."""
        manager = ConnectionManager(Config())
        monkeypatch.setattr(manager, "start", lambda: None)

        with pytest.raises(StartupError, match="not built"):
            await manager.serve_async()
        assert manager.state is ServerState.UNINITIALIZED


class TestCapabilities:
    """Capability declaration built from the registered protocol handlers."""

    def test_tools_and_logging_declared(self):
        """Only the tools and logging capabilities are declared."""
        manager = ConnectionManager(Config())
        manager.start()

        capabilities = manager.server.capabilities()
        assert capabilities.tools is not None
        assert capabilities.logging is not None
        assert capabilities.resources is None
        assert capabilities.prompts is None

    def test_server_identity(self):
        """Server name and version come from the config."""
        manager = ConnectionManager(Config(server_name="talks", server_version="1.2.3"))
        manager.start()

        options = manager.server.server.create_initialization_options()
        assert options.server_name == "talks"
        assert options.server_version == "1.2.3"

    def test_http_app_mounts_configured_path(self):
        """The HTTP app serves MCP at the configured path only."""
        manager = ConnectionManager(Config(transport="http", http_path="/talks"))
        manager.start()

        app = manager.server.http_app()
        assert [route.path for route in app.routes] == ["/talks"]
