"""Shared fixtures for unit and e2e tests."""
from __future__ import annotations

import pytest

from presentations_mcp_server.handler_registry import ToolRegistry
from presentations_mcp_server.primitives import register_all_tools
from presentations_mcp_server.primitives.essential.presentations import PresentationTools
from presentations_mcp_server.request_processor import RequestProcessor

from .sample_data import TWO_PRESENTATIONS


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio; the dispatcher uses asyncio.to_thread."""
    return "asyncio"


@pytest.fixture
def registry() -> ToolRegistry:
    """Frozen registry with all built-in tools."""
    reg = ToolRegistry()
    register_all_tools(reg)
    reg.freeze()
    return reg


@pytest.fixture
def processor(registry: ToolRegistry) -> RequestProcessor:
    return RequestProcessor(registry)


@pytest.fixture
def two_record_processor() -> RequestProcessor:
    """Processor serving only the two-record sample set."""
    reg = ToolRegistry()
    register_all_tools(reg, PresentationTools(TWO_PRESENTATIONS))
    reg.freeze()
    return RequestProcessor(reg)
