# primitives/tools.py
"""Central tool registration module."""

from typing import Optional

from ..handler_registry import ToolRegistry
from .essential.presentations import PresentationTools
from .essential.tools.get_presentations_tool import register_get_presentations_tool
from .essential.tools.get_presentations_by_year_tool import register_get_presentations_by_year_tool


def register_all_tools(
    registry: ToolRegistry,
    presentation_tools: Optional[PresentationTools] = None,
) -> None:
    """Register all MCP tools with the registry.

    Args:
        registry: Registry to populate. Not frozen here; the caller freezes
            it once startup is complete.
        presentation_tools: Data source for the presentation tools. Defaults
            to the built-in presentation set.
    """
    if presentation_tools is None:
        presentation_tools = PresentationTools()

    register_get_presentations_tool(registry, presentation_tools)
    register_get_presentations_by_year_tool(registry, presentation_tools)
