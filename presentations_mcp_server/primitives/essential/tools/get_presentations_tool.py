"""Get presentations tool - parameters, handler and registration in one file."""
from typing import Union
import logging

from pydantic import BaseModel, ConfigDict, Field
from pydantic.json_schema import SkipJsonSchema

from ....handler_registry import ToolRegistry
from ....tool_decorator import Tool
from ..presentations import PresentationTools, format_presentation

logger = logging.getLogger(__name__)


class GetPresentationsParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Accepted for compatibility with existing clients; has no effect on the result
    operation: Union[str, SkipJsonSchema[None]] = Field(
        default=None,
        description="Type of operation to perform (currently not used)",
    )


def register_get_presentations_tool(
    registry: ToolRegistry,
    presentation_tools: PresentationTools,
) -> None:
    """Register the get_presentations tool."""

    @Tool(
        registry,
        "get_presentations",
        "Get a list of all presentations from Java",
        params=GetPresentationsParams,
        error_prefix="Error retrieving presentations",
    )
    def get_presentations(params: GetPresentationsParams) -> list[str]:
        """
        Return every presentation as a text block, in insertion order.

        Each block has the form "Title: ...\\nURL: ...\\nYear: ...\\n\\n".
        The operation argument is logged and otherwise ignored.
        """
        logger.info("Executing get_presentations tool")
        logger.debug("Tool arguments received: %s", params.model_dump())

        presentations = presentation_tools.get_presentations()
        logger.info("Retrieved %d presentations", len(presentations))

        return [format_presentation(p) for p in presentations]
