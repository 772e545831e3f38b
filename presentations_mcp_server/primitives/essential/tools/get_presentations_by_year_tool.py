"""Get presentations by year tool - parameters, handler and registration in one file."""
import logging

from pydantic import BaseModel, ConfigDict, Field

from ....handler_registry import ToolRegistry
from ....tool_decorator import Tool
from ..presentations import PresentationTools, format_presentation

logger = logging.getLogger(__name__)


class GetPresentationsByYearParams(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    year: int = Field(description="Filter presentations by year")


def register_get_presentations_by_year_tool(
    registry: ToolRegistry,
    presentation_tools: PresentationTools,
) -> None:
    """Register the get_presentations_by_year tool."""

    @Tool(
        registry,
        "get_presentations_by_year",
        "Get presentations filtered by year",
        params=GetPresentationsByYearParams,
        error_prefix="Error retrieving presentations",
    )
    def get_presentations_by_year(params: GetPresentationsByYearParams) -> list[str]:
        logger.info("Executing get_presentations_by_year tool for %d", params.year)

        presentations = presentation_tools.get_presentations_by_year(params.year)
        logger.info("Retrieved %d presentations for %d", len(presentations), params.year)

        if not presentations:
            return [f"No presentations found for year {params.year}"]
        return [format_presentation(p) for p in presentations]
