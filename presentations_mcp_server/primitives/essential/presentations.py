"""Presentation records served by the presentation tools."""
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Presentation:
    title: str
    url: str
    year: int


DEFAULT_PRESENTATIONS: tuple[Presentation, ...] = (
    Presentation(
        "Java 24 Launch - Live from JavaOne 2025",
        "https://www.youtube.com/watch?v=mk_2MIWxLI0",
        2025,
    ),
    Presentation(
        "Java Turns 30 - Live from JavaOne 2025",
        "https://www.youtube.com/watch?v=GwR7Gvi80Xo",
        2025,
    ),
    Presentation(
        "Java for AI - Live from JavaOne 2025",
        "https://www.youtube.com/watch?v=V5-t1v-0Dbk",
        2025,
    ),
)


class PresentationTools:
    """Read-only access to a fixed set of presentations.

    The set is copied into a tuple on construction and never changes, so one
    instance can be shared by every request.
    """

    def __init__(self, presentations: Optional[Iterable[Presentation]] = None) -> None:
        if presentations is None:
            presentations = DEFAULT_PRESENTATIONS
        self._presentations = tuple(presentations)

    def get_presentations(self) -> list[Presentation]:
        return list(self._presentations)

    def get_presentations_by_year(self, year: int) -> list[Presentation]:
        return [p for p in self._presentations if p.year == year]


def format_presentation(presentation: Presentation) -> str:
    """Render one presentation as a text content block.

    Example:
        >>> format_presentation(Presentation("Talk", "https://x", 2025))
        'Title: Talk\\nURL: https://x\\nYear: 2025\\n\\n'
    """
    return (
        f"Title: {presentation.title}\n"
        f"URL: {presentation.url}\n"
        f"Year: {presentation.year}\n\n"
    )
