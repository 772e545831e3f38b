"""Registry of tool descriptors and their handlers.

The registry is built once during startup (tools register themselves through
the @Tool decorator), frozen, and then shared read-only by the dispatcher and
the MCP adapter for the lifetime of the process.
"""
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from .models import ToolDescriptor, ToolResult

Handler = Callable[[dict[str, Any]], ToolResult]


@dataclass(frozen=True)
class RegisteredTool:
    descriptor: ToolDescriptor
    handler: Handler
    # Prefix used when an unexpected exception escapes the handler
    error_prefix: Optional[str] = None

    @property
    def name(self) -> str:
        return self.descriptor.name


class ToolRegistry:
    """Name -> (descriptor, handler) mapping, read-only once frozen."""

    def __init__(self) -> None:
        self._tools: dict[str, RegisteredTool] = {}
        self._frozen = False

    def register(
        self,
        descriptor: ToolDescriptor,
        handler: Handler,
        *,
        error_prefix: Optional[str] = None,
    ) -> RegisteredTool:
        """Register a handler for a tool name.

        Raises:
            ValueError: If a tool with the same name is already registered.
            RuntimeError: If the registry has been frozen.
        """
        if self._frozen:
            raise RuntimeError(f"Registry is frozen, cannot register: {descriptor.name}")
        if descriptor.name in self._tools:
            raise ValueError(f"Tool already registered: {descriptor.name}")

        entry = RegisteredTool(descriptor, handler, error_prefix)
        self._tools[descriptor.name] = entry
        return entry

    def lookup(self, name: str) -> Optional[RegisteredTool]:
        return self._tools.get(name)

    def get(self, name: str) -> RegisteredTool:
        """Get tool by name. Raises KeyError if not found."""
        if name not in self._tools:
            raise KeyError(f"Unknown tool: {name}")
        return self._tools[name]

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> list[str]:
        return list(self._tools)

    def descriptors(self) -> list[ToolDescriptor]:
        return [entry.descriptor for entry in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[RegisteredTool]:
        return iter(list(self._tools.values()))

    def __len__(self) -> int:
        return len(self._tools)
