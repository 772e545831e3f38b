"""Configuration for the presentations MCP server.

This module provides the configuration dataclass plus loaders for the
environment. Command line flags are applied on top with Config.replace().
"""

import os
from dataclasses import dataclass, asdict, replace as _replace
from typing import Any, Literal, Mapping, Optional

ENV_PREFIX = "PRESENTATIONS_MCP_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRANSPORTS = ("stdio", "http")


@dataclass
class Config:
    """
    Server configuration.

    All fields have sensible defaults - the server works without any
    configuration and speaks MCP over stdio.
    """

    # Server identity announced during the initialize handshake
    server_name: str = "java-mcp-server"
    server_version: str = "0.0.1"

    # Transport: stdio (default) or streamable HTTP
    transport: Literal["stdio", "http"] = "stdio"

    # HTTP settings (only used when transport == "http")
    http_host: str = "127.0.0.1"
    http_port: int = 8765
    http_path: str = "/mcp"

    log_level: str = "INFO"

    def is_valid_for_mode(self) -> tuple[bool, str]:
        """
        Check if config is valid for current transport.

        Returns:
            Tuple of (is_valid, error_message). If valid, error_message is empty string.

        Examples:
            >>> Config(transport="http", http_port=80).is_valid_for_mode()
            (True, '')

            >>> Config(transport="http", http_port=70000).is_valid_for_mode()
            (False, 'Port must be between 1 and 65535')
        """
        if self.log_level.upper() not in LOG_LEVELS:
            return False, f"Unknown log level: {self.log_level}"
        if self.transport == "stdio":
            return True, ""
        if self.transport == "http":
            if not (1 <= self.http_port <= 65535):
                return False, "Port must be between 1 and 65535"
            if not self.http_path.startswith("/"):
                return False, "HTTP path must start with '/'"
            return True, ""
        return False, f"Unknown transport: {self.transport}"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """
        Create from dict, using defaults for missing keys.

        Only includes keys that are actual dataclass fields, ignoring
        any extra keys in the input dict.

        Examples:
            >>> Config.from_dict({"http_port": 8080}).http_port
            8080
        """
        return cls(
            **{k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Create from PRESENTATIONS_MCP_* environment variables.

        Raises:
            ValueError: If PRESENTATIONS_MCP_HTTP_PORT is not an integer.
        """
        if environ is None:
            environ = os.environ

        data: dict[str, Any] = {}
        for name in cls.__dataclass_fields__:
            value = environ.get(ENV_PREFIX + name.upper())
            if value is None:
                continue
            if name == "http_port":
                try:
                    data[name] = int(value)
                except ValueError:
                    raise ValueError(
                        f"{ENV_PREFIX}HTTP_PORT must be an integer, got {value!r}"
                    ) from None
            else:
                data[name] = value
        return cls.from_dict(data)

    def replace(self, **overrides: Any) -> "Config":
        """Return a copy with the given fields changed. None values are ignored."""
        return _replace(self, **{k: v for k, v in overrides.items() if v is not None})
