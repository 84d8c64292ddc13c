"""
Tool registry with dispatch table for MCP server.

Maps tool names to handlers; unknown names surface as JSON-RPC invalid params.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .errors import JsonRpcError
from .types import ToolResult, ToolSpec

if TYPE_CHECKING:
    from ..config import AutoTestIdConfig

logger = logging.getLogger("mcp.autotestid.registry")

HandlerFunc = Callable[["AutoTestIdConfig", dict[str, Any]], ToolResult]


class ToolRegistry:
    """Registry for tool handlers."""

    def __init__(self) -> None:
        self._specs: dict[str, ToolSpec] = {}

    def register(self, name: str, handler: HandlerFunc) -> None:
        """Register a tool handler."""
        self._specs[name] = ToolSpec(name=name, handler=handler)

    def register_many(self, handlers: dict[str, HandlerFunc]) -> None:
        """Register multiple handlers at once."""
        for name, handler in handlers.items():
            self.register(name, handler)

    def get(self, name: str) -> ToolSpec | None:
        return self._specs.get(name)

    def has(self, name: str) -> bool:
        return name in self._specs

    def dispatch(self, name: str, config: AutoTestIdConfig, arguments: dict[str, Any]) -> ToolResult:
        """
        Dispatch tool call to appropriate handler.

        Raises:
            JsonRpcError: If the tool is not registered
        """
        spec = self._specs.get(name)
        if spec is None:
            logger.info("unknown_tool name=%r", name)
            raise JsonRpcError.invalid_params(f"Unknown tool: {name}")
        return spec.handler(config, arguments)

    @property
    def tool_names(self) -> list[str]:
        """Get list of registered tool names."""
        return list(self._specs.keys())

    def __len__(self) -> int:
        return len(self._specs)


def create_default_registry() -> ToolRegistry:
    """Create registry with all default handlers."""
    from .handlers import ALL_HANDLERS

    registry = ToolRegistry()
    registry.register_many(ALL_HANDLERS)
    logger.info("Registered %d tool handlers", len(registry))
    return registry


__all__ = ["HandlerFunc", "ToolRegistry", "create_default_registry", "logger"]
