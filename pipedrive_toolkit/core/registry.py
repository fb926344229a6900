"""In-process tool registry acting as a host for the plugin."""

import logging
from typing import Any

from .models import ToolDefinition, ToolNotFoundError

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Minimal host runtime that collects registered tools.

    Exposes the same surface a host gives the plugin (plugin_config and
    register_tool), plus lookup and execution helpers used by the CLI.
    """

    def __init__(self, plugin_config: dict[str, Any] | None = None):
        self.plugin_config = plugin_config or {}
        self._tools: dict[str, ToolDefinition] = {}

    def register_tool(self, tool: ToolDefinition) -> None:
        """
        Register a tool.

        Note:
            If a tool with the same name exists, it will be overwritten.
        """
        if tool.name in self._tools:
            logger.warning(f"Tool '{tool.name}' already registered. Overwriting.")

        self._tools[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name} ({tool.api_version.value})")

    def get_tool(self, name: str) -> ToolDefinition:
        """
        Retrieve a tool by name.

        Raises:
            ToolNotFoundError: If the tool is not registered
        """
        if name not in self._tools:
            raise ToolNotFoundError(f"Tool '{name}' not found in registry")

        return self._tools[name]

    def list_tools(self) -> list[ToolDefinition]:
        """List all registered tools sorted by name."""
        return sorted(self._tools.values(), key=lambda t: t.name)

    def execute(self, name: str, params: dict[str, Any] | None = None, call_id: str = "") -> dict[str, Any]:
        """Execute a registered tool and return its content envelope."""
        return self.get_tool(name).execute(call_id, params)

    def reset(self) -> None:
        """Clear all registered tools."""
        self._tools = {}
        logger.debug("Registry reset")

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools
