"""Tool registry and dispatcher.

Handlers are async functions ``(connector, args) -> result`` registered
by tool name with ``@register_tool``. The dispatcher checks catalog
membership first, so a registered handler is unreachable unless its
tool is declared in the catalog.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from hubspot_mcp.connectors.hubspot import HubSpotConnector
from hubspot_mcp.tools import catalog
from hubspot_mcp.tools.errors import UnknownToolError

logger = logging.getLogger(__name__)

ToolHandler = Callable[[HubSpotConnector, Dict[str, Any]], Awaitable[Any]]


class ToolRegistry:
    """Registry of tool handlers."""

    def __init__(self):
        self._handlers: Dict[str, ToolHandler] = {}

    def register(self, name: str, handler: ToolHandler) -> None:
        """Register a handler by tool name."""
        self._handlers[name] = handler

    def get(self, name: str) -> Optional[ToolHandler]:
        """Get a handler by tool name."""
        return self._handlers.get(name)

    def has(self, name: str) -> bool:
        """Check if a handler is registered."""
        return name in self._handlers

    def names(self) -> List[str]:
        """Registered tool names."""
        return list(self._handlers)


# Global tool registry
tool_registry = ToolRegistry()


def register_tool(name: str) -> Callable[[ToolHandler], ToolHandler]:
    """Decorator to register a tool handler."""

    def decorator(func: ToolHandler) -> ToolHandler:
        tool_registry.register(name, func)
        return func

    return decorator


class ToolDispatcher:
    """Maps a tool name and argument bag to its handler.

    The connector is created lazily from configuration when not given,
    so a missing access token only fails the calls that need it.
    """

    def __init__(
        self,
        connector: Optional[HubSpotConnector] = None,
        registry: Optional[ToolRegistry] = None,
    ):
        self._connector = connector
        self.registry = registry or tool_registry

    @property
    def connector(self) -> HubSpotConnector:
        if self._connector is None:
            self._connector = HubSpotConnector.from_config()
        return self._connector

    async def dispatch(self, name: str, args: Optional[Dict[str, Any]] = None) -> Any:
        """Run one tool call.

        Raises:
            UnknownToolError: If the name is not in the catalog
            ToolValidationError: If arguments cannot form a valid request
            ConnectorError: On configuration or remote failures
        """
        handler = self.registry.get(name) if catalog.has_tool(name) else None
        if handler is None:
            raise UnknownToolError(name)

        logger.info(f"Calling tool {name}")
        return await handler(self.connector, dict(args or {}))
