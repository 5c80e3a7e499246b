"""Tool catalog, argument coercion and dispatch.

Handlers are auto-registered via the @register_tool decorator when
``hubspot_mcp.tools.handlers`` is imported below.
"""

from hubspot_mcp.tools.catalog import (
    TOOLS,
    ToolDefinition,
    get_tool,
    has_tool,
    list_tools,
    tool_names,
)
from hubspot_mcp.tools.dispatcher import (
    ToolDispatcher,
    ToolRegistry,
    register_tool,
    tool_registry,
)
from hubspot_mcp.tools.errors import (
    ToolError,
    ToolValidationError,
    UnknownToolError,
)

# Import handlers to trigger registration
import hubspot_mcp.tools.handlers  # noqa: F401, E402, I001

__all__ = [
    "TOOLS",
    "ToolDefinition",
    "get_tool",
    "has_tool",
    "list_tools",
    "tool_names",
    "ToolDispatcher",
    "ToolRegistry",
    "register_tool",
    "tool_registry",
    "ToolError",
    "ToolValidationError",
    "UnknownToolError",
]
