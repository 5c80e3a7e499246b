"""Tool-layer exceptions."""

from typing import Optional


class ToolError(Exception):
    """Base exception for tool dispatch errors."""

    def __init__(self, message: str, tool_name: Optional[str] = None):
        self.tool_name = tool_name
        super().__init__(message)


class UnknownToolError(ToolError):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}", tool_name)


class ToolValidationError(ToolError):
    """Raised when arguments cannot produce a well-formed remote call."""

    pass
