"""HTTP server for the JSON-RPC gateway."""

from hubspot_mcp.server.app import CORS_HEADERS, MCP_PATHS, app, create_app

__all__ = ["app", "create_app", "CORS_HEADERS", "MCP_PATHS"]
