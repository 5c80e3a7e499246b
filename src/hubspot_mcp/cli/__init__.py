"""CLI package for the HubSpot MCP gateway.

The main Typer app is created in app.py and commands are registered
by importing each command module.
"""

# Import command modules to register commands with the app
import hubspot_mcp.cli.commands_server  # noqa: F401, E402
import hubspot_mcp.cli.commands_tools  # noqa: F401, E402
from hubspot_mcp.cli.app import app

__all__ = ["app"]
