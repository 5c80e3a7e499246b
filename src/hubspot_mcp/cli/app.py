"""CLI app setup and common utilities.

This module creates the main Typer app and the logging setup shared by
all commands.
"""

import logging
import sys
from typing import Optional

import typer
from typer import Typer

from hubspot_mcp.config import config

# Initialize Typer app
app = Typer(
    name="hubspot-mcp",
    help="HubSpot CRM tool gateway: serve the JSON-RPC endpoint or call tools locally.",
)


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr at the given (or configured) level."""
    level_name = (level or config.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def init_app(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (default: HUBSPOT_MCP_LOG_LEVEL or INFO)",
    ),
):
    """Initialize logging before any command runs."""
    configure_logging(log_level)
