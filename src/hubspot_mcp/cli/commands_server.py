"""Server command: run the HTTP gateway under uvicorn."""

from typing import Optional

import typer

from hubspot_mcp.cli.app import app
from hubspot_mcp.config import config


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default: HUBSPOT_MCP_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port (default: HUBSPOT_MCP_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes (development)"),
):
    """Serve the JSON-RPC endpoint at /mcp."""
    import uvicorn

    bind_host = host or config.host
    bind_port = port or config.port

    if not config.hubspot.access_token:
        typer.echo("⚠️ HUBSPOT_ACCESS_TOKEN is not set; tool calls will fail until it is.", err=True)

    typer.echo(f"🚀 Serving on http://{bind_host}:{bind_port}/mcp", err=True)
    uvicorn.run(
        "hubspot_mcp.server.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=config.log_level.lower(),
    )
