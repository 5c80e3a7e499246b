"""Tool commands.

Commands:
- tools: List the tool catalog
- call: Run one tool through the protocol router and print its output
"""

import asyncio
import json
from typing import Optional

import typer

from hubspot_mcp.cli.app import app
from hubspot_mcp.protocol import ProtocolRouter
from hubspot_mcp.tools import TOOLS, list_tools


@app.command()
def tools(
    as_json: bool = typer.Option(False, "--json", help="Print full definitions as JSON"),
):
    """List the available tools."""
    if as_json:
        typer.echo(json.dumps(list_tools(), indent=2))
        return

    typer.echo(f"🔧 {len(TOOLS)} tools:")
    for tool in TOOLS:
        typer.echo(f"   {tool.name}: {tool.description}")


@app.command()
def call(
    name: str = typer.Argument(..., help="Tool name, e.g. hubspot_list_contacts"),
    args: Optional[str] = typer.Option(None, "--args", "-a", help="Tool arguments as a JSON object"),
):
    """Call one tool and print its text content."""
    try:
        arguments = json.loads(args) if args else {}
    except ValueError as e:
        typer.echo(f"❌ Invalid --args JSON: {e}", err=True)
        raise typer.Exit(2)
    if not isinstance(arguments, dict):
        typer.echo("❌ --args must be a JSON object", err=True)
        raise typer.Exit(2)

    request = {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "tools/call",
        "params": {"name": name, "arguments": arguments},
    }
    response = asyncio.run(ProtocolRouter().handle(request))

    if "error" in response:
        typer.echo(f"❌ {response['error']['message']}", err=True)
        raise typer.Exit(1)

    for item in response["result"]["content"]:
        typer.echo(item["text"])
