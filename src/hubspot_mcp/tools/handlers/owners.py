"""Owner (user) tools."""

from typing import Any, Dict

from hubspot_mcp.connectors.hubspot import HubSpotConnector
from hubspot_mcp.tools.args import clamp_limit, optional_str, require_str
from hubspot_mcp.tools.dispatcher import register_tool

OWNERS_DEFAULT_LIMIT = 100
OWNERS_MAX_LIMIT = 500


@register_tool("hubspot_list_owners")
async def list_owners(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    return await connector.list_owners(
        limit=clamp_limit(args.get("limit"), default=OWNERS_DEFAULT_LIMIT, maximum=OWNERS_MAX_LIMIT),
        after=optional_str(args.get("after")),
        archived=bool(args.get("archived")),
    )


@register_tool("hubspot_get_owner")
async def get_owner(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    return await connector.get_owner(require_str(args, "ownerId"))
