"""Contact tools."""

from typing import Any, Dict

from hubspot_mcp.connectors.hubspot import HubSpotConnector
from hubspot_mcp.tools.args import property_map, require_str, string_list
from hubspot_mcp.tools.dispatcher import register_tool
from hubspot_mcp.tools.errors import ToolValidationError
from hubspot_mcp.tools.handlers.common import (
    list_page,
    property_schema,
    search_body,
    shape_contact_page,
    write_result,
)

CONTACTS = "contacts"


@register_tool("hubspot_list_contacts")
async def list_contacts(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    page = await list_page(connector, CONTACTS, args)
    return shape_contact_page(page, args)


@register_tool("hubspot_search_contacts")
async def search_contacts(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    page = await connector.search_objects(CONTACTS, search_body(args))
    return shape_contact_page(page, args)


@register_tool("hubspot_get_contact")
async def get_contact(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    return await connector.get_object(
        CONTACTS, require_str(args, "id"), properties=string_list(args.get("properties"))
    )


@register_tool("hubspot_create_contact")
async def create_contact(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    data = await connector.create_object(CONTACTS, property_map(args.get("properties")))
    return write_result(data)


@register_tool("hubspot_update_contact")
async def update_contact(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    contact_id = require_str(args, "id")
    properties = property_map(args.get("properties"))
    if not properties:
        raise ToolValidationError("At least one property to update must be provided")
    data = await connector.update_object(CONTACTS, contact_id, properties)
    return write_result(data)


@register_tool("hubspot_delete_contact")
async def delete_contact(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    contact_id = require_str(args, "id")
    await connector.delete_object(CONTACTS, contact_id)
    return {"success": True, "deleted": contact_id}


@register_tool("hubspot_contact_properties")
async def contact_properties(connector: HubSpotConnector, args: Dict[str, Any]) -> Any:
    return await property_schema(connector, CONTACTS)
