"""Company tools."""

from typing import Any, Dict

from hubspot_mcp.connectors.hubspot import HubSpotConnector
from hubspot_mcp.tools.args import property_map, require_str, string_list
from hubspot_mcp.tools.dispatcher import register_tool
from hubspot_mcp.tools.errors import ToolValidationError
from hubspot_mcp.tools.handlers.common import (
    list_page,
    property_schema,
    search_body,
    shape_page,
    write_result,
)

COMPANIES = "companies"


@register_tool("hubspot_list_companies")
async def list_companies(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    page = await list_page(connector, COMPANIES, args)
    return shape_page(page, args)


@register_tool("hubspot_search_companies")
async def search_companies(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    page = await connector.search_objects(COMPANIES, search_body(args))
    return shape_page(page, args)


@register_tool("hubspot_get_company")
async def get_company(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    return await connector.get_object(
        COMPANIES, require_str(args, "id"), properties=string_list(args.get("properties"))
    )


@register_tool("hubspot_create_company")
async def create_company(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    data = await connector.create_object(COMPANIES, property_map(args.get("properties")))
    return write_result(data)


@register_tool("hubspot_update_company")
async def update_company(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    company_id = require_str(args, "id")
    properties = property_map(args.get("properties"))
    if not properties:
        raise ToolValidationError("At least one property to update must be provided")
    data = await connector.update_object(COMPANIES, company_id, properties)
    return write_result(data)


@register_tool("hubspot_delete_company")
async def delete_company(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    company_id = require_str(args, "id")
    await connector.delete_object(COMPANIES, company_id)
    return {"success": True, "deleted": company_id}


@register_tool("hubspot_company_properties")
async def company_properties(connector: HubSpotConnector, args: Dict[str, Any]) -> Any:
    return await property_schema(connector, COMPANIES)
