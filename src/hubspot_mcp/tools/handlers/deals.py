"""Deal and pipeline tools.

``hubspot_create_deal`` creates the deal, then associates the contact
(if given), then the company (if given), each awaited in turn. There is
no rollback: a failed association leaves the created deal in place.
"""

from typing import Any, Dict, List

from hubspot_mcp.connectors.hubspot import HubSpotConnector
from hubspot_mcp.tools.args import (
    clamp_limit,
    optional_str,
    pick_properties,
    require_str,
    string_list,
)
from hubspot_mcp.tools.dispatcher import register_tool
from hubspot_mcp.tools.errors import ToolValidationError
from hubspot_mcp.tools.handlers.common import (
    convenience_filters,
    id_and_properties,
    property_schema,
    with_filter_group,
)

DEALS = "deals"

DEFAULT_DEAL_PROPERTIES = ["dealname", "amount", "closedate", "dealstage", "pipeline", "hubspot_owner_id"]

DEAL_FILTERS = [
    ("ownerId", "hubspot_owner_id", "EQ"),
    ("dealstage", "dealstage", "EQ"),
    ("pipeline", "pipeline", "EQ"),
    ("closeAfter", "closedate", "GTE"),
    ("closeBefore", "closedate", "LTE"),
    ("minAmount", "amount", "GTE"),
]

DEAL_CREATE_FIELDS = {
    "amount": "amount",
    "closedate": "closedate",
    "pipeline": "pipeline",
    "dealstage": "dealstage",
    "ownerId": "hubspot_owner_id",
}

DEAL_UPDATE_FIELDS = {
    "dealname": "dealname",
    "amount": "amount",
    "closedate": "closedate",
    "dealstage": "dealstage",
    "ownerId": "hubspot_owner_id",
}


@register_tool("hubspot_get_deal")
async def get_deal(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    return await connector.get_object(
        DEALS, require_str(args, "id"), properties=string_list(args.get("properties"))
    )


@register_tool("hubspot_create_deal")
async def create_deal(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    properties = {"dealname": require_str(args, "dealname")}
    properties.update(pick_properties(args, DEAL_CREATE_FIELDS))
    contact_id = optional_str(args.get("contactId"))
    company_id = optional_str(args.get("companyId"))

    deal = await connector.create_object(DEALS, properties)
    if contact_id:
        await connector.associate(DEALS, deal["id"], "contacts", contact_id, "deal_to_contact")
    if company_id:
        await connector.associate(DEALS, deal["id"], "companies", company_id, "deal_to_company")

    return {
        "success": True,
        "dealId": deal["id"],
        "properties": deal.get("properties"),
        "associations": {"contactId": contact_id, "companyId": company_id},
    }


@register_tool("hubspot_update_deal")
async def update_deal(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    deal_id = require_str(args, "id")
    properties = pick_properties(args, DEAL_UPDATE_FIELDS)
    if not properties:
        raise ToolValidationError("At least one property to update must be provided")

    deal = await connector.update_object(DEALS, deal_id, properties)
    return {"success": True, "dealId": deal.get("id"), "properties": deal.get("properties")}


@register_tool("hubspot_search_deals")
async def search_deals(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    properties = args.get("properties")
    body: Dict[str, Any] = {
        "limit": clamp_limit(args.get("limit")),
        "properties": properties if isinstance(properties, list) else DEFAULT_DEAL_PROPERTIES,
        "sorts": [{"propertyName": "closedate", "direction": "ASCENDING"}],
    }
    if args.get("query"):
        body["query"] = args["query"]
    with_filter_group(body, convenience_filters(args, DEAL_FILTERS))

    page = await connector.search_objects(DEALS, body)
    return id_and_properties(page)


@register_tool("hubspot_delete_deal")
async def delete_deal(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    deal_id = require_str(args, "id")
    await connector.delete_object(DEALS, deal_id)
    return {"success": True, "deleted": deal_id}


@register_tool("hubspot_deal_properties")
async def deal_properties(connector: HubSpotConnector, args: Dict[str, Any]) -> Any:
    return await property_schema(connector, DEALS)


@register_tool("hubspot_list_pipelines")
async def list_pipelines(connector: HubSpotConnector, args: Dict[str, Any]) -> List[Dict[str, Any]]:
    data = await connector.list_pipelines(DEALS)
    return [
        {
            "id": pipeline.get("id"),
            "label": pipeline.get("label"),
            "stages": [
                {"id": stage.get("id"), "label": stage.get("label"), "displayOrder": stage.get("displayOrder")}
                for stage in pipeline.get("stages") or []
            ],
        }
        for pipeline in data.get("results") or []
    ]
