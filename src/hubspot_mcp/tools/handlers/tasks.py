"""Task tools."""

from datetime import timedelta
from typing import Any, Dict

from hubspot_mcp.connectors.hubspot import HubSpotConnector
from hubspot_mcp.tools.args import clamp_limit, optional_str, pick_properties, require_str, utc_timestamp
from hubspot_mcp.tools.dispatcher import register_tool
from hubspot_mcp.tools.errors import ToolValidationError
from hubspot_mcp.tools.handlers.common import convenience_filters, id_and_properties, with_filter_group

TASKS = "tasks"

TASK_SEARCH_PROPERTIES = [
    "hs_task_subject",
    "hs_task_body",
    "hs_task_status",
    "hs_timestamp",
    "hubspot_owner_id",
    "hs_task_priority",
]

TASK_FILTERS = [
    ("ownerId", "hubspot_owner_id", "EQ"),
    ("status", "hs_task_status", "EQ"),
    ("dueBefore", "hs_timestamp", "LT"),
    ("dueAfter", "hs_timestamp", "GT"),
]

# argument name -> task property
TASK_UPDATE_FIELDS = {
    "status": "hs_task_status",
    "subject": "hs_task_subject",
    "body": "hs_task_body",
    "dueDate": "hs_timestamp",
    "ownerId": "hubspot_owner_id",
    "priority": "hs_task_priority",
}


@register_tool("hubspot_create_task")
async def create_task(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    """Create a task, then link it to the contact.

    The due date defaults to 24 hours from now.
    """
    contact_id = require_str(args, "contactId")
    properties = {
        "hs_task_subject": require_str(args, "subject"),
        "hs_timestamp": optional_str(args.get("dueDate")) or utc_timestamp(timedelta(days=1)),
        "hs_task_status": "NOT_STARTED",
    }
    properties.update(
        pick_properties(
            args,
            {"body": "hs_task_body", "ownerId": "hubspot_owner_id", "priority": "hs_task_priority"},
        )
    )

    task = await connector.create_object(TASKS, properties)
    await connector.associate(TASKS, task["id"], "contacts", contact_id, "task_to_contact")

    return {
        "success": True,
        "taskId": task["id"],
        "contactId": contact_id,
        "properties": task.get("properties"),
    }


@register_tool("hubspot_search_tasks")
async def search_tasks(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "limit": clamp_limit(args.get("limit")),
        "properties": TASK_SEARCH_PROPERTIES,
        "sorts": [{"propertyName": "hs_timestamp", "direction": "ASCENDING"}],
    }
    with_filter_group(body, convenience_filters(args, TASK_FILTERS))

    page = await connector.search_objects(TASKS, body)
    return id_and_properties(page)


@register_tool("hubspot_update_task")
async def update_task(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    task_id = require_str(args, "taskId")
    properties = pick_properties(args, TASK_UPDATE_FIELDS)
    if not properties:
        raise ToolValidationError("At least one property to update must be provided")

    task = await connector.update_object(TASKS, task_id, properties)
    return {"success": True, "taskId": task.get("id"), "properties": task.get("properties")}
