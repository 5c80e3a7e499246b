"""Engagement tools: timeline history fan-out and contact-linked writes.

``hubspot_get_engagements`` fetches each engagement type concurrently.
A failing type degrades to an empty list; it never fails the call.

``hubspot_log_email`` and ``hubspot_create_note`` create the object
first, then associate it with the contact. If the association fails
the whole call fails and the created object is left unlinked.
"""

import asyncio
import logging
from typing import Any, Dict, List

from hubspot_mcp.connectors.hubspot import HubSpotConnector
from hubspot_mcp.tools.args import clamp_limit, optional_str, require_str, string_list, utc_timestamp
from hubspot_mcp.tools.dispatcher import register_tool

logger = logging.getLogger(__name__)

CONTACTS = "contacts"

# Properties requested per engagement type, in display order
ENGAGEMENT_PROPERTIES: Dict[str, List[str]] = {
    "notes": ["hs_note_body", "hs_timestamp", "hs_createdate"],
    "emails": ["hs_email_subject", "hs_email_text", "hs_email_direction", "hs_timestamp", "hs_createdate"],
    "calls": [
        "hs_call_title",
        "hs_call_body",
        "hs_call_duration",
        "hs_call_direction",
        "hs_timestamp",
        "hs_createdate",
    ],
    "meetings": [
        "hs_meeting_title",
        "hs_meeting_body",
        "hs_meeting_start_time",
        "hs_meeting_end_time",
        "hs_createdate",
    ],
    "tasks": ["hs_task_subject", "hs_task_body", "hs_task_status", "hs_timestamp", "hs_createdate"],
}

ENGAGEMENT_TYPES = list(ENGAGEMENT_PROPERTIES)


async def fetch_engagement_type(
    connector: HubSpotConnector,
    contact_id: str,
    engagement_type: str,
    limit: int,
) -> List[Dict[str, Any]]:
    """Fetch up to ``limit`` engagements of one type for a contact.

    Any failure is logged and yields ``[]``.
    """
    try:
        associations = await connector.list_associations(CONTACTS, contact_id, engagement_type)
        object_ids = [str(a.get("toObjectId")) for a in (associations.get("results") or [])][:limit]
        if not object_ids:
            return []

        batch = await connector.batch_read(
            engagement_type, object_ids, ENGAGEMENT_PROPERTIES[engagement_type]
        )
        return [
            {"id": item.get("id"), "properties": item.get("properties")}
            for item in batch.get("results") or []
        ]
    except Exception as e:
        logger.warning(f"Fetching {engagement_type} for contact {contact_id} failed: {e}")
        return []


@register_tool("hubspot_get_engagements")
async def get_engagements(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    contact_id = require_str(args, "contactId")
    limit = clamp_limit(args.get("limit"))

    requested = string_list(args.get("types")) if isinstance(args.get("types"), list) else ENGAGEMENT_TYPES
    types_to_fetch = [t for t in requested if t in ENGAGEMENT_PROPERTIES]

    fetched = await asyncio.gather(
        *(fetch_engagement_type(connector, contact_id, t, limit) for t in types_to_fetch)
    )

    return {
        "contactId": contact_id,
        "engagements": dict(zip(types_to_fetch, fetched)),
        "_meta": {"typesRequested": types_to_fetch},
    }


@register_tool("hubspot_log_email")
async def log_email(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    contact_id = require_str(args, "contactId")
    properties = {
        "hs_email_subject": require_str(args, "subject"),
        "hs_email_text": require_str(args, "body"),
        "hs_email_direction": optional_str(args.get("direction")) or "EMAIL",
        "hs_timestamp": optional_str(args.get("timestamp")) or utc_timestamp(),
    }

    email = await connector.create_object("emails", properties)
    await connector.associate("emails", email["id"], CONTACTS, contact_id, "email_to_contact")

    return {
        "success": True,
        "emailId": email["id"],
        "contactId": contact_id,
        "properties": email.get("properties"),
    }


@register_tool("hubspot_create_note")
async def create_note(connector: HubSpotConnector, args: Dict[str, Any]) -> Dict[str, Any]:
    contact_id = require_str(args, "contactId")
    properties = {
        "hs_note_body": require_str(args, "body"),
        "hs_timestamp": optional_str(args.get("timestamp")) or utc_timestamp(),
    }

    note = await connector.create_object("notes", properties)
    await connector.associate("notes", note["id"], CONTACTS, contact_id, "note_to_contact")

    return {
        "success": True,
        "noteId": note["id"],
        "contactId": contact_id,
        "properties": note.get("properties"),
    }
