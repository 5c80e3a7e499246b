"""Static tool catalog.

Every tool the gateway exposes is declared here once, as data. The
catalog is the sole authority for what ``tools/call`` accepts; input
schemas are advisory for callers and are not enforced server-side.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

Schema = Dict[str, Any]


class ToolDefinition(BaseModel):
    """A discoverable tool: name, description and JSON-Schema input contract."""

    name: str
    description: str
    input_schema: Schema = Field(alias="inputSchema")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with the protocol's camelCase keys."""
        return self.model_dump(by_alias=True)


# =============================================================================
# Schema fragments
# =============================================================================

FILTER_OPERATORS = [
    "EQ", "NEQ", "LT", "LTE", "GT", "GTE",
    "CONTAINS_TOKEN", "NOT_CONTAINS_TOKEN", "HAS_PROPERTY", "NOT_HAS_PROPERTY",
]
TASK_STATUSES = ["NOT_STARTED", "IN_PROGRESS", "COMPLETED", "DEFERRED"]
TASK_PRIORITIES = ["LOW", "MEDIUM", "HIGH"]
ENGAGEMENT_TYPE_NAMES = ["notes", "emails", "calls", "meetings", "tasks"]


def _obj(properties: Schema, required: Optional[List[str]] = None) -> Schema:
    schema: Schema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def _string(description: str, **extra: Any) -> Schema:
    return {"type": "string", "description": description, **extra}


def _string_list(description: str) -> Schema:
    return {"type": "array", "items": {"type": "string"}, "description": description}


def _limit(description: str = "Max results (1-100)", default: int = 20) -> Schema:
    return {"type": "number", "description": description, "default": default}


def _property_map(description: str) -> Schema:
    return {"type": "object", "description": description, "additionalProperties": {"type": "string"}}


COMPACTION_PROPERTIES: Schema = {
    "maxPropertyLength": {
        "type": "number",
        "description": "Max chars per property value before truncation (default: 500, use 0 for no truncation)",
        "default": 500,
    },
    "includeMetadata": {
        "type": "boolean",
        "description": "Include createdAt, updatedAt, archived, url fields (default: false)",
        "default": False,
    },
}

EXCLUSION_PROPERTIES: Schema = {
    "excludeCompanies": _string_list(
        "Exclude contacts from these companies (case-insensitive partial match; "
        'a broad term like "Co" excludes a lot). Example: ["Acme", "Globex"] to skip existing clients.'
    ),
    "excludeJobTitles": _string_list(
        "Exclude contacts with these job titles (case-insensitive partial match). "
        'Example: ["CEO", "Chief Executive"] to skip C-level roles.'
    ),
}

FILTER_GROUPS: Schema = {
    "type": "array",
    "description": "Filter groups for advanced search",
    "items": _obj({
        "filters": {
            "type": "array",
            "items": _obj(
                {
                    "propertyName": {"type": "string"},
                    "operator": {"type": "string", "enum": FILTER_OPERATORS},
                    "value": {"type": "string"},
                },
                required=["propertyName", "operator"],
            ),
        },
    }),
}

SORTS: Schema = {
    "type": "array",
    "description": 'Sort results by property. Example: [{propertyName: "createdate", direction: "DESCENDING"}]',
    "items": _obj(
        {
            "propertyName": _string("Property to sort by"),
            "direction": _string("Sort direction", enum=["ASCENDING", "DESCENDING"]),
        },
        required=["propertyName", "direction"],
    ),
}

COMPACTED_NOTE = "Results are compacted by default (truncated at 500 chars, no metadata)."


def _list_schema(properties_hint: str, extra: Optional[Schema] = None) -> Schema:
    return _obj({
        "limit": _limit(),
        "after": _string("Pagination cursor"),
        "properties": _string_list(f"Properties to return (e.g., {properties_hint})"),
        **(extra or {}),
        **COMPACTION_PROPERTIES,
    })


def _search_schema(extra: Optional[Schema] = None) -> Schema:
    return _obj({
        "query": _string("Free-text search query"),
        "filterGroups": FILTER_GROUPS,
        "properties": _string_list("Properties to return"),
        "sorts": SORTS,
        "limit": _limit(),
        **(extra or {}),
        **COMPACTION_PROPERTIES,
    })


def _get_schema(label: str, properties_hint: str = "Properties to return") -> Schema:
    return _obj({"id": _string(f"{label} ID"), "properties": _string_list(properties_hint)}, required=["id"])


def _id_only(description: str) -> Schema:
    return _obj({"id": _string(description)}, required=["id"])


def _tool(name: str, description: str, input_schema: Schema) -> ToolDefinition:
    return ToolDefinition(name=name, description=description, inputSchema=input_schema)


# =============================================================================
# Catalog
# =============================================================================

TOOLS: Tuple[ToolDefinition, ...] = (
    # Contacts
    _tool(
        "hubspot_list_contacts",
        f"List contacts from HubSpot CRM with pagination. {COMPACTED_NOTE} "
        "Use excludeCompanies/excludeJobTitles to filter out specific contacts.",
        _list_schema("email, firstname, lastname", EXCLUSION_PROPERTIES),
    ),
    _tool("hubspot_get_contact", "Get a single contact by ID", _get_schema("Contact")),
    _tool(
        "hubspot_create_contact",
        "Create a new contact",
        _obj(
            {"properties": _property_map("Contact properties (email, firstname, lastname, phone, etc.)")},
            required=["properties"],
        ),
    ),
    _tool(
        "hubspot_update_contact",
        "Update an existing contact",
        _obj(
            {"id": _string("Contact ID"), "properties": _property_map("Properties to update")},
            required=["id", "properties"],
        ),
    ),
    _tool("hubspot_delete_contact", "Delete a contact", _id_only("Contact ID")),
    _tool(
        "hubspot_search_contacts",
        "Search contacts with filters. Filters within a group are ANDed, groups are ORed. "
        f"{COMPACTED_NOTE} Use excludeCompanies to filter out contacts from specific companies "
        "(e.g., existing clients) and excludeJobTitles to filter out certain roles.",
        _search_schema(EXCLUSION_PROPERTIES),
    ),
    # Companies
    _tool(
        "hubspot_list_companies",
        f"List companies from HubSpot CRM with pagination. {COMPACTED_NOTE} "
        "Use maxPropertyLength:0 for full field values when you need complete data.",
        _list_schema("name, domain, industry"),
    ),
    _tool("hubspot_get_company", "Get a single company by ID", _get_schema("Company")),
    _tool(
        "hubspot_create_company",
        "Create a new company",
        _obj(
            {"properties": _property_map("Company properties (name, domain, industry, etc.)")},
            required=["properties"],
        ),
    ),
    _tool(
        "hubspot_update_company",
        "Update an existing company",
        _obj(
            {"id": _string("Company ID"), "properties": _property_map("Properties to update")},
            required=["id", "properties"],
        ),
    ),
    _tool("hubspot_delete_company", "Delete a company", _id_only("Company ID")),
    _tool(
        "hubspot_search_companies",
        "Search companies with filters. Filters within a group are ANDed, groups are ORed. "
        f"{COMPACTED_NOTE} Use maxPropertyLength:0 for full field values when you need "
        "complete data for a few specific companies.",
        _search_schema(),
    ),
    # Properties (schema discovery)
    _tool(
        "hubspot_contact_properties",
        "List all available contact properties. Use this to discover property names for searching/filtering.",
        _obj({}),
    ),
    _tool(
        "hubspot_company_properties",
        "List all available company properties. Use this to discover property names for searching/filtering.",
        _obj({}),
    ),
    # Owners
    _tool(
        "hubspot_list_owners",
        "List all owners (users) in the HubSpot account. Returns owner IDs, emails, and names. "
        "Use this to map owner IDs to email addresses.",
        _obj({
            "limit": _limit("Max results (default: 100)", default=100),
            "after": _string("Pagination cursor"),
            "archived": {"type": "boolean", "description": "Include archived owners (default: false)", "default": False},
        }),
    ),
    _tool(
        "hubspot_get_owner",
        "Get a single owner by ID. Returns owner details including email, name, and teams.",
        _obj({"ownerId": _string("The owner ID to look up")}, required=["ownerId"]),
    ),
    # Engagements
    _tool(
        "hubspot_get_engagements",
        "Fetch engagement history for a contact. Returns notes, emails, calls, meetings, and tasks "
        "associated with the contact. Use this to review communication history before reaching out.",
        _obj(
            {
                "contactId": _string("The HubSpot contact ID to fetch engagements for"),
                "types": {
                    "type": "array",
                    "items": {"type": "string", "enum": ENGAGEMENT_TYPE_NAMES},
                    "description": "Filter by engagement types. If not specified, returns all types. "
                    'Example: ["emails", "calls"].',
                },
                "limit": _limit("Max results per engagement type (default: 20)"),
            },
            required=["contactId"],
        ),
    ),
    _tool(
        "hubspot_log_email",
        "Log an email that was sent to a contact. The email is created and then associated "
        "with the contact, so it appears in the contact timeline.",
        _obj(
            {
                "contactId": _string("The HubSpot contact ID to associate the email with"),
                "subject": _string("Email subject line"),
                "body": _string("Email body content (HTML or plain text)"),
                "direction": _string(
                    "Email direction. EMAIL for sent/outbound emails, INCOMING_EMAIL for received emails (default: EMAIL)",
                    enum=["EMAIL", "INCOMING_EMAIL", "FORWARDED_EMAIL"],
                    default="EMAIL",
                ),
                "timestamp": _string(
                    'ISO 8601 timestamp of when the email was sent. Defaults to current time. Example: "2024-01-15T10:30:00Z"'
                ),
            },
            required=["contactId", "subject", "body"],
        ),
    ),
    _tool(
        "hubspot_create_note",
        "Create a note on a contact record (meeting summaries, context about interactions). "
        "The note appears in the contact timeline.",
        _obj(
            {
                "contactId": _string("The HubSpot contact ID to attach the note to"),
                "body": _string("Note content (supports plain text)"),
                "timestamp": _string("ISO 8601 timestamp for the note. Defaults to current time."),
            },
            required=["contactId", "body"],
        ),
    ),
    # Tasks
    _tool(
        "hubspot_create_task",
        "Create a task (follow-up reminder) linked to a contact. Use this to schedule follow-ups "
        "after calls, emails, or meetings.",
        _obj(
            {
                "contactId": _string("The HubSpot contact ID to associate the task with"),
                "subject": _string('Task subject/title (e.g., "Follow up on proposal")'),
                "body": _string("Task notes/description (optional)"),
                "dueDate": _string("ISO 8601 timestamp for when task is due. Defaults to 24 hours from now."),
                "ownerId": _string(
                    "Owner ID to assign the task to. Use hubspot_list_owners to get IDs. "
                    "If not specified, task is unassigned."
                ),
                "priority": _string("Task priority (default: MEDIUM)", enum=TASK_PRIORITIES),
            },
            required=["contactId", "subject"],
        ),
    ),
    _tool(
        "hubspot_search_tasks",
        "Search tasks by owner, status, or due date. Useful for \"my open tasks\" or \"what's overdue\" queries.",
        _obj({
            "ownerId": _string("Filter by owner ID. Use hubspot_list_owners to get IDs."),
            "status": _string("Filter by task status", enum=TASK_STATUSES),
            "dueBefore": _string("Filter tasks due before this ISO 8601 timestamp. Use for finding overdue tasks."),
            "dueAfter": _string("Filter tasks due after this ISO 8601 timestamp."),
            "limit": _limit("Max results (1-100, default: 20)"),
        }),
    ),
    _tool(
        "hubspot_update_task",
        "Update an existing task. Use this to mark tasks complete, change due date, reassign, or update priority.",
        _obj(
            {
                "taskId": _string("The task ID to update"),
                "status": _string("New task status. Use COMPLETED to mark done.", enum=TASK_STATUSES),
                "subject": _string("New task subject"),
                "body": _string("New task notes/description"),
                "dueDate": _string("New due date (ISO 8601 timestamp)"),
                "ownerId": _string("New owner ID to reassign the task"),
                "priority": _string("New task priority", enum=TASK_PRIORITIES),
            },
            required=["taskId"],
        ),
    ),
    # Deals
    _tool(
        "hubspot_get_deal",
        "Get a single deal by ID. Returns full deal details including all properties.",
        _get_schema("Deal", "Properties to return (e.g., dealname, amount, closedate, dealstage)"),
    ),
    _tool(
        "hubspot_create_deal",
        "Create a new deal (sales opportunity). Can be associated with a contact and/or a company.",
        _obj(
            {
                "dealname": _string("Name of the deal (required)"),
                "amount": _string("Deal amount/value"),
                "closedate": _string("Expected close date (ISO 8601 timestamp)"),
                "pipeline": _string("Pipeline ID. Use hubspot_list_pipelines to get available pipelines."),
                "dealstage": _string("Stage ID within the pipeline. Use hubspot_list_pipelines to get stage IDs."),
                "ownerId": _string("Owner ID to assign the deal. Use hubspot_list_owners to get IDs."),
                "contactId": _string("Contact ID to associate with this deal"),
                "companyId": _string("Company ID to associate with this deal"),
            },
            required=["dealname"],
        ),
    ),
    _tool(
        "hubspot_update_deal",
        "Update an existing deal. Use this to move deals through pipeline stages, update amounts, "
        "or change close dates.",
        _obj(
            {
                "id": _string("Deal ID to update"),
                "dealname": _string("New deal name"),
                "amount": _string("New deal amount"),
                "closedate": _string("New close date (ISO 8601 timestamp)"),
                "dealstage": _string("New stage ID to move the deal to"),
                "ownerId": _string("New owner ID"),
            },
            required=["id"],
        ),
    ),
    _tool(
        "hubspot_search_deals",
        "Search deals by owner, stage, close date, or amount. Useful for \"deals closing this month\" "
        "or \"my open deals\" queries.",
        _obj({
            "query": _string("Free-text search query"),
            "ownerId": _string("Filter by owner ID"),
            "dealstage": _string("Filter by stage ID"),
            "pipeline": _string("Filter by pipeline ID"),
            "closeAfter": _string("Filter deals closing after this date (ISO 8601)"),
            "closeBefore": _string("Filter deals closing before this date (ISO 8601)"),
            "minAmount": _string("Filter deals with amount >= this value"),
            "properties": _string_list("Properties to return"),
            "limit": _limit("Max results (1-100, default: 20)"),
        }),
    ),
    _tool(
        "hubspot_delete_deal",
        "Delete a deal. This action is permanent and cannot be undone.",
        _id_only("Deal ID to delete"),
    ),
    _tool(
        "hubspot_deal_properties",
        "List all available deal properties. Use this to discover property names for searching/filtering deals.",
        _obj({}),
    ),
    _tool(
        "hubspot_list_pipelines",
        "List all deal pipelines and their stages. Use this to get valid pipeline and stage IDs "
        "for creating/updating deals.",
        _obj({}),
    ),
)

_TOOLS_BY_NAME: Dict[str, ToolDefinition] = {tool.name: tool for tool in TOOLS}


def get_tool(name: str) -> Optional[ToolDefinition]:
    """Get a tool definition by name."""
    return _TOOLS_BY_NAME.get(name)


def has_tool(name: str) -> bool:
    """Check if a tool is in the catalog."""
    return name in _TOOLS_BY_NAME


def tool_names() -> List[str]:
    """Catalog names in declaration order."""
    return [tool.name for tool in TOOLS]


def list_tools() -> List[Dict[str, Any]]:
    """The full catalog in wire format, for ``tools/list``."""
    return [tool.to_wire() for tool in TOOLS]
