"""HubSpot CRM tool gateway.

Exposes HubSpot objects (contacts, companies, deals, tasks, engagements,
pipelines, owners) as MCP tools behind a single JSON-RPC endpoint.
"""

__version__ = "1.3.0"

SERVER_NAME = "hubspot-crm-mcp"
PROTOCOL_VERSION = "2024-11-05"
