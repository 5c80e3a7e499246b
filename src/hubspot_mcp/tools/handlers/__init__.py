"""Tool handlers, one module per CRM area.

Importing this package registers every handler with the tool registry.
"""

from hubspot_mcp.tools.handlers import (  # noqa: F401
    companies,
    contacts,
    deals,
    engagements,
    owners,
    tasks,
)
