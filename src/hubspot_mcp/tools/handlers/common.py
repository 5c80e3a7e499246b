"""Request-building and shaping helpers shared by handlers."""

from typing import Any, Dict, List

from hubspot_mcp.connectors.hubspot import HubSpotConnector
from hubspot_mcp.shaping import compact_page, filter_results
from hubspot_mcp.tools.args import (
    clamp_limit,
    compaction_options,
    exclusion_filter,
    optional_str,
    string_list,
)

Filter = Dict[str, str]


def search_body(args: Dict[str, Any]) -> Dict[str, Any]:
    """Translate search arguments into a remote search body.

    ``query``, ``filterGroups``, ``properties`` and ``sorts`` are passed
    through verbatim when present and omitted when absent.
    """
    body: Dict[str, Any] = {"limit": clamp_limit(args.get("limit"))}
    if args.get("query"):
        body["query"] = args["query"]
    if args.get("filterGroups"):
        body["filterGroups"] = args["filterGroups"]
    if isinstance(args.get("properties"), list):
        body["properties"] = args["properties"]
    if isinstance(args.get("sorts"), list):
        body["sorts"] = args["sorts"]
    return body


def convenience_filters(args: Dict[str, Any], mapping: List[tuple]) -> List[Filter]:
    """Build filters from convenience arguments.

    Args:
        args: Tool arguments
        mapping: (argument name, property name, operator) triples, in order

    Returns:
        One filter per supplied argument.
    """
    filters: List[Filter] = []
    for arg_name, property_name, operator in mapping:
        value = optional_str(args.get(arg_name))
        if value is not None:
            filters.append({"propertyName": property_name, "operator": operator, "value": value})
    return filters


def with_filter_group(body: Dict[str, Any], filters: List[Filter]) -> Dict[str, Any]:
    """AND all filters into exactly one group; no group when there are none."""
    if filters:
        body["filterGroups"] = [{"filters": filters}]
    return body


def id_and_properties(page: Dict[str, Any]) -> Dict[str, Any]:
    """Reduce a page to ``{total, results: [{id, properties}], paging}``.

    ``total`` and ``paging`` are copied only when the page carries them.
    """
    reduced: Dict[str, Any] = {}
    if "total" in page:
        reduced["total"] = page["total"]
    reduced["results"] = [
        {"id": item.get("id"), "properties": item.get("properties")}
        for item in page.get("results") or []
    ]
    if "paging" in page:
        reduced["paging"] = page["paging"]
    return reduced


def shape_page(page: Dict[str, Any], args: Dict[str, Any]) -> Dict[str, Any]:
    """Compact a page of companies (no client-side filtering)."""
    return compact_page(page, compaction_options(args))


def shape_contact_page(page: Dict[str, Any], args: Dict[str, Any]) -> Dict[str, Any]:
    """Filter then compact a page of contacts.

    Filtering must see untruncated ``company``/``jobtitle`` values, so it
    always runs first. ``_meta`` is added only when something was excluded.
    """
    exclusion = exclusion_filter(args)
    filtered = filter_results(page.get("results") or [], exclusion)
    shaped = compact_page({**page, "results": filtered.kept}, compaction_options(args))
    if filtered.excluded_count > 0:
        shaped["_meta"] = {
            "excluded": filtered.excluded_count,
            "excludeCompanies": exclusion.exclude_companies,
            "excludeJobTitles": exclusion.exclude_job_titles,
        }
    return shaped


async def list_page(connector: HubSpotConnector, object_type: str, args: Dict[str, Any]) -> Dict[str, Any]:
    """Fetch one list page using the standard limit/after/properties args."""
    return await connector.list_objects(
        object_type,
        limit=clamp_limit(args.get("limit")),
        after=optional_str(args.get("after")),
        properties=string_list(args.get("properties")),
    )


async def property_schema(connector: HubSpotConnector, object_type: str) -> List[Dict[str, Any]]:
    """List property definitions as ``{name, label, type, description}``."""
    data = await connector.list_properties(object_type)
    return [
        {
            "name": prop.get("name"),
            "label": prop.get("label"),
            "type": prop.get("type"),
            "description": prop.get("description"),
        }
        for prop in data.get("results") or []
    ]


def write_result(data: Dict[str, Any]) -> Dict[str, Any]:
    """Remote object plus a ``success`` flag."""
    return {"success": True, **(data or {})}
