"""Result compaction: truncate long property values, drop metadata.

CRM objects carry schema-free property maps, so everything here works
generically over ``Dict[str, Any]`` and never assumes a field set.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

DEFAULT_MAX_PROPERTY_LENGTH = 500
TRUNCATION_MARKER = "...[truncated]"
METADATA_FIELDS = ("createdAt", "updatedAt", "archived", "url")


@dataclass(frozen=True)
class CompactionOptions:
    """Per-call compaction settings.

    Attributes:
        max_property_length: Max characters kept per string property value.
            None means unbounded (no truncation).
        include_metadata: Keep createdAt/updatedAt/archived/url when present.
    """

    max_property_length: Optional[int] = DEFAULT_MAX_PROPERTY_LENGTH
    include_metadata: bool = False


def truncate_properties(properties: Mapping[str, Any], max_length: Optional[int]) -> Dict[str, Any]:
    """Copy a property map, cutting string values longer than ``max_length``."""
    if max_length is None:
        return dict(properties)

    result: Dict[str, Any] = {}
    for key, value in properties.items():
        if isinstance(value, str) and len(value) > max_length:
            result[key] = value[:max_length] + TRUNCATION_MARKER
        else:
            result[key] = value
    return result


def compact_result(item: Mapping[str, Any], options: Optional[CompactionOptions] = None) -> Dict[str, Any]:
    """Shape one CRM object: id, truncated properties, optional metadata."""
    options = options or CompactionOptions()
    result: Dict[str, Any] = {"id": item.get("id")}

    properties = item.get("properties")
    if isinstance(properties, Mapping):
        result["properties"] = truncate_properties(properties, options.max_property_length)

    if options.include_metadata:
        for name in METADATA_FIELDS:
            if name == "archived":
                # False is a real value; only absence drops it
                if item.get(name) is not None:
                    result[name] = item[name]
            elif item.get(name):
                result[name] = item[name]

    return result


def compact_page(page: Mapping[str, Any], options: Optional[CompactionOptions] = None) -> Dict[str, Any]:
    """Compact every object of a result page, keeping order.

    ``total`` and ``paging`` are copied only when the page carries them.
    """
    shaped: Dict[str, Any] = {}
    if "total" in page:
        shaped["total"] = page["total"]
    shaped["results"] = [compact_result(item, options) for item in page.get("results") or []]
    if "paging" in page:
        shaped["paging"] = page["paging"]
    return shaped
