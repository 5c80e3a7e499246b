"""Response shaping: client-side filtering, then compaction."""

from hubspot_mcp.shaping.compact import (
    DEFAULT_MAX_PROPERTY_LENGTH,
    METADATA_FIELDS,
    TRUNCATION_MARKER,
    CompactionOptions,
    compact_page,
    compact_result,
    truncate_properties,
)
from hubspot_mcp.shaping.filters import (
    ExclusionFilter,
    FilterResult,
    filter_results,
)

__all__ = [
    "CompactionOptions",
    "DEFAULT_MAX_PROPERTY_LENGTH",
    "METADATA_FIELDS",
    "TRUNCATION_MARKER",
    "compact_page",
    "compact_result",
    "truncate_properties",
    "ExclusionFilter",
    "FilterResult",
    "filter_results",
]
