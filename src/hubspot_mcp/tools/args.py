"""Argument coercion helpers shared by tool handlers.

Callers are LLM clients, so arguments arrive loosely typed: numbers as
strings, missing keys, ``null`` where a list is expected. These helpers
coerce just enough to build a well-formed remote request.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from hubspot_mcp.shaping import (
    DEFAULT_MAX_PROPERTY_LENGTH,
    CompactionOptions,
    ExclusionFilter,
)
from hubspot_mcp.tools.errors import ToolValidationError

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # NaN behaves like a missing value
    return None if math.isnan(number) else number


def clamp_limit(value: Any, default: int = DEFAULT_LIMIT, maximum: int = MAX_LIMIT, minimum: int = 1) -> int:
    """Clamp a result-size argument to [minimum, maximum].

    Missing, zero, NaN or non-numeric values fall back to ``default``;
    infinities clamp like any other out-of-range number.
    """
    number = _to_number(value)
    if not number:
        return default
    return int(max(minimum, min(number, maximum)))


def max_length_option(value: Any) -> Optional[int]:
    """Resolve ``maxPropertyLength``; ``0`` (or negative) means unbounded."""
    if value is None:
        return DEFAULT_MAX_PROPERTY_LENGTH
    number = _to_number(value)
    if number is None:
        return DEFAULT_MAX_PROPERTY_LENGTH
    if number <= 0 or math.isinf(number):
        return None
    return int(number)


def compaction_options(args: Dict[str, Any]) -> CompactionOptions:
    """Build CompactionOptions from ``maxPropertyLength``/``includeMetadata``."""
    return CompactionOptions(
        max_property_length=max_length_option(args.get("maxPropertyLength")),
        include_metadata=bool(args.get("includeMetadata")),
    )


def string_list(value: Any) -> List[str]:
    """Coerce a list argument; non-lists become ``[]`` and ``null`` items are skipped."""
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def exclusion_filter(args: Dict[str, Any]) -> ExclusionFilter:
    """Build an ExclusionFilter from ``excludeCompanies``/``excludeJobTitles``."""
    return ExclusionFilter(
        exclude_companies=string_list(args.get("excludeCompanies")),
        exclude_job_titles=string_list(args.get("excludeJobTitles")),
    )


def optional_str(value: Any) -> Optional[str]:
    """Falsy values become None, everything else ``str``."""
    if value is None or value == "" or value is False:
        return None
    return str(value)


def require_str(args: Dict[str, Any], key: str) -> str:
    """Get a required string argument."""
    value = optional_str(args.get(key))
    if value is None:
        raise ToolValidationError(f"Missing required argument: {key}")
    return value


def property_map(value: Any) -> Dict[str, Any]:
    """Coerce a ``properties`` object argument; non-mappings become ``{}``."""
    if not isinstance(value, dict):
        return {}
    return dict(value)


def pick_properties(args: Dict[str, Any], mapping: Dict[str, str]) -> Dict[str, str]:
    """Map supplied arguments to remote property names.

    Args:
        args: Tool arguments
        mapping: argument name -> remote property name

    Returns:
        Only the properties whose argument was supplied (non-empty).
    """
    properties: Dict[str, str] = {}
    for arg_name, property_name in mapping.items():
        value = optional_str(args.get(arg_name))
        if value is not None:
            properties[property_name] = value
    return properties


def utc_timestamp(offset: Optional[timedelta] = None) -> str:
    """Current UTC time (plus optional offset) as ISO-8601 with a ``Z`` suffix."""
    moment = datetime.now(timezone.utc)
    if offset is not None:
        moment += offset
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
