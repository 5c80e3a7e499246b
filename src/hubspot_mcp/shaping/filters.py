"""Client-side exclusion filter for contact results.

Removes objects whose ``company`` or ``jobtitle`` property contains any
exclusion term (case-insensitive substring). Must run on raw results,
before compaction truncates property values.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping

COMPANY_PROPERTY = "company"
JOB_TITLE_PROPERTY = "jobtitle"


@dataclass(frozen=True)
class ExclusionFilter:
    """Exclusion terms for one call."""

    exclude_companies: List[str] = field(default_factory=list)
    exclude_job_titles: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.exclude_companies and not self.exclude_job_titles


@dataclass
class FilterResult:
    """Objects that survived the filter plus how many were dropped."""

    kept: List[Dict[str, Any]]
    excluded_count: int = 0


def _matches(value: Any, terms: Iterable[str]) -> bool:
    if not value:
        return False
    folded = str(value).lower()
    return any(term in folded for term in terms)


def filter_results(results: List[Dict[str, Any]], exclusion: ExclusionFilter) -> FilterResult:
    """Drop results matching the exclusion terms.

    Args:
        results: CRM objects with a ``properties`` mapping
        exclusion: Company / job title terms

    Returns:
        FilterResult. With no terms, ``kept`` is the input list itself.
    """
    if exclusion.is_empty:
        return FilterResult(kept=results, excluded_count=0)

    companies = [term.lower() for term in exclusion.exclude_companies]
    job_titles = [term.lower() for term in exclusion.exclude_job_titles]

    kept = []
    for item in results:
        properties = item.get("properties")
        if not isinstance(properties, Mapping):
            kept.append(item)
            continue
        if _matches(properties.get(COMPANY_PROPERTY), companies):
            continue
        if _matches(properties.get(JOB_TITLE_PROPERTY), job_titles):
            continue
        kept.append(item)

    return FilterResult(kept=kept, excluded_count=len(results) - len(kept))
