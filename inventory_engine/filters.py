"""Filtering and search over consolidated items.

This module provides functions for narrowing the displayed items.
It is UI-agnostic and can be used by both Streamlit and CLI applications.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from .models import ConsolidatedItem

# Filterable multi-valued fields of ConsolidatedItem
FILTER_FIELDS = {
    "outlet": "outlet_ids",
    "department": "departments",
    "brand": "brands",
}


@dataclass
class FilterState:
    """Current selections of the filter panel (empty list = no filter)."""
    outlets: list[str] = field(default_factory=list)
    departments: list[str] = field(default_factory=list)
    brands: list[str] = field(default_factory=list)
    classifications: list[str] = field(default_factory=list)
    search_term: str = ""

    @property
    def is_active(self) -> bool:
        return bool(
            self.outlets or self.departments or self.brands
            or self.classifications or self.search_term.strip()
        )


def search_items(items: Iterable[ConsolidatedItem], term: str) -> list[ConsolidatedItem]:
    """Keep items whose code or any name contains `term` (case-insensitive).

    Args:
        items: Items to search
        term: Search text; blank returns everything

    Returns:
        Matching items in original order
    """
    items = list(items)
    needle = (term or "").strip().lower()
    if not needle:
        return items
    return [
        item for item in items
        if needle in item.product_code.lower()
        or any(needle in name.lower() for name in item.product_names)
    ]


def apply_classification_filter(
    items: Iterable[ConsolidatedItem],
    selected: list[str]
) -> list[ConsolidatedItem]:
    """Keep items whose tier label is selected."""
    items = list(items)
    if not selected:
        return items
    return [item for item in items if item.classification.value in selected]


def apply_multi_value_filter(
    items: Iterable[ConsolidatedItem],
    filter_name: str,
    selected: list[str]
) -> list[ConsolidatedItem]:
    """Keep items where any value of a multi-valued field is selected.

    Args:
        items: Items to filter
        filter_name: "outlet", "department" or "brand"
        selected: Values to include

    Returns:
        Filtered items
    """
    items = list(items)
    if not selected:
        return items
    attribute = FILTER_FIELDS[filter_name]
    wanted = set(selected)
    return [item for item in items if wanted.intersection(getattr(item, attribute))]


def apply_view_filters(
    items: Iterable[ConsolidatedItem],
    state: FilterState
) -> list[ConsolidatedItem]:
    """Apply search, tier, department and brand filters.

    The outlet selection is not applied here: it decides how items are
    consolidated (see reconsolidation.reconsolidate), not which are kept.
    """
    result = search_items(items, state.search_term)
    result = apply_classification_filter(result, state.classifications)
    result = apply_multi_value_filter(result, "department", state.departments)
    result = apply_multi_value_filter(result, "brand", state.brands)
    return result


def get_filter_options(
    items: Iterable[ConsolidatedItem],
    filter_name: str
) -> list[tuple[str, int]]:
    """Sorted unique values of a filterable field with item counts.

    Args:
        items: Items to scan
        filter_name: "outlet", "department", "brand" or "classification"

    Returns:
        List of (value, count) sorted by value
    """
    counts: Counter = Counter()
    for item in items:
        if filter_name == "classification":
            counts[item.classification.value] += 1
        else:
            for value in set(getattr(item, FILTER_FIELDS[filter_name])):
                if value.strip():
                    counts[value] += 1
    return sorted(counts.items())
