"""Outlet-filter sensitive consolidation.

The outlet filter decides which path builds the displayed items:

- nothing selected: the full consolidation computed at ingestion time
- one outlet: that outlet's own items from the unrestricted run, reshaped
  as ConsolidatedItem. Nothing is reclassified, so department inference and
  tiers are the ones computed against every outlet's rows.
- several outlets: classify and consolidate again over those outlets' rows
  only

Selecting exactly the full outlet set through the multi-outlet path gives
the same result as the unrestricted consolidation.
"""

from typing import Collection, Iterable, Optional

from .classifier import classify
from .consolidator import consolidate
from .models import (
    ClassificationConfig,
    ClassifiedItem,
    ConsolidatedItem,
    NormalizedRow,
)


def project_item(item: ClassifiedItem) -> ConsolidatedItem:
    """Reshape one outlet's item as a single-outlet ConsolidatedItem."""
    return ConsolidatedItem(
        product_code=item.product_code,
        product_names=(item.product_name,),
        departments=(item.department,),
        brands=(item.brand,),
        outlet_ids=(item.outlet_id,),
        stock_by_outlet={item.outlet_id: item.current_stock},
        current_stock=item.current_stock,
        total_sales=item.total_sales,
        daily_velocity=item.daily_velocity,
        days_of_supply=item.days_of_supply,
        classification=item.classification,
        excess_units=item.excess_units,
        suggested_reorder=dict(item.suggested_reorder),
    )


def reconsolidate(
    rows: Iterable[NormalizedRow],
    selected_outlets: Collection[str],
    precomputed: list[ConsolidatedItem],
    config: ClassificationConfig,
    classified: Optional[list[ClassifiedItem]] = None
) -> list[ConsolidatedItem]:
    """
    Build the consolidated view for the current outlet selection.

    Args:
        rows: All normalized rows of the batch (tagged with outlet and role)
        selected_outlets: Outlets picked in the filter (empty = all)
        precomputed: consolidate(classify(rows)) of the unrestricted run
        config: The config that produced `precomputed`
        classified: Per-outlet items of the unrestricted run; recomputed
            from `rows` when omitted

    Returns:
        ConsolidatedItems for the selection
    """
    selected = set(selected_outlets)

    if not selected:
        return precomputed

    if len(selected) == 1:
        (outlet_id,) = selected
        if classified is None:
            classified = classify(rows, config)
        return [project_item(item) for item in classified if item.outlet_id == outlet_id]

    restricted = [row for row in rows if row.outlet_id in selected]
    return consolidate(classify(restricted, config), config)
