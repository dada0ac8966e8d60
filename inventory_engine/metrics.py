"""Summary figures for a set of consolidated items."""

from dataclasses import dataclass, field
from typing import Iterable

from .models import Classification, ConsolidatedItem


@dataclass
class InventoryMetrics:
    total_products: int = 0
    total_stock: int = 0
    shortage_count: int = 0
    excess_count: int = 0
    unsold_count: int = 0
    balanced_count: int = 0
    total_excess_units: int = 0
    suggested_by_horizon: dict[int, int] = field(default_factory=dict)


def summarize(items: Iterable[ConsolidatedItem]) -> InventoryMetrics:
    """Count products per tier and total stock, excess and suggestions."""
    metrics = InventoryMetrics()
    tier_counts = {tier: 0 for tier in Classification}

    for item in items:
        metrics.total_products += 1
        metrics.total_stock += item.current_stock
        metrics.total_excess_units += item.excess_units
        tier_counts[item.classification] += 1
        for horizon, quantity in item.suggested_reorder.items():
            metrics.suggested_by_horizon[horizon] = (
                metrics.suggested_by_horizon.get(horizon, 0) + quantity
            )

    metrics.shortage_count = tier_counts[Classification.SHORTAGE]
    metrics.excess_count = tier_counts[Classification.EXCESS]
    metrics.unsold_count = tier_counts[Classification.UNSOLD]
    metrics.balanced_count = tier_counts[Classification.BALANCED]
    return metrics
