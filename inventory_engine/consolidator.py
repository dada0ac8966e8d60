"""Cross-outlet consolidation of classified items."""

from dataclasses import dataclass, field
from typing import Iterable

from .classifier import evaluate_stock_health
from .models import ClassificationConfig, ClassifiedItem, ConsolidatedItem


@dataclass
class _ProductAccumulator:
    """Running totals for one product code. Lives only inside consolidate()."""
    product_code: str
    names: dict[str, None] = field(default_factory=dict)
    departments: dict[str, None] = field(default_factory=dict)
    brands: dict[str, None] = field(default_factory=dict)
    stock_by_outlet: dict[str, int] = field(default_factory=dict)
    current_stock: int = 0
    total_sales: int = 0

    def add(self, item: ClassifiedItem):
        self.names[item.product_name] = None
        self.departments[item.department] = None
        self.brands[item.brand] = None
        self.stock_by_outlet[item.outlet_id] = (
            self.stock_by_outlet.get(item.outlet_id, 0) + item.current_stock
        )
        self.current_stock += item.current_stock
        self.total_sales += item.total_sales

    def build(self, config: ClassificationConfig) -> ConsolidatedItem:
        # Tier is re-derived from the summed totals, never copied from an outlet
        health = evaluate_stock_health(self.current_stock, self.total_sales, config)
        return ConsolidatedItem(
            product_code=self.product_code,
            product_names=tuple(self.names),
            departments=tuple(self.departments),
            brands=tuple(self.brands),
            outlet_ids=tuple(self.stock_by_outlet),
            stock_by_outlet=dict(self.stock_by_outlet),
            current_stock=self.current_stock,
            total_sales=self.total_sales,
            daily_velocity=health.daily_velocity,
            days_of_supply=health.days_of_supply,
            classification=health.classification,
            excess_units=health.excess_units,
            suggested_reorder=health.suggested_reorder,
        )


def consolidate(
    items: Iterable[ClassifiedItem],
    config: ClassificationConfig
) -> list[ConsolidatedItem]:
    """
    Merge per-outlet items that share a product code.

    Args:
        items: Classified items of one or more outlets
        config: The config that produced `items`

    Returns:
        One ConsolidatedItem per product code, in first-seen order
    """
    accumulators: dict[str, _ProductAccumulator] = {}
    for item in items:
        if not item.product_code:
            continue
        acc = accumulators.get(item.product_code)
        if acc is None:
            acc = accumulators[item.product_code] = _ProductAccumulator(item.product_code)
        acc.add(item)

    return [acc.build(config) for acc in accumulators.values()]
