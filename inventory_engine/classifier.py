"""Per-outlet inventory classification.

For every stock row of an outlet:
- total sales over the last SALES_WINDOW_DAYS days give the daily velocity
- stock / velocity gives days of supply (infinite without sales)
- days of supply against the configured thresholds gives the tier
- velocity * horizon - stock gives the reorder suggestion per horizon

Excess and unsold products never get a reorder suggestion.
"""

import math
from collections import defaultdict
from typing import Iterable, Optional

from .config import SALES_WINDOW_DAYS, ROLE_STOCK, ROLE_SALES
from .departments import DepartmentInferencer
from .models import (
    Classification,
    ClassificationConfig,
    ClassifiedItem,
    NormalizedRow,
    StockHealth,
)


def _units_over(total_sales: int, days: int) -> float:
    """Units sold in `days` at the current run rate.

    Same as daily_velocity * days, computed without the intermediate
    division so whole-unit results stay exact.
    """
    return total_sales * days / SALES_WINDOW_DAYS


def _whole_units(quantity: float) -> int:
    """Summed sales as whole units; any positive fraction rounds up."""
    # Float sums such as 0.1 * 30 land a hair above the whole number
    quantity = round(quantity, 6)
    if quantity > 0:
        return math.ceil(quantity)
    return int(quantity)


def evaluate_stock_health(
    current_stock: int,
    total_sales: int,
    config: ClassificationConfig
) -> StockHealth:
    """
    Classify a stock level against its sales run rate.

    Args:
        current_stock: Units on hand
        total_sales: Units sold over SALES_WINDOW_DAYS
        config: Thresholds and horizons

    Returns:
        StockHealth with velocity, days of supply, tier, excess units and
        one suggestion per configured horizon
    """
    daily_velocity = total_sales / SALES_WINDOW_DAYS if total_sales > 0 else 0.0
    if daily_velocity > 0:
        days_of_supply = current_stock / daily_velocity
    else:
        days_of_supply = math.inf

    excess_units = 0
    if total_sales <= 0:
        if current_stock > 0:
            classification = Classification.UNSOLD
            excess_units = current_stock
        else:
            classification = Classification.BALANCED
    elif days_of_supply < config.shortage_threshold_days:
        classification = Classification.SHORTAGE
    elif days_of_supply > config.excess_threshold_days:
        classification = Classification.EXCESS
        needed = _units_over(total_sales, config.excess_threshold_days)
        excess_units = max(0, math.ceil(current_stock - needed))
    else:
        classification = Classification.BALANCED

    suggested_reorder = {}
    for horizon in config.horizons:
        raw = _units_over(max(total_sales, 0), horizon) - current_stock
        if classification == Classification.SHORTAGE or (
            classification == Classification.BALANCED and raw > 0
        ):
            suggested_reorder[horizon] = max(0, math.ceil(raw))
        else:
            suggested_reorder[horizon] = 0

    return StockHealth(
        daily_velocity=daily_velocity,
        days_of_supply=days_of_supply,
        classification=classification,
        excess_units=excess_units,
        suggested_reorder=suggested_reorder,
    )


def sum_sales_by_code(sales_rows: Iterable[NormalizedRow]) -> dict[str, float]:
    """Total sold quantity per product code (rows without code are ignored)."""
    totals: dict[str, float] = defaultdict(float)
    for row in sales_rows:
        if row.product_code:
            totals[row.product_code] += row.sales_quantity
    return dict(totals)


def classify_outlet(
    outlet_id: str,
    stock_rows: Iterable[NormalizedRow],
    sales_rows: Iterable[NormalizedRow],
    config: ClassificationConfig,
    inferencer: Optional[DepartmentInferencer] = None
) -> list[ClassifiedItem]:
    """
    Classify every stock row of one outlet.

    Args:
        outlet_id: Outlet the rows belong to
        stock_rows: Normalized rows from the outlet's stock listing
        sales_rows: Normalized rows from the outlet's sales extract
            (may be empty: every product then has zero sales)
        config: Thresholds and horizons
        inferencer: Department index; built from stock_rows if omitted

    Returns:
        One ClassifiedItem per stock row with both code and name
    """
    stock_rows = list(stock_rows)
    sales_by_code = sum_sales_by_code(sales_rows)
    if inferencer is None:
        inferencer = DepartmentInferencer.from_rows(stock_rows)

    items = []
    for row in stock_rows:
        if not row.product_code or not row.product_name:
            continue

        current_stock = math.ceil(row.current_stock)
        total_sales = _whole_units(sales_by_code.get(row.product_code, 0.0))
        health = evaluate_stock_health(current_stock, total_sales, config)

        items.append(ClassifiedItem(
            product_code=row.product_code,
            product_name=row.product_name,
            department=inferencer.resolve(row.department, row.product_name),
            brand=row.brand,
            current_stock=current_stock,
            total_sales=total_sales,
            daily_velocity=health.daily_velocity,
            days_of_supply=health.days_of_supply,
            classification=health.classification,
            excess_units=health.excess_units,
            suggested_reorder=health.suggested_reorder,
            outlet_id=outlet_id,
        ))

    return items


def classify(
    rows: Iterable[NormalizedRow],
    config: ClassificationConfig
) -> list[ClassifiedItem]:
    """
    Classify tagged rows of any number of outlets.

    Rows are grouped by outlet_id (first-seen order) and split by role.
    One department index is built from all rows so every outlet infers
    against the same keywords. Outlets without stock rows yield nothing.

    Args:
        rows: Normalized rows tagged with outlet_id and role
        config: Thresholds and horizons

    Returns:
        ClassifiedItems of all outlets, outlet by outlet
    """
    rows = list(rows)
    inferencer = DepartmentInferencer.from_rows(rows)

    stock_by_outlet: dict[str, list[NormalizedRow]] = defaultdict(list)
    sales_by_outlet: dict[str, list[NormalizedRow]] = defaultdict(list)
    outlet_order: list[str] = []

    for row in rows:
        if row.outlet_id not in outlet_order:
            outlet_order.append(row.outlet_id)
        if row.role == ROLE_STOCK:
            stock_by_outlet[row.outlet_id].append(row)
        elif row.role == ROLE_SALES:
            sales_by_outlet[row.outlet_id].append(row)

    items = []
    for outlet_id in outlet_order:
        if not stock_by_outlet[outlet_id]:
            continue
        items.extend(classify_outlet(
            outlet_id,
            stock_by_outlet[outlet_id],
            sales_by_outlet[outlet_id],
            config,
            inferencer,
        ))
    return items
