"""Results rendering UI components.

This module provides Streamlit components for rendering metrics and the item table.
"""

import math

import pandas as pd
import streamlit as st

from inventory_engine.metrics import InventoryMetrics
from inventory_engine.models import ConsolidatedItem


def items_to_dataframe(items: list[ConsolidatedItem], horizons: tuple[int, ...]) -> pd.DataFrame:
    """Build the display table for consolidated items.

    Args:
        items: Items to show
        horizons: Configured horizons (one suggestion column each)

    Returns:
        DataFrame with one row per item
    """
    records = []
    for item in items:
        record = {
            "Código": item.product_code,
            "Nombre": item.display_name,
            "Existencia": item.current_stock,
            "Ventas 60d": item.total_sales,
            "Promedio diario": round(item.daily_velocity, 2),
            "Días de inventario": (
                None if math.isinf(item.days_of_supply) else round(item.days_of_supply, 1)
            ),
            "Clasificación": item.classification.value,
            "Exceso unidades": item.excess_units,
            "Departamento": ", ".join(item.departments),
            "Marca": ", ".join(item.brands),
            "Farmacia": ", ".join(item.outlet_ids),
        }
        for horizon in horizons:
            record[f"Sugerido {horizon}d"] = item.suggested_reorder.get(horizon, 0)
        records.append(record)
    return pd.DataFrame(records)


def render_metrics(metrics: InventoryMetrics):
    """Render summary metric cards."""
    col1, col2, col3, col4, col5 = st.columns(5)
    col1.metric("Total productos", f"{metrics.total_products:,}")
    col2.metric("Unidades en stock", f"{metrics.total_stock:,}")
    col3.metric("Productos en falla", metrics.shortage_count)
    col4.metric("Prods. en exceso", metrics.excess_count)
    col5.metric("Prods. no vendidos", metrics.unsold_count)


def render_results(items: list[ConsolidatedItem], horizons: tuple[int, ...]):
    """Render the item table.

    Args:
        items: Filtered items to show
        horizons: Configured horizons
    """
    st.caption(f"{len(items):,} resultados")

    if not items:
        st.info("No hay productos para los filtros actuales.")
        return

    df = items_to_dataframe(items, horizons)
    st.dataframe(df, use_container_width=True, hide_index=True)
