"""Filter UI components for Streamlit.

This module provides Streamlit UI components for the filter panel.
It uses inventory_engine.filters for the underlying filter logic.
"""

import streamlit as st

from inventory_engine.filters import FilterState, get_filter_options
from inventory_engine.models import ConsolidatedItem


def _multiselect(label: str, items: list[ConsolidatedItem], filter_name: str, prefix: str) -> list[str]:
    """Render a multiselect whose options show item counts."""
    options = get_filter_options(items, filter_name)
    if not options:
        return []
    counts = dict(options)
    return st.multiselect(
        label,
        options=[value for value, _ in options],
        default=[],
        format_func=lambda value: f"{value} ({counts.get(value, 0)})",
        key=f"{prefix}_filter_{filter_name}",
        placeholder="Seleccione...",
        help="Deje vacío para incluir todo",
    )


def render_filters(
    items: list[ConsolidatedItem],
    outlets: list[str],
    prefix: str = "main"
) -> FilterState:
    """Render the filter panel and return the selections.

    Args:
        items: Full consolidated items (option lists are built from them)
        outlets: Outlets available in the current analysis
        prefix: Unique prefix for widget keys

    Returns:
        FilterState with the current selections
    """
    state = FilterState()

    with st.expander("🔍 Filtros", expanded=True):
        state.search_term = st.text_input(
            "Buscar por código o nombre",
            key=f"{prefix}_search",
        )

        if outlets:
            state.outlets = st.multiselect(
                "Farmacia",
                options=outlets,
                default=[],
                key=f"{prefix}_filter_outlet",
                placeholder="Todas",
                help="Con varias farmacias se reconsolida solo sobre las elegidas",
            )

        state.classifications = _multiselect("Clasificación", items, "classification", prefix)
        state.departments = _multiselect("Departamento", items, "department", prefix)
        state.brands = _multiselect("Marca", items, "brand", prefix)

    return state
