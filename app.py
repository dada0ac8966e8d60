"""
Inventory Consolidation Streamlit App

A web interface for classifying and consolidating pharmacy inventories.
"""

import logging

import streamlit as st

from inventory_engine import run_analysis, load_files, summarize, apply_view_filters
from inventory_engine.config import (
    ALLOWED_EXTENSIONS,
    MAX_UPLOAD_FILES,
    STOCK_FILE_MARKER,
    SALES_FILE_MARKER,
)
from inventory_engine.logger import setup_logger
from ui import (
    init_session_state,
    apply_settings,
    reset_settings,
    render_filters,
    render_metrics,
    render_results,
)

setup_logger("inventory_engine")
setup_logger("ui")
logger = logging.getLogger("app")

# Page config
st.set_page_config(
    page_title="Consolidador de Inventarios",
    page_icon="💊",
    layout="wide",
)

init_session_state()


def process_uploads(uploaded_files):
    """Decode uploads and run a full ingestion pass."""
    rows_by_file, errors = load_files(uploaded_files)
    st.session_state.load_errors = errors

    analysis = run_analysis(rows_by_file, st.session_state.classification_config)
    if analysis.skipped_files:
        logger.info("Ignored files: %s", ", ".join(analysis.skipped_files))
    st.session_state.analysis = analysis


# Main UI
st.title("💊 Consolidador de Inventarios")
st.markdown("Análisis y consolidación de inventarios farmacéuticos")

# Sidebar for configuration
with st.sidebar:
    st.header("⚙️ Configuración de clasificación")

    config = st.session_state.classification_config
    with st.form("classification_settings"):
        shortage_days = st.number_input(
            "Días para falla",
            min_value=1,
            max_value=365,
            value=config.shortage_threshold_days,
            help="Productos con menos días de inventario",
        )
        excess_days = st.number_input(
            "Días para exceso",
            min_value=1,
            max_value=365,
            value=config.excess_threshold_days,
            help="Productos con más días de inventario",
        )
        if st.form_submit_button("Aplicar", type="primary"):
            apply_settings(int(shortage_days), int(excess_days))
            st.rerun()

    st.button("Restaurar", on_click=reset_settings)

    if st.session_state.config_error:
        st.error(st.session_state.config_error)

    active = st.session_state.classification_config
    st.caption(
        f"Falla: < {active.shortage_threshold_days}d | "
        f"OK: {active.shortage_threshold_days}-{active.excess_threshold_days}d | "
        f"Exceso: > {active.excess_threshold_days}d"
    )

# File upload
uploaded_files = st.file_uploader(
    "Cargar archivos de inventario",
    type=[ext.lstrip(".") for ext in ALLOWED_EXTENSIONS],
    accept_multiple_files=True,
    help=(
        f"Listados de productos ('{STOCK_FILE_MARKER}') y productos vendidos "
        f"('{SALES_FILE_MARKER}') de cada farmacia. Máximo {MAX_UPLOAD_FILES} archivos."
    ),
)

if uploaded_files:
    if len(uploaded_files) > MAX_UPLOAD_FILES:
        st.error(f"Máximo {MAX_UPLOAD_FILES} archivos permitidos")
    elif st.button("Procesar archivos", type="primary"):
        try:
            with st.spinner("Procesando archivos..."):
                process_uploads(uploaded_files)
        except Exception as e:
            logger.exception("Processing failed")
            st.error(f"Error procesando archivos: {e}")

for filename, error in st.session_state.load_errors.items():
    st.warning(f"{filename}: {error}")

analysis = st.session_state.analysis
if analysis is not None:
    if analysis.skipped_files:
        with st.expander(f"Archivos ignorados ({len(analysis.skipped_files)})"):
            for filename in analysis.skipped_files:
                st.write(filename)

    if analysis.is_empty:
        st.info("No se encontraron productos en los archivos cargados.")
    else:
        st.divider()
        filter_state = render_filters(analysis.consolidated, analysis.outlets)

        base_items = analysis.view(filter_state.outlets)
        items = apply_view_filters(base_items, filter_state)

        render_metrics(summarize(items))
        render_results(items, analysis.config.horizons)

# Footer
st.divider()
st.caption("Consolidador de Inventarios v1.0")
