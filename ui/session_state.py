"""Session state initialization and management.

This module provides functions for initializing and managing Streamlit session state.
"""

import logging

import streamlit as st

from inventory_engine.models import ClassificationConfig, update_classification_config

logger = logging.getLogger(__name__)


def init_session_state():
    """Initialize all session state variables with defaults."""
    # Classification settings
    if "classification_config" not in st.session_state:
        st.session_state.classification_config = ClassificationConfig()
    if "config_error" not in st.session_state:
        st.session_state.config_error = None

    # Results of the last ingestion pass
    if "analysis" not in st.session_state:
        st.session_state.analysis = None
    if "load_errors" not in st.session_state:
        st.session_state.load_errors = {}


def apply_settings(shortage_days: int, excess_days: int):
    """Validate a settings change and recompute the analysis if accepted.

    On rejection the previous config stays active and the error is kept in
    session state for display.

    Args:
        shortage_days: New shortage threshold in days
        excess_days: New excess threshold in days
    """
    current = st.session_state.classification_config
    config, error = update_classification_config(current, {
        "shortage_threshold_days": shortage_days,
        "excess_threshold_days": excess_days,
    })
    st.session_state.config_error = error
    if error:
        logger.warning("Rejected settings update: %s", error)
        return

    st.session_state.classification_config = config
    if st.session_state.analysis is not None:
        st.session_state.analysis = st.session_state.analysis.reclassify(config)


def reset_settings():
    """Restore default thresholds."""
    default = ClassificationConfig()
    apply_settings(default.shortage_threshold_days, default.excess_threshold_days)
