"""UI module for Streamlit components.

This package contains all Streamlit-specific UI components.
The components are separated from business logic (in inventory_engine/) to allow:
- Testing of business logic without Streamlit
- Potential future CLI or alternative UI implementations
"""

from .session_state import init_session_state, apply_settings, reset_settings
from .filters import render_filters
from .results import render_metrics, render_results, items_to_dataframe

__all__ = [
    # Session state
    "init_session_state",
    "apply_settings",
    "reset_settings",
    # Filters
    "render_filters",
    # Results
    "render_metrics",
    "render_results",
    "items_to_dataframe",
]
