"""Core module for inventory classification and consolidation logic."""

from .models import (
    Classification,
    ClassificationConfig,
    ClassifiedItem,
    ConsolidatedItem,
    NormalizedRow,
    StockHealth,
    update_classification_config,
)
from .normalizer import (
    normalize_header,
    normalize_row,
    coerce_number,
    coerce_text,
)
from .outlets import (
    OutletFiles,
    resolve_outlet,
    resolve_role,
    group_files_by_outlet,
)
from .departments import DepartmentInferencer, is_missing_department
from .classifier import evaluate_stock_health, classify_outlet, classify
from .consolidator import consolidate
from .reconsolidation import reconsolidate, project_item
from .pipeline import InventoryAnalysis, prepare_rows, analyze_rows, run_analysis
from .file_loader import read_table, load_files, is_supported_file
from .filters import (
    FilterState,
    search_items,
    apply_view_filters,
    get_filter_options,
)
from .metrics import InventoryMetrics, summarize

__all__ = [
    # Models
    "Classification",
    "ClassificationConfig",
    "ClassifiedItem",
    "ConsolidatedItem",
    "NormalizedRow",
    "StockHealth",
    "update_classification_config",
    # Normalizer
    "normalize_header",
    "normalize_row",
    "coerce_number",
    "coerce_text",
    # Outlets
    "OutletFiles",
    "resolve_outlet",
    "resolve_role",
    "group_files_by_outlet",
    # Departments
    "DepartmentInferencer",
    "is_missing_department",
    # Classification / consolidation
    "evaluate_stock_health",
    "classify_outlet",
    "classify",
    "consolidate",
    "reconsolidate",
    "project_item",
    # Pipeline
    "InventoryAnalysis",
    "prepare_rows",
    "analyze_rows",
    "run_analysis",
    # File loader
    "read_table",
    "load_files",
    "is_supported_file",
    # Filters
    "FilterState",
    "search_items",
    "apply_view_filters",
    "get_filter_options",
    # Metrics
    "InventoryMetrics",
    "summarize",
]
