"""Ingestion pass: raw rows per file -> classified and consolidated items."""

from dataclasses import dataclass, field, replace
from typing import Any, Collection, Iterable, Mapping

from .classifier import classify
from .config import EXCLUDED_NAME_MARKERS, ROLE_STOCK, ROLE_SALES
from .consolidator import consolidate
from .models import (
    ClassificationConfig,
    ClassifiedItem,
    ConsolidatedItem,
    NormalizedRow,
)
from .normalizer import normalize_row
from .outlets import group_files_by_outlet
from .reconsolidation import reconsolidate

RawRow = Mapping[str, Any]


def is_excluded_row(row: NormalizedRow) -> bool:
    """Rows without code, or POS placeholder rows, never enter the engine."""
    if not row.product_code:
        return True
    name = row.product_name.upper()
    return any(marker in name for marker in EXCLUDED_NAME_MARKERS)


def prepare_rows(
    files: Mapping[str, Iterable[RawRow]]
) -> tuple[list[NormalizedRow], list[str]]:
    """
    Normalize and tag the raw rows of a batch of files.

    Args:
        files: filename -> raw rows decoded from that file

    Returns:
        Tuple of (rows, skipped_files)
        - rows: normalized rows tagged with outlet_id and role, grouped
          outlet by outlet (stock files first, then sales files)
        - skipped_files: files that do not belong to a processable outlet
    """
    outlets, skipped = group_files_by_outlet(files.keys())

    rows: list[NormalizedRow] = []
    for outlet_id, outlet_files in outlets.items():
        tagged = [(name, ROLE_STOCK) for name in outlet_files.stock_files]
        tagged += [(name, ROLE_SALES) for name in outlet_files.sales_files]
        for filename, role in tagged:
            for raw in files[filename]:
                row = normalize_row(raw)
                if is_excluded_row(row):
                    continue
                rows.append(replace(row, outlet_id=outlet_id, role=role))

    return rows, skipped


@dataclass
class InventoryAnalysis:
    """Everything computed from one batch under one config snapshot."""
    config: ClassificationConfig
    rows: list[NormalizedRow] = field(default_factory=list)
    classified: list[ClassifiedItem] = field(default_factory=list)
    consolidated: list[ConsolidatedItem] = field(default_factory=list)
    skipped_files: list[str] = field(default_factory=list)

    @property
    def outlets(self) -> list[str]:
        """Outlets that produced at least one item, in ingestion order."""
        seen: dict[str, None] = {}
        for item in self.classified:
            seen[item.outlet_id] = None
        return list(seen)

    @property
    def is_empty(self) -> bool:
        return not self.consolidated

    def view(self, selected_outlets: Collection[str]) -> list[ConsolidatedItem]:
        """Consolidated items for an outlet selection (empty = all)."""
        return reconsolidate(
            self.rows,
            selected_outlets,
            self.consolidated,
            self.config,
            classified=self.classified,
        )

    def reclassify(self, config: ClassificationConfig) -> "InventoryAnalysis":
        """Full recompute of the same rows under a new config."""
        return analyze_rows(self.rows, config, skipped_files=self.skipped_files)


def analyze_rows(
    rows: list[NormalizedRow],
    config: ClassificationConfig,
    skipped_files: Collection[str] = ()
) -> InventoryAnalysis:
    """Classify and consolidate already normalized rows."""
    classified = classify(rows, config)
    return InventoryAnalysis(
        config=config,
        rows=list(rows),
        classified=classified,
        consolidated=consolidate(classified, config),
        skipped_files=list(skipped_files),
    )


def run_analysis(
    files: Mapping[str, Iterable[RawRow]],
    config: ClassificationConfig
) -> InventoryAnalysis:
    """
    Run a full ingestion pass.

    Args:
        files: filename -> raw rows (already decoded)
        config: Thresholds and horizons for this pass

    Returns:
        InventoryAnalysis for the batch
    """
    rows, skipped = prepare_rows(files)
    return analyze_rows(rows, config, skipped_files=skipped)
