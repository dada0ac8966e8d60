"""Data models for inventory classification and consolidation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .config import (
    DEFAULT_SHORTAGE_THRESHOLD_DAYS,
    DEFAULT_EXCESS_THRESHOLD_DAYS,
    DEFAULT_HORIZONS,
    NO_BRAND,
)


class Classification(str, Enum):
    """Inventory health tiers. Values are the labels shown to users."""
    SHORTAGE = "Falla"
    BALANCED = "OK"
    EXCESS = "Exceso"
    UNSOLD = "No vendido"


@dataclass
class NormalizedRow:
    """One spreadsheet line mapped onto the canonical field set."""
    product_code: str = ""
    product_name: str = ""
    current_stock: float = 0.0
    department: str = ""
    brand: str = NO_BRAND
    sales_quantity: float = 0.0

    # Set during ingestion from the source filename
    outlet_id: str = ""
    role: str = ""

    # Unrecognized columns, keyed by normalized header
    extras: dict = field(default_factory=dict)


@dataclass(frozen=True)
class ClassificationConfig:
    """Thresholds and horizons used for every classification call."""
    shortage_threshold_days: int = DEFAULT_SHORTAGE_THRESHOLD_DAYS
    excess_threshold_days: int = DEFAULT_EXCESS_THRESHOLD_DAYS
    horizons: tuple[int, ...] = DEFAULT_HORIZONS

    def validate(self) -> list[str]:
        """Return a list of problems; empty when the config is usable."""
        errors = []
        if self.shortage_threshold_days <= 0:
            errors.append("El umbral de falla debe ser mayor que 0")
        if self.excess_threshold_days <= 0:
            errors.append("El umbral de exceso debe ser mayor que 0")
        if self.shortage_threshold_days >= self.excess_threshold_days:
            errors.append("El umbral de falla debe ser menor que el de exceso")
        if not self.horizons:
            errors.append("Debe haber al menos un horizonte")
        elif any(h <= 0 for h in self.horizons):
            errors.append("Los horizontes deben ser mayores que 0")
        return errors

    def to_dict(self) -> dict:
        """Convert config to dictionary for JSON export."""
        return {
            "shortage_threshold_days": self.shortage_threshold_days,
            "excess_threshold_days": self.excess_threshold_days,
            "horizons": list(self.horizons),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ClassificationConfig":
        """Create config from dictionary (JSON import)."""
        return cls(
            shortage_threshold_days=int(data.get("shortage_threshold_days", DEFAULT_SHORTAGE_THRESHOLD_DAYS)),
            excess_threshold_days=int(data.get("excess_threshold_days", DEFAULT_EXCESS_THRESHOLD_DAYS)),
            horizons=tuple(int(h) for h in data.get("horizons", DEFAULT_HORIZONS)),
        )


def update_classification_config(
    current: ClassificationConfig,
    data: dict
) -> tuple[ClassificationConfig, Optional[str]]:
    """
    Apply a settings update, keeping the current config if it is invalid.

    Args:
        current: Config that is active now
        data: Fields to change (same keys as ClassificationConfig.to_dict)

    Returns:
        Tuple of (active_config, error_message)
        If accepted: (new_config, None)
        If rejected: (current, error_message)
    """
    merged = {**current.to_dict(), **data}
    try:
        candidate = ClassificationConfig.from_dict(merged)
    except (ValueError, TypeError) as e:
        return current, f"Configuración inválida: {e}"

    errors = candidate.validate()
    if errors:
        return current, "; ".join(errors)
    return candidate, None


@dataclass(frozen=True)
class StockHealth:
    """Classification math for one stock/sales pair."""
    daily_velocity: float
    days_of_supply: float
    classification: Classification
    excess_units: int
    suggested_reorder: dict[int, int]


@dataclass(frozen=True)
class ClassifiedItem:
    """A product as seen by a single outlet."""
    product_code: str
    product_name: str
    department: str
    brand: str
    current_stock: int
    total_sales: int
    daily_velocity: float
    days_of_supply: float
    classification: Classification
    excess_units: int
    suggested_reorder: dict[int, int]
    outlet_id: str


@dataclass(frozen=True)
class ConsolidatedItem:
    """A product aggregated across one or more outlets."""
    product_code: str
    product_names: tuple[str, ...]
    departments: tuple[str, ...]
    brands: tuple[str, ...]
    outlet_ids: tuple[str, ...]
    stock_by_outlet: dict[str, int]
    current_stock: int
    total_sales: int
    daily_velocity: float
    days_of_supply: float
    classification: Classification
    excess_units: int
    suggested_reorder: dict[int, int]

    @property
    def display_name(self) -> str:
        """All known names joined for display."""
        return ", ".join(self.product_names)
