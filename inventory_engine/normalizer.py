"""Header normalization for heterogeneous outlet exports.

Outlets export the same data under different column labels ("Código",
"CODIGO", "Dpto. Descrip.", ...). Every raw row is mapped onto the fixed
field set of NormalizedRow; values are coerced permissively so a dirty
cell never aborts an ingestion pass.
"""

import math
import unicodedata
from typing import Any, Mapping

import pandas as pd

from .config import HEADER_ALIASES, NO_BRAND
from .models import NormalizedRow


def normalize_header(header: Any) -> str:
    """Normalize a column label for alias lookup.

    Strips diacritics, lowercases and removes periods and whitespace:
    "Dpto. Descrip." -> "dptodescrip", "Existencia Actual" -> "existenciaactual"

    Args:
        header: Column label (any type, converted with str())

    Returns:
        Normalized label, possibly empty
    """
    if header is None:
        return ""
    text = unicodedata.normalize("NFKD", str(header))
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = text.lower().replace(".", "")
    return "".join(text.split())


def coerce_number(value: Any) -> float:
    """Convert cell value to float, treating NaN/empty/garbage as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        if pd.isna(value):
            return 0.0
    except (ValueError, TypeError):
        return 0.0
    try:
        number = float(value)
    except (ValueError, TypeError):
        # Spanish exports may use a decimal comma
        try:
            number = float(str(value).replace(",", "."))
        except (ValueError, TypeError):
            return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def coerce_text(value: Any) -> str:
    """Convert cell value to stripped string, treating NaN/None as empty."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (ValueError, TypeError):
        pass
    # Codes read as floats (1001.0) come back as "1001"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def normalize_row(raw: Mapping[str, Any]) -> NormalizedRow:
    """
    Map a raw row onto NormalizedRow.

    Missing columns fall back to defaults and unknown columns are kept in
    `extras` under their normalized name. When two labels map to the same
    field the first one wins.

    Args:
        raw: Mapping of column label -> cell value

    Returns:
        NormalizedRow with coerced values
    """
    fields: dict[str, Any] = {}
    extras: dict[str, Any] = {}

    for key, value in raw.items():
        normalized = normalize_header(key)
        target = HEADER_ALIASES.get(normalized)
        if target is None:
            extras.setdefault(normalized, value)
        else:
            fields.setdefault(target, value)

    return NormalizedRow(
        product_code=coerce_text(fields.get("product_code")),
        product_name=coerce_text(fields.get("product_name")),
        current_stock=coerce_number(fields.get("current_stock")),
        department=coerce_text(fields.get("department")),
        brand=coerce_text(fields.get("brand")) or NO_BRAND,
        sales_quantity=coerce_number(fields.get("sales_quantity")),
        extras=extras,
    )
