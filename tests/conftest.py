"""Shared fixtures for inventory classification tests."""

import pytest

from inventory_engine.config import ROLE_STOCK, ROLE_SALES
from inventory_engine.models import ClassificationConfig, NormalizedRow

# Outlet ids used in tests (must match config.KNOWN_OUTLETS)
CENTRO = "Farmacia Centro"
NORTE = "Farmacia Norte"
ORIENTE = "Farmacia Oriente"


@pytest.fixture
def config():
    """Default ClassificationConfig (20 / 60 days, horizons 30-60)."""
    return ClassificationConfig()


def stock_row(
    code: str,
    stock: float,
    name: str = None,
    department: str = "Medicamentos",
    brand: str = "Genven",
    outlet: str = CENTRO,
) -> NormalizedRow:
    """Helper to create a tagged stock listing row."""
    return NormalizedRow(
        product_code=code,
        product_name=name if name is not None else f"Producto {code}",
        current_stock=stock,
        department=department,
        brand=brand,
        outlet_id=outlet,
        role=ROLE_STOCK,
    )


def sales_row(code: str, quantity: float, outlet: str = CENTRO) -> NormalizedRow:
    """Helper to create a tagged sales extract row."""
    return NormalizedRow(
        product_code=code,
        product_name=f"Producto {code}",
        sales_quantity=quantity,
        outlet_id=outlet,
        role=ROLE_SALES,
    )


def raw_stock_row(code, name, stock, department="Medicamentos", brand="Genven") -> dict:
    """Raw stock export row with the headers used by most outlets."""
    return {
        "Código": code,
        "Nombre": name,
        "Existencia Actual": stock,
        "Dpto. Descrip.": department,
        "Marca": brand,
    }


def raw_sales_row(code, quantity) -> dict:
    """Raw sales export row."""
    return {"CODIGO": code, "Nombre": f"Producto {code}", "Cantidad": quantity}
