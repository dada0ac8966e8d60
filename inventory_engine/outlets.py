"""Outlet and file-role resolution by filename."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .config import (
    KNOWN_OUTLETS,
    UNKNOWN_OUTLET,
    STOCK_FILE_MARKER,
    SALES_FILE_MARKER,
    ROLE_STOCK,
    ROLE_SALES,
)


def resolve_outlet(filename: str) -> str:
    """
    Find the outlet a file belongs to.

    Example: "Listado Productos CENTRO.xlsx" -> "Farmacia Centro"

    Returns UNKNOWN_OUTLET when no known fragment appears in the name.
    """
    if not filename:
        return UNKNOWN_OUTLET
    name = str(filename).lower()
    for fragment, outlet_id in KNOWN_OUTLETS:
        if fragment in name:
            return outlet_id
    return UNKNOWN_OUTLET


def resolve_role(filename: str) -> Optional[str]:
    """Tag a file as a stock listing or a sales extract (None if neither)."""
    if not filename:
        return None
    name = str(filename).lower()
    if STOCK_FILE_MARKER in name:
        return ROLE_STOCK
    if SALES_FILE_MARKER in name:
        return ROLE_SALES
    return None


@dataclass
class OutletFiles:
    """Files uploaded for a single outlet, split by role."""
    outlet_id: str
    stock_files: list[str] = field(default_factory=list)
    sales_files: list[str] = field(default_factory=list)

    @property
    def is_processable(self) -> bool:
        """An outlet needs at least one stock listing; sales are optional."""
        return len(self.stock_files) > 0


def group_files_by_outlet(
    filenames: Iterable[str]
) -> tuple[dict[str, OutletFiles], list[str]]:
    """
    Group filenames by outlet and role.

    Args:
        filenames: Names of uploaded files

    Returns:
        Tuple of (outlets, skipped)
        - outlets: outlet_id -> OutletFiles, in first-seen order, only
          outlets that have a stock file
        - skipped: filenames left out (unknown outlet, no role, or outlet
          without stock listing)
    """
    grouped: dict[str, OutletFiles] = {}
    skipped: list[str] = []

    for filename in filenames:
        outlet_id = resolve_outlet(filename)
        role = resolve_role(filename)
        if outlet_id == UNKNOWN_OUTLET or role is None:
            skipped.append(filename)
            continue

        files = grouped.setdefault(outlet_id, OutletFiles(outlet_id=outlet_id))
        if role == ROLE_STOCK:
            files.stock_files.append(filename)
        else:
            files.sales_files.append(filename)

    outlets = {}
    for outlet_id, files in grouped.items():
        if files.is_processable:
            outlets[outlet_id] = files
        else:
            skipped.extend(files.sales_files)

    return outlets, skipped
