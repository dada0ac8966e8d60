"""Spreadsheet loading utilities.

This module decodes uploaded stock/sales exports into raw row dicts.
It is UI-agnostic and can be used by both Streamlit and CLI applications.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Iterable

import pandas as pd

from .config import ALLOWED_EXTENSIONS, EXCEL_ENGINES

logger = logging.getLogger(__name__)


def is_supported_file(filename: str) -> bool:
    """Whether the file extension is one we can decode."""
    return Path(str(filename)).suffix.lower() in ALLOWED_EXTENSIONS


def read_table(file: BinaryIO, filename: str) -> tuple[list[dict] | None, str | None]:
    """Decode the first sheet of an Excel file (xlsx or xls), or a CSV file, into rows.

    Args:
        file: File-like object (uploaded file or opened file)
        filename: Original file name, used to pick the decoder

    Returns:
        Tuple of (rows, error_message)
        If successful: (list_of_row_dicts, None)
        If error: (None, error_message)
    """
    suffix = Path(str(filename)).suffix.lower()
    if suffix not in ALLOWED_EXTENSIONS:
        return None, f"Formato no soportado: {suffix or filename}"

    # Cells are read as text so codes like "00123" keep their leading zeros
    try:
        if suffix == ".csv":
            df = pd.read_csv(file, dtype=str)
        else:
            df = pd.read_excel(file, sheet_name=0, dtype=str, engine=EXCEL_ENGINES[suffix])
    except Exception as e:
        return None, f"Error leyendo el archivo: {e}"
    finally:
        if hasattr(file, "seek"):
            file.seek(0)

    # Blank spreadsheet lines come through as all-NaN rows
    df = df.dropna(how="all")
    return df.to_dict(orient="records"), None


def load_files(files: Iterable) -> tuple[dict[str, list[dict]], dict[str, str]]:
    """Decode a batch of uploaded files, isolating failures per file.

    Args:
        files: Uploaded file objects exposing a `name` attribute

    Returns:
        Tuple of (rows_by_file, errors_by_file)
    """
    rows_by_file: dict[str, list[dict]] = {}
    errors: dict[str, str] = {}

    for file in files:
        filename = getattr(file, "name", str(file))
        rows, error = read_table(file, filename)
        if error:
            logger.warning("Skipping %s: %s", filename, error)
            errors[filename] = error
            continue
        logger.info("Loaded %s: %d rows", filename, len(rows))
        rows_by_file[filename] = rows

    return rows_by_file, errors
