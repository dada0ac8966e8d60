"""Tests for decoding uploaded spreadsheets."""

import io

import pandas as pd

from inventory_engine.file_loader import read_table, load_files, is_supported_file
from inventory_engine.pipeline import run_analysis
from inventory_engine.models import Classification


def named_buffer(data: bytes, name: str) -> io.BytesIO:
    """BytesIO with a `name`, like a Streamlit UploadedFile."""
    buffer = io.BytesIO(data)
    buffer.name = name
    return buffer


def excel_bytes(df: pd.DataFrame) -> bytes:
    buffer = io.BytesIO()
    df.to_excel(buffer, index=False)
    return buffer.getvalue()


class TestReadTable:
    """Tests for read_table."""

    def test_reads_excel(self):
        df = pd.DataFrame({
            "Código": ["A1", "B2"],
            "Nombre": ["Acetaminofen", "Ibuprofeno"],
            "Existencia Actual": [100, 5],
        })

        rows, error = read_table(io.BytesIO(excel_bytes(df)), "Listado Centro.xlsx")

        assert error is None
        assert len(rows) == 2
        assert rows[0]["Código"] == "A1"
        assert rows[1]["Existencia Actual"] == "5"

    def test_reads_csv(self):
        data = "CODIGO,Nombre,Cantidad\nA1,Acetaminofen,70\nA1,Acetaminofen,50\n".encode("utf-8")

        rows, error = read_table(io.BytesIO(data), "vendidos centro.csv")

        assert error is None
        assert [r["Cantidad"] for r in rows] == ["70", "50"]

    def test_drops_blank_lines(self):
        df = pd.DataFrame({"Código": ["A1", None], "Nombre": ["X", None]})

        rows, error = read_table(io.BytesIO(excel_bytes(df)), "listado centro.xlsx")

        assert error is None
        assert len(rows) == 1

    def test_unsupported_extension(self):
        rows, error = read_table(io.BytesIO(b"hello"), "listado centro.txt")

        assert rows is None
        assert "no soportado" in error

    def test_corrupt_file(self):
        rows, error = read_table(io.BytesIO(b"not a workbook"), "listado centro.xlsx")

        assert rows is None
        assert error.startswith("Error leyendo el archivo")

    def test_corrupt_legacy_workbook(self):
        rows, error = read_table(io.BytesIO(b"not a workbook"), "listado centro.xls")

        assert rows is None
        assert error.startswith("Error leyendo el archivo")

    def test_codes_keep_leading_zeros(self):
        df = pd.DataFrame({"Código": ["00123"], "Nombre": ["Gasa"], "Existencia": [4]})
        csv = "CODIGO,Cantidad\n00123,7\n".encode("utf-8")

        excel_rows, _ = read_table(io.BytesIO(excel_bytes(df)), "listado centro.xlsx")
        csv_rows, _ = read_table(io.BytesIO(csv), "vendidos centro.csv")

        assert excel_rows[0]["Código"] == "00123"
        assert csv_rows[0]["CODIGO"] == "00123"

    def test_is_supported_file(self):
        assert is_supported_file("LISTADO.XLSX")
        assert is_supported_file("vendidos.csv")
        assert is_supported_file("listado viejo.xls")
        assert not is_supported_file("vendidos.pdf")


class TestLoadFiles:
    """Tests for batch loading."""

    def test_one_bad_file_does_not_block_others(self):
        good = pd.DataFrame({"Código": ["A1"], "Nombre": ["Acetaminofen"], "Existencia": [10]})
        files = [
            named_buffer(excel_bytes(good), "Listado Centro.xlsx"),
            named_buffer(b"garbage", "Vendidos Centro.xlsx"),
        ]

        rows_by_file, errors = load_files(files)

        assert list(rows_by_file) == ["Listado Centro.xlsx"]
        assert list(errors) == ["Vendidos Centro.xlsx"]

    def test_loaded_rows_feed_the_pipeline(self, config):
        stock = pd.DataFrame({
            "Código": ["A1", "C3"],
            "Nombre": ["Acetaminofen", "Gasa esteril"],
            "Existencia Actual": [100, 10],
            "Dpto. Descrip.": ["Analgesicos", "Material Medico"],
        })
        sales = "CODIGO,Cantidad\nA1,120\n".encode("utf-8")
        files = [
            named_buffer(excel_bytes(stock), "Listado Norte.xlsx"),
            named_buffer(sales, "Vendidos Norte.csv"),
        ]

        rows_by_file, errors = load_files(files)
        analysis = run_analysis(rows_by_file, config)

        assert errors == {}
        by_code = {c.product_code: c for c in analysis.consolidated}
        assert by_code["A1"].classification == Classification.BALANCED
        assert by_code["C3"].classification == Classification.UNSOLD

    def test_zero_padded_codes_join_across_files(self, config):
        stock = pd.DataFrame({
            "Código": ["00123"],
            "Nombre": ["Gasa esteril"],
            "Existencia Actual": [100],
            "Dpto. Descrip.": ["Material Medico"],
        })
        sales = "CODIGO,Cantidad\n00123,120\n".encode("utf-8")
        files = [
            named_buffer(excel_bytes(stock), "Listado Centro.xlsx"),
            named_buffer(sales, "Vendidos Centro.csv"),
        ]

        rows_by_file, _ = load_files(files)
        item = run_analysis(rows_by_file, config).consolidated[0]

        assert item.product_code == "00123"
        assert item.current_stock == 100
        assert item.total_sales == 120
