"""Default configuration values."""

# Classification thresholds (can be modified in UI)
DEFAULT_SHORTAGE_THRESHOLD_DAYS = 20
DEFAULT_EXCESS_THRESHOLD_DAYS = 60
DEFAULT_HORIZONS = (30, 40, 50, 60)

# Sales extracts always cover this many days
SALES_WINDOW_DAYS = 60

# Known outlets: (filename fragment, outlet id). First match wins.
KNOWN_OUTLETS: list[tuple[str, str]] = [
    ("centro", "Farmacia Centro"),
    ("norte", "Farmacia Norte"),
    ("oriente", "Farmacia Oriente"),
]
UNKNOWN_OUTLET = "unknown"

# File role markers (searched case-insensitively in the filename)
STOCK_FILE_MARKER = "listado"
SALES_FILE_MARKER = "vendido"
ROLE_STOCK = "stock"
ROLE_SALES = "sales"

# Sentinels
NO_DEPARTMENT = "Sin Depto."
NO_BRAND = "Sin marca"
# Normalized department labels treated as "no department"
MISSING_DEPARTMENT_LABELS = {"", "sindepto", "sincategoria", "sindepartamento"}

# Department inference
MIN_KEYWORD_LENGTH = 4

# Header aliases: normalized header -> canonical field
HEADER_ALIASES = {
    "codigo": "product_code",
    "cod": "product_code",
    "codproducto": "product_code",
    "nombre": "product_name",
    "nombreproducto": "product_name",
    "descripcion": "product_name",
    "existenciaactual": "current_stock",
    "existencia": "current_stock",
    "dptodescrip": "department",
    "departamento": "department",
    "departamentonombre": "department",
    "ventas60d": "sales_quantity",
    "cantidad": "sales_quantity",
    "marca": "brand",
}

# Placeholder rows exported by the point-of-sale system
EXCLUDED_NAME_MARKERS = ("COD01",)

# Upload limits
ALLOWED_EXTENSIONS = (".xlsx", ".xls", ".csv")

# pandas read_excel engine per workbook format
EXCEL_ENGINES = {
    ".xlsx": "openpyxl",
    ".xls": "xlrd",
}
MAX_UPLOAD_FILES = 10
