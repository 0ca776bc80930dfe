from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Tuple

import pandas as pd

from load_planner.inventory import new_package_id
from load_planner.models import Package
from load_planner.rounding import to_decimal

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["type", "length", "width", "height", "weight"]

TEMPLATE_COLUMNS = {
    "type": "Type de colis",
    "length": "Longueur (cm)",
    "width": "Largeur (cm)",
    "height": "Hauteur (cm)",
    "weight": "Poids (kg)",
    "quantity": "Quantité",
}

TEMPLATE_SHEET = "Modèle Colis"

# legacy .xls would need xlrd; only openpyxl workbooks are read
IMPORT_FILE_TYPES = ["xlsx", "csv"]

COLUMN_ALIASES = {
    "typedecolis": "type",
    "type": "type",
    "category": "type",
    "longueurcm": "length",
    "longueur": "length",
    "length": "length",
    "l": "length",
    "largeurcm": "width",
    "largeur": "width",
    "width": "width",
    "w": "width",
    "hauteurcm": "height",
    "hauteur": "height",
    "height": "height",
    "h": "height",
    "poidskg": "weight",
    "poids": "weight",
    "weight": "weight",
    "weightkg": "weight",
    "quantité": "quantity",
    "quantite": "quantity",
    "quantity": "quantity",
    "qty": "quantity",
}


class PackageInputError(ValueError):
    pass


@dataclass
class SkippedRow:
    row_no: int
    reason: str


@dataclass
class ImportResult:
    packages: List[Package]
    skipped: List[SkippedRow] = field(default_factory=list)


def _normalize_column_name(name: str) -> str:
    return "".join(ch for ch in str(name).strip() if ch.isalnum()).lower()


def _apply_column_aliases(df: pd.DataFrame) -> pd.DataFrame:
    rename_map: dict[str, str] = {}
    for col in df.columns:
        target = COLUMN_ALIASES.get(_normalize_column_name(col))
        # first matching header wins when a sheet carries two spellings
        if target and target not in rename_map.values():
            rename_map[col] = target
    if rename_map:
        df = df.rename(columns=rename_map)
    return df


def load_packages_csv(content: str) -> pd.DataFrame:
    data = pd.read_csv(io.StringIO(content))
    return _apply_column_aliases(data)


def load_packages_excel(data: bytes) -> pd.DataFrame:
    # first sheet only
    frame = pd.read_excel(io.BytesIO(data), sheet_name=0, engine="openpyxl")
    return _apply_column_aliases(frame)


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and pd.isna(value):
        return True
    return str(value).strip() == ""


def _parse_positive(value, label: str) -> Decimal:
    if _is_blank(value):
        raise ValueError(f"{label} manquant")
    try:
        number = to_decimal(str(value).strip().replace(",", "."))
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"{label} '{value}' n'est pas un nombre") from exc
    if not number.is_finite() or number <= 0:
        raise ValueError(f"{label} doit être supérieur à 0")
    return number


def _parse_quantity(value) -> int:
    if _is_blank(value):
        return 1
    try:
        quantity = int(Decimal(str(value).strip()))
    except Exception:  # noqa: BLE001
        return 1
    return quantity if quantity > 0 else 1


def _parse_row(row: pd.Series, package_id: str) -> Package:
    package_type = "" if _is_blank(row.get("type")) else str(row.get("type")).strip()
    if not package_type:
        raise ValueError("type de colis manquant")
    return Package(
        id=package_id,
        type=package_type,
        length=_parse_positive(row.get("length"), "longueur"),
        width=_parse_positive(row.get("width"), "largeur"),
        height=_parse_positive(row.get("height"), "hauteur"),
        weight=_parse_positive(row.get("weight"), "poids"),
        quantity=_parse_quantity(row.get("quantity")),
    )


def normalize_package_rows(df: pd.DataFrame, id_prefix: str = "import") -> ImportResult:
    """Turn an imported sheet into packages, skipping rows that are not usable.

    Row numbers in the result follow the spreadsheet (header on row 1).
    Raises PackageInputError when a required column is missing or when no
    row survives.
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise PackageInputError(f"Colonnes obligatoires manquantes: {', '.join(missing)}")

    result = ImportResult(packages=[])
    for position, (_, row) in enumerate(df.iterrows()):
        row_no = position + 2
        try:
            pkg = _parse_row(row, new_package_id(id_prefix))
        except ValueError as exc:
            logger.warning("Import row %d skipped: %s", row_no, exc)
            result.skipped.append(SkippedRow(row_no=row_no, reason=str(exc)))
            continue
        result.packages.append(pkg)

    if not result.packages:
        raise PackageInputError("Aucun colis valide trouvé dans le fichier")
    return result


def build_import_template() -> pd.DataFrame:
    rows: List[Tuple] = [
        ("Carton", 30, 20, 15, 2.5, 1),
        ("Palette", 120, 80, 100, 25, 2),
    ]
    keys = list(TEMPLATE_COLUMNS)
    return pd.DataFrame(
        [dict(zip(keys, row)) for row in rows],
        columns=keys,
    ).rename(columns=TEMPLATE_COLUMNS)


def template_excel_bytes() -> bytes:
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        build_import_template().to_excel(writer, sheet_name=TEMPLATE_SHEET, index=False)
    return buffer.getvalue()
