"""CSV loading utilities."""
from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Dict, List

import numpy as np
import pandas as pd

from .models import PartySpec, TableSpec, parse_bool
from .restaurant import Restaurant

TABLE_COLUMNS = ["capacity"]
PARTY_COLUMNS = ["size"]


def _require_columns(df: pd.DataFrame, required: List[str], file_label: str) -> None:
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"{file_label}: missing columns: {', '.join(missing)}")


def read_frame(path: Path | str | IO[Any], file_label: str, dtype: Dict[str, Any] | None = None) -> pd.DataFrame:
    """Read a CSV, turning empty or malformed input into a labelled ``ValueError``."""
    try:
        return pd.read_csv(path, dtype=dtype)
    except pd.errors.EmptyDataError:
        raise ValueError(f"{file_label}: file is empty") from None
    except pd.errors.ParserError as e:
        raise ValueError(f"{file_label}: could not parse CSV: {e}") from None


def _parse_int(value: object, column: str, row_number: int, file_label: str) -> int:
    """Convert a cell to an exact ``int``; blanks and fractions are rejected."""
    if isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_)):
        return int(value)
    if value is None or pd.isna(value):
        raise ValueError(f"{file_label} row {row_number}: {column} must be a whole number, got {value!r}")
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    # Only used to tell "4.0" apart from "4.5" and "lots".
    try:
        number = float(text)
    except ValueError:
        raise ValueError(f"{file_label} row {row_number}: {column} is not a number: {value!r}") from None
    if not number.is_integer():
        raise ValueError(f"{file_label} row {row_number}: {column} must be a whole number, got {value!r}")
    return int(number)


def _parse_name(value: object) -> str:
    if value is None or pd.isna(value):
        return ""
    return str(value).strip()


def load_tables(path: Path | str | IO[Any]) -> List[TableSpec]:
    """Load table definitions from ``tables.csv`` in file order."""
    # Numbers are read as text so large values are never rounded through float.
    df = read_frame(path, "tables.csv", dtype={"capacity": str})
    _require_columns(df, TABLE_COLUMNS, "tables.csv")
    tables: List[TableSpec] = []
    # Row numbers are reported as they appear in the file, header included.
    for idx, row in df.iterrows():
        tables.append(
            TableSpec(
                capacity=_parse_int(row["capacity"], "capacity", idx + 2, "tables.csv"),
                name=_parse_name(row.get("name", "")),
            )
        )
    return tables


def load_parties(path: Path | str | IO[Any]) -> List[PartySpec]:
    """Load bookings from ``parties.csv`` in booking order."""
    df = read_frame(path, "parties.csv", dtype={"size": str})
    _require_columns(df, PARTY_COLUMNS, "parties.csv")
    parties: List[PartySpec] = []
    for idx, row in df.iterrows():
        parties.append(
            PartySpec(
                size=_parse_int(row["size"], "size", idx + 2, "parties.csv"),
                is_vip=parse_bool(row.get("vip", "false")),
                name=_parse_name(row.get("name", "")),
            )
        )
    return parties


def load_restaurant(
    tables_path: Path | str | IO[Any], parties_path: Path | str | IO[Any]
) -> Restaurant:
    """Build a restaurant with every table added and every party booked.

    Non-positive sizes surface as :class:`NonPositiveArgumentError` from the
    aggregate itself.
    """
    restaurant = Restaurant()
    for spec in load_tables(tables_path):
        restaurant.add_table(spec.capacity, name=spec.name)
    for spec in load_parties(parties_path):
        restaurant.book_party(spec.size, spec.is_vip, name=spec.name)
    return restaurant
