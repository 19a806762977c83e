"""restaurant_seating package."""
from .models import Party, Table, PartySpec, TableSpec
from .errors import (
    SeatingError,
    NonPositiveArgumentError,
    MissingTableError,
    OccupiedTableError,
    EmptyTableError,
    MissingPartyError,
    NoTablesAvailableError,
)
from .restaurant import Restaurant
from .csv_loader import load_tables, load_parties, load_restaurant

__all__ = [
    "Party",
    "Table",
    "PartySpec",
    "TableSpec",
    "SeatingError",
    "NonPositiveArgumentError",
    "MissingTableError",
    "OccupiedTableError",
    "EmptyTableError",
    "MissingPartyError",
    "NoTablesAvailableError",
    "Restaurant",
    "load_tables",
    "load_parties",
    "load_restaurant",
]
