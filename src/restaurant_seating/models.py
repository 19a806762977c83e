"""Data models for restaurant_seating."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import math


def parse_bool(value: object) -> bool:
    """Parse common truthy strings into bool.

    ``pandas`` hands back ``float('nan')`` for blank cells, which is false.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isnan(value):
        return False
    return str(value).strip().lower() in {"true", "yes", "y", "1"}


# Entities compare by identity, so eq is disabled on both dataclasses.
@dataclass(eq=False)
class Table:
    """Restaurant table with a fixed capacity and at most one occupant."""

    capacity: int
    name: str = ""
    occupant: Optional["Party"] = field(default=None, repr=False)

    @property
    def occupied(self) -> bool:
        return self.occupant is not None

    def occupy(self, party: "Party") -> None:
        self.occupant = party

    def free(self) -> Optional["Party"]:
        """Clear the occupant and return whoever was sitting here."""
        party = self.occupant
        self.occupant = None
        return party


@dataclass(eq=False)
class Party:
    """Group of guests waiting for, or seated at, a table."""

    size: int
    is_vip: bool = False
    name: str = ""
    seated_table: Optional[Table] = field(default=None, repr=False)

    def seat_at(self, table: Optional[Table]) -> None:
        self.seated_table = table


@dataclass
class TableSpec:
    """Table definition read from ``tables.csv``."""

    capacity: int
    name: str = ""


@dataclass
class PartySpec:
    """Booking read from ``parties.csv``."""

    size: int
    is_vip: bool = False
    name: str = ""
