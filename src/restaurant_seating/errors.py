"""Exceptions raised by the restaurant aggregate.

Every error keeps the offending argument or entity on the instance so
callers can check exactly which table or party was rejected.
"""
from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Party, Table


class SeatingError(Exception):
    """Base class for all seating errors."""


class NonPositiveArgumentError(SeatingError, ValueError):
    """A size or capacity was zero or negative."""

    def __init__(self, argument: int) -> None:
        super().__init__(f"Expected a positive integer, got {argument}")
        self.argument = argument


class MissingTableError(SeatingError, LookupError):
    """The table is ``None`` or does not belong to the restaurant."""

    def __init__(self, table: Optional["Table"]) -> None:
        super().__init__(f"Table not found: {table!r}")
        self.table = table


class OccupiedTableError(SeatingError):
    """The operation needs an empty table but a party is sitting there."""

    def __init__(self, table: "Table", party: "Party") -> None:
        super().__init__(f"Table {table!r} is occupied by {party!r}")
        self.table = table
        self.party = party


class EmptyTableError(SeatingError):
    """The operation needs an occupied table."""

    def __init__(self, table: "Table") -> None:
        super().__init__(f"Table {table!r} is not occupied")
        self.table = table


class MissingPartyError(SeatingError, LookupError):
    """The party is ``None`` or is not on the waiting list."""

    def __init__(self, party: Optional["Party"]) -> None:
        super().__init__(f"Party not waiting: {party!r}")
        self.party = party


class NoTablesAvailableError(SeatingError):
    """No empty table can hold any waiting party."""

    def __init__(self, party: "Party") -> None:
        super().__init__(f"No table available; next in line is {party!r}")
        self.party = party
