"""Restaurant aggregate owning the tables and the waiting list."""
from __future__ import annotations

from typing import List, Optional

from .errors import (
    EmptyTableError,
    MissingPartyError,
    MissingTableError,
    NoTablesAvailableError,
    NonPositiveArgumentError,
    OccupiedTableError,
)
from .models import Party, Table
from .seating import head_of_line, select_seating


class Restaurant:
    """Tables in the order they were added plus parties in booking order.

    Every operation validates before it mutates, so a raised error leaves
    the restaurant exactly as it was.
    """

    def __init__(self) -> None:
        self._tables: List[Table] = []
        self._waiting: List[Party] = []
        # Running counters for default labels; never reused after removal.
        self._tables_added = 0
        self._parties_booked = 0

    # ----------------------------- tables -----------------------------
    def add_table(self, capacity: int, name: str = "") -> Table:
        """Create an empty table and add it to the floor.

        Unnamed tables are labelled ``T<n>`` in the order they were added.
        """
        if capacity <= 0:
            raise NonPositiveArgumentError(capacity)
        self._tables_added += 1
        table = Table(capacity=capacity, name=name or f"T{self._tables_added}")
        self._tables.append(table)
        return table

    def remove_table(self, table: Optional[Table]) -> None:
        """Take an empty table off the floor."""
        if table is None or table not in self._tables:
            raise MissingTableError(table)
        if table.occupied:
            raise OccupiedTableError(table, table.occupant)
        self._tables.remove(table)

    def empty_table(self, table: Optional[Table]) -> Party:
        """Clear an occupied table and return the party that left."""
        if table is None or table not in self._tables:
            raise MissingTableError(table)
        if not table.occupied:
            raise EmptyTableError(table)
        party = table.free()
        party.seat_at(None)
        return party

    # ----------------------------- parties -----------------------------
    def book_party(self, size: int, is_vip: bool = False, name: str = "") -> Party:
        """Add a new party to the end of the waiting list.

        Unnamed parties are labelled ``P<n>`` in booking order.
        """
        if size <= 0:
            raise NonPositiveArgumentError(size)
        self._parties_booked += 1
        party = Party(size=size, is_vip=is_vip, name=name or f"P{self._parties_booked}")
        self._waiting.append(party)
        return party

    def remove_party(self, party: Optional[Party]) -> None:
        """Drop a waiting party from the list.

        Only waiting parties can be removed; a seated party leaves through
        :meth:`empty_table`.
        """
        if party is None or party not in self._waiting:
            raise MissingPartyError(party)
        # Unreachable while waiting parties are never seated; kept as a guard.
        if party.seated_table is not None:
            party.seated_table.free()
        self._waiting.remove(party)
        party.seat_at(None)

    # ----------------------------- seating -----------------------------
    def seat_party(self) -> Optional[Party]:
        """Seat one waiting party and return it.

        Returns ``None`` when nobody is waiting. Raises
        :class:`NoTablesAvailableError` carrying the head of the VIP-first
        line when no waiting party fits any empty table.
        """
        if not self._waiting:
            return None
        choice = select_seating(self._waiting, self._tables)
        if choice is None:
            raise NoTablesAvailableError(head_of_line(self._waiting))
        party, table = choice
        self._waiting.remove(party)
        party.seat_at(table)
        table.occupy(party)
        return party

    def seat_all(self) -> List[Party]:
        """Keep seating until the line is empty or nobody else fits."""
        seated: List[Party] = []
        while self._waiting:
            try:
                seated.append(self.seat_party())
            except NoTablesAvailableError:
                break
        return seated

    # ----------------------------- queries -----------------------------
    def get_tables(self) -> List[Table]:
        return list(self._tables)

    def get_filled_tables(self) -> List[Table]:
        return [t for t in self._tables if t.occupied]

    def get_empty_tables(self) -> List[Table]:
        return [t for t in self._tables if not t.occupied]

    def get_unseated_parties(self) -> List[Party]:
        """Waiting parties, earliest booking first regardless of VIP status."""
        return list(self._waiting)
