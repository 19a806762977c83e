"""Occupancy reports for a restaurant floor."""
from __future__ import annotations

from typing import Dict, List

from .restaurant import Restaurant


def table_rows(restaurant: Restaurant) -> List[Dict[str, object]]:
    """One row per table in the order the tables were added."""
    rows = []
    for table in restaurant.get_tables():
        party = table.occupant
        rows.append({
            "table": table.name,
            "capacity": table.capacity,
            "occupied": table.occupied,
            "party": party.name if party is not None else "",
            "party_size": party.size if party is not None else 0,
            "vip": party.is_vip if party is not None else False,
            "empty_seats": table.capacity - (party.size if party is not None else 0),
        })
    return rows


def waiting_rows(restaurant: Restaurant) -> List[Dict[str, object]]:
    """Waiting parties in booking order."""
    return [
        {"party": p.name, "size": p.size, "vip": p.is_vip}
        for p in restaurant.get_unseated_parties()
    ]


def summarize(restaurant: Restaurant) -> Dict[str, int | float]:
    """Floor-wide counts plus utilization of the filled tables."""
    tables = restaurant.get_tables()
    filled = restaurant.get_filled_tables()
    waiting = restaurant.get_unseated_parties()
    seated_guests = sum(t.occupant.size for t in filled)
    filled_capacity = sum(t.capacity for t in filled)
    return {
        "tables": len(tables),
        "filled_tables": len(filled),
        "empty_tables": len(tables) - len(filled),
        "waiting_parties": len(waiting),
        "waiting_guests": sum(p.size for p in waiting),
        "seated_guests": seated_guests,
        "total_capacity": sum(t.capacity for t in tables),
        "utilization": seated_guests / filled_capacity if filled_capacity else 0.0,
    }
