"""
Priority and best-fit seating policy.

Selection rule for a single seating:
    1. Order waiting parties VIP first, keeping booking order inside each class.
    2. Walk that order and take the first party that fits an empty table.
    3. Give it the smallest empty table that can hold it; among equal
       capacities the earliest-added table wins.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .models import Party, Table


# ----------------------------- ordering -----------------------------
def vip_first(parties: Sequence[Party]) -> List[Party]:
    """Stable partition of ``parties`` with VIPs ahead of everyone else."""
    vips = [p for p in parties if p.is_vip]
    others = [p for p in parties if not p.is_vip]
    return vips + others


def head_of_line(parties: Sequence[Party]) -> Optional[Party]:
    """Party that would be considered first, or ``None`` when nobody waits."""
    ordered = vip_first(parties)
    return ordered[0] if ordered else None


# ----------------------------- table choice -----------------------------
def fitting_tables(party: Party, tables: Sequence[Table]) -> List[Table]:
    """Empty tables big enough for ``party``, in table order."""
    return [t for t in tables if not t.occupied and t.capacity >= party.size]


def best_fit(party: Party, tables: Sequence[Table]) -> Optional[Table]:
    """Smallest fitting empty table, earliest-added on ties."""
    best = None
    for table in fitting_tables(party, tables):
        # Strict comparison keeps the earlier table on a tie.
        if best is None or table.capacity < best.capacity:
            best = table
    return best


def select_seating(
    parties: Sequence[Party], tables: Sequence[Table]
) -> Optional[Tuple[Party, Table]]:
    """Pick the next (party, table) pair, or ``None`` if no waiting party fits."""
    for party in vip_first(parties):
        table = best_fit(party, tables)
        if table is not None:
            return party, table
    return None
