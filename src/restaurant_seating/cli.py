"""Command line interface for restaurant_seating."""
from __future__ import annotations

import argparse
import csv
from pathlib import Path
from typing import Dict, List, Sequence

from .csv_loader import load_restaurant
from .errors import NoTablesAvailableError
from .report import summarize, table_rows, waiting_rows
from .restaurant import Restaurant


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Restaurant seating manager")
    parser.add_argument("--tables", required=True, help="Path to tables.csv")
    parser.add_argument("--parties", required=True, help="Path to parties.csv")
    parser.add_argument("--max-rounds", type=int, default=None,
                        help="Seat at most this many parties (default: until nothing fits).")
    parser.add_argument("--out-report", type=Path,
                        help="Write per-table report CSV.")
    parser.add_argument("--out-waiting", type=Path,
                        help="Write CSV of parties still waiting.")
    return parser


def run_rounds(restaurant: Restaurant, max_rounds: int | None = None) -> List[Dict[str, str]]:
    """Seat parties one call at a time and record each seating."""
    seatings = []
    while max_rounds is None or len(seatings) < max_rounds:
        try:
            party = restaurant.seat_party()
        except NoTablesAvailableError:
            break
        if party is None:
            break
        seatings.append({"party": party.name, "table": party.seated_table.name})
    return seatings


def _write_rows(path: Path, fieldnames: Sequence[str], rows: List[Dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(fieldnames))
        w.writeheader()
        for row in rows:
            w.writerow(row)


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point used by ``python -m restaurant_seating.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_rounds is not None and args.max_rounds < 0:
        parser.error("--max-rounds must not be negative")

    try:
        restaurant = load_restaurant(args.tables, args.parties)
    except (OSError, ValueError) as e:
        parser.exit(2, f"Input validation error: {e}\n")

    for seating in run_rounds(restaurant, args.max_rounds):
        print(f"{seating['party']},{seating['table']}")

    report = table_rows(restaurant)
    for r in report:
        state = f"party={r['party']} size={r['party_size']}" if r["occupied"] else "empty"
        print(f"[REPORT] {r['table']} capacity={r['capacity']} {state} "
              f"empty_seats={r['empty_seats']}")

    s = summarize(restaurant)
    print(f"[SUMMARY] filled={s['filled_tables']}/{s['tables']} "
          f"seated={s['seated_guests']} waiting={s['waiting_parties']} "
          f"utilization={s['utilization']:.2f}")

    if args.out_report:
        _write_rows(args.out_report, [
            "table", "capacity", "occupied", "party", "party_size", "vip", "empty_seats"
        ], report)
    if args.out_waiting:
        _write_rows(args.out_waiting, ["party", "size", "vip"], waiting_rows(restaurant))


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
