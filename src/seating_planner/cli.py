"""Command line interface for SeatingPlanner."""
from __future__ import annotations

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Sequence

from .capacity import DEFAULT_TABLE_CAPACITY
from .csv_loader import load_all
from .errors import InsufficientCapacity
from .scoring import build_report
from .solver import SeatingModel, assignment_map
from .weights import PreferenceMode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Relationship aware table assignment")
    parser.add_argument("--guests", required=True, help="Path to guests.csv")
    parser.add_argument("--relationships", required=True, help="Path to relationships.csv")
    parser.add_argument("--tables", required=True, help="Path to tables.csv")
    parser.add_argument("--blacklist", help="Path to blacklist.csv (pairs who should not sit together)")
    parser.add_argument("--preference", default=PreferenceMode.BALANCED.value,
                        choices=[m.value for m in PreferenceMode],
                        help="Boost family or close friend weights.")
    parser.add_argument("--auto-tables", action="store_true",
                        help="Add generic tables when there are not enough seats.")
    parser.add_argument("--default-capacity", type=int, default=DEFAULT_TABLE_CAPACITY,
                        help="Seats per table added by --auto-tables.")
    parser.add_argument("--out-assignments", type=Path,
                        help="Write assignments CSV: guest,table.")
    parser.add_argument("--out-report", type=Path,
                        help="Write per-table report CSV with scores and grades.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every placement decision.")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point used by ``python -m seating_planner.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(message)s",
        datefmt="%H:%M:%S",
    )

    model = SeatingModel(
        preference=args.preference,
        auto_tables=args.auto_tables,
        default_table_capacity=args.default_capacity,
    )
    try:
        guests, relationships, blacklist, tables = load_all(
            args.guests, args.relationships, args.tables, args.blacklist
        )
        seated = model.solve(guests, tables, relationships, blacklist)
    except InsufficientCapacity as e:
        print(f"Error: {e}. Add tables or rerun with --auto-tables.", file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    assignments = assignment_map(seated)

    # Print simple assignments
    for guest, table in sorted(assignments.items()):
        print(f"{guest},{table}")

    if args.out_assignments:
        args.out_assignments.parent.mkdir(parents=True, exist_ok=True)
        with args.out_assignments.open("w", newline="") as f:
            w = csv.writer(f)
            w.writerow(["guest", "table"])
            for guest, table in sorted(assignments.items()):
                w.writerow([guest, table])

    matrix = model.build_matrix(guests, relationships, blacklist)
    graded = build_report(seated, matrix, guests)

    # Print a compact table summary
    for s in graded:
        print(f"[REPORT] {s['table']} grade={s['grade']} mean={s['mean_score']:.2f} "
              f"pairs={s['pair_count']} pos={s['pos_pairs']} neg={s['neg_pairs']} neu={s['neu_pairs']}")

    if args.out_report:
        args.out_report.parent.mkdir(parents=True, exist_ok=True)
        with args.out_report.open("w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=[
                "table", "grade", "mean_score", "total_score", "pair_count",
                "pos_pairs", "neg_pairs", "neu_pairs", "members"
            ])
            w.writeheader()
            for s in graded:
                w.writerow({
                    "table": s["table"],
                    "grade": s["grade"],
                    "mean_score": f"{s['mean_score']:.4f}",
                    "total_score": s["total_score"],
                    "pair_count": s["pair_count"],
                    "pos_pairs": s["pos_pairs"],
                    "neg_pairs": s["neg_pairs"],
                    "neu_pairs": s["neu_pairs"],
                    "members": s["members"],
                })


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
