#!/usr/bin/env python3
"""
Box Pool Scorer CLI

Applies a score snapshot to a saved squares pool, recomputes the winning
squares, and prints settled payouts plus the owner's near misses.

Usage:
    python pool_scorer.py --pool pools/office.json --score scores/latest.json
    python pool_scorer.py --sheet office.xlsx --score scores/latest.json --owner "Mike" --output pools/office.json
"""

import argparse
import logging
import sys
from pathlib import Path

from boxpool import (
    finalized_winnings,
    grid_as_text,
    load_game_score,
    load_grid,
    on_the_hunt_items,
    parse_grid_from_sheet,
    save_grid,
    validate_pool_structure,
    validate_quarter_scores,
    write_grid_to_sheet,
)
from boxpool.config import get_log_dir, get_owner_name
from boxpool.logging_config import get_logger, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score a Super Bowl squares pool")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--pool", "-p",
        help="Saved pool JSON file",
    )
    source.add_argument(
        "--sheet", "-x",
        help="Excel pool sheet to import",
    )
    parser.add_argument(
        "--score", "-s",
        required=True,
        help="Score snapshot JSON file",
    )
    parser.add_argument(
        "--owner",
        action="append",
        default=None,
        help="Name(s) on the sheet identifying your squares (repeatable)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Where to save the updated pool JSON (defaults to --pool)",
    )
    parser.add_argument(
        "--export-sheet",
        default=None,
        help="Also write the updated pool to an Excel sheet",
    )
    parser.add_argument(
        "--show-grid",
        action="store_true",
        help="Print the grid with owner initials",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress detailed output",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        log_dir=get_log_dir(),
        level=logging.WARNING if args.quiet else logging.INFO,
        log_to_file=False,
    )
    logger = get_logger('boxpool.cli')

    try:
        grid = load_grid(args.pool) if args.pool else parse_grid_from_sheet(args.sheet)
        score = load_game_score(args.score)
    except FileNotFoundError as e:
        print(f"❌ {e}")
        return 1
    except ValueError as e:
        print(f"❌ Could not read input: {e}")
        return 1

    if args.owner:
        grid.owner_labels = args.owner

    for warning in validate_quarter_scores(score.quarter_scores):
        logger.warning(warning)
    for warning in validate_pool_structure(grid.resolved_pool_structure):
        logger.warning(warning)

    grid.apply_score(score)
    structure = grid.resolved_pool_structure

    print(f"{grid.name}: {score.score_display} ({score.status_text})")
    print(f"Rules: {structure.display_summary}")

    current = grid.current_period(score)
    if current is not None:
        leader = grid.winning_square(score)
        leader_name = leader.display_name if leader else "undetermined"
        print(f"In progress: {current.label} - leading square: {leader_name}")

    info = grid.score_change_info(score)
    if info is not None:
        print(
            f"{info.count} score changes · {structure.format_currency(info.paid)} paid · "
            f"{structure.format_currency(info.remainder)} to final"
        )

    winnings = finalized_winnings(grid, score)
    if winnings:
        print("\n" + "=" * 60)
        print("SETTLED PERIODS")
        print("=" * 60)
        for winning in winnings:
            amount = structure.format_currency(winning.amount) if winning.amount is not None else "n/a"
            print(f"  {winning.period_label}: {winning.winner_name} ({amount})")

    owner_labels = grid.effective_owner_labels(get_owner_name())
    if owner_labels:
        mine = grid.squares_for_owner(owner_labels)
        print(f"\nYour squares ({', '.join(owner_labels)}): {len(mine)}")
        for item in on_the_hunt_items(grid, score, owner_labels):
            print(
                f"  On the hunt: ({item.square.row}, {item.square.column}) needs "
                f"{item.team_needs_to_score.short_name} +{item.points_needed} "
                f"[{item.urgency.value}]"
            )

    if args.show_grid and not args.quiet:
        print()
        print(grid_as_text(grid))

    output = args.output or args.pool
    if output:
        save_grid(Path(output), grid)
    if args.export_sheet:
        write_grid_to_sheet(grid, Path(args.export_sheet))

    return 0


if __name__ == "__main__":
    sys.exit(main())
