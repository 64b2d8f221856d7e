#!/usr/bin/env python3
"""
Compare how evenly each strategy spreads handicaps across groups.

Usage:
    python scripts/compare_strategies.py ROSTER_FILE --group-size 4 --trials 500

Examples:
    # Quick comparison
    python scripts/compare_strategies.py players.txt --trials 50

    # Reproducible comparison of two strategies
    python scripts/compare_strategies.py players.txt -s random -s balanced --seed 1
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from teeup.grouping.models import Strategy
from teeup.grouping.display import format_comparison
from teeup.evaluation.balance import compare_strategies
from teeup.roster.roster import parse_roster
from teeup.utils.constants import DEFAULT_GROUP_SIZE


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Compare handicap balance across partitioning strategies.'
    )
    parser.add_argument(
        'roster',
        type=str,
        help='Roster file (name[, handicap[, category]] per line)'
    )
    parser.add_argument(
        '--group-size', '-g',
        type=int, default=DEFAULT_GROUP_SIZE,
        help=f'Players per group (default: {DEFAULT_GROUP_SIZE})'
    )
    parser.add_argument(
        '--trials', '-t',
        type=int, default=200,
        help='Draws per strategy (default: 200)'
    )
    parser.add_argument(
        '--strategy', '-s',
        type=str, action='append', default=None,
        choices=[s.value for s in Strategy],
        help='Strategy to include (repeatable, default: all)'
    )
    parser.add_argument(
        '--seed',
        type=int, default=None,
        help='Random seed'
    )
    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()

    with open(args.roster, encoding='utf-8') as f:
        participants = parse_roster(f.read())

    if not participants:
        print("Error: roster is empty")
        return 1

    strategies = [Strategy(s) for s in args.strategy] if args.strategy else None

    try:
        results = compare_strategies(
            participants,
            args.group_size,
            trials=args.trials,
            seed=args.seed,
            strategies=strategies
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"Players: {len(participants)}, group size: {args.group_size}, "
          f"trials: {args.trials}")
    print()
    print(format_comparison([
        (r.strategy.value, r.mean_spread, r.worst_spread) for r in results
    ]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
