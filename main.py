#!/usr/bin/env python3
"""
Draw tee-time groups from a roster file.

Usage:
    python main.py ROSTER_FILE [--group-size N] [--strategy STRATEGY]

Roster files have one player per line: name[, handicap[, category]]

Examples:
    # Random foursomes
    python main.py players.txt

    # Handicap-balanced threesomes with a balance summary
    python main.py players.txt -g 3 -s balanced --stats

    # Reproducible draw from stdin
    cat players.txt | python main.py - --seed 7

    # Serve the JSON API instead of drawing (docs at /docs)
    python main.py --serve --port 3000
"""
import argparse
import sys

import uvicorn

from teeup.grouping.models import Strategy
from teeup.grouping.runner import DrawConfig, DrawRunner
from teeup.roster.roster import parse_roster
from teeup.utils.constants import DEFAULT_GROUP_SIZE, DEFAULT_HOST, DEFAULT_PORT


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Split a roster into tee-time groups.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Strategies:
  random       Shuffle everyone and cut into groups
  stratified   Spread categories (A/B) evenly across groups
  balanced     Snake draft by handicap (lower = stronger)
'''
    )

    parser.add_argument(
        'roster',
        type=str, nargs='?', default='-',
        help='Roster file, or - for stdin (default: -)'
    )
    parser.add_argument(
        '--group-size', '-g',
        type=int, default=DEFAULT_GROUP_SIZE,
        help=f'Players per group (default: {DEFAULT_GROUP_SIZE})'
    )
    parser.add_argument(
        '--strategy', '-s',
        type=str, default=Strategy.UNIFORM_RANDOM.value,
        choices=[s.value for s in Strategy],
        help='Partitioning strategy (default: random)'
    )
    parser.add_argument(
        '--seed',
        type=int, default=None,
        help='Random seed for a reproducible draw'
    )
    parser.add_argument(
        '--fold-remainder',
        action='store_true',
        help='Random strategy: fold a short last group into the other groups'
    )
    parser.add_argument(
        '--stats',
        action='store_true',
        help='Print a handicap balance summary after the draw'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Print only the report'
    )
    parser.add_argument(
        '--serve',
        action='store_true',
        help='Run the draw API web server instead of drawing from a roster'
    )
    parser.add_argument(
        '--host',
        type=str, default=DEFAULT_HOST,
        help=f'Host for --serve (default: {DEFAULT_HOST})'
    )
    parser.add_argument(
        '--port',
        type=int, default=DEFAULT_PORT,
        help=f'Port for --serve (default: {DEFAULT_PORT})'
    )
    parser.add_argument(
        '--reload',
        action='store_true',
        help='With --serve, auto-reload on code changes'
    )

    return parser.parse_args(argv)


def read_roster_text(path: str) -> str:
    """Read roster text from a file path or stdin ('-')."""
    if path == '-':
        return sys.stdin.read()
    with open(path, encoding='utf-8') as f:
        return f.read()


def serve(host: str, port: int, reload: bool = False):
    """Run the draw API with uvicorn."""
    print(f"Starting teeup draw API at http://{host}:{port}")
    print(f"API documentation: http://{host}:{port}/docs")
    print()
    uvicorn.run("teeup.web.app:app", host=host, port=port, reload=reload)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    if args.serve:
        serve(args.host, args.port, args.reload)
        return 0

    try:
        text = read_roster_text(args.roster)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read roster: {e}")
        return 1

    participants = parse_roster(text)

    config = DrawConfig(
        group_size=args.group_size,
        strategy=Strategy(args.strategy),
        seed=args.seed,
        fold_remainder=args.fold_remainder
    )

    try:
        runner = DrawRunner(
            config=config,
            verbose=not args.quiet,
            show_balance=args.stats
        )
        result = runner.run(participants)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(result.report, end='')
    return 0


if __name__ == "__main__":
    sys.exit(main())
