#!/usr/bin/env python3
"""
scripts/reason.py
==================
Replay a recorded Clue game and print the detective notepad.

Usage:
    python scripts/reason.py examples/worked_game.json
    python scripts/reason.py game.json --legacy-seat-order --query cf pe
"""
import argparse
import logging
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="cluesat notepad CLI")
    parser.add_argument("trace", help="Path to game trace JSON")
    parser.add_argument("--legacy-seat-order", action="store_true",
                        help="Skip seats by raw index (no wraparound)")
    parser.add_argument("--query", nargs=2, metavar=("HOLDER", "CARD"),
                        action="append", default=[],
                        help="Print a single verdict; may be repeated")
    parser.add_argument("--no-notepad", action="store_true",
                        help="Do not print the notepad grid")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from cluesat.api.trace import GameTrace
    from cluesat.core.exceptions import ClueError

    try:
        trace = GameTrace.from_json(args.trace)
        if args.legacy_seat_order:
            trace.settings.wrap_seat_order = False
        reasoner = trace.build_reasoner()
        for holder, card in args.query:
            print(f"{holder} {card}: {reasoner.query(holder, card).symbol}")
        if not args.no_notepad:
            print(reasoner.notepad().render())
        solution = reasoner.solution()
    except ClueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    found = [card or "?" for card in solution.values()]
    print(f"Case file: {' '.join(found)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
