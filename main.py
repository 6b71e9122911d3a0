from __future__ import annotations

import argparse

from game.ruleset import DEFAULT_RULES, configure
from ui.cli import check_limits, gameloop


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Mastermind in the terminal.")
    ap.add_argument("--slots", type=int, default=DEFAULT_RULES["slot_count"],
                    help="Holes per row")
    ap.add_argument("--colors", type=int, default=DEFAULT_RULES["color_count"],
                    help="Colors in play")
    ap.add_argument("--rows", type=int, default=DEFAULT_RULES["num_rows"],
                    help="Guesses per game")
    ap.add_argument("--repeats", action="store_true",
                    default=DEFAULT_RULES["allow_repeats"],
                    help="Allow repeating colors in the hidden pattern")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        check_limits(args.slots, args.colors)
        config = configure(args.slots, args.colors, args.repeats, args.rows)
    except ValueError as e:
        print(f"Invalid settings: {e}")
        return 2

    if config.repeats_forced:
        print("Not enough colors for a pattern without repeats; repeating colors turned on.")

    gameloop(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
