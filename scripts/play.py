#!/usr/bin/env python3
"""
Interactive memory game in the terminal.

Flip cards two at a time and find every pair.

Usage:
    # Default 8 fruit symbols, 16 cards
    python scripts/play.py

    # Custom symbols (each one becomes a pair)
    python scripts/play.py --symbols A B C D

    # Longer peek at mismatched cards
    python scripts/play.py --delay 2.5
"""
import argparse
import sys
import time
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

from memory_server.display import RED, GREEN, RESET, format_board, format_status
from memory_server.exceptions import InvalidIndexError
from memory_server.game import ManualScheduler, MemoryEngine
from memory_server.models.game import DEFAULT_SYMBOLS, GameConfig, SelectionOutcome


def parse_args():
    parser = argparse.ArgumentParser(description="Play the matching-pairs memory game")
    parser.add_argument("--symbols", "-s", nargs="+", default=DEFAULT_SYMBOLS,
                       help="Symbols to build pairs from (default: 8 fruits)")
    parser.add_argument("--delay", "-d", type=float, default=1.0,
                       help="Seconds mismatched cards stay visible (default: 1.0)")
    parser.add_argument("--columns", "-c", type=int, default=4,
                       help="Cards per row (default: 4)")
    return parser.parse_args()


def render(engine: MemoryEngine, columns: int) -> None:
    print()
    print(format_board(engine.cards, columns))
    print(format_status(engine.score, engine.moves, engine.game_over))


def main():
    args = parse_args()

    try:
        config = GameConfig(symbols=args.symbols, revert_delay_seconds=args.delay)
    except ValidationError as e:
        print(f"{RED}Invalid game settings: {e}{RESET}")
        return 1

    scheduler = ManualScheduler()
    engine = MemoryEngine(config, scheduler=scheduler)

    print("Commands: card number to flip, s = shuffle, n = new game, q = quit")

    while True:
        render(engine, args.columns)

        try:
            command = input("> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        if command == "q":
            return 0
        if command == "s":
            engine.shuffle_cards()
            continue
        if command == "n":
            engine.start_new_game()
            continue

        try:
            outcome = engine.select_card(int(command))
        except ValueError:
            print(f"{RED}Unknown command: {command}{RESET}")
            continue
        except InvalidIndexError as e:
            print(f"{RED}{e}{RESET}")
            continue

        if outcome == SelectionOutcome.IGNORED:
            print("That card is already face up.")
        elif outcome == SelectionOutcome.MISMATCH:
            # Show the pair, then let the pending revert fire
            render(engine, args.columns)
            print(f"{RED}No match.{RESET}")
            time.sleep(config.revert_delay_seconds)
            scheduler.run_due()
        elif outcome in (SelectionOutcome.MATCH, SelectionOutcome.GAME_OVER):
            print(f"{GREEN}Match!{RESET}")

        if engine.game_over:
            render(engine, args.columns)
            try:
                again = input("Play again? [y/N] ").strip().lower()
            except (EOFError, KeyboardInterrupt):
                again = ""
            if again != "y":
                return 0
            engine.start_new_game()


if __name__ == "__main__":
    sys.exit(main())
