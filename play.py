#!/usr/bin/env python3
"""
Play TicTacToe against the minimax selector.

Usage:
    python play.py            # asks who starts
    python play.py --first    # you play white and move first
    python play.py --second   # the computer opens
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minimax_ttt.play import ask_human_first, play_game


def main():
    parser = argparse.ArgumentParser(description="Play TicTacToe against minimax")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--first", action="store_true", help="Move first (white)")
    group.add_argument("--second", action="store_true", help="Let the computer open")

    args = parser.parse_args()

    if args.first:
        human_first = True
    elif args.second:
        human_first = False
    else:
        try:
            human_first = ask_human_first()
        except (KeyboardInterrupt, EOFError):
            print("\nGame aborted")
            return

    play_game(human_first)


if __name__ == "__main__":
    main()
