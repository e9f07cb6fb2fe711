#!/usr/bin/env python3
"""
Evaluate the minimax selector.

Usage:
    python audit.py
    python audit.py --games 1000 --seed 7
    python audit.py --board 1,2,1,2,1,2,0,0,0
"""

import sys
import argparse
from pathlib import Path

from tqdm.auto import tqdm

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minimax_ttt import (
    ArenaConfig,
    Cell,
    InvalidBoard,
    audit_all_states,
    move_scores,
    play_self,
    play_vs_random,
    render_board,
    select_move,
)


def parse_board(text: str):
    """Parse '1,2,0,...' into a list of ints (validated by the selector)."""
    try:
        return [int(tok) for tok in text.replace(" ", "").split(",")]
    except ValueError:
        raise InvalidBoard(f"cells must be integers: {text!r}") from None


def show_decision(text: str):
    board = parse_board(text)
    result = select_move(board)
    print(render_board(board))
    print(f"Scores: {move_scores(board)}")
    print(render_board(result))
    print(f"Result: {result}")


def main():
    parser = argparse.ArgumentParser(description="Evaluate TicTacToe minimax selector")
    parser.add_argument("--games", type=int, default=200, help="Games vs random opponent")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--no-progress", action="store_true", help="Hide progress bars")
    parser.add_argument("--board", type=str, default=None,
                        help="Show the decision for one comma-separated board")

    args = parser.parse_args()

    if args.board is not None:
        try:
            show_decision(args.board)
        except InvalidBoard as e:
            print(f"Invalid board: {e}")
            sys.exit(2)
        return

    config = ArenaConfig(seed=args.seed, games=args.games, show_progress=not args.no_progress)

    print("\n=== Evaluation ===")

    # vs Random
    print(f"\nvs Random ({config.games} games)...")
    for side, name in ((None, "alternating"), (Cell.WHITE, "white"), (Cell.BLACK, "black")):
        r = play_vs_random(config, selector_side=side)
        tqdm.write(f"  {name:12s} W {r['selector_w']:.2%} | D {r['selector_d']:.2%} | L {r['selector_l']:.2%}")

    # Self-play
    print("\nSelf-play...")
    history = play_self()
    moves = [next(i for i in range(9) if a[i] != b[i]) for a, b in zip(history, history[1:])]
    print(f"  Moves: {moves}")
    print(render_board(history[-1]))

    # Exhaustive audit
    print("\nAudit (all states)...")
    te = audit_all_states(show_progress=config.show_progress)
    print(f"  States:      {te['n_states']}")
    print(f"  Canonical:   {te['n_canonical']}")
    print(f"  Mover W/D/L: {te['mover_wins']} / {te['draws']} / {te['mover_loses']}")
    print(f"  Failures:    {te['n_failures']}")
    for board in te["_failures"][:10]:
        tqdm.write(f"    {board}")

    if te["n_failures"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
