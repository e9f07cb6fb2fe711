"""
Evaluation functions.

Plays the minimax selector against a random opponent and against itself,
and audits its decision, policy and symmetry behaviour on every legal
non-terminal state.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np
import torch
from tqdm.auto import tqdm, trange

from .game import Cell, is_terminal, legal_moves, side_to_move
from .minimax import (
    WIN_SCORE,
    best_moves,
    iter_all_legal_nonterminal_states,
    minimax_score,
    move_scores,
    select_move,
)
from .policy import legal_move_mask, optimal_policy
from .symmetries import (
    SYM_MAPS,
    apply_symmetry_board,
    apply_symmetry_policy,
    canonical_board,
    map_move,
)


@dataclass
class ArenaConfig:
    """Evaluation configuration."""

    # Random seed for the random opponent
    seed: int = 0

    # Games vs random opponent
    games: int = 200

    # Progress bars
    show_progress: bool = True


def play_vs_random(
    config: ArenaConfig,
    selector_side: Optional[Cell] = None,
) -> Dict[str, float]:
    """
    Evaluate the selector vs a uniformly random opponent.

    Args:
        selector_side: Side played by the selector; alternates per game if None

    Returns:
        Dict with 'games', 'selector_w', 'selector_d', 'selector_l'
    """
    rng = np.random.default_rng(config.seed)
    wins = draws = losses = 0

    for g in trange(config.games, desc="vs random", disable=not config.show_progress):
        board = [0] * 9
        if selector_side is None:
            side = Cell.WHITE if (g % 2 == 0) else Cell.BLACK
        else:
            side = selector_side

        while True:
            done, winner = is_terminal(board)
            if done:
                if winner == Cell.BLANK:
                    draws += 1
                elif winner == side:
                    wins += 1
                else:
                    losses += 1
                break

            stm = side_to_move(board)
            if stm == side:
                board = select_move(board)
            else:
                moves = legal_moves(board)
                board[moves[int(rng.integers(0, len(moves)))]] = int(stm)

    total = wins + draws + losses
    return {
        "games": total,
        "selector_w": wins / total,
        "selector_d": draws / total,
        "selector_l": losses / total,
    }


def play_self() -> List[List[int]]:
    """Play the selector against itself from the empty board; returns every board."""
    board = [0] * 9
    history = [board]
    while not is_terminal(board)[0]:
        board = select_move(board)
        history.append(board)
    return history


def check_decision(board: List[int], player: Cell) -> bool:
    """
    Check the selector's decision on one non-terminal board.

    The move must place one piece of the side to move on a blank square,
    keep the position value (never hand the opponent a win that could have
    been avoided), be the lowest-index optimal move and carry policy mass.
    On each of the 8 symmetric boards the value must be unchanged, the
    mapped move must stay optimal and the policy must map square for square.
    """
    result = select_move(board)
    changed = [i for i in range(9) if result[i] != board[i]]
    if len(changed) != 1:
        return False
    (action,) = changed
    if board[action] != Cell.BLANK or result[action] != player:
        return False

    scores = move_scores(board)
    value = max(scores.values())
    if scores[action] != value or action != min(a for a, v in scores.items() if v == value):
        return False

    pi, v = optimal_policy(board)
    if pi[action].item() <= 0 or int(v.item()) * WIN_SCORE != value:
        return False
    if pi[~legal_move_mask(board)].sum().item() != 0:
        return False

    for k in range(len(SYM_MAPS)):
        sym = apply_symmetry_board(board, k)
        if minimax_score(sym, player) != value:
            return False
        if map_move(action, k) not in best_moves(sym):
            return False
        sym_pi, _ = optimal_policy(sym)
        if not torch.equal(apply_symmetry_policy(pi, k), sym_pi):
            return False
    return True


def audit_all_states(show_progress: bool = True) -> Dict[str, object]:
    """
    Run `check_decision` on all legal non-terminal states.

    Returns:
        Dict with counts and the list of failing boards under '_failures'
    """
    states = list(iter_all_legal_nonterminal_states())
    n = len(states)

    ok = 0
    outcomes = {+1: 0, 0: 0, -1: 0}
    canonical = set()
    failures = []

    for board, player in tqdm(states, desc="audit", disable=not show_progress):
        canonical.add(canonical_board(board))

        value = minimax_score(board, player)
        outcomes[value // WIN_SCORE] += 1

        if check_decision(board, player):
            ok += 1
        else:
            failures.append(board)

    return {
        "n_states": n,
        "n_canonical": len(canonical),
        "n_ok": ok,
        "n_failures": len(failures),
        "mover_wins": outcomes[+1],
        "draws": outcomes[0],
        "mover_loses": outcomes[-1],
        "_failures": failures,
    }
