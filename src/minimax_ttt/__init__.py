"""
Minimax TicTacToe - the computer picks its next move by exhaustive search.

Boards are 9 cells encoded 0 (blank), 1 (white, moves first), 2 (black).
`select_move` returns the board after the computer's optimal move.
"""

from .game import (
    Cell,
    Outcome,
    InvalidBoard,
    WIN_LINES,
    validate_board,
    outcome,
    is_terminal,
    legal_moves,
    apply_move,
    side_to_move,
    is_legal_board,
)
from .minimax import (
    WIN_SCORE,
    select_move,
    best_move,
    best_moves,
    move_scores,
    minimax_score,
    iter_all_legal_nonterminal_states,
)
from .policy import optimal_policy, legal_move_mask, policy_dataset
from .symmetries import apply_symmetry_board, apply_symmetry_policy, canonical_board, map_move, SYM_MAPS
from .arena import ArenaConfig, play_vs_random, play_self, check_decision, audit_all_states
from .play import render_board, play_game

__version__ = "0.1.0"
__all__ = [
    "Cell",
    "Outcome",
    "InvalidBoard",
    "WIN_LINES",
    "validate_board",
    "outcome",
    "is_terminal",
    "legal_moves",
    "apply_move",
    "side_to_move",
    "is_legal_board",
    "WIN_SCORE",
    "select_move",
    "best_move",
    "best_moves",
    "move_scores",
    "minimax_score",
    "iter_all_legal_nonterminal_states",
    "optimal_policy",
    "legal_move_mask",
    "policy_dataset",
    "apply_symmetry_board",
    "apply_symmetry_policy",
    "canonical_board",
    "map_move",
    "SYM_MAPS",
    "ArenaConfig",
    "play_vs_random",
    "play_self",
    "check_decision",
    "audit_all_states",
    "render_board",
    "play_game",
]
