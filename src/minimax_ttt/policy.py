"""
Exact policy and value targets derived from the minimax selector.

Useful as supervision for learned players: the policy spreads uniform
mass over every optimal move, the value is the game-theoretic result for
the side to move.
"""

import torch
from typing import List, Sequence, Tuple

from .game import Cell, side_to_move, validate_board
from .minimax import WIN_SCORE, best_moves, iter_all_legal_nonterminal_states, minimax_score


def legal_move_mask(board: Sequence[int]) -> torch.BoolTensor:
    """Return [9] boolean mask of legal moves."""
    mask = torch.zeros(9, dtype=torch.bool)
    for i, v in enumerate(board):
        if v == Cell.BLANK:
            mask[i] = True
    return mask


def optimal_policy(board: Sequence[int]) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Compute optimal targets (policy and value).

    Returns:
        pi_star: [9] tensor with uniform distribution over optimal moves
            (all zeros on a terminal board)
        v_star: scalar tensor in {-1, 0, +1} for the side to move
    """
    cells = validate_board(board)
    moves = best_moves(cells)

    pi = torch.zeros(9, dtype=torch.float32)
    if moves:
        pi[moves] = 1.0 / len(moves)

    v = minimax_score(cells, side_to_move(cells)) // WIN_SCORE
    return pi, torch.tensor(float(v), dtype=torch.float32)


def policy_dataset() -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
    """
    Stack targets for every legal non-terminal state.

    Returns:
        boards: [N, 9] int64 cells (0/1/2)
        pi_star: [N, 9] float32
        v_star: [N] float32
    """
    boards: List[torch.Tensor] = []
    pis: List[torch.Tensor] = []
    vs: List[torch.Tensor] = []
    for board, _ in iter_all_legal_nonterminal_states():
        pi, v = optimal_policy(board)
        boards.append(torch.tensor(board, dtype=torch.long))
        pis.append(pi)
        vs.append(v)
    return torch.stack(boards, dim=0), torch.stack(pis, dim=0), torch.stack(vs, dim=0)
