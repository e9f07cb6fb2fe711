"""
Exact minimax move selector for TicTacToe with caching.

Scores are undiscounted: a won position is worth WIN_SCORE to the winner,
a draw is worth 0. Values are always expressed from the perspective of the
side to move, so the mover at the root is the maximizer and each ply below
it alternates between maximizing and minimizing in white/black terms.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .game import (
    Cell,
    apply_move,
    is_terminal,
    legal_moves,
    opponent,
    side_to_move,
    validate_board,
    winners_set,
)

WIN_SCORE = 10

# Cache: (board_tuple, player) -> value for player
_MINIMAX_CACHE: Dict[Tuple[Tuple[int, ...], int], int] = {}


def minimax_score(board: Sequence[int], player: Cell) -> int:
    """
    Compute the minimax value of a position by full search.

    Args:
        board: Board state (assumed valid)
        player: Side to move on this board

    Returns:
        +WIN_SCORE (player wins), 0 (draw) or -WIN_SCORE (player loses)
        under optimal play from both sides
    """
    key = (tuple(board), int(player))
    if key in _MINIMAX_CACHE:
        return _MINIMAX_CACHE[key]

    done, winner = is_terminal(board)
    if done:
        if winner == Cell.BLANK:
            v = 0
        elif winner == player:
            v = WIN_SCORE
        else:
            v = -WIN_SCORE
        _MINIMAX_CACHE[key] = v
        return v

    other = opponent(player)
    best_v = -WIN_SCORE - 1
    for action in legal_moves(board):
        # Negate for opponent's perspective
        v_here = -minimax_score(apply_move(board, player, action), other)
        if v_here > best_v:
            best_v = v_here

    _MINIMAX_CACHE[key] = best_v
    return best_v


def move_scores(board: Sequence[int]) -> Dict[int, int]:
    """
    Score every legal move for the side to move.

    Returns:
        {action: value for the mover}, in ascending action order; empty
        when the board is terminal

    Raises:
        InvalidBoard: if the board is malformed
    """
    cells = validate_board(board)
    done, _ = is_terminal(cells)
    if done:
        return {}

    player = side_to_move(cells)
    other = opponent(player)
    return {
        action: -minimax_score(apply_move(cells, player, action), other)
        for action in legal_moves(cells)
    }


def best_moves(board: Sequence[int]) -> List[int]:
    """Return all actions achieving the optimal value, ascending."""
    scores = move_scores(board)
    if not scores:
        return []
    top = max(scores.values())
    return [a for a, v in scores.items() if v == top]


def best_move(board: Sequence[int]) -> Optional[int]:
    """Optimal action with the lowest index, or None on a terminal board."""
    best = None
    best_v = None
    for action, v in move_scores(board).items():
        # Strict comparison keeps the lowest index among equal scores
        if best_v is None or v > best_v:
            best, best_v = action, v
    return best


def select_move(board: Sequence[int]) -> List[int]:
    """
    Play the computer's optimal move.

    The side to move is inferred from the piece counts (see
    `side_to_move`). Among equally valued moves the lowest board index
    is played.

    Args:
        board: 9 cells encoded 0 (blank), 1 (white), 2 (black)

    Returns:
        A new board with exactly one blank cell set to the mover's piece,
        or an unchanged copy if the game is already over

    Raises:
        InvalidBoard: if the board is malformed
    """
    cells = validate_board(board)
    action = best_move(cells)
    if action is None:
        return cells
    return apply_move(cells, side_to_move(cells), action)


def clear_cache():
    """Clear minimax cache (useful for memory management)."""
    _MINIMAX_CACHE.clear()


def cache_size() -> int:
    """Return current cache size."""
    return len(_MINIMAX_CACHE)


def iter_all_legal_nonterminal_states() -> Iterator[Tuple[List[int], Cell]]:
    """
    Iterate over all legal non-terminal board states.

    Yields:
        (board, player) tuples for exhaustive evaluation.
    """
    for n in range(3**9):
        # Decode base-3 representation; digits are already cell values
        x = n
        board = [0] * 9
        for i in range(9):
            board[i] = x % 3
            x //= 3

        white = board.count(Cell.WHITE)
        black = board.count(Cell.BLACK)

        # Legal turn order: white starts
        if not (white == black or white == black + 1):
            continue

        # Any line ends the game
        if winners_set(board):
            continue

        if all(v != Cell.BLANK for v in board):
            continue

        yield board, side_to_move(board)
