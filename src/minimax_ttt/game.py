"""
TicTacToe game rules and board validation.

Board representation: list[int] of length 9, row-major
  - 0: blank
  - 1: white (moves first)
  - 2: black

The side to move is never stored; it is inferred from the piece counts.
"""

from enum import Enum, IntEnum
from numbers import Integral
from typing import List, Sequence, Set, Tuple


class Cell(IntEnum):
    """Contents of one square, equal to its wire encoding."""
    BLANK = 0
    WHITE = 1
    BLACK = 2


class Outcome(Enum):
    WHITE_WINS = "white_wins"
    BLACK_WINS = "black_wins"
    DRAW = "draw"
    ONGOING = "ongoing"


class InvalidBoard(ValueError):
    """Raised when a board cannot be a tic-tac-toe position."""


# Winning lines (rows, columns, diagonals)
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)

BOARD_SIZE = 9


def validate_board(board: Sequence[int]) -> List[int]:
    """
    Check shape, cell values and piece counts.

    Cells must be integers: Python ints or numpy integer scalars. Booleans,
    floats, strings and tensor elements (torch or numpy float arrays) are
    rejected rather than coerced; convert with `.tolist()` first.

    Returns:
        A fresh list copy of the board

    Raises:
        InvalidBoard: wrong length, unknown cell value, or a count skew
        that no sequence of alternating moves can produce
    """
    if isinstance(board, (str, bytes)):
        raise InvalidBoard(f"expected a sequence of 9 cells, got {type(board).__name__}")
    try:
        cells = list(board)
    except TypeError:
        raise InvalidBoard(f"expected a sequence of 9 cells, got {type(board).__name__}") from None

    if len(cells) != BOARD_SIZE:
        raise InvalidBoard(f"expected 9 cells, got {len(cells)}")

    for i, v in enumerate(cells):
        if isinstance(v, bool) or not isinstance(v, Integral) or int(v) not in (0, 1, 2):
            raise InvalidBoard(f"cell {i}: expected 0, 1 or 2, got {v!r}")
    cells = [int(v) for v in cells]

    white = cells.count(Cell.WHITE)
    black = cells.count(Cell.BLACK)
    if not (white == black or white == black + 1):
        raise InvalidBoard(f"impossible piece counts: {white} white, {black} black")

    return cells


def winners_set(board: Sequence[int]) -> Set[Cell]:
    """Return set of sides owning a full line (both only on illegal boards)."""
    wins = set()
    for a, b, c in WIN_LINES:
        if board[a] != Cell.BLANK and board[a] == board[b] == board[c]:
            wins.add(Cell(board[a]))
    return wins


def outcome(board: Sequence[int]) -> Outcome:
    """Classify the board; a board where both sides own a line counts as a draw."""
    wset = winners_set(board)
    if len(wset) == 1:
        return Outcome.WHITE_WINS if Cell.WHITE in wset else Outcome.BLACK_WINS
    if len(wset) >= 2:
        return Outcome.DRAW
    if all(v != Cell.BLANK for v in board):
        return Outcome.DRAW
    return Outcome.ONGOING


def is_terminal(board: Sequence[int]) -> Tuple[bool, Cell]:
    """
    Check if board is terminal.

    Returns:
        (is_terminal, winner) where winner is WHITE/BLACK, or BLANK for
        a draw or an ongoing game
    """
    result = outcome(board)
    if result is Outcome.WHITE_WINS:
        return True, Cell.WHITE
    if result is Outcome.BLACK_WINS:
        return True, Cell.BLACK
    return result is Outcome.DRAW, Cell.BLANK


def legal_moves(board: Sequence[int]) -> List[int]:
    """Return list of legal move indices (blank squares), ascending."""
    return [i for i, v in enumerate(board) if v == Cell.BLANK]


def apply_move(board: Sequence[int], player: Cell, action: int) -> List[int]:
    """Apply move and return new board."""
    new_board = list(board)
    new_board[action] = int(player)
    return new_board


def opponent(player: Cell) -> Cell:
    return Cell.BLACK if player == Cell.WHITE else Cell.WHITE


def side_to_move(board: Sequence[int]) -> Cell:
    """
    Infer side to move from board state.

    The side with fewer pieces moves next; on equal counts white moves,
    since white opens a fresh game.
    """
    white = sum(1 for v in board if v == Cell.WHITE)
    black = sum(1 for v in board if v == Cell.BLACK)
    return Cell.BLACK if black < white else Cell.WHITE


def is_legal_board(board: Sequence[int]) -> bool:
    """Check if board respects game rules."""
    try:
        cells = validate_board(board)
    except InvalidBoard:
        return False

    # Can't have both winners
    return len(winners_set(cells)) < 2
