"""
Interactive game against the minimax selector in the terminal.
"""

from typing import Callable, Optional, Sequence

from .game import Cell, Outcome, apply_move, legal_moves, outcome, side_to_move
from .minimax import select_move

SYMBOLS = {Cell.WHITE: "o", Cell.BLACK: "x"}
RULE = "------------"


def render_board(board: Sequence[int]) -> str:
    """Render board rows; blank squares show their index."""
    rows = []
    for r in range(3):
        rows.append(" ".join(
            SYMBOLS.get(board[r * 3 + c], str(r * 3 + c)) for c in range(3)
        ))
    return "\n".join([RULE, *rows, RULE])


def ask_human_first(
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> bool:
    """Ask until the human answers 0 (computer starts) or 1 (human starts)."""
    output_fn("Do you want to put the first piece?")
    while True:
        answer = input_fn("0: No, 1: Yes ").strip()
        if answer == "0":
            return False
        if answer == "1":
            return True
        output_fn("0: No, 1: Yes")


def read_human_move(
    board: Sequence[int],
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> int:
    """Prompt until the human names a blank square."""
    moves = legal_moves(board)
    while True:
        try:
            action = int(input_fn(f"Your move {moves}: "))
        except ValueError:
            output_fn("Enter a square number 0-8")
            continue
        if action in moves:
            return action
        output_fn("You can not put a piece on that square")


def play_game(
    human_first: bool,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> Optional[Outcome]:
    """
    Play one game, human vs computer.

    The human plays white when moving first, black otherwise.

    Returns:
        Final outcome, or None if the human aborted the game
    """
    human = Cell.WHITE if human_first else Cell.BLACK
    board = [0] * 9
    output_fn("Ready to play")
    output_fn(render_board(board))

    while True:
        result = outcome(board)
        if result is not Outcome.ONGOING:
            break

        stm = side_to_move(board)
        if stm == human:
            output_fn("Your turn")
            try:
                action = read_human_move(board, input_fn, output_fn)
            except (KeyboardInterrupt, EOFError):
                output_fn("Game aborted")
                return None
            board = apply_move(board, stm, action)
        else:
            output_fn("CPU turn")
            board = select_move(board)

        output_fn(render_board(board))

    if result is Outcome.DRAW:
        output_fn("Draw")
    elif (result is Outcome.WHITE_WINS) == (human == Cell.WHITE):
        output_fn("You win")
    else:
        output_fn("You lose")
    return result
