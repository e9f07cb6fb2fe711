"""
Tests for board validation and game rules.
"""

import numpy as np
import pytest
import torch

from minimax_ttt.game import (
    Cell,
    InvalidBoard,
    Outcome,
    WIN_LINES,
    apply_move,
    is_legal_board,
    is_terminal,
    legal_moves,
    opponent,
    outcome,
    side_to_move,
    validate_board,
    winners_set,
)


class TestValidateBoard:
    def test_empty_board(self):
        assert validate_board([0] * 9) == [0] * 9

    def test_returns_copy(self):
        board = [1, 0, 0, 0, 2, 0, 0, 0, 0]
        cells = validate_board(board)
        cells[1] = 1
        assert board == [1, 0, 0, 0, 2, 0, 0, 0, 0]

    def test_accepts_tuple_and_numpy(self):
        assert validate_board((1, 0, 0, 0, 0, 0, 0, 0, 0)) == [1, 0, 0, 0, 0, 0, 0, 0, 0]
        arr = np.array([1, 2, 0, 0, 0, 0, 0, 0, 0])
        assert validate_board(arr) == [1, 2, 0, 0, 0, 0, 0, 0, 0]

    @pytest.mark.parametrize("board", [[0] * 8, [0] * 10, []])
    def test_wrong_length(self, board):
        with pytest.raises(InvalidBoard):
            validate_board(board)

    @pytest.mark.parametrize("bad", [3, -1, 1.0, "1", None, True])
    def test_bad_cell_value(self, bad):
        board = [0] * 9
        board[4] = bad
        with pytest.raises(InvalidBoard):
            validate_board(board)

    @pytest.mark.parametrize("board", [
        [1, 1, 0, 0, 0, 0, 0, 0, 0],   # white two ahead
        [2, 0, 0, 0, 0, 0, 0, 0, 0],   # black moved first
        [2, 2, 1, 0, 0, 0, 0, 0, 0],
    ])
    def test_impossible_counts(self, board):
        with pytest.raises(InvalidBoard):
            validate_board(board)

    def test_not_a_sequence(self):
        with pytest.raises(InvalidBoard):
            validate_board(None)
        with pytest.raises(InvalidBoard):
            validate_board("000000000")

    def test_invalid_board_is_value_error(self):
        assert issubclass(InvalidBoard, ValueError)


class TestOutcome:
    def test_win_lines(self):
        assert len(WIN_LINES) == 8
        assert all(len(set(line)) == 3 for line in WIN_LINES)

    def test_ongoing(self):
        assert outcome([0] * 9) is Outcome.ONGOING
        assert is_terminal([0] * 9) == (False, Cell.BLANK)

    @pytest.mark.parametrize("line", WIN_LINES)
    def test_white_line(self, line):
        board = [0] * 9
        for i in line:
            board[i] = 1
        assert outcome(board) is Outcome.WHITE_WINS
        assert is_terminal(board) == (True, Cell.WHITE)

    def test_black_wins(self):
        board = [1, 1, 0, 2, 2, 2, 1, 0, 0]
        assert outcome(board) is Outcome.BLACK_WINS
        assert is_terminal(board) == (True, Cell.BLACK)

    def test_full_board_draw(self):
        board = [1, 2, 1, 1, 2, 2, 2, 1, 1]
        assert outcome(board) is Outcome.DRAW
        assert is_terminal(board) == (True, Cell.BLANK)

    def test_win_on_full_board(self):
        board = [1, 1, 1, 2, 2, 1, 1, 2, 2]
        assert outcome(board) is Outcome.WHITE_WINS

    def test_both_winning_is_terminal_draw(self):
        board = [1, 1, 1, 2, 2, 2, 0, 0, 0]
        assert winners_set(board) == {Cell.WHITE, Cell.BLACK}
        assert outcome(board) is Outcome.DRAW
        assert not is_legal_board(board)


class TestMoves:
    def test_legal_moves_ascending(self):
        assert legal_moves([1, 0, 2, 0, 0, 1, 2, 0, 0]) == [1, 3, 4, 7, 8]

    def test_apply_move_does_not_mutate(self):
        board = [0] * 9
        new_board = apply_move(board, Cell.WHITE, 4)
        assert board == [0] * 9
        assert new_board == [0, 0, 0, 0, 1, 0, 0, 0, 0]
        assert type(new_board[4]) is int

    def test_side_to_move(self):
        assert side_to_move([0] * 9) == Cell.WHITE
        assert side_to_move([1, 0, 0, 0, 0, 0, 0, 0, 0]) == Cell.BLACK
        assert side_to_move([1, 2, 0, 0, 0, 0, 0, 0, 0]) == Cell.WHITE

    def test_opponent(self):
        assert opponent(Cell.WHITE) == Cell.BLACK
        assert opponent(Cell.BLACK) == Cell.WHITE

    def test_is_legal_board(self):
        assert is_legal_board([1, 2, 0, 0, 0, 0, 0, 0, 0])
        assert not is_legal_board([1, 1, 0, 0, 0, 0, 0, 0, 0])
        assert not is_legal_board([0] * 8)


class TestArrayInput:
    def test_float_array_rejected(self):
        with pytest.raises(InvalidBoard):
            validate_board(np.zeros(9))

    def test_tensor_rejected_until_converted(self):
        tensor = torch.tensor([1, 2, 0, 0, 0, 0, 0, 0, 0])
        with pytest.raises(InvalidBoard):
            validate_board(tensor)
        assert validate_board(tensor.tolist()) == [1, 2, 0, 0, 0, 0, 0, 0, 0]
