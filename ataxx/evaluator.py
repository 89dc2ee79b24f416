from __future__ import annotations

from .board import Board
from .color import PieceColor


class Evaluator:
    """Static evaluation for Ataxx positions.

    Positive scores favor RED, negative scores favor BLUE. Units are pieces.
    """

    @classmethod
    def evaluate(cls, board: Board, winning_value: int) -> int:
        """Score BOARD: +/-WINNING_VALUE once decided, 0 for a tie, else material."""
        winner = board.get_winner()
        if winner is not None:
            if winner is PieceColor.RED:
                return winning_value
            if winner is PieceColor.BLUE:
                return -winning_value
            return 0
        return board.red_pieces() - board.blue_pieces()
