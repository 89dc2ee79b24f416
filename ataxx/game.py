from __future__ import annotations

from typing import Dict, List, Optional

from .ai import possible_moves
from .board import Board
from .color import PieceColor
from .move import Move


class Game:
    """One Ataxx game in progress: a Board plus the moves played on it.

    Moves arrive as text ("a7b6", "-") and are parsed before being applied;
    results are reported as "red", "blue" or "tie" for JSON responses.
    """

    def __init__(self, layout: Optional[str] = None, to_move: PieceColor = PieceColor.RED) -> None:
        self.reset(layout, to_move)

    def reset(self, layout: Optional[str] = None, to_move: PieceColor = PieceColor.RED) -> None:
        self.board = Board.from_layout(layout, to_move) if layout else Board()
        self.moves: List[Move] = []

    @property
    def turn(self) -> PieceColor:
        return self.board.whose_move

    def get_turn_color(self) -> str:
        return str(self.board.whose_move)

    def get_legal_moves(self) -> List[str]:
        return [str(move) for move in possible_moves(self.board.whose_move, self.board)
                if self.board.legal_move(move)]

    def is_game_over(self) -> bool:
        return self.board.get_winner() is not None

    def get_result(self) -> Optional[str]:
        winner = self.board.get_winner()
        if winner is None:
            return None
        return "tie" if winner is PieceColor.EMPTY else str(winner)

    def push(self, text: str) -> Move:
        """Parse TEXT and play it for the side to move."""
        move = Move.parse(text)
        self.play(move)
        return move

    def play(self, move: Move) -> None:
        self.board.make_move(move)
        self.moves.append(move)

    def snapshot(self) -> Dict[str, object]:
        return {
            "board": str(self.board),
            "turn": self.get_turn_color(),
            "legal_moves": self.get_legal_moves(),
            "red_pieces": self.board.red_pieces(),
            "blue_pieces": self.board.blue_pieces(),
            "game_over": self.is_game_over(),
            "result": self.get_result(),
            "last_move": str(self.moves[-1]) if self.moves else None,
        }
