"""Ataxx game core and AI player.

Modules:
- color: Cell contents and player colors
- move: Move value type and board coordinates
- board: Position, rules and winner detection
- evaluator: Static evaluation (material difference with win overrides)
- ai: Move generation and fixed-depth minimax with alpha-beta pruning
- game: Turn bookkeeping atop Board for the web/API
- config: Search, web and logging settings
"""

from .color import PieceColor
from .move import Move
from .board import Board, IllegalMoveError
from .evaluator import Evaluator
from .ai import AIPlayer, SearchResult, possible_moves
from .game import Game

__all__ = [
    "PieceColor",
    "Move",
    "Board",
    "IllegalMoveError",
    "Evaluator",
    "AIPlayer",
    "SearchResult",
    "possible_moves",
    "Game",
]
