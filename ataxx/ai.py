from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import logging
import time

from .board import Board
from .color import PieceColor
from .config import CONFIG
from .evaluator import Evaluator
from .move import EXTENDED_SIDE, Move

logger = logging.getLogger(__name__)

# A magnitude greater than any reachable score.
INFTY = 2**31 - 1
# A position magnitude indicating a win (for RED if positive, BLUE if negative).
WINNING_VALUE = INFTY - 20
# Deepest search whose depth-biased win scores stay below INFTY.
MAX_SEARCH_DEPTH = INFTY - WINNING_VALUE - 1


@dataclass
class SearchResult:
    best_move: Optional[Move] = None
    score: int = 0
    nodes: int = 0


def possible_moves(who: PieceColor, board: Board) -> List[Move]:
    """Candidate moves for WHO on BOARD, always ending with a pass.

    Destinations are every empty cell in the 5x5 window around each of WHO's
    pieces. Nothing here checks legality; the source cell itself is never
    empty, so the zero offset drops out on its own.
    """
    moves: List[Move] = []
    for i in range(EXTENDED_SIDE * EXTENDED_SIDE):
        if board.get(i) is not who:
            continue
        col0 = chr(ord("a") + i % EXTENDED_SIDE - 2)
        row0 = chr(ord("1") + i // EXTENDED_SIDE - 2)
        for c in range(-2, 3):
            for r in range(-2, 3):
                if board.get(board.neighbor(i, c, r)) is PieceColor.EMPTY:
                    moves.append(Move.move(col0, row0,
                                           chr(ord(col0) + c), chr(ord(row0) + r)))
    moves.append(Move.pass_move())
    return moves


class AIPlayer:
    """Fixed-depth minimax with alpha-beta pruning over cloned boards."""

    def __init__(self, depth: Optional[int] = None) -> None:
        self.depth = CONFIG.search.depth if depth is None else depth
        if not 1 <= self.depth <= MAX_SEARCH_DEPTH:
            raise ValueError(
                f"Search depth must be between 1 and {MAX_SEARCH_DEPTH}, got {self.depth}"
            )

    def choose_move(self, board: Board, color: PieceColor) -> Move:
        """Return a move for COLOR from BOARD; a pass if COLOR cannot move."""
        if not board.can_move(color):
            logger.debug("%s has no moves; passing", color)
            return Move.pass_move()
        return self.find_move(board, color).best_move

    def find_move(self, board: Board, color: PieceColor) -> SearchResult:
        """Search a private copy of BOARD and return the full root result."""
        search_board = board.copy()
        result = SearchResult()
        sense = 1 if color is PieceColor.RED else -1
        start = time.perf_counter()
        result.score = self.minimax(search_board, self.depth, True, sense,
                                    -INFTY, INFTY, result)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            "%s plays %s (score %d, depth %d, %d nodes, %.1f ms)",
            color, result.best_move, result.score, self.depth, result.nodes, elapsed_ms,
        )
        return result

    def minimax(
        self,
        board: Board,
        depth: int,
        save_move: bool,
        sense: int,
        alpha: int,
        beta: int,
        result: SearchResult,
    ) -> int:
        """Return the value of BOARD searched DEPTH plies deep.

        SENSE is 1 when RED (maximizing) is to move, -1 for BLUE. When
        SAVE_MOVE is set the best move found at this node is stored in
        RESULT; the root finishes last, so its move is the one left there.
        At depth 0 or on a decided board the static score is returned and
        nothing is recorded.
        """
        result.nodes += 1
        # WINNING_VALUE + depth favors wins that happen sooner: depth is
        # larger the fewer moves have been made.
        if depth == 0 or board.get_winner() is not None:
            return Evaluator.evaluate(board, WINNING_VALUE + depth)

        best: Optional[Move] = None
        if sense == 1:
            best_score = -INFTY
            for move in possible_moves(PieceColor.RED, board):
                if not board.legal_move(move):
                    continue
                child = board.copy()
                child.make_move(move)
                score = self.minimax(child, depth - 1, save_move, -sense,
                                     alpha, beta, result)
                if score > best_score:
                    best_score = score
                    alpha = max(alpha, best_score)
                    best = move
                    if alpha >= beta:
                        return best_score
        else:
            best_score = INFTY
            for move in possible_moves(PieceColor.BLUE, board):
                if not board.legal_move(move):
                    continue
                child = board.copy()
                child.make_move(move)
                score = self.minimax(child, depth - 1, save_move, -sense,
                                     alpha, beta, result)
                if score < best_score:
                    best_score = score
                    beta = min(beta, best_score)
                    best = move
                    if alpha >= beta:
                        return best_score

        if save_move:
            result.best_move = best if best is not None else Move.pass_move()
            result.score = best_score
        return best_score
