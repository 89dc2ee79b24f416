from __future__ import annotations

from typing import List, Optional

from .color import PieceColor
from .move import EXTENDED_SIDE, SIDE, Move, in_range, index

EMPTY = PieceColor.EMPTY
BLOCKED = PieceColor.BLOCKED
RED = PieceColor.RED
BLUE = PieceColor.BLUE

# Consecutive jumps (with no intervening extend) that end the game.
JUMP_LIMIT = 25

# Every destination offset within distance 2 of a piece.
_REACH = [(dc, dr) for dc in range(-2, 3) for dr in range(-2, 3) if (dc, dr) != (0, 0)]
_ADJACENT = [(dc, dr) for dc in range(-1, 2) for dr in range(-1, 2) if (dc, dr) != (0, 0)]

_UNKNOWN = object()


class IllegalMoveError(ValueError):
    """A move or setup change that the rules do not allow."""


class Board:
    """An Ataxx position: the grid, the side to move and the jump counter.

    Cells live in a flat list over an 11x11 extended grid; the two-cell
    border is permanently BLOCKED so neighbor arithmetic never needs bounds
    checks for offsets up to 2. The board validates every move it is asked to
    make; search code is expected to consult legal_move() first.
    """

    SIDE = SIDE
    EXTENDED_SIDE = EXTENDED_SIDE

    def __init__(self) -> None:
        self._cells: List[PieceColor] = []
        self.whose_move: PieceColor = RED
        self.num_jumps: int = 0
        self._moves_made: int = 0
        self._winner = _UNKNOWN
        self.reset()

    def reset(self) -> None:
        """Set up the standard starting position, RED to move."""
        self.clear()
        self.put(RED, "a7")
        self.put(RED, "g1")
        self.put(BLUE, "a1")
        self.put(BLUE, "g7")

    def clear(self) -> None:
        """Empty every playable cell, RED to move."""
        self._cells = [BLOCKED] * (EXTENDED_SIDE * EXTENDED_SIDE)
        for r in range(SIDE):
            for c in range(SIDE):
                self._cells[index(chr(ord("a") + c), chr(ord("1") + r))] = EMPTY
        self.whose_move = RED
        self.num_jumps = 0
        self._moves_made = 0
        self._winner = _UNKNOWN

    def copy(self) -> "Board":
        """Return an independent deep copy of this position."""
        other = Board.__new__(Board)
        other._cells = list(self._cells)
        other.whose_move = self.whose_move
        other.num_jumps = self.num_jumps
        other._moves_made = self._moves_made
        other._winner = self._winner
        return other

    @classmethod
    def from_layout(cls, layout: str, to_move: PieceColor = RED) -> "Board":
        """Build a board from rows 7 down to 1, one symbol per cell.

        Symbols are those of PieceColor ("r", "b", "X", "-"); whitespace is
        ignored, so the output of str() is accepted.
        """
        symbols = [ch for ch in layout if not ch.isspace()]
        if len(symbols) != SIDE * SIDE:
            raise ValueError(f"Layout needs {SIDE * SIDE} cells, got {len(symbols)}")
        board = cls()
        board.clear()
        for k, symbol in enumerate(symbols):
            row = chr(ord("1") + SIDE - 1 - k // SIDE)
            col = chr(ord("a") + k % SIDE)
            board.put(PieceColor.from_symbol(symbol), col + row)
        if not to_move.is_piece():
            raise ValueError(f"Side to move must be red or blue, not {to_move}")
        board.whose_move = to_move
        return board

    # ------------------------------------------------------------------
    # Cell access

    @staticmethod
    def neighbor(sq: int, dc: int, dr: int) -> int:
        return sq + dc + dr * EXTENDED_SIDE

    def get(self, sq: int) -> PieceColor:
        """Contents of linear index SQ; anything off the grid reads BLOCKED."""
        if 0 <= sq < len(self._cells):
            return self._cells[sq]
        return BLOCKED

    def get_at(self, col_row: str) -> PieceColor:
        return self.get(index(col_row[0], col_row[1]))

    def put(self, color: PieceColor, col_row: str) -> None:
        """Place COLOR at COL_ROW with no rule checks (setup only)."""
        if len(col_row) != 2 or not in_range(col_row[0], col_row[1]):
            raise ValueError(f"Square out of range: {col_row!r}")
        self._cells[index(col_row[0], col_row[1])] = color
        self._winner = _UNKNOWN

    def set_block(self, col_row: str) -> None:
        """Block COL_ROW and its reflections across both board axes."""
        if self._moves_made > 0:
            raise IllegalMoveError("Blocks can only be placed before the first move")
        if len(col_row) != 2 or not in_range(col_row[0], col_row[1]):
            raise ValueError(f"Square out of range: {col_row!r}")
        col, row = col_row
        mirror_col = chr(ord("a") + ord("g") - ord(col))
        mirror_row = chr(ord("1") + ord("7") - ord(row))
        squares = {col + row, mirror_col + row, col + mirror_row, mirror_col + mirror_row}
        if any(self.get_at(sq) is not EMPTY for sq in squares):
            raise IllegalMoveError(f"Cannot block occupied square {col_row}")
        for sq in squares:
            self.put(BLOCKED, sq)

    def num_pieces(self, color: PieceColor) -> int:
        return self._cells.count(color)

    def red_pieces(self) -> int:
        return self.num_pieces(RED)

    def blue_pieces(self) -> int:
        return self.num_pieces(BLUE)

    # ------------------------------------------------------------------
    # Rules

    def can_move(self, who: PieceColor) -> bool:
        """True iff some piece of WHO has an empty cell within distance 2."""
        cells = self._cells
        for sq, cell in enumerate(cells):
            if cell is not who:
                continue
            for dc, dr in _REACH:
                if cells[sq + dc + dr * EXTENDED_SIDE] is EMPTY:
                    return True
        return False

    def legal_move(self, move: Optional[Move]) -> bool:
        if move is None:
            return False
        if move.is_pass():
            return not self.can_move(self.whose_move)
        if self.get_winner() is not None:
            return False
        if not (in_range(move.col0, move.row0) and in_range(move.col1, move.row1)):
            return False
        if self.get(move.from_index) is not self.whose_move:
            return False
        if self.get(move.to_index) is not EMPTY:
            return False
        return move.is_extend() or move.is_jump()

    def make_move(self, move: Move) -> None:
        """Apply MOVE for the side to move, converting adjacent opponents."""
        if not self.legal_move(move):
            raise IllegalMoveError(f"Illegal move: {move}")
        me = self.whose_move
        opponent = me.opposite()
        if not move.is_pass():
            to = move.to_index
            if move.is_jump():
                self._cells[move.from_index] = EMPTY
                self.num_jumps += 1
            else:
                self.num_jumps = 0
            self._cells[to] = me
            for dc, dr in _ADJACENT:
                n = self.neighbor(to, dc, dr)
                if self._cells[n] is opponent:
                    self._cells[n] = me
        self.whose_move = opponent
        self._moves_made += 1
        self._winner = _UNKNOWN

    def get_winner(self) -> Optional[PieceColor]:
        """None while play continues; RED, BLUE, or EMPTY for a tie once over."""
        if self._winner is _UNKNOWN:
            self._winner = self._compute_winner()
        return self._winner

    def _compute_winner(self) -> Optional[PieceColor]:
        red, blue = self.red_pieces(), self.blue_pieces()
        over = (
            red == 0
            or blue == 0
            or self.num_jumps >= JUMP_LIMIT
            or not (self.can_move(RED) or self.can_move(BLUE))
        )
        if not over:
            return None
        if red > blue:
            return RED
        if blue > red:
            return BLUE
        return EMPTY

    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self._cells == other._cells
                and self.whose_move is other.whose_move
                and self.num_jumps == other.num_jumps)

    __hash__ = None

    def __str__(self) -> str:
        lines = []
        for r in range(SIDE - 1, -1, -1):
            row = chr(ord("1") + r)
            cells = [self.get_at(chr(ord("a") + c) + row).value for c in range(SIDE)]
            lines.append("  " + " ".join(cells))
        return "\n".join(lines)
