from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Playable board geometry. The extended grid adds a two-cell blocked border
# on every side so that any offset in -2..2 stays inside the array.
SIDE = 7
EXTENDED_SIDE = SIDE + 4


def index(col: str, row: str) -> int:
    """Linear index of (col, row) in the extended grid."""
    return (ord(row) - ord("1") + 2) * EXTENDED_SIDE + (ord(col) - ord("a") + 2)


def coordinate(sq: int) -> str:
    """External coordinate (e.g. "c4") of linear index SQ."""
    col = chr(ord("a") + sq % EXTENDED_SIDE - 2)
    row = chr(ord("1") + sq // EXTENDED_SIDE - 2)
    return col + row


def in_range(col: str, row: str) -> bool:
    return "a" <= col <= chr(ord("a") + SIDE - 1) and "1" <= row <= chr(ord("1") + SIDE - 1)


@dataclass(frozen=True)
class Move:
    """A pass or a relocation from (col0, row0) to (col1, row1).

    Coordinates are single characters; all four are None for a pass. A move
    carries no evaluation state and compares by value.
    """

    col0: Optional[str] = None
    row0: Optional[str] = None
    col1: Optional[str] = None
    row1: Optional[str] = None

    @classmethod
    def move(cls, col0: str, row0: str, col1: str, row1: str) -> "Move":
        # No range check here; legality belongs to the board.
        return cls(col0, row0, col1, row1)

    @classmethod
    def pass_move(cls) -> "Move":
        return PASS

    @classmethod
    def parse(cls, text: str) -> "Move":
        """Parse "-" or a coordinate pair such as "a7b6" or "a7-b6"."""
        s = text.strip()
        if s == "-":
            return PASS
        if len(s) == 5 and s[2] == "-":
            s = s[:2] + s[3:]
        if len(s) != 4:
            raise ValueError(f"Malformed move: {text!r}")
        col0, row0, col1, row1 = s
        if not (in_range(col0, row0) and in_range(col1, row1)):
            raise ValueError(f"Move out of range: {text!r}")
        return cls(col0, row0, col1, row1)

    def is_pass(self) -> bool:
        return self.col0 is None

    def _distance(self) -> int:
        return max(abs(ord(self.col1) - ord(self.col0)),
                   abs(ord(self.row1) - ord(self.row0)))

    def is_extend(self) -> bool:
        return not self.is_pass() and self._distance() == 1

    def is_jump(self) -> bool:
        return not self.is_pass() and self._distance() == 2

    @property
    def from_index(self) -> int:
        return index(self.col0, self.row0)

    @property
    def to_index(self) -> int:
        return index(self.col1, self.row1)

    def __str__(self) -> str:
        if self.is_pass():
            return "-"
        return f"{self.col0}{self.row0}{self.col1}{self.row1}"


PASS = Move()
