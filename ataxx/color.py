from __future__ import annotations

from enum import Enum


class PieceColor(Enum):
    """Contents of a cell. RED moves first and is the maximizing side."""

    EMPTY = "-"
    BLOCKED = "X"
    RED = "r"
    BLUE = "b"

    def opposite(self) -> "PieceColor":
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    def is_piece(self) -> bool:
        return self is PieceColor.RED or self is PieceColor.BLUE

    @classmethod
    def from_symbol(cls, symbol: str) -> "PieceColor":
        for color in cls:
            if color.value == symbol:
                return color
        raise ValueError(f"Unknown cell symbol: {symbol!r}")

    @classmethod
    def from_name(cls, name: str) -> "PieceColor":
        """Parse a player name ("red"/"blue"), case-insensitively."""
        key = name.strip().upper()
        if key not in ("RED", "BLUE"):
            raise ValueError(f"Unknown player color: {name!r}")
        return cls[key]

    def __str__(self) -> str:
        return self.name.lower()
