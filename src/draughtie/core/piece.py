"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from draughtie.core.enums import Color, PieceType

# Notation character <-> (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "r": (Color.RED, PieceType.REGULAR),
    "R": (Color.RED, PieceType.KING),
    "b": (Color.BLACK, PieceType.REGULAR),
    "B": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.RED, PieceType.REGULAR): "⛀",
    (Color.RED, PieceType.KING): "⛁",
    (Color.BLACK, PieceType.REGULAR): "⛂",
    (Color.BLACK, PieceType.KING): "⛃",
}

_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a draughts piece."""

    color: Color
    piece_type: PieceType = PieceType.REGULAR

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    def promoted(self) -> Piece:
        """Same color, king rank."""
        return Piece(self.color, PieceType.KING)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Notation character (lowercase = regular, uppercase = king)."""
        return _CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from notation character, e.g. 'B' -> black king."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode draughts symbol, e.g. ⛃."""
        return _UNICODE[(self.color, self.piece_type)]
