"""Move value object: one atomic step (simple move or single jump)."""

from __future__ import annotations

from dataclasses import dataclass

from draughtie.core.piece import Piece
from draughtie.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single step.

    A multi-jump turn is a sequence of these, one per jump.
    """

    from_sq: Square
    to_sq: Square
    captured: tuple[Square, ...] = ()
    # Identity of each captured piece, parallel to ``captured``.
    captured_pieces: tuple[Piece, ...] = ()
    promoted: bool = False

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.captured else "-"
        return f"{self.from_sq}{sep}{self.to_sq}"
