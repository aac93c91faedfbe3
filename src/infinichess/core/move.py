"""Move value objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from infinichess.core.piece import PieceType
from infinichess.core.types import Coords, coords_key


@dataclass(frozen=True, slots=True)
class MoveDraft:
    """The minimum needed to replay a move.

    The moving piece is not stored; it is whatever stands on *start*.
    """

    start: Coords
    end: Coords
    promotion: PieceType | None = None

    def __str__(self) -> str:
        """Most-compact ICN form, e.g. ``'1,7>2,8=Q'``.

        The ``=`` is mandatory: a multiplayer promotion code can begin with a
        player number, which would otherwise run into the end y-coordinate
        (``'1,7>2,8=3Q'`` is a red queen).
        """
        base = f"{coords_key(self.start)}>{coords_key(self.end)}"
        if self.promotion is not None:
            base += f"={self.promotion}"
        return base

    @property
    def compact(self) -> str:
        return str(self)


@dataclass(frozen=True, slots=True)
class MoveFlags:
    """Annotations a played move carries in styled notation."""

    capture: bool = False
    check: bool = False
    mate: bool = False


@dataclass(frozen=True, slots=True)
class Move:
    """A played move: draft + moving piece + flags + optional annotations.

    ``clk`` is the mover's remaining clock time in milliseconds right after
    the move. ``compact`` is computed once on construction.
    """

    start: Coords
    end: Coords
    type: PieceType
    promotion: PieceType | None = None
    flags: MoveFlags = MoveFlags()
    comment: str | None = None
    clk: float | None = None
    compact: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compact", str(self.draft))

    @property
    def draft(self) -> MoveDraft:
        return MoveDraft(self.start, self.end, self.promotion)

    def __str__(self) -> str:
        return self.compact
