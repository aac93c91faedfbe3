"""ICN move and move-list encoding and parsing.

A single move has several shortforms, from the most compact ``1,7>2,8=Q`` to
the fully annotated ``P1,7 x 2,8 =Q + {[%clk 0:09:56.7] Promotion!}``. Move
lists are never split on a delimiter: the shortform grammar describes itself,
so a list is read by scanning it for consecutive, non-overlapping moves.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from infinichess.core.errors import MalformedMoveText
from infinichess.core.move import Move, MoveDraft
from infinichess.core.notation.clock import clock_tag
from infinichess.core.notation.models import (
    MOST_COMPACT,
    MoveStyle,
    NumberedMoveStyle,
    ParsedMove,
)
from infinichess.core.piece import PIECE_CODE_SOURCE, piece_type_from_code
from infinichess.core.types import COORDS_KEY_SOURCE, coords_from_key, coords_key

_LOGGER = logging.getLogger(__name__)

_PROMOTION_SOURCE = rf"(?:=(?P<promotion>{PIECE_CODE_SOURCE}))?"

_COMPACT_MOVE_RE = re.compile(
    rf"(?P<start>{COORDS_KEY_SOURCE})>(?P<end>{COORDS_KEY_SOURCE}){_PROMOTION_SOURCE}"
)

_SHORTFORM_MOVE_RE = re.compile(
    rf"""
    (?:{PIECE_CODE_SOURCE})?                # moving piece, re-derived by the caller
    (?P<start>{COORDS_KEY_SOURCE})
    \ ?[>x]\ ?
    (?P<end>{COORDS_KEY_SOURCE})
    \ ?{_PROMOTION_SOURCE}                  # "=" required
    \ ?[+\#]?                               # check / mate
    \ ?(?:[!?]{{1,2}})?                     # !, ?, !!, ??, !?, ?!
    \ ?(?:\{{(?P<comment>[^}}]+)\}})?       # first closing brace ends it
    """,
    re.VERBOSE,
)


def _draft_from_match(match: re.Match[str]) -> MoveDraft:
    promotion_code = match["promotion"]
    return MoveDraft(
        coords_from_key(match["start"]),
        coords_from_key(match["end"]),
        piece_type_from_code(promotion_code) if promotion_code else None,
    )


def _parsed_move_from_match(match: re.Match[str]) -> ParsedMove:
    return ParsedMove(draft=_draft_from_match(match), comment=match["comment"] or None)


# ── Single moves ─────────────────────────────────────────────────────────────


def compact_move_from_draft(draft: MoveDraft) -> str:
    """Most-compact form of *draft*: ``'1,7>2,8=Q'``."""
    return str(draft)


def move_to_shortform(move: Move, style: MoveStyle = MoveStyle()) -> str:
    """Write *move* in the shortform described by *style*.

    compact  → ``'1,7>2,8=Q'`` (no piece code, no ``x`` / ``+`` / ``#``)
    spaces   → ``'P1,7 x 2,8 =Q +'``
    comments → ``'P1,7x2,8=Q+{[%clk 0:09:56.7] Capture and promotion!}'``
    """
    if style.is_most_compact:
        _LOGGER.warning(
            "compact_move_from_draft() or Move.compact is faster for the most-compact form of a move"
        )

    segments: list[str] = []

    start_key = coords_key(move.start)
    segments.append(start_key if style.compact else f"{move.type}{start_key}")
    segments.append("x" if move.flags.capture and not style.compact else ">")
    segments.append(coords_key(move.end))

    if move.promotion is not None:
        segments.append(f"={move.promotion}")

    if not style.compact and (move.flags.mate or move.flags.check):
        segments.append("#" if move.flags.mate else "+")

    if style.comments and (move.comment or move.clk is not None):
        # Embedded command sequences come before the free-text comment.
        parts: list[str] = []
        if move.clk is not None:
            parts.append(clock_tag(move.clk))
        if move.comment:
            parts.append(move.comment)
        segments.append("{" + " ".join(parts) + "}")

    return (" " if style.spaces else "").join(segments)


def parse_compact_move(text: str) -> MoveDraft:
    """Parse a move that is in the most-compact form only, e.g. ``'1,7>2,8=Q'``."""
    match = _COMPACT_MOVE_RE.fullmatch(text)
    if match is None:
        raise MalformedMoveText(f"Invalid compact move: {text!r}")
    return _draft_from_match(match)


def parse_shortform_move(text: str) -> ParsedMove:
    """Parse a single move written in any shortform."""
    match = _SHORTFORM_MOVE_RE.fullmatch(text)
    if match is None:
        raise MalformedMoveText(f"Invalid shortform move: {text!r}")
    return _parsed_move_from_match(match)


# ── Move lists ───────────────────────────────────────────────────────────────


def moves_to_shortform(moves: Sequence[Move], style: MoveStyle = MOST_COMPACT) -> str:
    """Write a whole move list.

    Unnumbered lists are joined by ``'|'``, or ``' | '`` when *style* asks for
    spaces. A :class:`NumberedMoveStyle` produces numbered lines::

        1. P4,2 > 4,4 | p4,7 > 4,6
        2. P4,4 > 4,5 | p3,7 > 3,5
    """
    if isinstance(style, NumberedMoveStyle):
        return _numbered_moves_to_shortform(moves, style)

    if style.is_most_compact:
        return "|".join(move.compact for move in moves)

    delimiter = " | " if style.spaces else "|"
    return delimiter.join(move_to_shortform(move, style) for move in moves)


def _numbered_moves_to_shortform(moves: Sequence[Move], style: NumberedMoveStyle) -> str:
    cycle = len(style.turn_order)
    most_compact = style.is_most_compact

    lines: list[str] = []
    current = ""
    for index, move in enumerate(moves):
        turn_index = index % cycle
        if turn_index == 0:
            current += f"{index // cycle + style.fullmove}. "
        else:
            current += " | "

        current += move.compact if most_compact else move_to_shortform(move, style)

        if turn_index == cycle - 1:
            lines.append(current)
            current = ""

    # A partial last turn still gets its own line.
    if current:
        lines.append(current)

    return ("\n" if style.make_new_lines else " ").join(lines)


def parse_shortform_moves(text: str) -> list[ParsedMove]:
    """Read every move out of a move list written in any shortform style."""
    moves = [_parsed_move_from_match(match) for match in _SHORTFORM_MOVE_RE.finditer(text)]
    _LOGGER.debug("Parsed %d moves from shortform move list", len(moves))
    return moves
