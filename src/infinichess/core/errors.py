"""Exceptions raised by the ICN codec.

Everything derives from :class:`ValueError` so callers that already guard
notation parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations


class IcnError(ValueError):
    """Base class for every ICN encode/decode failure."""


class InvalidPieceCode(IcnError):
    """A piece type has no code, or a code maps to no piece type."""


class InvalidPlayerCode(IcnError):
    """A player code used in a turn order is not registered."""


class InvalidCastlePartner(IcnError):
    """A ruleset names a piece kind that cannot castle."""


class InvalidCoordinate(IcnError):
    """A coordinate component or coords key is not a canonical integer."""


class InfiniteCoordinate(InvalidCoordinate):
    """A coordinate component is infinite (or NaN)."""


class MalformedMoveText(IcnError):
    """A move does not match the compact or shortform grammar."""


class MalformedPositionText(IcnError):
    """A position entry could not be decoded."""


class MalformedMetadataText(IcnError):
    """A metadata header line is not of the form ``[Key "value"]``."""
