"""Coordinates on an unbounded board and their canonical string keys.

A coordinate is a pair of arbitrary-precision ints. Its key ``"x,y"`` is the
form used in every map, set and notation string; two coordinates are equal
exactly when their keys are equal strings.
"""

from __future__ import annotations

import math
import re

from infinichess.core.errors import InfiniteCoordinate, InvalidCoordinate

Coords = tuple[int, int]
CoordsKey = str

# "0" or an optionally negative integer without leading zeros; never "-0".
COORD_SOURCE = r"(?:0|-?[1-9]\d*)"
COORDS_KEY_SOURCE = rf"{COORD_SOURCE},{COORD_SOURCE}"

_COORDS_KEY_RE = re.compile(rf"(?P<x>{COORD_SOURCE}),(?P<y>{COORD_SOURCE})")


def _component(value: int | float) -> int:
    """Normalise one coordinate component to an int."""
    if isinstance(value, bool):
        raise InvalidCoordinate(f"Coordinate must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InfiniteCoordinate(f"Coordinate must be finite, got {value!r}")
        if not value.is_integer():
            raise InvalidCoordinate(f"Coordinate must be an integer, got {value!r}")
        return int(value)  # also folds -0.0 into 0
    raise InvalidCoordinate(f"Coordinate must be an integer, got {value!r}")


def ensure_finite(coords: tuple[int | float, int | float]) -> Coords:
    """Return *coords* as a pair of ints, rejecting infinite components."""
    x, y = coords
    return _component(x), _component(y)


def _too_large(text: str) -> InfiniteCoordinate:
    # int <-> str conversion is capped (sys.get_int_max_str_digits()).
    shown = text if len(text) <= 40 else f"{text[:40]}..."
    return InfiniteCoordinate(f"Coordinate too large: {shown!r}")


def coords_key(coords: tuple[int | float, int | float]) -> CoordsKey:
    """Canonical key of *coords*, e.g. ``(-1, 2)`` → ``'-1,2'``."""
    x, y = ensure_finite(coords)
    try:
        return f"{x},{y}"
    except ValueError:
        raise _too_large(f"{x.bit_length()}-bit x / {y.bit_length()}-bit y") from None


def coords_from_key(key: CoordsKey) -> Coords:
    """Parse a canonical key back into coordinates, e.g. ``'-1,2'`` → ``(-1, 2)``."""
    match = _COORDS_KEY_RE.fullmatch(key)
    if match is None:
        raise InvalidCoordinate(f"Invalid coords key: {key!r}")
    try:
        return int(match["x"]), int(match["y"])
    except ValueError:
        raise _too_large(key) from None
