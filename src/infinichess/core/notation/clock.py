"""Clock embedded command sequence: ``[%clk H:MM:SS.D]``.

The tag lives inside a move comment and records how much time the player who
just moved has left. D is tenths of a second.
"""

from __future__ import annotations

import math
import re

ZERO_CLOCK_TAG = "[%clk 0:00:00.0]"

# Finds clock tags inside otherwise opaque comment text.
CLOCK_TAG_RE = re.compile(
    r"\[%clk (?P<hours>\d+):(?P<minutes>\d{2}):(?P<seconds>\d{2})\.(?P<tenths>\d)\]"
)


def clock_tag(millis_remaining: float) -> str:
    """Format remaining clock time as a ``[%clk ...]`` tag.

    Time is rounded up to the next 100 ms boundary first (96700 → 96800).
    Non-positive input gives the zero tag; NaN and infinities are rejected.
    """
    if isinstance(millis_remaining, float) and not math.isfinite(millis_remaining):
        raise ValueError(f"Clock time must be finite, got {millis_remaining!r}")
    if millis_remaining <= 0:
        return ZERO_CLOCK_TAG

    rounded = (math.floor(millis_remaining) // 100 + 1) * 100

    total_seconds = rounded // 1000
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    tenths = (rounded % 1000) // 100

    return f"[%clk {hours}:{minutes:02d}:{seconds:02d}.{tenths}]"
