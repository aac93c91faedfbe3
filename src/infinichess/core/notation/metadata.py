"""Game metadata headers: ``[Event "Casual"] [Site "..."] ...``.

Headers are written in a fixed canonical order with unlisted keys appended
after it. Gamerules that have their own encoding are never written here.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from infinichess.core.errors import MalformedMetadataText
from infinichess.core.notation.gamerules import EXCLUDED_GAMERULES

METADATA_KEY_ORDER: tuple[str, ...] = (
    "Event",
    "Site",
    "Variant",
    "Round",
    "UTCDate",
    "UTCTime",
    "TimeControl",
    "White",
    "Black",
    "WhiteID",
    "BlackID",
    "Result",
    "Termination",
)
_CANONICAL_KEYS = frozenset(METADATA_KEY_ORDER)

_HEADER_RE = re.compile(r'\[(?P<key>\w+)\s+"(?P<value>(?:[^"\\]|\\.)*)"\]')
_ESCAPE_RE = re.compile(r"\\(.)")


def order_metadata(metadata: Mapping[str, str]) -> list[tuple[str, str]]:
    """Canonical keys first in canonical order, then the rest as given."""
    ordered = [(key, metadata[key]) for key in METADATA_KEY_ORDER if key in metadata]
    ordered.extend(
        (key, value)
        for key, value in metadata.items()
        if key not in _CANONICAL_KEYS and key not in EXCLUDED_GAMERULES
    )
    return ordered


def metadata_to_icn(metadata: Mapping[str, str], make_new_lines: bool = False) -> str:
    """Serialise *metadata* to ICN headers, space- or newline-separated."""
    headers: list[str] = []
    for key, value in order_metadata(metadata):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        headers.append(f'[{key} "{escaped}"]')
    return ("\n" if make_new_lines else " ").join(headers)


def metadata_from_icn(text: str) -> dict[str, str]:
    """Parse a header block written by :func:`metadata_to_icn`.

    Only whitespace may appear between headers.
    """
    metadata: dict[str, str] = {}
    pos = 0
    for match in _HEADER_RE.finditer(text):
        gap = text[pos : match.start()]
        if gap.strip():
            raise MalformedMetadataText(f"Invalid metadata header: {gap.strip()!r}")
        metadata[match["key"]] = _ESCAPE_RE.sub(r"\1", match["value"])
        pos = match.end()

    rest = text[pos:]
    if rest.strip():
        raise MalformedMetadataText(f"Invalid metadata header: {rest.strip()!r}")
    return metadata
