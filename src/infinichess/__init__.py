"""infinichess — ICN (Infinite Chess Notation) codec for unbounded boards."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
