"""Domain Types — tours and value types shared across the codebase.

Invariants:
    - Tour values are the ESPN path segment for that tour's data partition
    - Prices are integer minor units, never floats

Design Decisions:
    - str Enum: serializes to JSON and formats into URL paths without conversion
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

PriceMinorUnits = NewType("PriceMinorUnits", int)
PlayerId = NewType("PlayerId", str)


# ─── Enums ───────────────────────────────────────────────────────

class Tour(str, Enum):
    """Supported golf tours. PGA is the primary tour, LPGA the secondary."""
    PGA = "pga"
    LPGA = "lpga"
