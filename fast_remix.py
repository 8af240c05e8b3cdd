"""
Pre-validated colour sets for the remix button.

Picking from this table costs nothing, and every entry clears the
validator, so it is also the generator's fallback. Entries reference
catalog gradients by name; their ratios are computed once at import.
"""

import logging
from typing import Callable, Optional

from color_set import ColorSet, build_color_set
from gradients import GRADIENTS, pick

logger = logging.getLogger(__name__)

_CATALOG_BY_NAME = {g.name: g for g in GRADIENTS}

# (gradient name, cta, body text, heading)
_COMBINATIONS = (
    # Greens
    ('Frame 69', '#1A1A1A', '#000000', '#1A1A1A'),
    ('Frame 2', '#2D2D2D', '#000000', '#1A1A1A'),
    ('Frame 5', '#1A1A1A', '#1A1A1A', '#000000'),
    # Blues and cyans
    ('Frame 68', '#1A1A1A', '#000000', '#1A1A1A'),
    ('Frame 54', '#1A1A1A', '#000000', '#1A1A1A'),
    ('Frame 61', '#1A1A1A', '#1A1A1A', '#000000'),
    ('Frame 13', '#228B22', '#000000', '#1A1A1A'),
    ('Frame 7', '#FFFFFF', '#FFFFFF', '#FFFFFF'),
    # Purples
    ('Frame 53', '#FFD700', '#FFFFFF', '#FFFFFF'),
    ('Frame 55', '#FFFFFF', '#FFFFFF', '#FFFFFF'),
    ('G_01', '#1A1A1A', '#1A1A1A', '#000000'),
    ('Frame 43', '#4169E1', '#000000', '#1A1A1A'),
    # Oranges and earth tones
    ('Frame 18', '#1A1A1A', '#1A1A1A', '#000000'),
    ('Frame 6', '#1A1A1A', '#000000', '#1A1A1A'),
    ('Frame 67', '#FFD700', '#FFFFFF', '#FFFFFF'),
    # Pinks
    ('Frame 10', '#1A1A1A', '#000000', '#1A1A1A'),
    ('Frame 8', '#2D2D2D', '#000000', '#2D2D2D'),
    # Neutrals and darks
    ('G_02', '#1A1A1A', '#1A1A1A', '#000000'),
    ('Frame 63', '#FFD700', '#FFFFFF', '#FFFFFF'),
    ('G_05', '#FFFFFF', '#FFFFFF', '#FFFFFF'),
)

FAST_REMIX_TABLE = tuple(
    build_color_set(_CATALOG_BY_NAME[name], cta, text, heading)
    for name, cta, text, heading in _COMBINATIONS
)


def fast_remix_color_set(rng: Optional[Callable[[], float]] = None) -> ColorSet:
    """Random table entry, returned as a copy the caller may modify."""
    entry = pick(FAST_REMIX_TABLE, rng)
    logger.debug(f"Fast remix picked {entry.gradient.name}")
    return entry.copy()
