"""
WCAG contrast math for banner colours.

Colours are hex strings (#RRGGBB or #RGB, leading # optional) or explicit
(r, g, b) triples in 0-255. Parsing never raises: malformed input yields
None, and anything that needs a luminance from an unparseable colour gets
the neutral mid value instead.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

import numpy as np

import settings

logger = logging.getLogger(__name__)


class RGB(NamedTuple):
    r: int
    g: int
    b: int


Color = Union[str, RGB, tuple, Mapping]

WHITE = '#FFFFFF'
BLACK = '#000000'

_HEX_PATTERN = re.compile(r'^([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$', re.IGNORECASE)


@dataclass(frozen=True)
class ContrastResult:
    """Contrast of a foreground/background pair."""
    ratio: float
    meets_aa: bool
    meets_aaa: bool
    is_large_text: bool = False


# =============================================================================
# Parsing
# =============================================================================

def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """Parse a 3- or 6-digit hex colour. Returns None on malformed input."""
    if not isinstance(hex_color, str):
        return None

    value = hex_color.strip()
    if value.startswith('#'):
        value = value[1:]

    if len(value) == 3:
        value = ''.join(ch * 2 for ch in value)

    match = _HEX_PATTERN.match(value)
    if not match:
        return None
    return RGB(*(int(part, 16) for part in match.groups()))


def to_rgb(color: Color) -> Optional[RGB]:
    """Coerce any accepted colour form to RGB, or None if it can't be read."""
    if isinstance(color, str):
        return hex_to_rgb(color)
    if isinstance(color, Mapping):
        try:
            color = (color['r'], color['g'], color['b'])
        except KeyError:
            return None
    if isinstance(color, tuple) and len(color) == 3:
        try:
            channels = [int(c) for c in color]
        except (TypeError, ValueError):
            return None
        if all(0 <= c <= 255 for c in channels):
            return RGB(*channels)
    return None


def rgb_to_hex(color: Color) -> Optional[str]:
    """Format a colour as uppercase #RRGGBB."""
    rgb = to_rgb(color)
    if rgb is None:
        return None
    return f"#{rgb.r:02X}{rgb.g:02X}{rgb.b:02X}"


def normalize_hex(color: Color) -> Optional[str]:
    """
    Canonical form for comparing colours written differently.

    '#abc', 'AABBCC' and (170, 187, 204) all become '#AABBCC'.
    """
    return rgb_to_hex(color)


# =============================================================================
# Luminance and contrast
# =============================================================================

def _linearize(channel: float) -> float:
    c = channel / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    """WCAG relative luminance (0-1) of a single colour."""
    rgb = to_rgb(color)
    if rgb is None:
        logger.warning(f"Unparseable colour {color!r}, using neutral luminance")
        return settings.NEUTRAL_LUMINANCE

    return 0.2126 * _linearize(rgb.r) + 0.7152 * _linearize(rgb.g) + 0.0722 * _linearize(rgb.b)


def luminance_array(rgb: np.ndarray) -> np.ndarray:
    """Relative luminance for an (n, 3) array of 0-255 RGB values."""
    rgb_norm = np.asarray(rgb, dtype=np.float64).reshape(-1, 3) / 255.0

    mask = rgb_norm <= 0.03928
    rgb_linear = np.where(mask, rgb_norm / 12.92, ((rgb_norm + 0.055) / 1.055) ** 2.4)

    return rgb_linear @ np.array([0.2126, 0.7152, 0.0722])


def contrast_ratio(color_a: Color, color_b: Color) -> float:
    """Contrast ratio between two colours, in [1, 21]. Symmetric."""
    lum_a = relative_luminance(color_a)
    lum_b = relative_luminance(color_b)

    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)

    return (lighter + 0.05) / (darker + 0.05)


def contrast_against(colors: list, background: Color) -> np.ndarray:
    """
    Contrast ratio of every colour in `colors` against one background.

    Args:
        colors: Candidate colours (any accepted form)
        background: Background colour

    Returns:
        Array of ratios, same order as `colors`
    """
    if not colors:
        return np.zeros(0)

    parsed = [to_rgb(c) for c in colors]
    valid = np.array([p is not None for p in parsed])
    rgb = np.array([p if p is not None else (0, 0, 0) for p in parsed])

    lums = np.where(valid, luminance_array(rgb), settings.NEUTRAL_LUMINANCE)
    bg_lum = relative_luminance(background)

    lighter = np.maximum(lums, bg_lum)
    darker = np.minimum(lums, bg_lum)
    return (lighter + 0.05) / (darker + 0.05)


# =============================================================================
# Thresholds
# =============================================================================

def meets_threshold(ratio: float, level: str = 'AA', is_large_text: bool = False) -> bool:
    """Check a ratio against WCAG AA or AAA."""
    if level == 'AA':
        return ratio >= (settings.AA_LARGE if is_large_text else settings.AA_NORMAL)
    if level == 'AAA':
        return ratio >= (settings.AAA_LARGE if is_large_text else settings.AAA_NORMAL)
    raise ValueError(f"Unknown WCAG level: {level!r}")


def wcag_level(ratio: float) -> str:
    """Best WCAG level a ratio reaches for normal text."""
    if ratio >= settings.AAA_NORMAL:
        return "AAA"
    elif ratio >= settings.AA_NORMAL:
        return "AA"
    elif ratio >= settings.AA_LARGE:
        return "AA-large"
    return "fail"


def analyze_contrast(foreground: Color, background: Color,
                     is_large_text: bool = False) -> ContrastResult:
    ratio = contrast_ratio(foreground, background)
    return ContrastResult(
        ratio=ratio,
        meets_aa=meets_threshold(ratio, 'AA', is_large_text),
        meets_aaa=meets_threshold(ratio, 'AAA', is_large_text),
        is_large_text=is_large_text
    )


# =============================================================================
# Light / dark helpers
# =============================================================================

def is_light(color: Color) -> bool:
    return relative_luminance(color) > settings.LIGHT_LUMINANCE_THRESHOLD


def optimal_text_color(background: Color) -> str:
    """Return white or black, whichever contrasts more with the background."""
    white_contrast = contrast_ratio(WHITE, background)
    black_contrast = contrast_ratio(BLACK, background)
    return WHITE if white_contrast > black_contrast else BLACK
