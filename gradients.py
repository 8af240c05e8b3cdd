"""
Gradient catalog for banner backgrounds.

Every gradient is a two-stop diagonal linear gradient. For contrast
purposes a gradient is represented by its dominant colour, the first stop.
"""

import json
import logging
import random
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

import settings
from contrast import relative_luminance, rgb_to_hex

logger = logging.getLogger(__name__)

_HEX6 = re.compile(r'#[a-fA-F0-9]{6}')
_RGB_FUNC = re.compile(r'rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*[\d.]+)?\s*\)')
_COLOR_TOKEN = re.compile(
    r'#[a-fA-F0-9]{6}\b|#[a-fA-F0-9]{3}\b|rgba?\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*(?:,\s*[\d.]+)?\s*\)'
)
_ANGLE = re.compile(r'(-?\d+(?:\.\d+)?)deg')


@dataclass(frozen=True)
class Gradient:
    """A two-stop diagonal linear gradient."""
    name: str = field(compare=False)
    stops: tuple  # (first, second) as #RRGGBB
    angle: int = settings.DEFAULT_GRADIENT_ANGLE

    @property
    def css(self) -> str:
        return f"linear-gradient({self.angle}deg, {self.stops[0]} 0%, {self.stops[1]} 100%)"

    @property
    def dominant_color(self) -> str:
        return self.stops[0]

    def __str__(self) -> str:
        return self.css


# =============================================================================
# Catalog
# =============================================================================

GRADIENTS = (
    Gradient('Frame 69', ('#98FB98', '#32CD32')),
    Gradient('Frame 68', ('#40E0D0', '#48D1CC')),
    Gradient('Frame 44', ('#DDA0DD', '#EE82EE')),
    Gradient('Frame 43', ('#E6E6FA', '#9370DB')),
    Gradient('Frame 48', ('#FFA500', '#FF8C00')),
    Gradient('Frame 53', ('#800080', '#4B0082')),
    Gradient('Frame 54', ('#87CEEB', '#1E90FF')),
    Gradient('Frame 10', ('#FFB6C1', '#FF69B4')),
    Gradient('Frame 8', ('#FFC0CB', '#FF69B4')),
    Gradient('Frame 67', ('#8B4513', '#A0522D')),
    Gradient('G_10', ('#800080', '#4B0082')),
    Gradient('G_01', ('#E6E6FA', '#DDA0DD')),
    Gradient('Frame 56', ('#98FB98', '#90EE90')),
    Gradient('Frame 2', ('#90EE90', '#32CD32')),
    Gradient('Frame 1', ('#87CEEB', '#00BFFF')),
    Gradient('Frame 36', ('#E6E6FA', '#9370DB')),
    Gradient('Frame 50', ('#FFA07A', '#FF7F50')),
    Gradient('Frame 55', ('#9400D3', '#800080')),
    Gradient('Frame 58', ('#87CEEB', '#1E90FF')),
    Gradient('Frame 71', ('#FFB6C1', '#FF69B4')),
    Gradient('Frame 4', ('#FFA07A', '#FF7F50')),
    Gradient('Frame 65', ('#8B4513', '#A0522D')),
    Gradient('G_11', ('#9400D3', '#800080')),
    Gradient('G_02', ('#DCDCDC', '#A9A9A9')),
    Gradient('Frame 61', ('#E0FFFF', '#B0E0E6')),
    Gradient('Frame 19', ('#98FB98', '#90EE90')),
    Gradient('Frame 12', ('#DDA0DD', '#BA55D3')),
    Gradient('Frame 21', ('#E6E6FA', '#DDA0DD')),
    Gradient('Frame 39', ('#FF6347', '#FF4500')),
    Gradient('Frame 57', ('#9400D3', '#8B008B')),
    Gradient('Frame 45', ('#E0FFFF', '#AFEEEE')),
    Gradient('Frame 18', ('#FFDAB9', '#FFE4B5')),
    Gradient('Frame 16', ('#FFDAB9', '#FFE4B5')),
    Gradient('Frame 63', ('#2F4F4F', '#000080')),
    Gradient('G_12', ('#9400D3', '#800080')),
    Gradient('G_03', ('#FFB6C1', '#FF69B4')),
    Gradient('Frame 5', ('#F0FFF0', '#98FB98')),
    Gradient('Frame 24', ('#98FB98', '#32CD32')),
    Gradient('Frame 9', ('#DDA0DD', '#BA55D3')),
    Gradient('Frame 3', ('#E6E6FA', '#DDA0DD')),
    Gradient('Frame 11', ('#FF6347', '#FF4500')),
    Gradient('Frame 7', ('#4169E1', '#0000CD')),
    Gradient('Frame 38', ('#E0FFFF', '#B0E0E6')),
    Gradient('Frame 20', ('#FFDAB9', '#FFE4B5')),
    Gradient('Frame 17', ('#FFDAB9', '#FFE4B5')),
    Gradient('Frame 60', ('#2F4F4F', '#000080')),
    Gradient('G_13', ('#9400D3', '#800080')),
    Gradient('G_05', ('#008B8B', '#006400')),
    Gradient('Frame 6', ('#FFD700', '#FFA500')),
    Gradient('Frame 42', ('#90EE90', '#32CD32')),
    Gradient('Frame 22', ('#FFB6C1', '#FF69B4')),
    Gradient('Frame 25', ('#DDA0DD', '#BA55D3')),
    Gradient('Frame 47', ('#FF6347', '#FF4500')),
    Gradient('Frame 52', ('#9400D3', '#800080')),
    Gradient('Frame 34', ('#E0FFFF', '#B0E0E6')),
    Gradient('Frame 41', ('#FFDAB9', '#FFE4B5')),
    Gradient('Frame 31', ('#FFDAB9', '#FFE4B5')),
    Gradient('Frame 64', ('#2F4F4F', '#000080')),
    Gradient('G_14', ('#9400D3', '#800080')),
    Gradient('G_06', ('#FF69B4', '#FF1493')),
    Gradient('Frame 14', ('#FFB6C1', '#FFC0CB')),
    Gradient('Frame 27', ('#E0FFFF', '#B0E0E6')),
    Gradient('Frame 51', ('#FFA500', '#FF8C00')),
    Gradient('Frame 30', ('#DDA0DD', '#BA55D3')),
    Gradient('Frame 28', ('#E0FFFF', '#B0E0E6')),
    Gradient('Frame 15', ('#E6E6FA', '#DDA0DD')),
    Gradient('Frame 37', ('#E6E6FA', '#DDA0DD')),
    Gradient('Frame 29', ('#E6E6FA', '#DDA0DD')),
    Gradient('Frame 26', ('#DDA0DD', '#BA55D3')),
    Gradient('Frame 13', ('#F0FFFF', '#E0FFFF')),
    Gradient('G_07', ('#9400D3', '#800080')),
)


# =============================================================================
# Selection
# =============================================================================

def pick(items: Sequence, rng: Optional[Callable[[], float]] = None):
    """Uniform pick driven by an rng returning floats in [0, 1)."""
    if not items:
        raise ValueError("Cannot pick from an empty sequence")
    rng = rng or random.random
    index = max(0, min(int(rng() * len(items)), len(items) - 1))
    return items[index]


def random_gradient(catalog: Optional[Sequence[Gradient]] = None,
                    rng: Optional[Callable[[], float]] = None) -> Gradient:
    if catalog is None:
        catalog = GRADIENTS
    if not catalog:
        raise ValueError("Gradient catalog is empty")
    return pick(catalog, rng)


# =============================================================================
# CSS parsing
# =============================================================================

def _rgb_func_to_hex(token: str) -> Optional[str]:
    match = _RGB_FUNC.match(token)
    if not match:
        return None
    return rgb_to_hex(tuple(int(c) for c in match.groups()))


def dominant_color(gradient: Union[Gradient, str]) -> str:
    """
    First colour stop of a gradient.

    CSS strings are searched for a 6-digit hex colour first, then an
    rgb()/rgba() colour. Strings with neither resolve to neutral gray.
    """
    if isinstance(gradient, Gradient):
        return gradient.dominant_color

    hex_match = _HEX6.search(gradient)
    if hex_match:
        return hex_match.group(0).upper()

    rgb_match = _RGB_FUNC.search(gradient)
    if rgb_match:
        converted = rgb_to_hex(tuple(int(c) for c in rgb_match.groups()))
        if converted:
            return converted

    return settings.NEUTRAL_GRAY


def parse_gradient(css: str, name: str = '') -> Gradient:
    """
    Build a Gradient from a CSS linear-gradient definition.

    Raises:
        ValueError: If fewer than two colour stops can be read
    """
    stops = []
    for token in _COLOR_TOKEN.findall(css):
        color = rgb_to_hex(token) if token.startswith('#') else _rgb_func_to_hex(token)
        if color:
            stops.append(color)

    if len(stops) < 2:
        raise ValueError(f"Gradient needs two colour stops: {css!r}")

    angle_match = _ANGLE.search(css)
    angle = int(float(angle_match.group(1))) if angle_match else settings.DEFAULT_GRADIENT_ANGLE

    return Gradient(name or css, (stops[0], stops[1]), angle)


# =============================================================================
# JSON catalog
# =============================================================================

def load_catalog(path: Union[str, Path]) -> tuple:
    """
    Load gradients from a JSON catalog.

    Expected shape: {"gradients": {key: {"name": ..., "colors": [c1, c2]}}}

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the JSON is malformed or holds no usable gradients
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text())
    except FileNotFoundError:
        raise FileNotFoundError(f"Gradient catalog not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Could not parse gradient catalog: {e}")

    entries = raw.get('gradients') if isinstance(raw, dict) else None
    if not isinstance(entries, dict):
        raise ValueError(f"Gradient catalog has no 'gradients' mapping: {path}")

    catalog = []
    for key, entry in entries.items():
        colors = entry.get('colors', []) if isinstance(entry, dict) else []
        stops = [rgb_to_hex(c) for c in colors[:2]]
        if len(stops) < 2 or None in stops:
            raise ValueError(f"Gradient {key!r} needs two valid hex colours, got {colors!r}")
        catalog.append(Gradient(entry.get('name') or key, tuple(stops)))

    if not catalog:
        raise ValueError(f"Gradient catalog is empty: {path}")

    logger.info(f"Loaded {len(catalog)} gradients from {path}")
    return tuple(catalog)


# =============================================================================
# Styling helpers
# =============================================================================

def is_gradient_dark(gradient: Gradient) -> bool:
    """True when the mean luminance of both stops is below 0.5."""
    first, second = gradient.stops
    average = (relative_luminance(first) + relative_luminance(second)) / 2
    return average < 0.5


def gradient_style(gradient: Optional[Gradient]) -> dict:
    if gradient is None:
        return {'background': settings.FALLBACK_BACKGROUND}
    return {'background': gradient.css}
