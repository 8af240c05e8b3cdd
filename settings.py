"""
Configuration for banner colour selection.

Contrast thresholds are fixed product decisions. Only the runtime knobs at
the bottom can be overridden from the environment (or a .env file).
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


# =============================================================================
# WCAG levels
# =============================================================================

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5


# =============================================================================
# Validator thresholds (below AA)
# =============================================================================

MIN_TEXT_CONTRAST = 3.0
MIN_HEADING_CONTRAST = 3.0
MIN_CTA_CONTRAST = 2.5
MIN_CTA_TEXT_CONTRAST = 3.0


# =============================================================================
# Selection parameters
# =============================================================================

CTA_PREFERRED_CONTRAST = 3.0  # Interactive elements
HEADING_REQUIRED_CONTRAST = 2.8
BODY_REQUIRED_CONTRAST = 3.2
LIGHT_LUMINANCE_THRESHOLD = 0.5

NEUTRAL_GRAY = '#808080'
NEUTRAL_LUMINANCE = 0.5  # Stand-in for unparseable colours

DEFAULT_GRADIENT_ANGLE = 135
FALLBACK_BACKGROUND = 'linear-gradient(to right, #f3f4f6, #e5e7eb)'


# =============================================================================
# Runtime knobs
# =============================================================================

def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_number(name: str, default, cast=int):
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return cast(value.strip())
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}, not a valid {cast.__name__}; using {default}")
        return default


DEFAULT_MAX_ATTEMPTS = _env_number('BANNER_COLORS_MAX_ATTEMPTS', 15)
CACHE_TTL_SECONDS = _env_number('BANNER_COLORS_CACHE_TTL', 300.0, float)
LOG_LEVEL = os.getenv('BANNER_COLORS_LOG_LEVEL', 'INFO').upper()
ANALYTICS_ENABLED = _env_bool('BANNER_COLORS_ANALYTICS')
