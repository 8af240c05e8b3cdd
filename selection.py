"""
Accessible colour selection for banners.

Picks a background gradient, then derives a CTA colour from the palette
opposite the background's lightness and body/heading colours from the
text candidates. The generator samples several combinations and keeps the
best one that clears the validator, falling back to the pre-validated
remix table when none does.
"""

import logging
from typing import Callable, Optional, Sequence

import numpy as np

import settings
from color_set import (
    ColorSet, ContrastRatios, build_color_set, quality_score, validate_color_set,
)
from contrast import (
    Color, contrast_against, contrast_ratio, is_light, normalize_hex, optimal_text_color,
)
from fast_remix import fast_remix_color_set
from gradients import Gradient, random_gradient
from palettes import MID_CTA_COLORS, TEXT_COLORS, cta_candidates

logger = logging.getLogger(__name__)


def _best_candidate(candidates: Sequence[str], background: Color,
                    minimum: Optional[float] = None) -> Optional[str]:
    """Highest-contrast candidate, optionally requiring a minimum ratio."""
    if not candidates:
        return None

    ratios = contrast_against(list(candidates), background)
    if minimum is not None:
        ratios = np.where(ratios >= minimum, ratios, -np.inf)
        if not np.isfinite(ratios).any():
            return None

    return candidates[int(np.argmax(ratios))]


# =============================================================================
# Per-role selection
# =============================================================================

def select_cta_color(background: Color) -> str:
    """
    CTA colour for a background.

    Searches the palette opposite the background's lightness for the best
    ratio at or above the preferred minimum. If nothing qualifies, the best
    mid-tone wins regardless of ratio.
    """
    primary = cta_candidates(is_light(background))
    best = _best_candidate(primary, background, settings.CTA_PREFERRED_CONTRAST)
    if best is None:
        best = _best_candidate(MID_CTA_COLORS, background)
    return best


def select_text_color(background: Color, is_heading: bool = False) -> str:
    """Highest-contrast text candidate meeting the heading/body minimum."""
    required = settings.HEADING_REQUIRED_CONTRAST if is_heading else settings.BODY_REQUIRED_CONTRAST

    ratios = contrast_against(list(TEXT_COLORS), background)
    for index in np.argsort(-ratios, kind='stable'):
        if ratios[index] >= required:
            return TEXT_COLORS[index]

    return optimal_text_color(background)


# =============================================================================
# Colour sets
# =============================================================================

def harmonious_color_set(gradient: Optional[Gradient] = None,
                         catalog: Optional[Sequence[Gradient]] = None,
                         rng: Optional[Callable[[], float]] = None) -> ColorSet:
    """One unvalidated colour set, for `gradient` or a random catalog entry."""
    if gradient is None:
        gradient = random_gradient(catalog, rng)
    background = gradient.dominant_color

    return build_color_set(
        gradient,
        cta_color=select_cta_color(background),
        text_color=select_text_color(background, is_heading=False),
        heading_color=select_text_color(background, is_heading=True),
    )


def generate_optimal_color_set(max_attempts: Optional[int] = None,
                               catalog: Optional[Sequence[Gradient]] = None,
                               rng: Optional[Callable[[], float]] = None) -> ColorSet:
    """
    Best-of-N colour set.

    Args:
        max_attempts: Number of random combinations to try (default from settings)
        catalog: Gradients to sample from (default: built-in catalog)
        rng: Callable returning floats in [0, 1)

    Returns:
        The valid attempt with the highest quality score, or a fast remix
        entry when no attempt validates. Never fails for a usable catalog.
    """
    if max_attempts is None:
        max_attempts = settings.DEFAULT_MAX_ATTEMPTS

    best_set = None
    best_score = 0.0

    for attempt in range(max_attempts):
        color_set = harmonious_color_set(catalog=catalog, rng=rng)
        score = quality_score(color_set)

        if validate_color_set(color_set) and score > best_score:
            best_score = score
            best_set = color_set
            logger.debug(f"Attempt {attempt + 1}: {color_set.gradient.name} scored {score:.2f}")

    if best_set is None:
        logger.info(f"No colour set validated in {max_attempts} attempts, using fast remix fallback")
        return fast_remix_color_set(rng)

    return best_set


def create_variation(base: ColorSet) -> ColorSet:
    """
    New CTA colour for an existing set.

    Gradient, text colours and their ratios carry over untouched. The
    current CTA is excluded from the candidate pool so the accent always
    changes.
    """
    background = base.background
    current = normalize_hex(base.cta_color)

    pool = [c for c in (*cta_candidates(is_light(background)), *MID_CTA_COLORS)
            if c != current]
    cta_color = _best_candidate(pool, background, settings.CTA_PREFERRED_CONTRAST)
    if cta_color is None:
        cta_color = _best_candidate(pool, background)

    return ColorSet(
        gradient=base.gradient,
        cta_color=cta_color,
        text_color=base.text_color,
        heading_color=base.heading_color,
        contrast_ratios=ContrastRatios(
            text_to_background=base.contrast_ratios.text_to_background,
            heading_to_background=base.contrast_ratios.heading_to_background,
            cta_to_background=contrast_ratio(cta_color, background),
            cta_text_to_cta=optimal_text_color(cta_color),
        ),
    )
