"""
ColorSet: a gradient background plus the CTA, body and heading colours
derived for it.
"""

from dataclasses import dataclass, replace

import settings
from contrast import contrast_ratio, optimal_text_color
from gradients import Gradient


@dataclass
class ContrastRatios:
    text_to_background: float
    heading_to_background: float
    cta_to_background: float
    cta_text_to_cta: str  # Text colour that sits on the CTA button


@dataclass
class ColorSet:
    """Complete styling for one banner instance."""
    gradient: Gradient
    cta_color: str
    text_color: str
    heading_color: str
    contrast_ratios: ContrastRatios

    @property
    def background(self) -> str:
        return self.gradient.dominant_color

    @property
    def cta_text_color(self) -> str:
        return self.contrast_ratios.cta_text_to_cta

    def copy(self) -> 'ColorSet':
        return replace(self, contrast_ratios=replace(self.contrast_ratios))

    def to_dict(self) -> dict:
        """Renderer-facing mapping."""
        ratios = self.contrast_ratios
        return {
            'gradient': self.gradient.css,
            'ctaColor': self.cta_color,
            'textColor': self.text_color,
            'headingColor': self.heading_color,
            'contrastRatios': {
                'textToBackground': round(ratios.text_to_background, 2),
                'headingToBackground': round(ratios.heading_to_background, 2),
                'ctaToBackground': round(ratios.cta_to_background, 2),
                'ctaTextToCta': ratios.cta_text_to_cta,
            },
        }


def build_color_set(gradient: Gradient, cta_color: str, text_color: str,
                    heading_color: str) -> ColorSet:
    """Assemble a ColorSet, computing every ratio against the dominant colour."""
    background = gradient.dominant_color
    return ColorSet(
        gradient=gradient,
        cta_color=cta_color,
        text_color=text_color,
        heading_color=heading_color,
        contrast_ratios=ContrastRatios(
            text_to_background=contrast_ratio(text_color, background),
            heading_to_background=contrast_ratio(heading_color, background),
            cta_to_background=contrast_ratio(cta_color, background),
            cta_text_to_cta=optimal_text_color(cta_color),
        ),
    )


def quality_score(color_set: ColorSet) -> float:
    """Sum of the three background contrast ratios. Unweighted, uncapped."""
    ratios = color_set.contrast_ratios
    return ratios.text_to_background + ratios.heading_to_background + ratios.cta_to_background


def validation_failures(color_set: ColorSet) -> list[str]:
    """Describe each validator threshold the set misses. Empty when valid."""
    background = color_set.background
    checks = [
        ('text', color_set.text_color, background, settings.MIN_TEXT_CONTRAST),
        ('heading', color_set.heading_color, background, settings.MIN_HEADING_CONTRAST),
        ('cta', color_set.cta_color, background, settings.MIN_CTA_CONTRAST),
        ('cta text', color_set.cta_text_color, color_set.cta_color, settings.MIN_CTA_TEXT_CONTRAST),
    ]

    failures = []
    for label, foreground, against, minimum in checks:
        ratio = contrast_ratio(foreground, against)
        if ratio < minimum:
            failures.append(f"{label} {foreground} on {against}: {ratio:.2f} < {minimum}")
    return failures


def validate_color_set(color_set: ColorSet) -> bool:
    return not validation_failures(color_set)
