"""
Candidate colours for CTA buttons and text.

CTA candidates are chosen opposite the background: dark, saturated
colours over light backgrounds and bright colours over dark ones. The
mid-tone list is the second pass when neither primary list clears the
preferred contrast.
"""

# Bright colours, used over dark backgrounds
LIGHT_CTA_COLORS = ('#FFD700', '#FFA500', '#FF6B35', '#F7931E')

# Saturated colours, used over light backgrounds
DARK_CTA_COLORS = ('#1E90FF', '#32CD32', '#9370DB', '#00CED1')

MID_CTA_COLORS = ('#FF1493', '#FF4500', '#4169E1', '#228B22')

# Heading and body text candidates (light, dark and gray tones)
TEXT_COLORS = (
    '#FFFFFF',
    '#000000',
    '#1A1A1A',
    '#F5F5F5',
    '#666666',
    '#E5E5E5',
    '#2D2D2D',
)


def cta_candidates(light_background: bool) -> tuple:
    """Primary CTA palette for a background."""
    return DARK_CTA_COLORS if light_background else LIGHT_CTA_COLORS
