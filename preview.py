"""
PNG previews of colour sets.

Not a banner template renderer: a quick look at how the gradient, heading,
body text and CTA button sit together.
"""

import logging
import math
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from color_set import ColorSet
from contrast import to_rgb
from gradients import Gradient

logger = logging.getLogger(__name__)

DEFAULT_SIZE = (600, 300)


def gradient_image(gradient: Gradient, size: tuple = DEFAULT_SIZE) -> Image.Image:
    """Render a two-stop linear gradient following the CSS angle convention."""
    width, height = size
    start = np.array(to_rgb(gradient.stops[0]), dtype=np.float64)
    end = np.array(to_rgb(gradient.stops[1]), dtype=np.float64)

    # CSS angles: 0deg points up, 90deg points right
    theta = math.radians(gradient.angle)
    dx, dy = math.sin(theta), -math.cos(theta)
    half_length = (abs(width * dx) + abs(height * dy)) / 2 or 1.0

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    projection = (xs + 0.5 - width / 2) * dx + (ys + 0.5 - height / 2) * dy
    t = np.clip(0.5 + projection / (2 * half_length), 0.0, 1.0)

    pixels = start + (end - start) * t[..., None]
    return Image.fromarray(np.round(pixels).astype(np.uint8), 'RGB')


def render_preview(color_set: ColorSet, output_path: Union[str, Path],
                   size: tuple = DEFAULT_SIZE,
                   headline: str = 'Protect what matters',
                   body: str = 'Coverage that fits your life and budget.',
                   cta_text: str = 'Get a quote') -> Path:
    """
    Draw a colour set onto its gradient and save it as PNG.

    Args:
        color_set: Colours to preview
        output_path: Where to write the PNG
        size: (width, height) in pixels

    Returns:
        Path of the written file
    """
    width, height = size
    img = gradient_image(color_set.gradient, size)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    padding = max(8, width // 30)

    # Heading, then body text beneath it
    draw.text((padding, padding), headline, fill=color_set.heading_color, font=font)
    heading_box = draw.textbbox((padding, padding), headline, font=font)
    body_y = heading_box[3] + padding // 2
    draw.text((padding, body_y), body, fill=color_set.text_color, font=font)

    # CTA button anchored bottom-left
    text_box = draw.textbbox((0, 0), cta_text, font=font)
    text_width = text_box[2] - text_box[0]
    text_height = text_box[3] - text_box[1]
    button = [
        padding,
        height - 2 * padding - text_height,
        padding + text_width + 2 * padding,
        height - padding,
    ]
    draw.rectangle(button, fill=color_set.cta_color)
    draw.text(
        (button[0] + padding, button[1] + (button[3] - button[1] - text_height) // 2 - text_box[1]),
        cta_text,
        fill=color_set.cta_text_color,
        font=font,
    )

    output_path = Path(output_path)
    img.save(output_path, format='PNG')
    logger.info(f"Saved preview to {output_path}")
    return output_path
