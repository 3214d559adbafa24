#!/usr/bin/env python3
"""
Render a single rounded, padded icon image.

The source is scaled (not cropped) to a square content area, centred on a
transparent canvas, and clipped to a rounded rectangle whose corner radius
is 20% of the content edge.
"""

import logging
import math
from io import BytesIO
from pathlib import Path

import pillow_heif
from PIL import Image, ImageChops, ImageDraw

from icns_constants import CORNER_RADIUS_RATIO, MAX_PADDING_PERCENT, VECTOR_FORMATS
from icns_errors import ConfigurationError, RenderError

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)

# The mask is drawn this many times larger, then box-filtered down
MASK_SUPERSAMPLE = 4

pillow_heif.register_heif_opener()


def round_half_up(value):
    return int(math.floor(value + 0.5))


def padding_pixels(size, padding):
    """Transparent margin in pixels on each side of a size x size canvas."""
    return round_half_up(size * padding / 100)


def corner_radius(content_size):
    return content_size * CORNER_RADIUS_RATIO


def compute_layout(size, padding):
    """
    Return (padding_pixels, content_size) for a canvas.

    Raises ConfigurationError when the padding is outside [0, 50) percent or
    leaves no content area at this size.
    """
    if size <= 0:
        raise ConfigurationError(f"Icon size must be positive: {size}")
    # also rejects NaN
    if not (0 <= padding < MAX_PADDING_PERCENT):
        raise ConfigurationError(
            f"Padding must be at least 0% and below {MAX_PADDING_PERCENT}%: {padding}%"
        )

    pad = padding_pixels(size, padding)
    content_size = size - pad * 2
    if content_size <= 0:
        raise ConfigurationError(
            f"Padding {padding}% leaves no content area at {size}x{size}"
        )
    return pad, content_size


def load_source(source_path, content_size):
    """Load the source image as RGBA, scaled to content_size x content_size."""
    source_path = Path(source_path)

    if source_path.suffix.lower() in VECTOR_FORMATS:
        return _rasterize_svg(source_path, content_size)

    try:
        with Image.open(source_path) as image:
            image = image.convert("RGBA")
            return image.resize((content_size, content_size), Image.Resampling.LANCZOS)
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise RenderError(source_path, exc) from exc


def _rasterize_svg(source_path, content_size):
    # cairosvg needs the native cairo library, so only load it for SVG input
    try:
        import cairosvg
    except (ImportError, OSError) as exc:
        raise RenderError(source_path, f"SVG support is unavailable ({exc})") from exc

    try:
        png_data = cairosvg.svg2png(
            url=str(source_path),
            output_width=content_size,
            output_height=content_size,
        )
        with Image.open(BytesIO(png_data)) as image:
            image = image.convert("RGBA")
            if image.size != (content_size, content_size):
                image = image.resize((content_size, content_size), Image.Resampling.LANCZOS)
            return image
    except (OSError, ValueError, SyntaxError) as exc:
        raise RenderError(source_path, exc) from exc


def rounded_mask(size, pad, content_size):
    """
    Anti-aliased rounded rectangle on a transparent size x size L-mode mask.

    Straight edges stay pixel-aligned, so the margin is fully transparent and
    the content edge fully opaque; only the corners get partial coverage.
    """
    scale = MASK_SUPERSAMPLE
    large = Image.new("L", (size * scale, size * scale), 0)
    draw = ImageDraw.Draw(large)
    first = pad * scale
    last = (pad + content_size) * scale - 1
    draw.rounded_rectangle(
        (first, first, last, last),
        radius=round_half_up(corner_radius(content_size) * scale),
        fill=255,
    )
    # BOX averages coverage; LANCZOS would ring into the transparent margin
    return large.resize((size, size), Image.Resampling.BOX)


def create_rounded_image(source_path, size, padding=0):
    """
    Render source_path as a size x size RGBA icon.

    Args:
        source_path: Path to any supported raster or SVG image
        size: Output edge length in pixels
        padding: Transparent margin per side, as a percentage of size

    Returns:
        A PIL Image in RGBA mode
    """
    pad, content_size = compute_layout(size, padding)

    content = load_source(source_path, content_size)

    canvas = Image.new("RGBA", (size, size), TRANSPARENT)
    canvas.paste(content, (pad, pad))

    # dest-in: keep canvas pixels only where the mask is opaque
    mask = rounded_mask(size, pad, content_size)
    alpha = ImageChops.multiply(canvas.getchannel("A"), mask)
    canvas.putalpha(alpha)
    return canvas


def render_icon(source_path, size, padding, output_path):
    """Render one icon and write it as PNG."""
    image = create_rounded_image(source_path, size, padding)
    output_path = Path(output_path)
    try:
        image.save(output_path, format="PNG")
    except (OSError, ValueError) as exc:
        raise RenderError(source_path, f"cannot write {output_path}: {exc}") from exc
    logger.debug("Rendered %s (%dx%d)", output_path.name, size, size)
    return output_path
