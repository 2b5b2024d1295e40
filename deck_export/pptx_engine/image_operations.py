"""Image placement for generated slides."""

import logging
from pathlib import Path

from pptx.util import Inches

logger = logging.getLogger(__name__)


def fit_within(
    image_width: float,
    image_height: float,
    max_width: float,
    max_height: float,
) -> tuple[float, float]:
    """Scale (width, height) to fit a box while keeping the aspect ratio."""
    if image_width <= 0 or image_height <= 0:
        return max_width, max_height
    aspect = image_width / image_height
    if aspect > (max_width / max_height):
        return max_width, max_width / aspect
    return max_height * aspect, max_height


def add_image_fitted(
    slide,
    image_path: str | Path,
    left: float,
    top: float,
    max_width: float,
    max_height: float,
) -> object | None:
    """Add an image scaled to fit a box, centered within it.

    Returns:
        The created picture shape, or None if the image couldn't be added.
    """
    image_path = Path(image_path)
    if not image_path.exists():
        logger.warning(f"Image not found: {image_path}")
        return None

    try:
        from PIL import Image

        with Image.open(image_path) as img:
            orig_w, orig_h = img.size
    except Exception as e:
        logger.warning(f"Could not read image dimensions for {image_path}: {e}")
        orig_w, orig_h = max_width, max_height

    width, height = fit_within(orig_w, orig_h, max_width, max_height)
    x = left + (max_width - width) / 2
    y = top + (max_height - height) / 2

    try:
        return slide.shapes.add_picture(
            str(image_path), Inches(x), Inches(y), Inches(width), Inches(height)
        )
    except Exception as e:
        logger.warning(f"Could not add image {image_path}: {e}")
        return None
