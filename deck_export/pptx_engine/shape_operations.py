"""Shape primitives for generated slides: section panels, header rules, colors."""

from pptx.dml.color import RGBColor
from pptx.enum.shapes import MSO_CONNECTOR, MSO_SHAPE
from pptx.util import Inches, Pt


def add_rectangle(
    slide,
    left: float,
    top: float,
    width: float,
    height: float,
    fill_color: str | None = None,
    border_color: str | None = None,
    border_width: float = 1.0,
    corner_radius: float | None = None,
) -> object:
    """Add a rectangle shape to a slide.

    Args:
        slide: The slide to add the shape to.
        left, top, width, height: Position and size in inches.
        fill_color: Fill color as hex string (e.g., "#F8F9FA"). None for no fill.
        border_color: Border color as hex string. None for no border.
        border_width: Border width in points.
        corner_radius: Any truthy value gives a rounded rectangle.

    Returns:
        The created shape.
    """
    shape_type = MSO_SHAPE.ROUNDED_RECTANGLE if corner_radius else MSO_SHAPE.RECTANGLE

    shape = slide.shapes.add_shape(
        shape_type,
        Inches(left),
        Inches(top),
        Inches(width),
        Inches(height),
    )

    if fill_color:
        shape.fill.solid()
        shape.fill.fore_color.rgb = hex_to_rgb(fill_color)
    else:
        shape.fill.background()

    if border_color:
        shape.line.color.rgb = hex_to_rgb(border_color)
        shape.line.width = Pt(border_width)
    else:
        shape.line.fill.background()

    return shape


def add_divider(
    slide,
    left: float,
    top: float,
    width: float,
    color: str = "#E1E5E9",
    weight: float = 1.0,
) -> object:
    """Add a horizontal divider line starting at (left, top)."""
    line = slide.shapes.add_connector(
        MSO_CONNECTOR.STRAIGHT,
        Inches(left),
        Inches(top),
        Inches(left + width),
        Inches(top),
    )
    line.line.color.rgb = hex_to_rgb(color)
    line.line.width = Pt(weight)
    return line


def hex_to_rgb(hex_color: str) -> RGBColor:
    """Convert hex color string ("#1A1A1A" or shorthand "#FFF") to RGBColor."""
    hex_color = hex_color.strip().lstrip("#")
    if len(hex_color) == 3:
        hex_color = "".join(c * 2 for c in hex_color)
    return RGBColor.from_string(hex_color[:6].upper())
