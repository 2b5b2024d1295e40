"""Text primitives for generated slides.

Provides text boxes, multi-paragraph text blocks, bullet lists with an
explicit bullet character, and small labels.
"""

import logging

from lxml import etree
from pptx.enum.text import MSO_ANCHOR, MSO_AUTO_SIZE, PP_ALIGN
from pptx.util import Inches, Pt

from deck_export.pptx_engine.shape_operations import hex_to_rgb

logger = logging.getLogger(__name__)

# Namespace for DrawingML elements
_NS_A = "http://schemas.openxmlformats.org/drawingml/2006/main"

_ANCHORS = {
    "top": MSO_ANCHOR.TOP,
    "middle": MSO_ANCHOR.MIDDLE,
    "bottom": MSO_ANCHOR.BOTTOM,
}


# ---------------------------------------------------------------------------
# Core text box helpers
# ---------------------------------------------------------------------------


def add_textbox(
    slide,
    text: str,
    left: float,
    top: float,
    width: float,
    height: float,
    font_name: str = "Arial",
    font_size: int = 12,
    font_color: str = "#1A1A1A",
    bold: bool = False,
    italic: bool = False,
    alignment: str = "left",
    vertical_anchor: str = "top",
    fill_color: str | None = None,
    paragraph_gap: float = 0.0,
) -> object:
    """Add a text box to a slide.

    Newlines in text start new paragraphs; every paragraph gets the same
    formatting.

    Args:
        slide: The slide to add the text box to.
        text: The text content.
        left, top, width, height: Position and size in inches.
        font_name: Font family name.
        font_size: Font size in points.
        font_color: Hex color string (e.g., "#1A1A1A").
        bold: Whether text should be bold.
        italic: Whether text should be italic.
        alignment: Text alignment ("left", "center", "right").
        vertical_anchor: Vertical text position ("top", "middle", "bottom").
        fill_color: Optional hex background fill for the box.
        paragraph_gap: Space after each paragraph, in points.

    Returns:
        The created text box shape.
    """
    txBox = slide.shapes.add_textbox(
        Inches(left), Inches(top), Inches(width), Inches(height)
    )
    tf = txBox.text_frame
    tf.word_wrap = True
    tf.vertical_anchor = _ANCHORS.get(vertical_anchor, MSO_ANCHOR.TOP)

    try:
        tf.auto_size = MSO_AUTO_SIZE.TEXT_TO_FIT_SHAPE
    except Exception:
        pass

    if fill_color:
        txBox.fill.solid()
        txBox.fill.fore_color.rgb = hex_to_rgb(fill_color)

    for i, line in enumerate(text.split("\n")):
        p = tf.paragraphs[0] if i == 0 else tf.add_paragraph()
        p.text = line
        _apply_run_format(p, font_name, font_size, font_color, bold, italic)
        p.alignment = _get_alignment(alignment)
        if paragraph_gap:
            p.space_after = Pt(paragraph_gap)

    return txBox


def add_bullet_list(
    slide,
    items: list[str],
    left: float,
    top: float,
    width: float,
    height: float,
    font_name: str = "Arial",
    font_size: int = 12,
    font_color: str = "#1A1A1A",
    bullet_color: str | None = None,
    line_spacing: float = 1.1,
) -> object:
    """Add a bullet list to a slide.

    Bullets are set on each paragraph in XML, so they show regardless of
    what the slide layout defines.

    Returns:
        The created text box shape.
    """
    txBox = slide.shapes.add_textbox(
        Inches(left), Inches(top), Inches(width), Inches(height)
    )
    tf = txBox.text_frame
    tf.word_wrap = True
    tf.vertical_anchor = MSO_ANCHOR.TOP

    try:
        tf.auto_size = MSO_AUTO_SIZE.TEXT_TO_FIT_SHAPE
    except Exception:
        pass

    for i, item in enumerate(items):
        p = tf.paragraphs[0] if i == 0 else tf.add_paragraph()
        p.text = item
        p.level = 0
        _apply_run_format(p, font_name, font_size, font_color, bold=False, italic=False)
        p.alignment = PP_ALIGN.LEFT
        _set_bullet_char(p, "•", bullet_color or font_color)
        p.space_after = Pt(font_size * 0.4)
        p.line_spacing = line_spacing

    return txBox


def add_label(
    slide,
    text: str,
    left: float,
    top: float,
    width: float,
    height: float = 0.3,
    font_name: str = "Arial",
    font_size: int = 10,
    font_color: str = "#505050",
    alignment: str = "left",
) -> object:
    """Add a small label (slide numbers, captions)."""
    return add_textbox(
        slide,
        text,
        left=left,
        top=top,
        width=width,
        height=height,
        font_name=font_name,
        font_size=font_size,
        font_color=font_color,
        alignment=alignment,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _set_bullet_char(paragraph, char: str = "•", color_hex: str | None = None) -> None:
    """Explicitly set a bullet character on a paragraph using XML."""
    pPr = paragraph._p.get_or_add_pPr()

    # Indent so wrapped lines align with the text, not the bullet
    pPr.set("marL", "228600")
    pPr.set("indent", "-228600")

    for tag in ("buNone", "buChar", "buAutoNum", "buClr", "buSzPct"):
        for existing in pPr.findall(f"{{{_NS_A}}}{tag}"):
            pPr.remove(existing)

    if color_hex:
        buClr = etree.SubElement(pPr, f"{{{_NS_A}}}buClr")
        srgbClr = etree.SubElement(buClr, f"{{{_NS_A}}}srgbClr")
        srgbClr.set("val", color_hex.lstrip("#")[:6].upper())

    buSzPct = etree.SubElement(pPr, f"{{{_NS_A}}}buSzPct")
    buSzPct.set("val", "100000")  # 100% of text size

    buChar = etree.SubElement(pPr, f"{{{_NS_A}}}buChar")
    buChar.set("char", char)


def _apply_run_format(
    paragraph,
    font_name: str,
    font_size: int,
    font_color: str,
    bold: bool,
    italic: bool,
) -> None:
    """Apply font formatting to all runs in a paragraph."""
    color_rgb = hex_to_rgb(font_color)
    for run in paragraph.runs:
        run.font.name = font_name
        run.font.size = Pt(font_size)
        run.font.bold = bold
        run.font.italic = italic
        run.font.color.rgb = color_rgb


def _get_alignment(alignment: str) -> int:
    """Convert alignment string to PP_ALIGN constant."""
    align_map = {
        "left": PP_ALIGN.LEFT,
        "center": PP_ALIGN.CENTER,
        "right": PP_ALIGN.RIGHT,
        "justify": PP_ALIGN.JUSTIFY,
    }
    return align_map.get(alignment.lower(), PP_ALIGN.LEFT)
