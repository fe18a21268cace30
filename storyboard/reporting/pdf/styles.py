"""
PDF Styles Module.

Defines page geometry, colors, and paragraph styles for table PDFs.
Uses ReportLab library. No layout logic.
"""
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.colors import Color, HexColor, black, white, toColor
from reportlab.lib.enums import TA_LEFT, TA_CENTER, TA_RIGHT
import re
from dataclasses import dataclass
from typing import Any, Optional

from ...config import Config


# ============================================================================
# PAGE CONFIGURATION
# ============================================================================

PAGE_SIZE = A4
MARGIN = Config.PAGE_MARGIN_MM * mm


# ============================================================================
# COLOR PALETTE
# ============================================================================

COLORS = {
    "primary": HexColor("#1F77B4"),
    "text": HexColor("#2C3E50"),
    "text_light": HexColor("#7F8C8D"),
    "background": HexColor("#F8F9FA"),
    "border": HexColor("#CCCCCC"),
    "light_grey": HexColor("#ECF0F1"),
    "white": white,
    "black": black,
}

ALIGNMENTS = {
    "left": TA_LEFT,
    "center": TA_CENTER,
    "right": TA_RIGHT,
}

_HEX_RE = re.compile(r"^#?[0-9a-fA-F]{6}$")
_BASE_STYLES = getSampleStyleSheet()


# ============================================================================
# TYPOGRAPHY
# ============================================================================

FONT_FAMILY = Config.FONT_NAME
FONT_SIZE_BODY = Config.FONT_SIZE
FONT_SIZE_SMALL = 9


@dataclass
class PDFConfig:
    """Configuration for PDF generation."""
    page_size: tuple = PAGE_SIZE
    margin: float = MARGIN
    title: str = "Storyboard"
    author: str = "Storyboard"
    columns: int = 1          # text columns per page
    column_gutter: float = 5 * mm


def to_color(value: Any) -> Optional[Color]:
    """Convert a color value into a ReportLab color.

    Accepts ReportLab colors, hex strings with or without a leading '#'
    ('cccccc', '#cccccc') and named colors ('white', 'gray').
    None stays None (no fill / no stroke).
    """
    if value is None or isinstance(value, Color):
        return value
    if isinstance(value, str) and _HEX_RE.match(value):
        return HexColor("#" + value.lstrip("#"))
    if isinstance(value, str) and value in COLORS:
        return COLORS[value]
    return toColor(value)


def create_cell_paragraph_style(
    font_name: str = FONT_FAMILY,
    font_size: float = FONT_SIZE_BODY,
    text_color: Any = None,
    align: str = "left",
) -> ParagraphStyle:
    """Create the paragraph style used to measure and ink a text cell.

    Returns:
        ParagraphStyle with leading derived from the font size.
    """
    return ParagraphStyle(
        "Cell",
        parent=_BASE_STYLES["Normal"],
        fontName=font_name,
        fontSize=font_size,
        leading=font_size * Config.LEADING_RATIO,
        textColor=to_color(text_color) or black,
        alignment=ALIGNMENTS.get(align, TA_LEFT),
        spaceBefore=0,
        spaceAfter=0,
    )
