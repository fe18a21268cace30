"""
PDF Module for table output.

Module Structure:
- styles.py: Page geometry, colors, paragraph styles
- surface.py: ReportLab canvas implementing the table drawing surface
- builder.py: Document orchestration (table and storyboard PDFs)

Usage:
    from storyboard.reporting.pdf.builder import build_table_pdf

    pdf_bytes = build_table_pdf(data, header=True)
"""
from .styles import PDFConfig, COLORS, PAGE_SIZE, MARGIN, to_color, create_cell_paragraph_style
from .surface import PDFSurface


__all__ = [
    # Configuration
    "PDFConfig",
    "PDFSurface",
    # Styles (for advanced usage)
    "create_cell_paragraph_style",
    "to_color",
    "COLORS",
    "PAGE_SIZE",
    "MARGIN",
]
