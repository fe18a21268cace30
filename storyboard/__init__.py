"""
Storyboard table layout.

Usage:
    from storyboard import make_table, build_table_pdf

    pdf_bytes = build_table_pdf([["Project", "Story"], ["Web", "Login page"]], header=True)
"""
from .config import Config, configure_logging
from .table import (
    Table,
    TableOptions,
    DrawCall,
    make_table,
    draw_table,
    TableError,
    EmptyTableError,
    InvalidTableDataError,
    CannotFitError,
    ColumnWidthsError,
)
from .reporting.pdf import PDFConfig, PDFSurface
from .reporting.pdf.builder import build_table_pdf, build_storyboard_pdf

__version__ = "0.1.0"

__all__ = [
    "Config",
    "configure_logging",
    "Table",
    "TableOptions",
    "DrawCall",
    "make_table",
    "draw_table",
    "PDFConfig",
    "PDFSurface",
    "build_table_pdf",
    "build_storyboard_pdf",
    "TableError",
    "EmptyTableError",
    "InvalidTableDataError",
    "CannotFitError",
    "ColumnWidthsError",
]
