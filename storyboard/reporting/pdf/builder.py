"""
PDF Builder Module.

Orchestrates table drawing into complete PDF documents:

- build_table_pdf: one table, paginated across as many pages as needed
- build_storyboard_pdf: story cards laid out two per row, each card a
  nested table of (summary line, story text, footer boxes)

No layout calculations - only document assembly.
"""
from pathlib import Path
import logging
from typing import Any, Dict, List, Optional, Sequence

from ...config import Config
from ...table import TableOptions, draw_table, make_cell, make_table
from ...table.types import InitCallback
from .styles import PDFConfig, FONT_SIZE_SMALL
from .surface import PDFSurface


# Setup logger
logger = logging.getLogger("Storyboard.PDFBuilder")

STORY_FIELDS = ("project", "type", "story", "estimate")
MISSING = "-"


def map_story(story: Any) -> Dict[str, str]:
    """Map one story record to the fields printed on a card.

    Accepts a dict with project/type/story/estimate keys or a sequence in
    that order. Missing values fall back to '-'.
    """
    if isinstance(story, dict):
        values = [story.get(key) for key in STORY_FIELDS]
    else:
        values = list(story)[:len(STORY_FIELDS)]
        values += [None] * (len(STORY_FIELDS) - len(values))

    mapped = {}
    for key, value in zip(STORY_FIELDS, values):
        if value is None or str(value).strip() == "":
            logger.warning(f"Story mapping: missing field '{key}'")
            mapped[key] = MISSING
        else:
            mapped[key] = str(value).strip()
    return mapped


def _save(pdf_bytes: bytes, output_path: Optional[str]) -> None:
    if output_path:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'wb') as f:
            f.write(pdf_bytes)
        logger.info(f"PDF saved to: {output_path}")


def build_table_pdf(
    data: Sequence[Sequence[Any]],
    options: Optional[TableOptions] = None,
    init: Optional[InitCallback] = None,
    output_path: Optional[str] = None,
    config: Optional[PDFConfig] = None,
    **option_kwargs: Any,
) -> bytes:
    """Build a PDF containing a single (possibly multi-page) table.

    Args:
        data: Rows of cellable values
        options: Table options (or pass them as keyword arguments)
        init: Callback run after cell setup, before layout
        output_path: Optional file path to save PDF
        config: PDF configuration

    Returns:
        PDF bytes
    """
    surface = PDFSurface(config=config)
    table = draw_table(data, surface, options, init, **option_kwargs)
    logger.info(
        f"Table {table.row_length}x{table.column_length} drawn on {surface.page_number} page(s)"
    )

    pdf_bytes = surface.render()
    _save(pdf_bytes, output_path)
    return pdf_bytes


def build_story_card(surface: PDFSurface, story: Dict[str, str], card_width: float) -> List[List[Any]]:
    """Build the nested rows for one story card."""
    border = Config.STORY_BORDER_COLOR

    cell_style = {"font_size": FONT_SIZE_SMALL, "border_color": border}

    # Project name in bold
    summary = make_table(
        [[story["project"], story["type"], story["estimate"]]],
        surface,
        init=lambda t: t.style(t.column(0), {"font_style": "bold"}),
        width=card_width,
        cell_style=cell_style,
    )

    body = make_cell(surface, story["story"], width=card_width, **cell_style)

    footer_boxes = make_table(
        [["Owner", "Started", "Done", "Points"]],
        surface,
        width=card_width,
        cell_style={**cell_style, "text_color": "text_light"},
    )
    footer = make_cell(
        surface,
        footer_boxes,
        height=Config.STORY_FOOTER_HEIGHT,
        border_color=border,
    )

    return [[summary], [body], [footer]]


def build_storyboard_pdf(
    stories: Sequence[Any],
    output_path: Optional[str] = None,
    config: Optional[PDFConfig] = None,
    card_width: Optional[float] = None,
) -> bytes:
    """Build a storyboard PDF with two story cards per row.

    Args:
        stories: Story records (dicts or project/type/story/estimate sequences)
        output_path: Optional file path to save PDF
        config: PDF configuration
        card_width: Width of one card; defaults to Config.STORY_CARD_WIDTH

    Returns:
        PDF bytes
    """
    config = config or PDFConfig(title="Storyboard")
    surface = PDFSurface(config=config)
    card_width = card_width or Config.STORY_CARD_WIDTH or surface.bounds_width / 2

    mapped = [map_story(s) for s in stories]
    rows = []
    for i in range(0, len(mapped), 2):
        rows.append([build_story_card(surface, story, card_width) for story in mapped[i:i + 2]])

    table = draw_table(rows, surface, cell_style={"border_color": Config.STORY_BORDER_COLOR})
    logger.info(
        f"Storyboard with {len(mapped)} stories in {table.row_length} row(s) "
        f"drawn on {surface.page_number} page(s)"
    )

    pdf_bytes = surface.render()
    _save(pdf_bytes, output_path)
    return pdf_bytes
