"""
Cell Factory.

Normalizes every "cellable" value into a Cell:

- text (str and plain numbers)  -> TextCell
- an existing Cell              -> passed through, options applied as style
- a Table                       -> SubtableCell
- a nested list / tuple         -> Table built with make_table, then SubtableCell
"""

import logging
from enum import Enum
from numbers import Number
from typing import Any

from .cell import Cell
from .errors import InvalidTableDataError
from .subtable import SubtableCell
from .text import TextCell
from .types import Surface


logger = logging.getLogger("Storyboard.CellFactory")


class CellKind(str, Enum):
    """Variants of cellable input."""
    TEXT = "text"
    PREBUILT = "prebuilt"
    SUBTABLE = "subtable"
    NESTED_ARRAY = "nested_array"


def classify(content: Any) -> CellKind:
    """Tag a cellable value with its variant."""
    from .table import Table

    if isinstance(content, Cell):
        return CellKind.PREBUILT
    if isinstance(content, Table):
        return CellKind.SUBTABLE
    if isinstance(content, (list, tuple)):
        return CellKind.NESTED_ARRAY
    if content is None or isinstance(content, (str, Number)):
        return CellKind.TEXT
    if hasattr(content, "draw") and hasattr(content, "natural_width"):
        # Duck-typed cells from outside this package
        return CellKind.PREBUILT
    raise InvalidTableDataError(
        f"Cannot convert {type(content).__name__} into a table cell"
    )


def make_cell(surface: Surface, content: Any, **options: Any) -> Cell:
    """Build a uniform cell handle from any cellable value."""
    from .table import make_table

    kind = classify(content)

    if kind is CellKind.PREBUILT:
        if options:
            content.style(**options)
        return content
    if kind is CellKind.SUBTABLE:
        return SubtableCell(surface, content, **options)
    if kind is CellKind.NESTED_ARRAY:
        logger.debug(f"Building nested table from {len(content)} row(s)")
        return SubtableCell(surface, make_table(content, surface), **options)
    return TextCell(surface, content, **options)
