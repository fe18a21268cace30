"""
Table Errors.

All conditions are raised while a table is built or its widths are resolved.
None of them are recovered internally; the layout is deterministic, so the
caller has to change the constraints before trying again.
"""


class TableError(Exception):
    """Base class for table layout failures."""


class EmptyTableError(TableError, ValueError):
    """Table data was None or empty."""


class InvalidTableDataError(TableError, TypeError):
    """A row of table data is not itself a sequence of cellable values."""


class CannotFitError(TableError):
    """Target table width is below the sum of column minimum widths."""


class ColumnWidthsError(TableError, TypeError):
    """Column width override has an unsupported shape."""
