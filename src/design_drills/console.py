"""Console output helpers built on rich."""

from collections.abc import Iterable, Mapping
from typing import Any

import structlog
from rich.console import Console
from rich.table import Table
from rich.text import Text

logger = structlog.get_logger()

PLACEHOLDER = "-"
EMPTY_TABLE = "(no rows)"


class ConsolePrinter:
    """Writes lines and tables of records to a rich console."""

    def __init__(self, console: Console | None = None, show_lines: bool = False) -> None:
        """Initialize the printer.

        Args:
            console: Console to write to (defaults to stdout)
            show_lines: If True, draw separators between table rows
        """
        self.console = console or Console()
        self.show_lines = show_lines

    def line(self, text: str) -> None:
        """Print a single line of plain text."""
        # markup off: user input may contain square brackets
        self.console.print(text, markup=False, highlight=False)

    def table(self, records: Iterable[Mapping[str, Any]] | None) -> None:
        """Print records as a table, one row per record.

        Columns are the union of the record keys, in first-seen order.
        Missing or None values render as the placeholder.
        """
        rows = list(records or [])
        if not rows:
            self.line(EMPTY_TABLE)
            return

        columns: list[str] = []
        for row in rows:
            for key in row:
                if key not in columns:
                    columns.append(key)

        table = Table(show_lines=self.show_lines)
        table.add_column("#", justify="right")
        for column in columns:
            table.add_column(column)
        for index, row in enumerate(rows):
            table.add_row(str(index), *(Text(format_value(row.get(column))) for column in columns))

        logger.debug("Rendering table", rows=len(rows), columns=columns)
        self.console.print(table)


def format_value(value: Any) -> str:
    """Format a value for display, using the placeholder for absent values."""
    if value is None:
        return PLACEHOLDER
    return str(value)
