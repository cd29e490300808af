"""Renders extracted records as a table, CSV, JSON or HTML report."""
from __future__ import annotations

import csv
import html
from enum import Enum
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text
from verboselogs import VerboseLogger

from vault_parser.config import Settings
from vault_parser.exceptions import UnsupportedFormatError
from vault_parser.helpers import dump_to_file
from vault_parser.models import ALL_COLUMNS, DEFAULT_COLUMNS, FieldEncoding, Record

Row = dict[str, str | FieldEncoding]


class ReportFormat(str, Enum):
    TABLE = "table"
    CSV = "csv"
    JSON = "json"
    HTML = "html"


def resolve_format(output: str | Path | None) -> ReportFormat:
    """Pick the report format from the output file extension.

    Parameters
    ----------
    output : str or pathlib.Path, optional
        The report file. No file means a table printed to stdout.

    Returns
    -------
    ReportFormat

    Raises
    ------
    vault_parser.exceptions.UnsupportedFormatError
        If the extension is not one of csv, json or html.

    """
    if output is None:
        return ReportFormat.TABLE

    extension = Path(output).suffix.lower().lstrip(".")

    match extension:
        case "csv":
            return ReportFormat.CSV
        case "json":
            return ReportFormat.JSON
        case "html":
            return ReportFormat.HTML
        case _:
            raise UnsupportedFormatError(
                f"Invalid output extension '{extension}' (handled: csv, json, html)."
            )


def select_rows(
    records: Sequence[Record], extract_all: bool, sort_column: str = "URL"
) -> tuple[list[str], list[Row]]:
    """Return the report columns and one row per record.

    The default report keeps a subset of columns sorted by `sort_column`;
    the full report keeps every column in extraction order.
    """
    rows = [record.as_row() for record in records]

    if extract_all:
        return list(ALL_COLUMNS), rows

    rows.sort(key=lambda row: str(row[sort_column]))
    return list(DEFAULT_COLUMNS), [
        {column: row[column] for column in DEFAULT_COLUMNS} for row in rows
    ]


def render_html(columns: Sequence[str], rows: Sequence[Row], title: str) -> str:
    """Build a standalone HTML document holding one table."""
    header = "".join(f"<th>{html.escape(column)}</th>" for column in columns)
    body = "\n".join(
        "<tr>"
        + "".join(f"<td>{html.escape(str(row[column]))}</td>" for column in columns)
        + "</tr>"
        for row in rows
    )
    escaped_title = html.escape(title)

    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escaped_title}</title>\n"
        "</head>\n<body>\n"
        f"<h1>{escaped_title}</h1>\n"
        "<table>\n"
        f"<thead><tr>{header}</tr></thead>\n"
        f"<tbody>\n{body}\n</tbody>\n"
        "</table>\n</body>\n</html>\n"
    )


class ReportRenderer:
    """Writes records in the format matching the requested output."""

    def __init__(
        self,
        logger: VerboseLogger,
        settings: Settings | None = None,
        console: Console | None = None,
    ):
        self.logger = logger
        self.settings = settings or Settings()
        self.console = console or Console()

    def render(
        self,
        records: Sequence[Record],
        output: str | Path | None = None,
        extract_all: bool = False,
    ) -> ReportFormat:
        """Render the records.

        Parameters
        ----------
        records : list of vault_parser.models.Record
            The extracted records.
        output : str or pathlib.Path, optional
            The report file. Its extension selects the format.
        extract_all : bool, optional
            Report every column.

        Returns
        -------
        ReportFormat
            The format that was written.

        Raises
        ------
        vault_parser.exceptions.UnsupportedFormatError
            If the output extension is not handled.
        OSError
            If the report file can't be written.

        """
        report_format = resolve_format(output)
        columns, rows = select_rows(
            records, extract_all, sort_column=self.settings.sort_column
        )
        self.logger.debug(
            f"Rendering {len(rows)} rows as {report_format.value} ({len(columns)} columns)."
        )

        match report_format:
            case ReportFormat.TABLE:
                self._print_table(columns, rows)
            case ReportFormat.CSV:
                self._write_csv(Path(output), columns, rows)
            case ReportFormat.JSON:
                dump_to_file(self.logger, output, rows)
            case ReportFormat.HTML:
                dump_to_file(
                    self.logger,
                    output,
                    render_html(columns, rows, self.settings.html_title),
                )

        return report_format

    def _print_table(self, columns: Sequence[str], rows: Sequence[Row]) -> None:
        table = Table(show_lines=False)

        for column in columns:
            table.add_column(column, overflow="fold")
        for row in rows:
            # Text cells are not parsed as console markup.
            table.add_row(*(Text(str(row[column])) for column in columns))

        self.console.print(table)

    def _write_csv(
        self, filepath: Path, columns: Sequence[str], rows: Sequence[Row]
    ) -> None:
        if not filepath.parent.exists():
            filepath.parent.mkdir(parents=True)

        with open(filepath, "w", newline="", encoding="utf-8") as file_handle:
            writer = csv.DictWriter(file_handle, fieldnames=list(columns))
            writer.writeheader()
            writer.writerows(
                {column: str(value) for column, value in row.items()} for row in rows
            )

        self.logger.info(f"Successfully wrote '{str(filepath)}'.")
