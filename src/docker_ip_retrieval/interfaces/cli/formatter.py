"""
Table rendering for CLI output
"""
from typing import Iterable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from docker_ip_retrieval.domain.entities.report import PortRow, StatusRow

STATUS_HEADERS = ("Container Name", "Public IP Address", "Location")
STATUS_COL_WIDTHS = (30, 35, 40)
PORT_HEADERS = ("Container Name", "Ports")
PORT_COL_WIDTHS = (30, 60)


class ReportFormatter:
    """
    Render status and port rows as rich tables

    Rows are separated by nothing but line breaks; cell text is never parsed
    as rich markup, so names such as "[web]" print verbatim.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _build_table(
        self,
        headers: Sequence[str],
        widths: Sequence[int],
        rows: Iterable[Iterable[str]],
    ) -> Table:
        table = Table(box=box.SQUARE, header_style="bold green", show_lines=False)
        for header, width in zip(headers, widths):
            table.add_column(header, width=width, overflow="fold")
        for row in rows:
            table.add_row(*(Text(str(cell)) for cell in row))
        return table

    def status_table(self, rows: Sequence[StatusRow]) -> Table:
        return self._build_table(STATUS_HEADERS, STATUS_COL_WIDTHS, rows)

    def ports_table(self, rows: Sequence[PortRow]) -> Table:
        return self._build_table(PORT_HEADERS, PORT_COL_WIDTHS, rows)

    def show_results(self, rows: Sequence[StatusRow]) -> None:
        self.console.print(self.status_table(rows))

    def show_ports(self, rows: Sequence[PortRow]) -> None:
        self.console.print()
        self.console.print(self.ports_table(rows))
