"""
Prompt and table formatter tests
"""
import io
from unittest.mock import patch

import pytest
from rich.console import Console

from docker_ip_retrieval.domain.entities.report import PortRow, StatusRow
from docker_ip_retrieval.interfaces.cli.formatter import ReportFormatter
from docker_ip_retrieval.interfaces.cli.prompt import prompt_container
from docker_ip_retrieval.shared.errors import PromptFailureError

PROMPT_ASK = "docker_ip_retrieval.interfaces.cli.prompt.Prompt.ask"


def _console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


class TestPromptContainer:
    def test_returns_answer(self):
        console = _console()

        with patch(PROMPT_ASK, return_value="web") as ask:
            answer = prompt_container(["All", "web", "db"], console=console, require_tty=False)

        assert answer == "web"
        assert ask.call_args.kwargs["choices"] == ["All", "web", "db"]
        assert ask.call_args.kwargs["default"] == "All"
        listing = console.file.getvalue()
        assert "- web" in listing and "- db" in listing

    def test_non_interactive_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))

        with pytest.raises(PromptFailureError):
            prompt_container(["All", "web"], console=_console())

    @pytest.mark.parametrize("error", [EOFError, KeyboardInterrupt])
    def test_cancelled_input(self, error):
        with patch(PROMPT_ASK, side_effect=error):
            with pytest.raises(PromptFailureError):
                prompt_container(["All", "web"], console=_console(), require_tty=False)


class TestReportFormatter:
    def test_status_table(self):
        console = _console()
        formatter = ReportFormatter(console)

        formatter.show_results([
            StatusRow("web", "203.0.113.7", "US, Ashburn"),
            StatusRow("db", "Container exited", "Unknown"),
        ])

        text = console.file.getvalue()
        for expected in ("Container Name", "Public IP Address", "Location",
                         "web", "203.0.113.7", "US, Ashburn", "Container exited"):
            assert expected in text

    def test_status_table_column_widths(self):
        table = ReportFormatter(_console()).status_table([])

        assert [c.header for c in table.columns] == ["Container Name", "Public IP Address", "Location"]
        assert [c.width for c in table.columns] == [30, 35, 40]

    def test_names_are_not_markup(self):
        console = _console()

        ReportFormatter(console).show_results([StatusRow("[bold]web[/bold]", "Retrieval failed", "Unknown")])

        assert "[bold]web[/bold]" in console.file.getvalue()

    def test_ports_table_multiline_cell(self):
        console = _console()

        ReportFormatter(console).show_ports([
            PortRow("web", "0.0.0.0:8080->80/tcp\n0.0.0.0:8443->443/tcp"),
            PortRow("db", "No ports exposed"),
        ])

        lines = console.file.getvalue().splitlines()
        assert any("0.0.0.0:8080->80/tcp" in line for line in lines)
        assert any("0.0.0.0:8443->443/tcp" in line for line in lines)
        assert any("No ports exposed" in line for line in lines)
