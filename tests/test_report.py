"""Report formatting and clipboard export tests."""

from __future__ import annotations

import logging

from roundrobin.export.report import ClipboardExporter, format_report
from roundrobin.wagers.engine import calculate_round_robin
from roundrobin.wagers.types import TeamEntry, TeamStatus


def _result(risk: str = "30"):
    teams = [
        TeamEntry(id=1, name="A", odds="2", status=TeamStatus.WIN),
        TeamEntry(id=2, name="B", odds="3", status=TeamStatus.WIN),
        TeamEntry(id=3, name="C", odds="1.5", status=TeamStatus.LOSE),
    ]
    return calculate_round_robin(teams, 2, risk)


def test_format_report_lines() -> None:
    text = format_report(_result())
    lines = text.splitlines()
    assert lines[0] == "Combination 1: A, B - profit of $50.00"
    assert lines[1] == "Combination 2: A, C - loss of $10.00"
    assert lines[2] == "Combination 3: B, C - loss of $10.00"
    assert lines[-1] == "Your round robin nets a profit of $30.00."


def test_format_report_without_stake() -> None:
    text = format_report(_result(risk=""))
    assert "no profit or loss" in text
    assert text.endswith("Your round robin shows no profit or loss.")


class DummyClipboard:
    def __init__(self) -> None:
        self.copied: list[str] = []

    def __call__(self, text: str) -> None:
        self.copied.append(text)


def test_exporter_writes_report() -> None:
    clipboard = DummyClipboard()
    assert ClipboardExporter(writer=clipboard).copy(_result()) is True
    assert clipboard.copied == [format_report(_result())]


def test_exporter_logs_writer_failure(caplog) -> None:
    def broken(_: str) -> None:
        raise OSError("no display")

    with caplog.at_level(logging.ERROR):
        assert ClipboardExporter(writer=broken).copy(_result()) is False
    assert "no display" in caplog.text


def test_exporter_without_writer_logs_text(caplog) -> None:
    with caplog.at_level(logging.INFO):
        assert ClipboardExporter().copy(_result()) is False
    assert "Clipboard disabled" in caplog.text
