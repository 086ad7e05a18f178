"""Tests for Rich output helpers in ``extcheck.cli.output``."""

from __future__ import annotations

from pathlib import Path

from extcheck.cli import output
from extcheck.core.usage import AnalysisResult, CapabilityUsageRecord
from extcheck.core.validator import Finding, Severity, ValidationReport


def _render(func, *args) -> str:
    with output.console.capture() as capture:
        func(*args)
    return capture.get()


class TestSeverityStyle:

    def test_known_styles(self) -> None:
        assert output.severity_style(Severity.ERROR) == "bold red"
        assert output.severity_style(Severity.WARNING) == "yellow"
        assert output.severity_style(Severity.INFO) == "cyan"


class TestPrintValidationReport:

    def test_brackets_are_printed_literally(self) -> None:
        report = ValidationReport((
            Finding(Severity.ERROR, "Content script file not found: a.js",
                    "content_scripts[0].js"),
        ))
        text = _render(output.print_validation_report, report, Path("manifest.json"))
        assert "[content_scripts[0].js]" in text
        assert "ERRORS (1):" in text

    def test_empty_groups_are_omitted(self) -> None:
        report = ValidationReport((Finding(Severity.INFO, "No background", "background"),))
        text = _render(output.print_validation_report, report, Path("manifest.json"))
        assert "INFOS (1):" in text
        assert "ERRORS" not in text
        assert "WARNINGS" not in text


class TestPrintUsageReport:

    def test_file_list_is_truncated(self) -> None:
        record = CapabilityUsageRecord(
            "chrome.tabs", "tabs", frozenset({"a.js", "b.js", "c.js", "d.js"}),
        )
        result = AnalysisResult(("tabs",), (), (record,), (), (), ())
        text = _render(output.print_usage_report, result, Path("proj"))
        assert "..." in text
        assert "d.js" not in text
