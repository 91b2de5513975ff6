"""
Reporters

Render an AssessmentResult to the terminal, a JSON document or an HTML page.
"""

from pathlib import Path
from typing import Optional

from assessor.i18n import Messages
from assessor.models import AssessmentResult
from assessor.reporters.console import ConsoleReporter
from assessor.reporters.html import DEFAULT_HTML_PATH, HtmlReporter
from assessor.reporters.json_report import DEFAULT_JSON_PATH, JsonReporter


def report_path(output_path: Optional[str], suffix: str, default: str) -> Path:
    """Output file for one format: the given path with its suffix, or the default name."""
    if not output_path:
        return Path(default)
    return Path(output_path).with_suffix(suffix)


def write_reports(
    result: AssessmentResult,
    fmt: str,
    output_path: Optional[str],
    messages: Messages,
) -> list[Path]:
    """
    Render the result in the requested format.

    Args:
        result: Completed assessment
        fmt: console, json, html or all
        output_path: Base path for file reports (None for the default names)
        messages: Catalog for display strings

    Returns:
        Paths of the files written (empty for console output)
    """
    if fmt not in ("console", "json", "html", "all"):
        raise ValueError(f"Unknown output format: {fmt}")

    written = []
    if fmt in ("console", "all"):
        ConsoleReporter(messages).report(result)
    if fmt in ("json", "all"):
        written.append(JsonReporter().generate_report(
            result, report_path(output_path, ".json", DEFAULT_JSON_PATH)))
    if fmt in ("html", "all"):
        written.append(HtmlReporter(messages).generate_report(
            result, report_path(output_path, ".html", DEFAULT_HTML_PATH)))
    return written


__all__ = [
    "ConsoleReporter",
    "HtmlReporter",
    "JsonReporter",
    "report_path",
    "write_reports",
]
