# src/pyright_review/review/render.py
from collections.abc import Sequence
from pyright_review.helpers import pluralize
from pyright_review.models.report import Diagnostic, Report, Severity
from .aggregate import diff_reports


SEVERITY_LABELS = {
    Severity.ERROR: "❌ **Error**:",
    Severity.WARNING: "⚠️ **Warning**:",
    Severity.INFORMATION: "",
}

INCREASE = "⬆️"
DECREASE = "⬇️"
NEUTRAL = "➖"


def format_message(message: str) -> str:
    """Single-line message with double quotes turned into code spans."""
    lines = (line.strip() for line in message.splitlines())
    return " ".join(line for line in lines if line).replace('"', "`")


def render_diagnostic(diagnostic: Diagnostic) -> str:
    parts = []
    location = diagnostic.location
    if location is not None:
        parts.append(f"`{location.line + 1}:{location.character + 1}`")
    label = SEVERITY_LABELS[diagnostic.severity]
    if label:
        parts.append(label)
    parts.append(format_message(diagnostic.message))
    if diagnostic.rule:
        parts.append(f"({diagnostic.rule})")
    return "- " + " ".join(parts)


def render_file_group(path: str, diagnostics: Sequence[Diagnostic]) -> str:
    if not diagnostics:
        raise ValueError(f"No diagnostics to render for {path}")
    lines = [
        f"### Pyright: `{path}`",
        "",
        *(render_diagnostic(d) for d in diagnostics),
    ]
    return "\n".join(lines)


def render_summary(report: Report) -> str:
    summary = report.summary
    lines = [
        "## Pyright Summary",
        "",
        f"- 📝 Analyzed {pluralize(summary.files_analyzed, 'file', 'files')}",
    ]
    if summary.error_count > 0:
        lines.append(f"- ❌ {pluralize(summary.error_count, 'error', 'errors')}")
    if summary.warning_count > 0:
        lines.append(f"- ⚠️ {pluralize(summary.warning_count, 'warning', 'warnings')}")
    if summary.error_count == 0 and summary.warning_count == 0:
        lines.append("- ✅ No errors or warnings found")
    return "\n".join(lines)


def render_no_changes() -> str:
    return "## Pyright Summary\n\n- ✅ No Python files changed"


def format_change(delta: int) -> str:
    if delta > 0:
        return f"+{delta} {INCREASE}"
    if delta < 0:
        return f"{delta} {DECREASE}"
    return f"0 {NEUTRAL}"


def render_comparison(base: Report, head: Report) -> str:
    diff = diff_reports(base, head)
    rows = [
        ("Base", *_counts(base)),
        ("Head", *_counts(head)),
        ("Diff", format_change(diff.file_diff), format_change(diff.warning_diff), format_change(diff.error_diff)),
    ]
    lines = [
        "## Pyright Base Comparison",
        "",
        "| | Files Analyzed | Warnings | Errors |",
        "| --- | --- | --- | --- |",
        *(f"| {' | '.join(str(cell) for cell in row)} |" for row in rows),
    ]
    return "\n".join(lines)


def _counts(report: Report) -> tuple[int, int, int]:
    s = report.summary
    return s.files_analyzed, s.warning_count, s.error_count
