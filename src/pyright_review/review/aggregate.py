# src/pyright_review/review/aggregate.py
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pyright_review.models.report import Diagnostic, Report
from .paths import relative_path


@dataclass(frozen=True)
class ReportDiff:
    file_diff: int
    warning_diff: int
    error_diff: int

    @property
    def issue_diff(self) -> int:
        return self.warning_diff + self.error_diff


def group_by_file(
    diagnostics: Iterable[Diagnostic],
    repo_name: str,
    resolve: Callable[[str, str], str] = relative_path,
) -> dict[str, list[Diagnostic]]:
    """Group diagnostics by relative path, keeping first-seen file order and emission order."""
    groups: dict[str, list[Diagnostic]] = {}
    for diagnostic in diagnostics:
        groups.setdefault(resolve(diagnostic.file, repo_name), []).append(diagnostic)
    return groups


def diff_reports(base: Report, head: Report) -> ReportDiff:
    return ReportDiff(
        file_diff=head.summary.files_analyzed - base.summary.files_analyzed,
        warning_diff=head.summary.warning_count - base.summary.warning_count,
        error_diff=head.summary.error_count - base.summary.error_count,
    )
