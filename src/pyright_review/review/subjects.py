"""Turn reports into the set of comments a run wants to exist."""
from collections.abc import Mapping, Sequence
from pyright_review.models import CommentKind, CommentTarget, LogicalComment
from pyright_review.models.report import Diagnostic, Report
from . import keys, markers
from .render import render_comparison, render_file_group, render_no_changes, render_summary

MARKER_PREFIX = "pyright-review"


def _comment(key: str, body: str, target: CommentTarget) -> LogicalComment:
    return LogicalComment(
        subject_key=key,
        body=markers.attach(body, MARKER_PREFIX, key),
        target=target,
    )


def file_comments(pr_number: int, groups: Mapping[str, Sequence[Diagnostic]]) -> list[LogicalComment]:
    return [
        _comment(
            keys.file_key(pr_number, path),
            render_file_group(path, diagnostics),
            CommentTarget(kind=CommentKind.REVIEW, path=path),
        )
        for path, diagnostics in groups.items()
        if diagnostics
    ]


def summary_comment(pr_number: int, report: Report) -> LogicalComment:
    return _comment(
        keys.summary_key(pr_number),
        render_summary(report),
        CommentTarget(kind=CommentKind.ISSUE),
    )


def no_changes_comment(pr_number: int) -> LogicalComment:
    """Summary for a pull request that no longer touches any checked file."""
    return _comment(
        keys.summary_key(pr_number),
        render_no_changes(),
        CommentTarget(kind=CommentKind.ISSUE),
    )


def comparison_comment(pr_number: int, base: Report, head: Report) -> LogicalComment:
    return _comment(
        keys.comparison_key(pr_number),
        render_comparison(base, head),
        CommentTarget(kind=CommentKind.ISSUE),
    )
