from .comment import CommentKind, CommentTarget, LogicalComment, RemoteComment
from .pull_request import PullRequest
from .report import Diagnostic, Position, Range, Report, Severity, Summary

__all__ = [
    "CommentKind",
    "CommentTarget",
    "LogicalComment",
    "RemoteComment",
    "PullRequest",
    "Diagnostic",
    "Position",
    "Range",
    "Report",
    "Severity",
    "Summary",
]
