from .base import CommentStore, CommentStoreError
from .channels import CommentChannel, IssueCommentChannel, ReviewCommentChannel
from .github import GitHubClient

__all__ = [
    "CommentStore",
    "CommentStoreError",
    "CommentChannel",
    "IssueCommentChannel",
    "ReviewCommentChannel",
    "GitHubClient",
]
