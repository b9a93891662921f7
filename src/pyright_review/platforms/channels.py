"""Bind a comment store to one kind of comment.

The reconciler works on a single channel at a time and does not care whether
it is looking at issue-level comments or file review comments.
"""
from abc import ABC, abstractmethod
from pyright_review.models import CommentKind, LogicalComment, RemoteComment
from .base import CommentStore


class CommentChannel(ABC):
    kind: CommentKind

    @abstractmethod
    async def fetch(self) -> list[RemoteComment]:
        pass

    @abstractmethod
    async def create(self, comment: LogicalComment) -> None:
        pass

    @abstractmethod
    async def update(self, comment_id: int, body: str) -> None:
        pass

    @abstractmethod
    async def delete(self, comment_id: int) -> None:
        pass


class IssueCommentChannel(CommentChannel):
    kind = CommentKind.ISSUE

    def __init__(self, store: CommentStore, pr_number: int):
        self.store = store
        self.pr_number = pr_number

    async def fetch(self) -> list[RemoteComment]:
        return await self.store.list_issue_comments(self.pr_number)

    async def create(self, comment: LogicalComment) -> None:
        await self.store.create_issue_comment(self.pr_number, comment.body)

    async def update(self, comment_id: int, body: str) -> None:
        await self.store.update_comment(comment_id, body)

    async def delete(self, comment_id: int) -> None:
        await self.store.delete_issue_comment(comment_id)


class ReviewCommentChannel(CommentChannel):
    kind = CommentKind.REVIEW

    def __init__(self, store: CommentStore, pr_number: int, commit_sha: str):
        self.store = store
        self.pr_number = pr_number
        self.commit_sha = commit_sha

    async def fetch(self) -> list[RemoteComment]:
        return await self.store.list_review_comments(self.pr_number)

    async def create(self, comment: LogicalComment) -> None:
        if comment.target.path is None:
            raise ValueError(f"Review comment {comment.subject_key} has no file path")
        await self.store.create_review_comment(
            self.pr_number, comment.target.path, self.commit_sha, comment.body
        )

    async def update(self, comment_id: int, body: str) -> None:
        await self.store.update_review_comment(comment_id, body)

    async def delete(self, comment_id: int) -> None:
        await self.store.delete_review_comment(comment_id)
