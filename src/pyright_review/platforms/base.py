from abc import ABC, abstractmethod
from collections.abc import Sequence
from pyright_review.models import PullRequest, RemoteComment


class CommentStoreError(Exception):
    """A call to the hosting platform failed."""


class CommentStore(ABC):
    @abstractmethod
    async def get_pull_request(self, pr_number: int) -> PullRequest:
        pass

    @abstractmethod
    async def changed_files(
        self, base_sha: str, head_sha: str, extensions: Sequence[str] = (".py",)
    ) -> list[str]:
        pass

    @abstractmethod
    async def list_issue_comments(self, pr_number: int) -> list[RemoteComment]:
        pass

    @abstractmethod
    async def create_issue_comment(self, pr_number: int, body: str) -> None:
        pass

    @abstractmethod
    async def update_comment(self, comment_id: int, body: str) -> None:
        pass

    @abstractmethod
    async def delete_issue_comment(self, comment_id: int) -> None:
        pass

    @abstractmethod
    async def list_review_comments(self, pr_number: int) -> list[RemoteComment]:
        pass

    @abstractmethod
    async def create_review_comment(
        self, pr_number: int, path: str, commit_sha: str, body: str
    ) -> None:
        pass

    @abstractmethod
    async def update_review_comment(self, comment_id: int, body: str) -> None:
        pass

    @abstractmethod
    async def delete_review_comment(self, comment_id: int) -> None:
        pass
