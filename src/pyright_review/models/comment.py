from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict


class CommentKind(str, Enum):
    ISSUE = "issue"
    REVIEW = "review"


class CommentTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: CommentKind
    path: str | None = None


class LogicalComment(BaseModel):
    """A comment this run wants to exist, identified by its subject key."""
    model_config = ConfigDict(frozen=True)

    subject_key: str
    body: str
    target: CommentTarget


class RemoteComment(BaseModel):
    """A comment as currently stored on the hosting platform."""
    model_config = ConfigDict(frozen=True)

    id: int
    author: str
    body: str
    path: str | None = None

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "RemoteComment":
        user = payload.get("user") or {}
        return cls(
            id=payload["id"],
            author=user.get("login", ""),
            body=payload.get("body") or "",
            path=payload.get("path"),
        )
