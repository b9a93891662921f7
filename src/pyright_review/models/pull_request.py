from typing import Any
from pydantic import BaseModel


class PullRequest(BaseModel):
    number: int
    head_sha: str
    base_sha: str
    repo_name: str

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "PullRequest":
        return cls(
            number=payload["number"],
            head_sha=payload["head"]["sha"],
            base_sha=payload["base"]["sha"],
            repo_name=payload["base"]["repo"]["name"],
        )
