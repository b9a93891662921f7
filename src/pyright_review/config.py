# src/pyright_review/config.py
import json
from dataclasses import dataclass
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _input(name: str) -> AliasChoices:
    """Accept an action input as INPUT_<NAME> (GitHub keeps the dashes) or with underscores."""
    upper = name.upper()
    return AliasChoices(
        f"INPUT_{upper}",
        f"INPUT_{upper.replace('-', '_')}",
        name.replace("-", "_"),
    )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", populate_by_name=True, extra="ignore")

    # Action inputs
    github_token: str = Field(validation_alias=_input("github-token"))
    include_file_comments: bool = Field(True, validation_alias=_input("include-file-comments"))
    include_base_comparison: bool = Field(False, validation_alias=_input("include-base-comparison"))
    fail_on_issue_increase: bool = Field(False, validation_alias=_input("fail-on-issue-increase"))
    pyright_version: str = Field("latest", validation_alias=_input("pyright-version"))
    migrate_legacy_comments: bool = Field(True, validation_alias=_input("migrate-legacy-comments"))

    # Runner environment
    github_repository: str | None = None
    github_event_path: str | None = None
    github_api_url: str = "https://api.github.com"

    bot_login: str = "github-actions[bot]"
    log_level: str = "INFO"

    @field_validator("github_token")
    @classmethod
    def _require_token(cls, value: str) -> str:
        # An unset action input arrives as an empty string.
        value = value.strip()
        if not value:
            raise ValueError("github-token must not be empty")
        return value


class ContextError(Exception):
    """The runner environment does not describe a pull request."""


@dataclass(frozen=True)
class RunContext:
    """Everything a single run needs, built once and passed down explicitly."""
    settings: Settings
    owner: str
    repo: str
    pr_number: int

    @classmethod
    def from_settings(cls, settings: Settings) -> "RunContext":
        repository = settings.github_repository or ""
        if "/" not in repository:
            raise ContextError(f"GITHUB_REPOSITORY must be 'owner/repo', got {repository!r}")
        owner, repo = repository.split("/", 1)

        if not settings.github_event_path:
            raise ContextError("GITHUB_EVENT_PATH is not set")
        try:
            event = json.loads(Path(settings.github_event_path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ContextError(f"Could not read event payload: {e}") from e

        return cls(settings=settings, owner=owner, repo=repo, pr_number=pr_number_from_event(event))


def pr_number_from_event(event: dict) -> int:
    """Pull request number from a pull_request or issue_comment event payload."""
    for key in ("pull_request", "issue"):
        number = (event.get(key) or {}).get("number")
        if isinstance(number, int):
            return number
    number = event.get("number")
    if isinstance(number, int):
        return number
    raise ContextError("Event payload does not reference a pull request")
