# src/pyright_review/main.py
import asyncio
import logging
import sys
from pydantic import ValidationError

from pyright_review.checkers import CommandError, PyrightChecker, ReportParseError
from pyright_review.config import ContextError, RunContext, Settings
from pyright_review.platforms import CommentStoreError, GitHubClient
from pyright_review.review.engine import ReviewEngine, RunResult


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ActionFailed(Exception):
    """The run finished but must be reported as failed."""


def _escape(message: str) -> str:
    # Workflow command data escaping
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def report_failure(message: str) -> None:
    print(f"::error::{_escape(message)}", flush=True)


def build_engine(ctx: RunContext) -> ReviewEngine:
    settings = ctx.settings
    store = GitHubClient(
        token=settings.github_token,
        owner=ctx.owner,
        repo=ctx.repo,
        api_url=settings.github_api_url,
    )
    checker = PyrightChecker(version=settings.pyright_version)
    return ReviewEngine(store=store, checker=checker)


async def run(settings: Settings) -> RunResult:
    ctx = RunContext.from_settings(settings)
    logger.info(f"Reviewing {ctx.owner}/{ctx.repo}#{ctx.pr_number}")
    engine = build_engine(ctx)
    result = await engine.review_pr(ctx)
    if not result.ok:
        raise ActionFailed(
            f"{len(result.failures)} problem(s): " + "; ".join(result.failures)
        )
    return result


def main() -> int:
    try:
        settings = Settings()
    except ValidationError as e:
        report_failure(f"Invalid action configuration: {e}")
        return 1
    logging.getLogger().setLevel(settings.log_level.upper())

    try:
        asyncio.run(run(settings))
    except (ActionFailed, ContextError, ReportParseError, CommandError, CommentStoreError) as e:
        logger.error(f"Run failed: {e}")
        report_failure(f"Action failed with error: {e}")
        return 1
    logger.info("Pyright review completed")
    return 0


def cli() -> None:
    sys.exit(main())
