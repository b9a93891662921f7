# src/pyright_review/checkers/workspace.py
"""Switch the checked-out tree between the commits being compared."""
import logging
from .pyright import run_command

logger = logging.getLogger(__name__)


class Workspace:
    async def current_commit(self) -> str:
        """The commit the job checked out, which is the merge commit on pull_request events."""
        _, stdout = await run_command("git", "rev-parse", "HEAD")
        return stdout.strip()

    async def checkout(self, sha: str) -> None:
        """Fetch a single commit from origin and check it out detached.

        CI checkouts are usually shallow, so the base commit may not be present.
        """
        logger.info(f"Checking out {sha}")
        await run_command("git", "fetch", "--no-tags", "--depth=1", "origin", sha)
        await run_command("git", "checkout", "--detach", sha)

    async def restore(self, sha: str) -> None:
        """Return to a commit that was checked out earlier in this job."""
        logger.info(f"Restoring {sha}")
        await run_command("git", "checkout", "--detach", sha)
