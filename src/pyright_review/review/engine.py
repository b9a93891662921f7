# src/pyright_review/review/engine.py
import asyncio
import logging
from dataclasses import dataclass, field
from pyright_review.checkers.workspace import Workspace
from pyright_review.checkers.base import TypeChecker
from pyright_review.config import RunContext
from pyright_review.models import LogicalComment, PullRequest
from pyright_review.models.report import Report
from pyright_review.platforms.base import CommentStore
from pyright_review.platforms.channels import IssueCommentChannel, ReviewCommentChannel
from . import subjects
from .aggregate import diff_reports, group_by_file
from .reconciler import ReconcileResult, Reconciler


logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of one run over a pull request."""
    report: Report | None = None
    base_report: Report | None = None
    head_report: Report | None = None
    reconciliations: list[ReconcileResult] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class ReviewEngine:
    def __init__(
        self,
        store: CommentStore,
        checker: TypeChecker,
        workspace: Workspace | None = None,
    ):
        self.store = store
        self.checker = checker
        self.workspace = workspace or Workspace()

    async def review_pr(self, ctx: RunContext) -> RunResult:
        """Check the files a pull request changes and sync its comments."""
        settings = ctx.settings
        result = RunResult()
        reconciler = Reconciler(
            bot_login=settings.bot_login,
            migrate_legacy=settings.migrate_legacy_comments,
        )

        pr = await self.store.get_pull_request(ctx.pr_number)
        issue_channel = IssueCommentChannel(self.store, pr.number)
        review_channel = ReviewCommentChannel(self.store, pr.number, pr.head_sha)

        changed, issue_existing, review_existing = await asyncio.gather(
            self.store.changed_files(pr.base_sha, pr.head_sha, self.checker.extensions),
            issue_channel.fetch(),
            review_channel.fetch(),
        )
        logger.info(f"Changed files: {changed}")

        if not changed:
            logger.info("No Python files have changed.")
            # Replaces an earlier summary and drops any comparison left from previous pushes
            no_changes = [subjects.no_changes_comment(pr.number)]
            self._record(result, await reconciler.reconcile(review_channel, [], review_existing))
            self._record(result, await reconciler.reconcile(issue_channel, no_changes, issue_existing))
            return result

        await self.checker.install()
        report = await self.checker.run(changed)
        result.report = report

        file_desired: list[LogicalComment] = []
        if settings.include_file_comments:
            groups = group_by_file(report.diagnostics, pr.repo_name)
            file_desired = subjects.file_comments(pr.number, groups)
        issue_desired = [subjects.summary_comment(pr.number, report)]

        # The increase check reads the whole-project comparison only
        if settings.include_base_comparison or settings.fail_on_issue_increase:
            base, head = await self._compare(pr)
            result.base_report, result.head_report = base, head
            if settings.include_base_comparison:
                issue_desired.append(subjects.comparison_comment(pr.number, base, head))
            if settings.fail_on_issue_increase:
                diff = diff_reports(base, head)
                if diff.issue_diff > 0:
                    result.failures.append(
                        f"Pyright issues increased by {diff.issue_diff} "
                        f"(errors {diff.error_diff:+d}, warnings {diff.warning_diff:+d})"
                    )

        self._record(result, await reconciler.reconcile(review_channel, file_desired, review_existing))
        self._record(result, await reconciler.reconcile(issue_channel, issue_desired, issue_existing))
        return result

    async def _compare(self, pr: PullRequest) -> tuple[Report, Report]:
        """Whole-project reports for the base and the checked-out head, in that order.

        The tree is put back on the commit it started on, which for pull_request
        events is the merge commit rather than the head of the branch.
        """
        original = await self.workspace.current_commit()
        head = await self.checker.run(None)
        await self.workspace.checkout(pr.base_sha)
        try:
            base = await self.checker.run(None)
        finally:
            await self.workspace.restore(original)
        return base, head

    def _record(self, result: RunResult, reconciliation: ReconcileResult) -> None:
        result.reconciliations.append(reconciliation)
        for outcome in reconciliation.failures:
            result.failures.append(
                f"Could not {outcome.describe()} ({reconciliation.kind.value} comment): {outcome.error}"
            )
