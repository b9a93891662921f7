# src/pyright_review/review/reconciler.py
"""Bring the comments on a pull request in line with the comments a run wants.

Each remote comment written by this tool carries a footer marker holding its
subject key. A run decodes the markers of the bot's existing comments, diffs
them against the desired comments by key, and issues one create, update or
delete per subject. Comments written by anyone else are never touched, even
if their body ends with a well-formed marker.
"""
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pyright_review.models import CommentKind, LogicalComment, RemoteComment
from pyright_review.platforms.base import CommentStoreError
from pyright_review.platforms.channels import CommentChannel
from . import markers
from .subjects import MARKER_PREFIX


logger = logging.getLogger(__name__)


class Action(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class PlannedAction:
    action: Action
    subject_key: str | None
    comment_id: int | None = None
    comment: LogicalComment | None = None


@dataclass(frozen=True)
class ActionOutcome:
    action: Action
    subject_key: str | None
    comment_id: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe(self) -> str:
        subject = self.subject_key or f"legacy comment {self.comment_id}"
        return f"{self.action.value} {subject}"


@dataclass
class ReconcileResult:
    kind: CommentKind
    outcomes: list[ActionOutcome] = field(default_factory=list)

    @property
    def failures(self) -> list[ActionOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return not self.failures

    def count(self, action: Action) -> int:
        return sum(1 for o in self.outcomes if o.action == action and o.ok)


def _same_body(remote: str, desired: str) -> bool:
    return remote.replace("\r\n", "\n").rstrip() == desired.rstrip()


def plan_actions(
    desired: Sequence[LogicalComment],
    existing: Iterable[RemoteComment],
    *,
    bot_login: str,
    prefix: str = MARKER_PREFIX,
    migrate_legacy: bool = True,
) -> list[PlannedAction]:
    """Diff desired comments against the existing ones.

    Creates, updates and no-ops come first in desired order, deletions last.
    """
    owned: dict[str, RemoteComment] = {}
    deletions: list[PlannedAction] = []

    for remote in existing:
        if remote.author != bot_login:
            continue
        key = markers.decode(prefix, remote.body)
        if key is None:
            if migrate_legacy and markers.is_legacy(remote.body):
                deletions.append(PlannedAction(Action.DELETE, None, remote.id))
            continue
        if key in owned:
            # Left behind by an overlapping run; keep the first one listed
            deletions.append(PlannedAction(Action.DELETE, key, remote.id))
            continue
        owned[key] = remote

    actions: list[PlannedAction] = []
    wanted: set[str] = set()
    for comment in desired:
        key = comment.subject_key
        if key in wanted:
            raise ValueError(f"Subject key {key} is desired twice")
        wanted.add(key)

        remote = owned.get(key)
        if remote is None:
            actions.append(PlannedAction(Action.CREATE, key, comment=comment))
        elif _same_body(remote.body, comment.body):
            actions.append(PlannedAction(Action.UNCHANGED, key, remote.id, comment))
        else:
            actions.append(PlannedAction(Action.UPDATE, key, remote.id, comment))

    for key, remote in owned.items():
        if key not in wanted:
            deletions.append(PlannedAction(Action.DELETE, key, remote.id))

    return actions + deletions


class Reconciler:
    def __init__(self, bot_login: str, prefix: str = MARKER_PREFIX, migrate_legacy: bool = True):
        self.bot_login = bot_login
        self.prefix = prefix
        self.migrate_legacy = migrate_legacy

    async def reconcile(
        self,
        channel: CommentChannel,
        desired: Sequence[LogicalComment],
        existing: Sequence[RemoteComment] | None = None,
    ) -> ReconcileResult:
        """Plan against one snapshot of existing comments and apply the plan.

        The snapshot is fetched only when the caller does not supply one.
        """
        if existing is None:
            existing = await channel.fetch()
        planned = plan_actions(
            desired,
            existing,
            bot_login=self.bot_login,
            prefix=self.prefix,
            migrate_legacy=self.migrate_legacy,
        )
        return await self.apply(channel, planned)

    async def apply(self, channel: CommentChannel, planned: Sequence[PlannedAction]) -> ReconcileResult:
        result = ReconcileResult(kind=channel.kind)
        for step in planned:
            result.outcomes.append(await self._apply_one(channel, step))

        logger.info(
            f"{channel.kind.value} comments: {result.count(Action.CREATE)} created, "
            f"{result.count(Action.UPDATE)} updated, {result.count(Action.DELETE)} deleted, "
            f"{result.count(Action.UNCHANGED)} unchanged, {len(result.failures)} failed"
        )
        return result

    async def _apply_one(self, channel: CommentChannel, step: PlannedAction) -> ActionOutcome:
        try:
            if step.action == Action.CREATE:
                await channel.create(step.comment)
            elif step.action == Action.UPDATE:
                await channel.update(step.comment_id, step.comment.body)
            elif step.action == Action.DELETE:
                await channel.delete(step.comment_id)
        except (CommentStoreError, ValueError) as e:
            outcome = ActionOutcome(step.action, step.subject_key, step.comment_id, error=str(e))
            logger.error(f"Failed to {outcome.describe()}: {e}")
            return outcome

        outcome = ActionOutcome(step.action, step.subject_key, step.comment_id)
        logger.debug(f"Done: {outcome.describe()}")
        return outcome
