import pytest
from unittest.mock import AsyncMock
from pyright_review.models import CommentKind, CommentTarget, LogicalComment
from pyright_review.platforms.channels import IssueCommentChannel, ReviewCommentChannel


@pytest.mark.asyncio
async def test_issue_channel_routes_to_issue_comment_calls():
    store = AsyncMock()
    channel = IssueCommentChannel(store, 7)
    comment = LogicalComment(subject_key="k", body="body", target=CommentTarget(kind=CommentKind.ISSUE))

    await channel.fetch()
    await channel.create(comment)
    await channel.update(1, "new")
    await channel.delete(2)

    store.list_issue_comments.assert_called_once_with(7)
    store.create_issue_comment.assert_called_once_with(7, "body")
    store.update_comment.assert_called_once_with(1, "new")
    store.delete_issue_comment.assert_called_once_with(2)


@pytest.mark.asyncio
async def test_review_channel_anchors_comments_to_file_and_commit():
    store = AsyncMock()
    channel = ReviewCommentChannel(store, 7, "head-sha")
    comment = LogicalComment(
        subject_key="k", body="body", target=CommentTarget(kind=CommentKind.REVIEW, path="main.py")
    )

    await channel.create(comment)
    await channel.update(1, "new")
    await channel.delete(2)

    store.create_review_comment.assert_called_once_with(7, "main.py", "head-sha", "body")
    store.update_review_comment.assert_called_once_with(1, "new")
    store.delete_review_comment.assert_called_once_with(2)


@pytest.mark.asyncio
async def test_review_channel_needs_a_path():
    channel = ReviewCommentChannel(AsyncMock(), 7, "head-sha")
    comment = LogicalComment(subject_key="k", body="b", target=CommentTarget(kind=CommentKind.REVIEW))

    with pytest.raises(ValueError):
        await channel.create(comment)
