"""Tests for modules/comments/service.py."""

import pytest

from fake_supabase import FakeSupabase
from modules.comments.exceptions import CommentNotFoundError
from modules.comments.models import CreateCommentRequest, UpdateCommentRequest
from modules.comments.repository import CommentRepository
from modules.comments.service import CommentService
from modules.tweets.exceptions import TweetNotFoundError
from modules.tweets.repository import TweetRepository
from shared.models import AuthenticatedUser

ALICE = AuthenticatedUser(id=1, email="alice@example.com")
BOB = AuthenticatedUser(id=2, email="bob@example.com")


class TestCommentService:
    @pytest.fixture
    def db(self):
        db = FakeSupabase()
        db.table("tweets").insert({"user_id": ALICE.id, "text": "a tweet"}).execute()
        return db

    @pytest.fixture
    def service(self, db):
        return CommentService(
            repository=CommentRepository(db),
            tweets=TweetRepository(db),
        )

    @pytest.mark.asyncio
    async def test_create(self, service):
        comment = await service.create_comment(BOB, 1, CreateCommentRequest(text="nice"))

        assert comment.user_id == BOB.id
        assert comment.tweet_id == 1
        assert comment.text == "nice"

    @pytest.mark.asyncio
    async def test_create_on_missing_tweet(self, service):
        with pytest.raises(TweetNotFoundError):
            await service.create_comment(BOB, 99, CreateCommentRequest(text="hello?"))

    @pytest.mark.asyncio
    async def test_create_on_deleted_tweet(self, service, db):
        db.get("tweets", 1)["deleted_at"] = "2024-01-01T00:00:00+00:00"

        with pytest.raises(TweetNotFoundError):
            await service.create_comment(BOB, 1, CreateCommentRequest(text="late"))

    @pytest.mark.asyncio
    async def test_listings(self, service):
        await service.create_comment(BOB, 1, CreateCommentRequest(text="first"))
        await service.create_comment(ALICE, 1, CreateCommentRequest(text="second"))

        assert [c.text for c in await service.list_comments()] == ["first", "second"]
        assert [c.text for c in await service.list_tweet_comments(1)] == ["first", "second"]
        assert [c.text for c in await service.list_user_comments(BOB.id)] == ["first"]

    @pytest.mark.asyncio
    async def test_update_own(self, service):
        comment = await service.create_comment(BOB, 1, CreateCommentRequest(text="typo"))

        updated = await service.update_comment(BOB, comment.id, UpdateCommentRequest(text="fixed"))

        assert updated.text == "fixed"

    @pytest.mark.asyncio
    async def test_update_someone_elses(self, service):
        comment = await service.create_comment(BOB, 1, CreateCommentRequest(text="mine"))

        with pytest.raises(CommentNotFoundError):
            await service.update_comment(ALICE, comment.id, UpdateCommentRequest(text="theirs"))

        assert (await service.get_comment(comment.id)).text == "mine"

    @pytest.mark.asyncio
    async def test_delete_someone_elses(self, service):
        comment = await service.create_comment(BOB, 1, CreateCommentRequest(text="mine"))

        with pytest.raises(CommentNotFoundError):
            await service.delete_comment(ALICE, comment.id)

        assert (await service.get_comment(comment.id)).deleted_at is None

    @pytest.mark.asyncio
    async def test_delete_own(self, service):
        comment = await service.create_comment(BOB, 1, CreateCommentRequest(text="bye"))

        await service.delete_comment(BOB, comment.id)

        with pytest.raises(CommentNotFoundError):
            await service.get_comment(comment.id)
