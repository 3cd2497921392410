"""Tests for modules/tweets/service.py."""

import pytest

from fake_supabase import FakeSupabase
from modules.tweets.exceptions import TweetNotFoundError
from modules.tweets.models import CreateTweetRequest, UpdateTweetRequest
from modules.tweets.repository import TweetRepository
from modules.tweets.service import TweetService
from shared.models import AuthenticatedUser

ALICE = AuthenticatedUser(id=1, email="alice@example.com")
BOB = AuthenticatedUser(id=2, email="bob@example.com")


class TestTweetService:
    @pytest.fixture
    def db(self):
        return FakeSupabase()

    @pytest.fixture
    def service(self, db):
        return TweetService(repository=TweetRepository(db))

    @pytest.mark.asyncio
    async def test_create_stamps_author(self, service):
        tweet = await service.create_tweet(
            ALICE, CreateTweetRequest(text="hello", photo="https://example.com/cat.png")
        )

        assert tweet.user_id == ALICE.id
        assert tweet.text == "hello"
        assert tweet.photo == "https://example.com/cat.png"

    @pytest.mark.asyncio
    async def test_lists_newest_first(self, service):
        await service.create_tweet(ALICE, CreateTweetRequest(text="first"))
        await service.create_tweet(BOB, CreateTweetRequest(text="second"))
        await service.create_tweet(ALICE, CreateTweetRequest(text="third"))

        assert [t.text for t in await service.list_tweets()] == ["third", "second", "first"]
        assert [t.text for t in await service.list_user_tweets(ALICE.id)] == ["third", "first"]

    @pytest.mark.asyncio
    async def test_get_missing(self, service):
        with pytest.raises(TweetNotFoundError):
            await service.get_tweet(42)

    @pytest.mark.asyncio
    async def test_update_changes_only_that_tweet(self, service):
        first = await service.create_tweet(ALICE, CreateTweetRequest(text="first"))
        second = await service.create_tweet(ALICE, CreateTweetRequest(text="second"))

        updated = await service.update_tweet(ALICE, first.id, UpdateTweetRequest(text="edited"))

        assert updated.text == "edited"
        assert updated.updated_at is not None
        assert (await service.get_tweet(second.id)).text == "second"

    @pytest.mark.asyncio
    async def test_update_keeps_absent_fields(self, service):
        tweet = await service.create_tweet(
            ALICE, CreateTweetRequest(text="hi", photo="https://example.com/a.png")
        )

        updated = await service.update_tweet(ALICE, tweet.id, UpdateTweetRequest(text="bye"))

        assert updated.photo == "https://example.com/a.png"

    @pytest.mark.asyncio
    async def test_update_someone_elses_tweet(self, service):
        tweet = await service.create_tweet(ALICE, CreateTweetRequest(text="mine"))

        with pytest.raises(TweetNotFoundError):
            await service.update_tweet(BOB, tweet.id, UpdateTweetRequest(text="theirs"))

        unchanged = await service.get_tweet(tweet.id)
        assert unchanged.text == "mine"
        assert unchanged.updated_at is None

    @pytest.mark.asyncio
    async def test_delete(self, service):
        tweet = await service.create_tweet(ALICE, CreateTweetRequest(text="bye"))

        deleted = await service.delete_tweet(ALICE, tweet.id)

        assert deleted.deleted_at is not None
        assert await service.list_tweets() == []
        with pytest.raises(TweetNotFoundError):
            await service.get_tweet(tweet.id)

    @pytest.mark.asyncio
    async def test_delete_someone_elses_tweet(self, service):
        tweet = await service.create_tweet(ALICE, CreateTweetRequest(text="mine"))

        with pytest.raises(TweetNotFoundError):
            await service.delete_tweet(BOB, tweet.id)

        assert (await service.get_tweet(tweet.id)).deleted_at is None

    @pytest.mark.asyncio
    async def test_deleted_tweet_cannot_be_updated(self, service):
        tweet = await service.create_tweet(ALICE, CreateTweetRequest(text="gone"))
        await service.delete_tweet(ALICE, tweet.id)

        with pytest.raises(TweetNotFoundError):
            await service.update_tweet(ALICE, tweet.id, UpdateTweetRequest(text="back"))
