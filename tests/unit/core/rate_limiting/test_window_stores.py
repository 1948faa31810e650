"""Tests for the window stores backing the rate limiter."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.core.rate_limiting.stores import InMemoryWindowStore, RedisWindowStore


@pytest.fixture
def redis_pipeline():
    pipe = MagicMock()
    pipe.__aenter__.return_value = pipe
    pipe.__aexit__.return_value = False
    pipe.execute = AsyncMock(return_value=[True, 1, 900_000])
    return pipe


@pytest.fixture
def redis_client(redis_pipeline):
    client = MagicMock()
    client.pipeline.return_value = redis_pipeline
    client.delete = AsyncMock(return_value=1)
    return client


class TestInMemoryWindowStore:
    @pytest.mark.asyncio
    async def test_first_hit_opens_window(self):
        store = InMemoryWindowStore(clock=lambda: 50.0)

        hit = await store.hit("login:a", 900)

        assert hit.count == 1
        assert hit.resets_in == 900
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_keys_are_isolated(self):
        store = InMemoryWindowStore()

        await store.hit("login:a", 900)
        hit = await store.hit("password_reset:a", 900)

        assert hit.count == 1
        assert len(store) == 2

    @pytest.mark.asyncio
    async def test_reset_unknown_key_is_noop(self):
        store = InMemoryWindowStore()

        await store.reset("login:missing")

        assert len(store) == 0


class TestRedisWindowStore:
    @pytest.mark.asyncio
    async def test_hit_runs_single_transaction(self, redis_client, redis_pipeline):
        store = RedisWindowStore(redis_client)

        hit = await store.hit("login:10.0.0.1", 900)

        redis_client.pipeline.assert_called_once_with(transaction=True)
        redis_pipeline.set.assert_called_once_with(
            "rate:login:10.0.0.1", 0, px=900_000, nx=True
        )
        redis_pipeline.incr.assert_called_once_with("rate:login:10.0.0.1")
        redis_pipeline.pttl.assert_called_once_with("rate:login:10.0.0.1")
        assert hit.count == 1
        assert hit.resets_in == pytest.approx(900)

    @pytest.mark.asyncio
    async def test_hit_reports_remaining_ttl(self, redis_client, redis_pipeline):
        redis_pipeline.execute.return_value = [None, 6, 120_500]
        store = RedisWindowStore(redis_client)

        hit = await store.hit("login:10.0.0.1", 900)

        assert hit.count == 6
        assert hit.resets_in == pytest.approx(120.5)

    @pytest.mark.asyncio
    async def test_missing_ttl_falls_back_to_window(self, redis_client, redis_pipeline):
        redis_pipeline.execute.return_value = [None, 2, -1]
        store = RedisWindowStore(redis_client)

        hit = await store.hit("login:10.0.0.1", 900)

        assert hit.resets_in == 900

    @pytest.mark.asyncio
    async def test_reset_deletes_prefixed_key(self, redis_client):
        store = RedisWindowStore(redis_client, prefix="hostel")

        await store.reset("login:10.0.0.1")

        redis_client.delete.assert_awaited_once_with("hostel:login:10.0.0.1")
