import asyncio

import pytest

from src.app.services.keyed_lock import KeyedLock


@pytest.mark.asyncio
async def test_same_key_runs_one_after_another():
    locks = KeyedLock()
    events = []

    async def worker(name):
        async with locks.hold("template"):
            events.append(f"{name}:start")
            await asyncio.sleep(0.01)
            events.append(f"{name}:end")

    await asyncio.gather(worker("a"), worker("b"))

    assert events == ["a:start", "a:end", "b:start", "b:end"]


@pytest.mark.asyncio
async def test_different_keys_do_not_wait():
    locks = KeyedLock()

    async with locks.hold("one"):
        assert locks.is_locked("one")
        assert not locks.is_locked("two")
        async with locks.hold("two"):
            assert locks.is_locked("two")


@pytest.mark.asyncio
async def test_lock_is_dropped_after_release():
    locks = KeyedLock()

    async with locks.hold("key"):
        pass

    assert not locks.is_locked("key")
    assert locks._locks == {}
