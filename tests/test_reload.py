"""Tests for cache drop triggers."""

import asyncio
import os
import signal
import threading
import time

import pytest
from unittest.mock import MagicMock

from hub.interfaces.filesystem import IFileSystem
from hub.system.caching_filesystem import CachingFileSystem
from hub.system.reload import install_reload_signal, periodic_drop, remove_reload_signal


@pytest.fixture
def fs():
    return MagicMock(spec=CachingFileSystem)


@pytest.fixture
def blocked_read():
    """Create a CachingFileSystem whose next read blocks until released."""
    release = threading.Event()
    entered = threading.Event()
    underlying = MagicMock(spec=IFileSystem)

    def slow_read(path):
        entered.set()
        release.wait(5)
        return b"x"

    underlying.read_file.side_effect = slow_read
    return CachingFileSystem(underlying), entered, release


async def _wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not met in time")
        await asyncio.sleep(0.01)


class TestReloadSignal:
    """Tests for install_reload_signal."""

    @pytest.mark.asyncio
    async def test_signal_drops_cache(self, fs):
        """Test that the signal handler calls drop_cache."""
        install_reload_signal(fs, signal.SIGUSR1)
        try:
            os.kill(os.getpid(), signal.SIGUSR1)
            await _wait_for(lambda: fs.drop_cache.called)
        finally:
            remove_reload_signal(signal.SIGUSR1)

        fs.drop_cache.assert_called_once()

    @pytest.mark.asyncio
    async def test_remove_handler(self, fs):
        install_reload_signal(fs, signal.SIGUSR2)

        assert remove_reload_signal(signal.SIGUSR2) is True
        assert remove_reload_signal(signal.SIGUSR2) is False

    @pytest.mark.asyncio
    async def test_signal_during_read_on_loop_thread(self):
        """Test that a signal arriving while this thread holds the read lock does not deadlock."""
        underlying = MagicMock(spec=IFileSystem)
        caching = CachingFileSystem(underlying)

        def read_and_signal(path):
            os.kill(os.getpid(), signal.SIGUSR1)
            return b"x"

        underlying.read_file.side_effect = read_and_signal
        drops = []
        original_drop = caching.drop_cache
        caching.drop_cache = lambda: drops.append(original_drop())

        install_reload_signal(caching, signal.SIGUSR1)
        try:
            assert caching.read_file("/a") == b"x"
            await _wait_for(lambda: drops)
        finally:
            remove_reload_signal(signal.SIGUSR1)

        assert caching.stats()["read_entries"] == 0

    def test_requires_running_loop(self, fs):
        with pytest.raises(RuntimeError):
            install_reload_signal(fs, signal.SIGUSR1)


class TestPeriodicDrop:
    """Tests for periodic_drop."""

    @pytest.mark.asyncio
    async def test_drops_until_cancelled(self, fs):
        task = asyncio.create_task(periodic_drop(fs, 0.01))
        await _wait_for(lambda: fs.drop_cache.call_count >= 2)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    @pytest.mark.asyncio
    @pytest.mark.parametrize("interval", [0, -1])
    async def test_rejects_non_positive_interval(self, fs, interval):
        with pytest.raises(ValueError):
            await periodic_drop(fs, interval)

    @pytest.mark.asyncio
    async def test_loop_responsive_while_read_in_flight(self, blocked_read):
        """Test that a drop waiting on a slow read does not stall the event loop."""
        caching, entered, release = blocked_read
        reader = threading.Thread(target=caching.read_file, args=("/slow",))
        reader.start()
        assert entered.wait(5)

        task = asyncio.create_task(periodic_drop(caching, 0.01))
        try:
            started = time.monotonic()
            await asyncio.sleep(0.05)
            await asyncio.sleep(0.05)
            elapsed = time.monotonic() - started

            assert elapsed < 0.5
            assert reader.is_alive()
        finally:
            release.set()
            reader.join()

        await _wait_for(lambda: caching.stats()["read_entries"] == 0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
