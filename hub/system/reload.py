"""
Triggers that drop the CachingFileSystem caches.

Data on disk is refreshed by an external process; these helpers let the
running service pick it up on SIGHUP or on a fixed interval.

drop_cache() waits on the cache locks, which a slow read in the threadpool
can hold for a long time, so both triggers run it in a worker thread and
never on the event loop itself.
"""

import asyncio
import logging
import signal

from hub.system.caching_filesystem import CachingFileSystem

logger = logging.getLogger(__name__)


def install_reload_signal(fs: CachingFileSystem, signum: int = signal.SIGHUP) -> None:
    """
    Drop the caches of ``fs`` whenever ``signum`` is received.

    Must be called from the main thread with an event loop running. The
    handler runs as a loop callback, not in signal context, so it cannot
    re-enter a cache lock the main thread already holds.

    Raises:
        RuntimeError: Not called from the main thread
        NotImplementedError: The loop does not support signal handlers
    """
    loop = asyncio.get_running_loop()
    pending = set()

    def handler():
        logger.info(f"Received signal {signum}, dropping filesystem caches")
        task = loop.create_task(asyncio.to_thread(fs.drop_cache))
        pending.add(task)
        task.add_done_callback(pending.discard)

    loop.add_signal_handler(signum, handler)


def remove_reload_signal(signum: int = signal.SIGHUP) -> bool:
    """Remove a handler installed by install_reload_signal."""
    return asyncio.get_running_loop().remove_signal_handler(signum)


async def periodic_drop(fs: CachingFileSystem, interval: float) -> None:
    """
    Drop the caches of ``fs`` every ``interval`` seconds until cancelled.

    Args:
        fs: Caching filesystem to reload
        interval: Seconds between drops, must be positive
    """
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")

    logger.info(f"Dropping filesystem caches every {interval}s")
    while True:
        await asyncio.sleep(interval)
        await asyncio.to_thread(fs.drop_cache)
