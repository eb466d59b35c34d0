"""Deferred actions for mismatch reverts."""

import asyncio
import itertools
import logging
import threading
import time
from typing import Any, Awaitable, Callable, Optional


logger = logging.getLogger(__name__)


class RevertTimer:
    """Event-loop scheduler for one-shot delayed callbacks."""

    def __init__(self, on_fired: Optional[Callable[[], Awaitable[None]]] = None):
        """
        Create the timer.

        Args:
            on_fired: Awaited after a callback that returned a truthy value
        """
        self.on_fired = on_fired
        self._tasks: set[asyncio.Task] = set()

    def schedule(self, delay: float, callback: Callable[[], Any]) -> asyncio.Task:
        """
        Run callback after delay seconds.

        Must be called with a running event loop.
        """
        task = asyncio.create_task(self._wait_and_fire(delay, callback))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _wait_and_fire(self, delay: float, callback: Callable[[], Any]) -> None:
        """Wait for delay then call callback."""
        try:
            await asyncio.sleep(delay)
            applied = callback()
            if applied and self.on_fired:
                await self.on_fired()
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.exception("Deferred callback failed")

    def cancel_all(self) -> None:
        """Cancel every scheduled callback that has not fired yet."""
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()

    async def shutdown(self) -> None:
        """Cancel scheduled callbacks and wait for their tasks to finish."""
        tasks = list(self._tasks)
        self.cancel_all()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    @property
    def pending_count(self) -> int:
        """Number of callbacks still waiting."""
        return sum(1 for task in self._tasks if not task.done())


class ManualScheduler:
    """Scheduler driven by the caller's own loop.

    Front-ends that redraw in a loop call ``run_due()`` once per frame;
    callbacks whose delay has elapsed run on the caller's thread. The
    queue may be fed from other threads.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._pending: list[tuple[float, int, Callable[[], Any]]] = []
        self._handles = itertools.count()
        self._lock = threading.Lock()

    def schedule(self, delay: float, callback: Callable[[], Any]) -> int:
        """Queue callback to run once delay seconds have passed."""
        with self._lock:
            handle = next(self._handles)
            self._pending.append((self._clock() + delay, handle, callback))
        return handle

    def run_due(self, now: Optional[float] = None) -> int:
        """Run callbacks that are due. Returns how many ran."""
        if now is None:
            now = self._clock()
        with self._lock:
            due = [entry for entry in self._pending if entry[0] <= now]
            self._pending = [entry for entry in self._pending if entry[0] > now]
        # Callbacks run unlocked so they can schedule again
        return self._run(due)

    def run_all(self) -> int:
        """Run every queued callback regardless of its due time."""
        with self._lock:
            due, self._pending = self._pending, []
        return self._run(due)

    @staticmethod
    def _run(due: list[tuple[float, int, Callable[[], Any]]]) -> int:
        for _, _, callback in sorted(due, key=lambda entry: (entry[0], entry[1])):
            callback()
        return len(due)

    def cancel_all(self) -> None:
        """Drop all queued callbacks."""
        with self._lock:
            self._pending.clear()

    @property
    def pending_count(self) -> int:
        """Number of queued callbacks."""
        with self._lock:
            return len(self._pending)

    @property
    def next_due(self) -> Optional[float]:
        """Clock time of the earliest queued callback."""
        with self._lock:
            if not self._pending:
                return None
            return min(entry[0] for entry in self._pending)
