from .scheduler_base import SchedulerBase
import asyncio
import functools


class AsyncioScheduler(SchedulerBase):
    """Runs callbacks on an asyncio event loop via ``call_soon``.

    Without an explicit loop the loop running at scheduling time is used.
    With ``threadsafe=True`` callbacks may be scheduled from other threads;
    they still run on the loop thread.
    """

    def __init__(self, loop=None, *, threadsafe=False):
        assert loop is not None or not threadsafe, \
            "AsyncioScheduler needs explicit loop to be thread-safe"
        self._loop = loop
        self._threadsafe = threadsafe

    @property
    def loop(self):
        """Scheduler's event loop.

        Raises:
            RuntimeError: if no loop was given and none is running.
        """
        return self._loop or asyncio.get_running_loop()

    def __call__(self, fn, *args, **kwargs):
        loop = self.loop
        call_soon = loop.call_soon_threadsafe if self._threadsafe else loop.call_soon
        call_soon(functools.partial(self._run_callback, fn, *args, **kwargs))

    def call_later(self, delay, fn, *args):
        self.loop.call_later(delay, functools.partial(self._run_callback, fn, *args))
