from .scheduler_base import SchedulerBase
from collections import deque
import heapq
import itertools


class QueueScheduler(SchedulerBase):
    """Scheduler that runs callbacks only when explicitly drained.

    Timers use a virtual clock which only moves forward in ``run`` and
    ``advance``, so tests involving delays run instantly and deterministically.

    Example:
        sched = QueueScheduler()
        f = Future.resolved(1, scheduler=sched).then(print)
        sched.run()
    """

    def __init__(self):
        self._ready = deque()
        self._timers = []
        self._seq = itertools.count()
        self._time = 0.0

    @property
    def time(self):
        """Current virtual time in seconds."""
        return self._time

    def __call__(self, fn, *args, **kwargs):
        self._ready.append((fn, args, kwargs))

    def call_later(self, delay, fn, *args):
        # sequence number keeps timers with equal deadlines in FIFO order
        heapq.heappush(self._timers,
                       (self._time + max(delay, 0), next(self._seq), fn, args))

    def pending(self):
        """Returns number of scheduled callbacks and timers."""
        return len(self._ready) + len(self._timers)

    def run_ready(self):
        """Runs scheduled callbacks, including ones scheduled while running,
        until the queue is empty. Timers are not touched."""
        while self._ready:
            fn, args, kwargs = self._ready.popleft()
            self._run_callback(fn, *args, **kwargs)

    def run(self):
        """Runs everything, advancing virtual time from timer to timer."""
        self.run_ready()
        while self._timers:
            self._fire_next_timer()

    def advance(self, seconds):
        """Moves virtual time forward by ``seconds``, running callbacks and
        timers that become due."""
        deadline = self._time + seconds
        self.run_ready()
        while self._timers and self._timers[0][0] <= deadline:
            self._fire_next_timer()
        self._time = deadline

    def shutdown(self, wait=True):
        self._ready.clear()
        self._timers[:] = []

    def _fire_next_timer(self):
        when, _, fn, args = heapq.heappop(self._timers)
        self._time = max(self._time, when)
        self._run_callback(fn, *args)
        self.run_ready()
