from ..config import Default
import abc


class SchedulerBase(metaclass=abc.ABCMeta):

    @abc.abstractmethod
    def __call__(self, fn, *args, **kwargs):
        """Schedule ``fn`` to run after the current synchronous code
        completes, in FIFO order with other scheduled callbacks. Does not
        produce future in response, which allows using schedulers directly
        as the scheduler of futures."""

    @abc.abstractmethod
    def call_later(self, delay, fn, *args):
        """Schedule ``fn`` to run once ``delay`` seconds have passed.
        Timers never run before already scheduled callbacks."""

    def submit(self, fn, *args, **kwargs):
        """Schedule execution of specified function and return a future of
        its outcome."""
        from ..futures import Future

        def start(resolve, reject):
            def run():
                try:
                    resolve(fn(*args, **kwargs))
                except Exception as ex:
                    reject(ex)

            self(run)

        return Future(start, scheduler=self)

    def shutdown(self, wait=True):
        """Stop scheduler"""

    @staticmethod
    def _run_callback(fn, *args, **kwargs):
        try:
            fn(*args, **kwargs)
        except Exception as ex:
            Default.on_unhandled_error(ex)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
        return False
