from .future_core import FutureCore
from .future_extensions import FutureExtensions


class Future(FutureCore, FutureExtensions):
    """Deferred value settled exactly once with a value or a rejection reason.

    Example:
        f = Future(lambda resolve, reject: timer.call_later(1, resolve, 42))
        f.then(lambda x: x * 2).catch(log_failure)
    """

    def __init__(self, executor=None, *, scheduler=None):
        """Initializes future instance.

        Args:
            executor: function accepting ``(resolve, reject)`` settlement
            functions, called synchronously. If it raises, the future is
            rejected with the exception.
            scheduler: scheduler for settlement and callbacks (default -
            ``config.Default.CALLBACK_SCHEDULER``).
        """
        FutureCore.__init__(self, scheduler=scheduler)
        if executor is not None:
            try:
                executor(self._settle_fulfilled, self._settle_rejected)
            except Exception as ex:
                self._settle_rejected(ex)

    @classmethod
    def resolved(cls, value=None, *, scheduler=None):
        """Returns future fulfilled with provided value.

        If value is a future (or any thenable), returned future adopts its
        outcome instead.
        """
        return cls(lambda resolve, _: resolve(value), scheduler=scheduler)

    @classmethod
    def rejected(cls, reason, *, scheduler=None):
        """Returns future rejected with provided reason."""
        return cls(lambda _, reject: reject(reason), scheduler=scheduler)
