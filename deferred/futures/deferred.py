from .future import Future


class Deferred(object):
    """Producer side of a future: an object which can be resolved with a
    value or rejected with a reason.
    """

    def __init__(self, *, scheduler=None):
        """Initializes new Deferred instance.

        Args:
            scheduler: scheduler of the associated future.
        """
        self._future = Future(self._executor, scheduler=scheduler)

    def _executor(self, resolve, reject):
        self._resolve = resolve
        self._reject = reject

    def resolve(self, value=None):
        """Fulfills associated future with provided value.

        Has no effect if the future already settled.
        """
        self._resolve(value)

    def reject(self, reason):
        """Rejects associated future with provided reason.

        Has no effect if the future already settled.
        """
        self._reject(reason)

    @property
    def is_settled(self):
        """Returns True if the associated future is fulfilled or rejected."""
        return self._future.done()

    @property
    def future(self):
        """Returns associated future instance."""
        return self._future
