from .exceptions import InvalidStateError
from ..config import Default


class FutureState(object):
    pending = 'pending'
    fulfilled = 'fulfilled'
    rejected = 'rejected'


def get_then(value):
    """Returns the callable ``then`` of value, or None if it has none.

    Any object exposing a callable ``then`` attribute qualifies, so futures
    from other implementations are assimilated as well. Exceptions raised
    while looking ``then`` up propagate.
    """
    if isinstance(value, type):
        return None
    then = getattr(value, 'then', None)
    return then if callable(then) else None


def is_thenable(value):
    """Returns True if value can be subscribed to with ``then``."""
    return get_then(value) is not None


class FutureCore(object):
    """Encapsulates Future state and maintains callbacks.

    State changes only through ``_settle_fulfilled`` / ``_settle_rejected``,
    whose effect is always deferred through the scheduler, and callbacks
    are only ever invoked by ``_dispatch``.
    """

    _state = FutureState.pending
    _result = None
    _rejection_handled = False

    def __init__(self, *, scheduler=None):
        """Initializes future instance.

        Args:
            scheduler: callable accepting ``(fn, *args)`` that runs ``fn``
            after the current synchronous code completes, in FIFO order
            (by default set from ``config.Default.CALLBACK_SCHEDULER``).
        """
        self._fulfill_clb = []
        self._reject_clb = []
        if scheduler is None:
            scheduler = Default.get_callback_scheduler()
        self._scheduler = scheduler

    def __del__(self):
        if self._state == FutureState.rejected and not self._rejection_handled:
            Default.on_unhandled_rejection(self._result)

    @property
    def state(self):
        """One of ``FutureState`` values."""
        return self._state

    def done(self):
        """Return True if the future is fulfilled or rejected."""
        return self._state != FutureState.pending

    def is_fulfilled(self):
        return self._state == FutureState.fulfilled

    def is_rejected(self):
        return self._state == FutureState.rejected

    def result(self):
        """Return the settled payload: value if fulfilled, reason if rejected.

        The reason is returned, not raised. Reading the reason of a rejected
        future counts as handling it.

        Raises:
            InvalidStateError: if the future is still pending.
        """
        if self._state == FutureState.pending:
            raise InvalidStateError('Result is not ready.')
        if self._state == FutureState.rejected:
            self._rejection_handled = True
        return self._result

    def _settle_fulfilled(self, value=None):
        self._scheduler(self._try_settle, FutureState.fulfilled, value)

    def _settle_rejected(self, reason):
        self._scheduler(self._try_settle, FutureState.rejected, reason)

    def _try_settle(self, state, payload):
        if self._state != FutureState.pending:
            return

        try:
            then = get_then(payload)
            if then is not None:
                then(self._settle_fulfilled, self._settle_rejected)
                return
        except Exception as ex:
            self._settle_rejected(ex)
            return

        self._state = state
        self._result = payload
        self._dispatch()

    def _add_callbacks(self, on_fulfilled, on_rejected):
        self._fulfill_clb.append(on_fulfilled)
        self._reject_clb.append(on_rejected)
        self._rejection_handled = True

        # late subscribers are still notified asynchronously
        if self._state != FutureState.pending:
            self._scheduler(self._dispatch)

    def _dispatch(self):
        if self._state == FutureState.pending:
            return

        if self._state == FutureState.fulfilled:
            callbacks = self._fulfill_clb
        else:
            callbacks = self._reject_clb

        self._fulfill_clb = []
        self._reject_clb = []

        self._run_callbacks(callbacks)

    def _run_callbacks(self, callbacks):
        for i, clb in enumerate(callbacks):
            try:
                clb(self._result)
            except Exception as ex:
                Default.on_unhandled_error(ex)
            except BaseException:
                # callbacks left in the batch run on a later turn
                rest = callbacks[i + 1:]
                if rest:
                    self._scheduler(self._run_callbacks, rest)
                raise

    def __repr__(self):
        res = self.__class__.__name__
        if self._state != FutureState.pending:
            res += '<{}={!r}>'.format(self._state, self._result)
        elif self._fulfill_clb:
            res += '<{}, {} callbacks>'.format(self._state, len(self._fulfill_clb))
        else:
            res += '<{}>'.format(self._state)
        return res
