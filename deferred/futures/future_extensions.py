from .exceptions import AggregateError
from .future_core import FutureState
import functools


class FutureExtensions(object):
    """Mixin class for Future chaining and combination functions.

    Combinators only use ``then`` and the settlement functions passed to a
    new future's executor, never the internal state of input futures.
    """

    def then(self, on_fulfilled=None, on_rejected=None):
        """Returns future which will be set from result of applying one of
        provided functions to the outcome of original future.

        New future inherits scheduler from original future. If a function
        returns a future (or any thenable) the new future adopts its outcome.
        Exceptions raised by the functions reject the new future.

        Args:
            on_fulfilled: function that accepts original value (default -
            pass value through).
            on_rejected: function that accepts rejection reason (default -
            pass rejection through).
        """
        assert on_fulfilled is None or callable(on_fulfilled), \
            "Future.then expects callable or None"
        assert on_rejected is None or callable(on_rejected), \
            "Future.then expects callable or None"

        def chain(resolve, reject):
            def fulfilled(value):
                if on_fulfilled is None:
                    resolve(value)
                else:
                    try:
                        resolve(on_fulfilled(value))
                    except Exception as ex:
                        reject(ex)

            def rejected(reason):
                if on_rejected is None:
                    reject(reason)
                else:
                    try:
                        resolve(on_rejected(reason))
                    except Exception as ex:
                        reject(ex)

            self._add_callbacks(fulfilled, rejected)

        return self._new(chain, other=self)

    def catch(self, on_rejected):
        """Returns future that will contain value of original if it is
        fulfilled, or set from result of provided function in case of
        rejection.

        Args:
            on_rejected: function that accepts rejection reason.
        """
        return self.then(None, on_rejected)

    def finally_(self, on_finally=None):
        """Returns future settled exactly like original, after calling
        provided function without arguments on either outcome.

        Return value of the function is ignored. If it raises, new future is
        rejected with that exception instead.
        """
        assert on_finally is None or callable(on_finally), \
            "Future.finally_ expects callable or None"

        def chain(resolve, reject):
            def run(settle, payload):
                try:
                    if on_finally is not None:
                        on_finally()
                except Exception as ex:
                    reject(ex)
                else:
                    settle(payload)

            self._add_callbacks(functools.partial(run, resolve),
                                functools.partial(run, reject))

        return self._new(chain, other=self)

    @classmethod
    def all(cls, futures, *, scheduler=None):
        """Transforms sequence of futures into one future that will contain
        list of values in the original order.

        In case of any rejection future will be rejected with first reason to
        occur. Plain values are treated as fulfilled futures.

        Args:
            futures: iterable of futures or values to combine.
            scheduler: scheduler of the new future (default - from config).
        """
        futures = list(futures)

        def combine(resolve, reject):
            if not futures:
                resolve([])
                return

            ctx = _CombineContext(len(futures))

            def done(i, value):
                ctx.results[i] = value
                ctx.left -= 1
                if not ctx.left:
                    resolve(ctx.results)

            for i, fi in enumerate(futures):
                cls.resolved(fi, scheduler=scheduler) \
                    .then(functools.partial(done, i), reject)

        return cls._new(combine, scheduler=scheduler)

    @classmethod
    def all_settled(cls, futures, *, scheduler=None):
        """Returns future which will contain list of outcome records once
        all provided futures are settled.

        Records are dicts in the original order, either
        ``{'status': 'fulfilled', 'value': value}`` or
        ``{'status': 'rejected', 'reason': reason}``. The future is never
        rejected.

        Args:
            futures: iterable of futures or values to combine.
            scheduler: scheduler of the new future (default - from config).
        """
        futures = list(futures)

        def combine(resolve, _):
            if not futures:
                resolve([])
                return

            ctx = _CombineContext(len(futures))

            def done(i, record):
                ctx.results[i] = record
                ctx.left -= 1
                if not ctx.left:
                    resolve(ctx.results)

            def fulfilled(i, value):
                done(i, {'status': FutureState.fulfilled, 'value': value})

            def rejected(i, reason):
                done(i, {'status': FutureState.rejected, 'reason': reason})

            for i, fi in enumerate(futures):
                cls.resolved(fi, scheduler=scheduler) \
                    .then(functools.partial(fulfilled, i),
                          functools.partial(rejected, i))

        return cls._new(combine, scheduler=scheduler)

    @classmethod
    def race(cls, futures, *, scheduler=None):
        """Returns future which will be set from outcome of first future to
        settle, both fulfilled or rejected.

        An empty sequence produces a future that never settles.

        Args:
            futures: iterable of futures or values to combine.
            scheduler: scheduler of the new future (default - from config).
        """
        futures = list(futures)

        def combine(resolve, reject):
            for fi in futures:
                cls.resolved(fi, scheduler=scheduler).then(resolve, reject)

        return cls._new(combine, scheduler=scheduler)

    @classmethod
    def any(cls, futures, *, scheduler=None):
        """Returns future which will be set from value of first future to be
        fulfilled.

        If all provided futures are rejected, the future is rejected with
        ``AggregateError`` listing the reasons in the original order. An
        empty sequence rejects immediately.

        Args:
            futures: iterable of futures or values to combine.
            scheduler: scheduler of the new future (default - from config).
        """
        futures = list(futures)

        def combine(resolve, reject):
            if not futures:
                reject(AggregateError([], _ALL_REJECTED))
                return

            ctx = _CombineContext(len(futures))

            def failed(i, reason):
                ctx.results[i] = reason
                ctx.left -= 1
                if not ctx.left:
                    reject(AggregateError(ctx.results, _ALL_REJECTED))

            for i, fi in enumerate(futures):
                cls.resolved(fi, scheduler=scheduler) \
                    .then(resolve, functools.partial(failed, i))

        return cls._new(combine, scheduler=scheduler)

    @classmethod
    def reduce(cls, futures, fun, initial, *, scheduler=None):
        """Returns future which will be set with reduced values of all
        provided futures. In case of any rejection future will be rejected
        with first reason to occur.

        Args:
            futures: iterable of futures or values to combine.
            fun: reduce-compatible function.
            initial: initial accumulator value.
            scheduler: scheduler of the new future (default - from config).
        """
        return cls \
            .all(futures, scheduler=scheduler) \
            .then(lambda results: functools.reduce(fun, results, initial))

    @classmethod
    def _new(cls, executor=None, *, other=None, scheduler=None):
        if scheduler is None and other is not None:
            scheduler = other._scheduler
        return cls(executor, scheduler=scheduler)


_ALL_REJECTED = 'All futures were rejected'


class _CombineContext(object):
    def __init__(self, size):
        self.results = [None] * size
        self.left = size
