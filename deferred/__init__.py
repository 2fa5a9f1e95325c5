"""Chainable futures with deferred settlement and aggregate combinators."""

from .futures import (Future, Deferred, FutureState, is_thenable,
                      Error, InvalidStateError, AggregateError)
from .schedulers import SchedulerBase, QueueScheduler, AsyncioScheduler
from .config import Default

__all__ = [
    'Future',
    'Deferred',
    'FutureState',
    'is_thenable',
    'Error',
    'InvalidStateError',
    'AggregateError',
    'SchedulerBase',
    'QueueScheduler',
    'AsyncioScheduler',
    'Default',
]
