from .exceptions import Error, InvalidStateError, AggregateError
from .future_core import FutureState, is_thenable
from .future import Future
from .deferred import Deferred
