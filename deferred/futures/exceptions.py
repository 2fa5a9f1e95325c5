class Error(Exception):
    """Base class for all future-related exceptions."""
    pass


class InvalidStateError(Error):
    """The operation is not allowed in this state."""
    pass


class AggregateError(Error):
    """Several failures reported as one.

    Attributes:
        errors: list of failure reasons, in input order.
    """

    def __init__(self, errors, message='Multiple errors'):
        Error.__init__(self, message)
        self.errors = list(errors)
        self.message = message

    def __str__(self):
        return self.message

    def __repr__(self):
        return '{}({!r}, {!r})'.format(self.__class__.__name__,
                                       self.errors, self.message)
