"""Errors raised by the event primitives."""


class InvalidArgumentError(ValueError):
    """Raised when a handler or an event type cannot be used.

    Covers a handler that is neither callable nor the ``False`` sentinel, and
    firing without a type or with the wildcard type.
    """
