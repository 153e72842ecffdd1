"""Ordered handler storage for a single event channel."""

from __future__ import annotations

from typing import Any, Callable, Union

from minievent.lib.errors import InvalidArgumentError

# A callable, or `False` meaning "prevent default and stop propagation"
Handler = Union[Callable[..., Any], bool]


class _Registration:
    """One slot of an EventQueue."""

    __slots__ = ("handler", "this_object", "once")

    def __init__(self, handler: Handler, this_object: Any = None, once: bool = False) -> None:
        self.handler = handler
        self.this_object = this_object
        self.once = once

    def matches(self, handler: Handler, this_object: Any) -> bool:
        # Same function bound differently is a different registration
        return self.this_object is this_object and self.handler == handler


def _call_if_callable(obj: Any, method_name: str) -> Any:
    method = getattr(obj, method_name, None)
    if callable(method):
        return method()
    return None


class EventQueue:
    """Insertion-ordered registrations for one event name.

    Removal tombstones the slot instead of shrinking the list, so a handler
    may remove itself or any other handler while the queue is executing
    without disturbing the running loop.
    """

    def __init__(self) -> None:
        self._queue: list[_Registration | None] | None = []

    def add(self, handler: Handler, this_object: Any = None, once: bool = False) -> None:
        """Append a handler unless an identical registration is already live.

        Args:
            handler: A callable, or ``False`` which acts like calling both
                ``prevent_default()`` and ``stop_propagation()`` on the event.
            this_object: Context passed as the handler's first argument.
            once: Remove the registration after its first invocation.

        Raises:
            InvalidArgumentError: If handler is neither callable nor ``False``.
        """
        if handler is not False and not callable(handler):
            raise InvalidArgumentError(
                f"Event handler must be a callable or False, got {handler!r}"
            )

        if self._queue is None:
            self._queue = []

        for context in self._queue:
            if context is not None and context.matches(handler, this_object):
                return

        self._queue.append(_Registration(handler, this_object, once))

    def remove(self, handler: Handler | None = None, this_object: Any = None) -> None:
        """Remove one registration, or every registration if no handler is given.

        Without ``this_object`` only registrations made without a context match.
        """
        if handler is None:
            self.clear()
            return

        if not self._queue:
            return

        for index, context in enumerate(self._queue):
            if context is not None and context.matches(handler, this_object):
                # Keep the slot so an executing loop keeps its indices
                self._queue[index] = None
                # `add` refuses duplicates, there is at most one match
                return

    def clear(self) -> None:
        """Remove every registration. An executing loop stops after the current handler."""
        if self._queue is not None:
            self._queue.clear()

    def execute(self, event: Any, this_object: Any = None) -> None:
        """Call every live handler with ``event`` in registration order.

        Args:
            event: Passed to each handler. Any object works; the propagation
                checks only apply when it has the matching methods.
            this_object: Default context for registrations that have none.
        """
        # `dispose` drops `self._queue` but empties the list first, so this
        # local reference stops the loop as well
        queue = self._queue
        if queue is None:
            return

        index = 0
        while index < len(queue):
            if _call_if_callable(event, "is_immediate_propagation_stopped"):
                return

            context = queue[index]
            index += 1

            # tombstone
            if context is None:
                continue

            handler = context.handler
            if handler is False:
                _call_if_callable(event, "prevent_default")
                _call_if_callable(event, "stop_propagation")
            else:
                bound = context.this_object if context.this_object is not None else this_object
                if bound is None:
                    handler(event)
                else:
                    handler(bound, event)

            if context.once:
                self.remove(context.handler, context.this_object)

    def length(self) -> int:
        """Number of live registrations."""
        if not self._queue:
            return 0
        return sum(1 for context in self._queue if context is not None)

    def __len__(self) -> int:
        return self.length()

    def dispose(self) -> None:
        """Release storage. Handlers after the disposing one in a running pass are skipped."""
        self.clear()
        self._queue = None
