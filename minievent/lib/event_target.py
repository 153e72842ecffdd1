"""Base class giving objects named events.

Subclass it to get ``on``/``once``/``un``/``fire``/``destroy_events``; calling
its constructor is not required::

    class Player(EventTarget):
        def __init__(self, name):
            self.name = name

    player = Player("alice")
    player.on("song_end", lambda event: print(event.title))
    player.fire("song_end", {"title": "Hello World"})

Objects that cannot inherit from it are retrofitted instead::

    player = SimpleNamespace()
    EventTarget.enable(player)
    player.on("song_end", handle_song_end)

Handlers are called synchronously in registration order; exceptions bubble up
to the caller of ``fire``.
"""

from __future__ import annotations

import logging
import types
from collections.abc import Mapping
from typing import Any

from minievent.constants import WILDCARD
from minievent.lib.errors import InvalidArgumentError
from minievent.lib.event import Event
from minievent.lib.event_queue import EventQueue, Handler

logger = logging.getLogger(__name__)


class EventTarget:
    """Per-instance registry of event queues, keyed by event type."""

    # Created on first `on`, dropped again by `destroy_events`
    _event_pool: dict[str, EventQueue] | None = None

    def on(
        self, event_type: str, handler: Handler, this_object: Any = None, *, once: bool = False
    ) -> None:
        """Register a handler for an event type.

        Args:
            event_type: Name of the event. ``"*"`` receives every event fired
                on this object, after the handlers of the event's own type.
            handler: Called with the event. ``False`` registers a handler that
                calls ``prevent_default()`` and ``stop_propagation()``.
            this_object: Passed to the handler before the event, so an unbound
                method can be registered together with its instance.
            once: Unregister the handler after its first call.
        """
        if self._event_pool is None:
            self._event_pool = {}

        queue = self._event_pool.get(event_type)
        if queue is None:
            queue = self._event_pool[event_type] = EventQueue()

        queue.add(handler, this_object=this_object, once=once)

    def once(self, event_type: str, handler: Handler, this_object: Any = None) -> None:
        """Register a handler that runs at most once."""
        self.on(event_type, handler, this_object, once=True)

    def un(self, event_type: str, handler: Handler | None = None, this_object: Any = None) -> None:
        """Unregister a handler, or every handler of the type when none is given.

        ``"*"`` only unregisters wildcard handlers, never all handlers.
        """
        if self._event_pool is None or event_type not in self._event_pool:
            return

        self._event_pool[event_type].remove(handler, this_object)

    def fire(self, event_type: Any, payload: Any = None) -> Event:
        """Fire an event and return the Event object handlers received.

        Accepted call shapes::

            target.fire("change")
            target.fire("change", {"value": 1})  # payload becomes attributes
            target.fire("change", 1)             # non-mapping payload becomes `data`
            target.fire({"type": "change", "value": 1})
            target.fire("change", existing_event)  # dispatched as is

        Handlers registered without ``this_object`` are called as
        ``handler(event)``; the firing object is ``event.target``. Handlers
        registered with one are called as ``handler(this_object, event)``.

        Raises:
            InvalidArgumentError: If no type is given, the type is not a
                string, or the type is ``"*"``.
        """
        # Only a payload given, its `type` names the event
        if payload is None and isinstance(event_type, (Mapping, Event)):
            payload = event_type
            if isinstance(payload, Mapping):
                event_type = payload.get("type")
            else:
                event_type = payload.type

        if not event_type:
            raise InvalidArgumentError("No event type specified")

        if not isinstance(event_type, str):
            raise InvalidArgumentError(f"Event type must be a string, got {event_type!r}")

        if event_type == WILDCARD:
            raise InvalidArgumentError(f"Cannot fire the global event {WILDCARD!r}")

        event = payload if isinstance(payload, Event) else Event(event_type, payload)
        event.target = self

        # Firing before any `on` is fine, there is just nobody listening
        if self._event_pool is not None and event_type in self._event_pool:
            self._event_pool[event_type].execute(event)

        # A handler above may have called destroy_events
        if self._event_pool is not None and WILDCARD in self._event_pool:
            self._event_pool[WILDCARD].execute(event)

        return event

    def destroy_events(self) -> None:
        """Dispose every queue. Handlers still pending in a running fire are skipped."""
        if self._event_pool is None:
            return

        logger.debug("Destroying %d event queue(s) of %r", len(self._event_pool), self)
        for queue in self._event_pool.values():
            queue.dispose()

        self._event_pool = None

    @staticmethod
    def enable(target: Any) -> Any:
        """Give an arbitrary object the event methods of EventTarget.

        The methods are bound directly onto ``target`` and it gets its own empty
        registry; its class is left untouched.

        Returns:
            The same object, for chaining.
        """
        target._event_pool = None
        for name in ("on", "once", "un", "fire", "destroy_events"):
            setattr(target, name, types.MethodType(getattr(EventTarget, name), target))
        return target
