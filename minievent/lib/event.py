"""Event object passed to handlers, plus derivation and relaying helpers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from minievent.constants import EVENT_PROPERTY_DENYLIST

logger = logging.getLogger(__name__)


def _has_methods(obj: Any, *names: str) -> bool:
    return all(callable(getattr(obj, name, None)) for name in names)


class Event:
    """An event with a type, arbitrary payload attributes and propagation state.

    Three call shapes are accepted:

    - ``Event("change")``
    - ``Event({"type": "change", "value": 1})``
    - ``Event("change", {"value": 1})``

    A mapping payload is copied onto the event as attributes, with an explicit
    type taking precedence over ``payload["type"]``. Any other payload is kept
    whole as ``event.data``::

        >>> Event("change", 1).data
        1
    """

    type: str | None = None
    target: Any = None

    def __init__(self, type: Any = None, payload: Any = None) -> None:
        self._default_prevented = False
        self._propagation_stopped = False
        self._immediate_propagation_stopped = False
        self._sync_source: Event | None = None

        # Single non-string argument: it is the payload, not the type
        if payload is None and type is not None and not isinstance(type, str):
            payload = type
            type = payload.get("type") if isinstance(payload, Mapping) else None

        if isinstance(payload, Mapping):
            for key, value in payload.items():
                setattr(self, key, value)
        elif payload is not None:
            self.data = payload

        if type:
            self.type = type

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} type={self.type!r}>"

    def is_default_prevented(self) -> bool:
        return self._default_prevented

    def prevent_default(self) -> None:
        if self._sync_source is not None:
            self._sync_source.prevent_default()
        self._default_prevented = True

    def is_propagation_stopped(self) -> bool:
        return self._propagation_stopped

    def stop_propagation(self) -> None:
        if self._sync_source is not None:
            self._sync_source.stop_propagation()
        self._propagation_stopped = True

    def is_immediate_propagation_stopped(self) -> bool:
        return self._immediate_propagation_stopped

    def stop_immediate_propagation(self) -> None:
        """Stop the remaining handlers of the current queue. Implies stop_propagation."""
        if self._sync_source is not None:
            # the source cascades to its own stop_propagation
            self._sync_source.stop_immediate_propagation()
        self._immediate_propagation_stopped = True
        self._propagation_stopped = True

    @classmethod
    def from_event(
        cls,
        original_event: Any,
        type: str | None = None,
        preserve_data: bool = False,
        sync_state: bool = False,
        extend: Mapping[str, Any] | None = None,
    ) -> Event:
        """Build a new event from an existing one.

        Args:
            original_event: The event to derive from.
            type: Type of the new event. Defaults to ``original_event.type``.
            preserve_data: Copy the payload attributes of ``original_event``.
                Type, target and propagation state are never copied.
            sync_state: Forward ``prevent_default``, ``stop_propagation`` and
                ``stop_immediate_propagation`` calls on the new event to
                ``original_event``. The link is one way.
            extend: Extra attributes applied last.

        Returns:
            Event: the derived event.
        """
        if type is None:
            type = getattr(original_event, "type", None)

        new_event = cls(type)

        if preserve_data:
            for key, value in vars(original_event).items():
                if key not in EVENT_PROPERTY_DENYLIST:
                    setattr(new_event, key, value)

        if extend:
            for key, value in extend.items():
                setattr(new_event, key, value)

        if sync_state:
            new_event._sync_source = original_event

        return new_event

    @staticmethod
    def delegate(
        source: Any,
        from_type: Any,
        target: Any,
        to_type: str | None = None,
        *,
        preserve_data: bool = False,
        sync_state: bool = False,
        extend: Mapping[str, Any] | None = None,
    ) -> None:
        """Re-fire events of ``source`` on ``target``.

        Two call shapes are accepted::

            # `label` fires "click" -> `self` fires "click"
            Event.delegate(label, self, "click")

            # `label` fires "click" -> `self` fires "label_click"
            Event.delegate(label, "click", self, "label_click")

        Nothing is registered unless ``source`` has a callable ``on`` and
        ``target`` has callable ``on`` and ``fire``. The relayed event is
        built with ``from_event`` using the remaining keyword arguments, then
        gets the destination type and target.

        Raises:
            TypeError: If the ``(source, target, type)`` shape is given a
                fourth positional argument.
        """
        if isinstance(from_type, str):
            source_type, destination, destination_type = from_type, target, to_type
        else:
            if to_type is not None:
                raise TypeError(
                    "delegate(source, target, type) takes no fourth positional argument, "
                    "pass preserve_data, sync_state and extend as keywords"
                )
            source_type, destination, destination_type = target, from_type, target

        if not _has_methods(source, "on") or not _has_methods(destination, "on", "fire"):
            logger.debug(
                "Not delegating %r: source cannot register or target cannot fire", source_type
            )
            return

        def relay(original_event):
            event = Event.from_event(
                original_event,
                preserve_data=preserve_data,
                sync_state=sync_state,
                extend=extend,
            )
            event.type = destination_type
            event.target = destination
            destination.fire(destination_type, event)

        source.on(source_type, relay)
