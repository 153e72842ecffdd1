"""Pytest fixtures for minievent tests."""

from unittest.mock import MagicMock

import pytest

from minievent import EventQueue, EventTarget


class Widget(EventTarget):
    """EventTarget subclass that never calls the base constructor."""

    def __init__(self, name="widget"):
        self.name = name

    def handle_change(self, event):
        self.last_event = event


class CallLog:
    """Records handler calls in order, by label."""

    def __init__(self):
        self.calls = []

    def handler(self, label):
        def record(*args):
            self.calls.append(label)

        return record


@pytest.fixture
def queue():
    """Create an empty EventQueue."""
    return EventQueue()


@pytest.fixture
def event_target():
    """Create a bare EventTarget instance."""
    return EventTarget()


@pytest.fixture
def widget():
    """Create an EventTarget subclass instance."""
    return Widget()


@pytest.fixture
def call_log():
    """Create a CallLog to assert handler order."""
    return CallLog()


@pytest.fixture
def spy():
    """A callable spy usable as an event handler."""
    return MagicMock(name="handler")
