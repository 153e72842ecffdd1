import logging

from minievent.constants import WILDCARD
from minievent.lib.errors import InvalidArgumentError
from minievent.lib.event import Event
from minievent.lib.event_queue import EventQueue
from minievent.lib.event_target import EventTarget
from minievent.version import __version__

PACKAGE = __package__
VERSION = __version__
version = __version__

from_event = Event.from_event
delegate = Event.delegate
enable = EventTarget.enable

# Library code never configures logging itself, see minievent.lib.logger
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "VERSION",
    "PACKAGE",
    "WILDCARD",
    "version",
    Event.__name__,
    EventQueue.__name__,
    EventTarget.__name__,
    InvalidArgumentError.__name__,
    "from_event",
    "delegate",
    "enable",
]
