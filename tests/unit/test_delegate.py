"""Unit tests for relaying events between objects with Event.delegate."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from minievent import Event, EventTarget, delegate


def stop_everything(event):
    event.stop_propagation()
    event.prevent_default()
    event.stop_immediate_propagation()


@pytest.fixture
def source():
    return EventTarget()


@pytest.fixture
def target():
    return EventTarget()


class TestDelegateCapabilities:
    """Tests for the silent no-op when an object lacks the needed methods."""

    def test_source_without_on(self):
        """Test that a source that cannot register handlers is ignored."""
        source = SimpleNamespace()
        target = SimpleNamespace(fire=MagicMock(), on=MagicMock())

        Event.delegate(source, target, "foo")

        target.on.assert_not_called()
        target.fire.assert_not_called()

    def test_target_without_fire(self):
        """Test that a target that cannot fire is ignored."""
        source = SimpleNamespace(on=MagicMock())
        target = SimpleNamespace(on=MagicMock())

        Event.delegate(source, target, "foo")

        source.on.assert_not_called()

    def test_target_without_on(self):
        """Test that a target that cannot register handlers is ignored."""
        source = SimpleNamespace(on=MagicMock())
        target = SimpleNamespace(fire=MagicMock())

        Event.delegate(source, "foo", target, "bar")

        source.on.assert_not_called()

    def test_source_with_non_callable_on(self):
        """Test that a source whose `on` is not callable is ignored without raising."""
        source = SimpleNamespace(on="x")
        target = SimpleNamespace(on=MagicMock(), fire=MagicMock())

        Event.delegate(source, target, "foo")

        target.on.assert_not_called()
        target.fire.assert_not_called()

    def test_target_with_non_callable_fire(self, source):
        """Test that a target whose `fire` is not callable is ignored up front."""
        target = SimpleNamespace(on=MagicMock(), fire=42)

        with patch.object(source, "on", wraps=source.on) as source_on:
            Event.delegate(source, target, "foo")

        source_on.assert_not_called()
        assert source.fire("foo").type == "foo"

    def test_refusal_is_logged(self, caplog):
        """Test that a refused delegation leaves a debug record."""
        with caplog.at_level("DEBUG", logger="minievent"):
            Event.delegate(SimpleNamespace(), SimpleNamespace(), "foo")
        assert "not delegating" in caplog.text.lower()

    def test_duck_typed_objects_are_accepted(self):
        """Test that any object with on and fire works, no base class needed."""
        source = SimpleNamespace(on=MagicMock())
        target = SimpleNamespace(on=MagicMock(), fire=MagicMock())

        Event.delegate(source, target, "foo")

        source.on.assert_called_once()
        assert source.on.call_args.args[0] == "foo"


class TestDelegateRelay:
    """Tests for events fired through a delegation."""

    def test_delegate_same_type(self, source, target):
        """Test the (source, target, type) form."""
        with patch.object(source, "on", wraps=source.on) as source_on:
            Event.delegate(source, target, "foo")
        assert source_on.call_args.args[0] == "foo"

        with patch.object(target, "fire", wraps=target.fire) as target_fire:
            source.fire("foo")

        target_fire.assert_called_once()
        assert target_fire.call_args.args[0] == "foo"

    def test_same_type_rejects_fourth_positional_argument(self, source, target):
        """Test that options passed positionally in the 3-argument form raise."""
        with pytest.raises(TypeError):
            Event.delegate(source, target, "foo", {"preserve_data": True})

        assert source._event_pool is None

    def test_delegate_custom_type(self, source, target):
        """Test the (source, from_type, target, to_type) form."""
        Event.delegate(source, "foo", target, "bar")

        with patch.object(target, "fire", wraps=target.fire) as target_fire:
            source.fire("foo")

        assert target_fire.call_args.args[0] == "bar"

    def test_target_handlers_receive_relayed_event(self, source, target):
        """Test that handlers on the target get an event typed and targeted for it."""
        received = []
        target.on("bar", received.append)
        Event.delegate(source, "foo", target, "bar")

        original = source.fire("foo")

        assert len(received) == 1
        assert received[0] is not original
        assert received[0].type == "bar"
        assert received[0].target is target

    def test_data_not_preserved_by_default(self, source, target):
        """Test that payload attributes are dropped unless asked for."""
        received = []
        target.on("foo", received.append)
        Event.delegate(source, target, "foo")

        source.fire("foo", {"x": 1})

        assert not hasattr(received[0], "x")

    def test_preserve_data_same_type(self, source, target):
        """Test that preserve_data carries the payload with the same type."""
        Event.delegate(source, target, "foo", preserve_data=True)

        with patch.object(target, "fire", wraps=target.fire) as target_fire:
            source.fire("foo", {"x": 1})

        assert target_fire.call_args.args[0] == "foo"
        assert target_fire.call_args.args[1].x == 1

    def test_preserve_data_custom_type(self, source, target):
        """Test that preserve_data carries the payload to a renamed event."""
        delegate(source, "foo", target, "bar", preserve_data=True)

        with patch.object(target, "fire", wraps=target.fire) as target_fire:
            source.fire("foo", {"x": 1})

        relayed = target_fire.call_args.args[1]
        assert target_fire.call_args.args[0] == "bar"
        assert relayed.x == 1
        assert relayed.type == "bar"
        assert relayed.target is target

    def test_extend(self, source, target):
        """Test that extend adds attributes to the relayed event."""
        received = []
        target.on("bar", received.append)
        Event.delegate(source, "foo", target, "bar", extend={"relayed": True})

        source.fire("foo")

        assert received[0].relayed is True

    def test_sync_state_same_type(self, source, target):
        """Test that state set on the relayed event reaches the original event."""
        target.on("foo", stop_everything)
        Event.delegate(source, target, "foo", sync_state=True)

        event = source.fire("foo", {"x": 1})

        assert event.is_propagation_stopped() is True
        assert event.is_default_prevented() is True
        assert event.is_immediate_propagation_stopped() is True

    def test_sync_state_custom_type(self, source, target):
        """Test that state syncing also works with a renamed event."""
        target.on("bar", stop_everything)
        Event.delegate(source, "foo", target, "bar", sync_state=True)

        event = source.fire("foo", {"x": 1})

        assert event.is_propagation_stopped() is True
        assert event.is_default_prevented() is True
        assert event.is_immediate_propagation_stopped() is True

    def test_without_sync_state_original_is_untouched(self, source, target):
        """Test that the original event keeps its state by default."""
        target.on("bar", stop_everything)
        Event.delegate(source, "foo", target, "bar")

        event = source.fire("foo")

        assert event.is_propagation_stopped() is False
        assert event.is_default_prevented() is False

    def test_sync_state_stops_remaining_source_handlers(self, source, target):
        """Test that an immediate stop on the target ends the source's pass too."""
        later = MagicMock()
        target.on("bar", lambda event: event.stop_immediate_propagation())
        Event.delegate(source, "foo", target, "bar", sync_state=True)
        source.on("foo", later)

        source.fire("foo")

        later.assert_not_called()

    def test_delegate_to_enabled_object(self, source):
        """Test relaying to an object retrofitted with EventTarget.enable."""
        target = EventTarget.enable(SimpleNamespace())
        received = []
        target.on("bar", received.append)
        Event.delegate(source, "foo", target, "bar", preserve_data=True)

        source.fire("foo", {"x": 1})

        assert received[0].x == 1
        assert received[0].target is target
