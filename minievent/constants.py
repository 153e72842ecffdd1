# Listeners registered under this name run on every fire, after the typed ones
WILDCARD = "*"

# Never copied from one event to another by `Event.from_event(preserve_data=True)`
EVENT_PROPERTY_DENYLIST = frozenset(
    {
        "type",
        "target",
        "prevent_default",
        "is_default_prevented",
        "stop_propagation",
        "is_propagation_stopped",
        "stop_immediate_propagation",
        "is_immediate_propagation_stopped",
        "_default_prevented",
        "_propagation_stopped",
        "_immediate_propagation_stopped",
        "_sync_source",
    }
)
