"""Command line self-check for minievent.

Wires a couple of event targets together the way an application would and
verifies the dispatch order, wildcard broadcast, delegation and the ``False``
handler all behave. Useful to check an installation.
"""

from __future__ import annotations

import logging
from types import SimpleNamespace

from minievent import VERSION, Event, EventTarget
from minievent.config import get_config
from minievent.lib.logger import configure_logger
from minievent.lib.parse_args import parse_args

logger = logging.getLogger(__name__)


def self_check() -> list[str]:
    """Run a dispatch through two targets and return the problems found."""
    problems = []
    calls: list[str] = []

    source = EventTarget()
    relay_target = EventTarget.enable(SimpleNamespace())

    source.on("change", lambda event: calls.append("change"))
    source.on("*", lambda event: calls.append(f"*:{event.type}"))
    Event.delegate(source, "change", relay_target, "relayed_change", preserve_data=True)
    relay_target.on("relayed_change", lambda event: calls.append(f"relayed:{event.value}"))
    relay_target.on("relayed_change", False)

    event = source.fire("change", {"value": 1})
    logger.debug(f"Self-check calls: {calls}")

    expected = ["change", "relayed:1", "*:change"]
    if calls != expected:
        problems.append(f"Unexpected dispatch order {calls}, expected {expected}")
    if event.target is not source:
        problems.append("Fired event does not point back at its target")
    if event.is_default_prevented():
        problems.append("Relayed event leaked its state without sync_state")

    source.destroy_events()
    calls.clear()
    source.fire("change")
    if calls:
        problems.append(f"Handlers still called after destroy_events: {calls}")

    return problems


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = get_config(args.config)

    log_level = args.log_level if args.log_level is not None else config.LOG_LEVEL
    log_dir = args.log_dir if args.log_dir is not None else config.LOG_DIR
    configure_logger(log_level, log_dir=log_dir, max_log_files=config.MAX_LOG_FILES)
    logger.info(f"minievent {VERSION} running self-check with {args.config} config")

    problems = self_check()
    for problem in problems:
        logger.error(problem)

    if problems:
        print(f"minievent {VERSION}: self-check failed")
        return 1

    print(f"minievent {VERSION}")
    return 0
