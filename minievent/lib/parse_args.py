import argparse
import logging
from pathlib import Path

from minievent import VERSION
from minievent.config import ConfigType

logger = logging.getLogger(__name__)

CONFIG = ConfigType.PRODUCTION.name.lower()


def log_level_type(input):
    """Verify the log level input, either a level name or a number"""
    if isinstance(input, str) and input.isdigit():
        return int(input)

    level = logging.getLevelName(str(input).upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(
            f"Log level must be a level name like DEBUG or a number, but got '{input}'"
        )
    return level


class ArgsNamespace(argparse.Namespace):
    """Provides typehints to the input args"""

    config: str
    log_level: int | None
    log_dir: Path | None


def parse_args(argv: list[str] | None = None) -> ArgsNamespace:
    parser = argparse.ArgumentParser(
        prog="minievent",
        description="Run a dispatch self-check of the minievent library.",
    )

    parser.add_argument(
        "-c",
        "--config",
        help=f"Configuration to load (default: {CONFIG})",
        choices=[member.name.lower() for member in ConfigType],
        default=CONFIG,
    )
    parser.add_argument(
        "-l",
        "--log-level",
        help="Log level, overrides the configuration. A level name or number.",
        default=None,
        type=log_level_type,
    )
    parser.add_argument(
        "--log-dir",
        help="Also write logs to this directory. Defaults to console only.",
        default=None,
        type=Path,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )

    args = parser.parse_args(argv, namespace=ArgsNamespace())
    logger.debug(f"{args=}")
    return args
