"""
Command-line interface for the kernelmon agent.

This module loads the configuration, builds the input registry and the
sample writer, and then either runs every input once (--test) or keeps the
agent running until SIGINT/SIGTERM.
"""

import argparse
import logging
import signal
import sys
from pathlib import Path
from typing import List, Optional

from ..agent import Agent
from ..config import get_config, set_config_path
from ..inputs import build_default_registry
from ..storage import ConsoleWriter, create_writer
from ..validation import ValidationError, handle_cli_error

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kernelmon",
        description="Sample kernel activity counters from /proc and emit them as metrics.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config.toml. Defaults to conf/config.toml in the project root.",
    )
    parser.add_argument(
        "--test",
        action="store_true",
        help="Run every selected input once, print the samples to stdout and exit.",
    )
    parser.add_argument(
        "--inputs",
        type=str,
        help="Comma-separated list of inputs to run (e.g. 'kernel'). Defaults to all enabled inputs.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def parse_input_names(value: Optional[str]) -> Optional[List[str]]:
    """
    Split the --inputs argument into names.

    Raises:
        ValidationError: If the argument is given but names nothing.
    """
    if value is None:
        return None
    names = [name.strip() for name in value.split(",") if name.strip()]
    if not names:
        raise ValidationError("--inputs must name at least one input", field_name="--inputs", value=value)
    return names


def main_cli(argv: Optional[List[str]] = None) -> int:
    """
    Main command-line entry point.

    Returns:
        Process exit code.

    Raises:
        SystemExit: On configuration errors or unknown inputs.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    if args.config is not None:
        set_config_path(args.config)

    try:
        app_config = get_config()
    except Exception as e:
        handle_cli_error(error=e, context="configuration loading", exit_code=1, logger=logger)

    try:
        input_names = parse_input_names(args.inputs)
    except ValidationError as e:
        handle_cli_error(error=e, context="argument validation", exit_code=1, logger=logger)

    registry = build_default_registry()
    writer = ConsoleWriter() if args.test else create_writer(app_config.writer)
    agent = Agent(app_config, registry, writer, input_names=input_names)

    if args.test:
        try:
            samples = agent.run_once()
        except KeyError as e:
            handle_cli_error(error=e, context="input selection", exit_code=1, logger=logger)
        logger.info(f"Test run produced {len(samples)} samples")
        return 0

    def signal_handler(signum, frame):
        logger.info(f"Signal {signal.strsignal(signum)} received. Shutting down...")
        agent.stop()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        agent.start()
    except KeyError as e:
        handle_cli_error(error=e, context="input selection", exit_code=1, logger=logger)

    logger.info("kernelmon agent running. Press Ctrl+C to stop.")
    agent.wait()
    logger.info("kernelmon agent stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main_cli())
