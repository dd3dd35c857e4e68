#!/usr/bin/env python3
"""
CLI for the valuation demonstration.

Usage:
    python -m realestate
    python -m realestate --summary
    python -m realestate --verbose

Environment:
    REALESTATE_LOG_LEVEL   Root log level (default WARNING)
    REALESTATE_VERBOSE     "true" behaves like --verbose
    REALESTATE_CURRENCY    Currency code for --summary (default HUF)
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..hooks import LoggingHook
from ..utils.config import Config
from .scenarios import run_scenarios
from .summary import render_summary


logger = logging.getLogger(__name__)


def configure_logging(config: Config) -> None:
    """Configure the root logger from config."""
    if config.verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, config.log_level, None)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def cmd_demo(args: argparse.Namespace, config: Config) -> int:
    """Run the fixed scenarios and print their reports."""
    hook = LoggingHook() if config.verbose else None
    logger.info("Running demonstration scenarios")

    for result in run_scenarios(hook=hook):
        for line in result.report_lines():
            print(line)
        if args.summary:
            print(render_summary(result.prop, config.currency))

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Real estate valuation - demonstration scenarios",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m realestate
    python -m realestate --summary
    REALESTATE_CURRENCY=EUR python -m realestate --summary
        """,
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Also print a currency-formatted summary for each scenario",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every valuation operation at DEBUG level",
    )

    args = parser.parse_args(argv)

    config = Config.load()
    if args.verbose:
        config.verbose = True
    configure_logging(config)

    return cmd_demo(args, config)


if __name__ == "__main__":
    sys.exit(main())
