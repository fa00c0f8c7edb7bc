from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from transit_rules.app import apply_rules_to_dataset
from transit_rules.config import ConfigurationError, configure_logging, get_rules_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Patch a transit dataset with rule files")
    subparsers = parser.add_subparsers(dest="command", required=True)

    apply = subparsers.add_parser("apply", help="Apply complementary code and property rules")
    apply.add_argument(
        "--input",
        "-i",
        type=Path,
        required=True,
        help="Directory of the dataset to patch",
    )
    apply.add_argument(
        "--output",
        "-o",
        type=Path,
        required=True,
        help="Directory the patched dataset is written to",
    )
    apply.add_argument(
        "--complementary-code-rules",
        "-c",
        type=Path,
        action="append",
        default=[],
        help="Complementary code rule file (repeatable)",
    )
    apply.add_argument(
        "--property-rules",
        "-p",
        type=Path,
        action="append",
        default=[],
        help="Property rule file (repeatable)",
    )
    apply.add_argument(
        "--report",
        "-r",
        type=Path,
        default=None,
        help="Path of the JSON report (defaults to config)",
    )
    apply.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level name (defaults to config)",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        config = get_rules_config()
        if parsed_args.log_level:
            config = replace(config, log_level=parsed_args.log_level.upper())
        configure_logging(level=config.log_level_number)
    except (ConfigurationError, ValueError):
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "apply":
            report_path = parsed_args.report or config.resolve_report_path()
            apply_rules_to_dataset(
                parsed_args.input,
                parsed_args.output,
                complementary_code_rules_files=parsed_args.complementary_code_rules,
                property_rules_files=parsed_args.property_rules,
                report_path=report_path,
            )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error while applying rules")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
