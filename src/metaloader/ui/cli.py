from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from metaloader.app import load_modules
from metaloader.config import ConfigurationError, configure_logging, resolve_log_level

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load module metadata definitions")
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level name (defaults to METALOADER_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    load = subparsers.add_parser("load", help="Load module definitions into the store")
    load.add_argument(
        "modules",
        nargs="*",
        help="Module names to load (defaults to every module found)",
    )
    load.add_argument(
        "--path",
        type=Path,
        help="Directory holding one sub-directory per module (defaults to config)",
    )
    load.add_argument(
        "--update",
        action="store_true",
        help="Overwrite records persisted by earlier loads",
    )
    load.add_argument(
        "--output-dir",
        type=Path,
        help="Where generated default views are written (defaults to config)",
    )
    load.add_argument(
        "--no-generated-files",
        action="store_true",
        help="Do not write generated default view files",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        level = resolve_log_level(parsed_args.log_level) if parsed_args.log_level else None
    except (ValueError, ConfigurationError):
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=level)

    try:
        if parsed_args.command == "load":
            result = load_modules(
                parsed_args.modules,
                path=parsed_args.path,
                update=parsed_args.update,
                output_dir=parsed_args.output_dir,
                write_generated=not parsed_args.no_generated_files,
            )
            log.info("Loaded modules: %s", ", ".join(result.modules))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during load")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
