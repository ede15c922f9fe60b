"""
Command line entry point.

Parses arguments, loads configuration, configures logging and runs a single
session. Every fatal error raised by the session ends up in `main()`, which
reports it on stderr and exits with the error's exit code.
"""

import argparse
import logging
import os
import sys
from collections.abc import Callable
from typing import Any

from rbgn import __author__, __version__
from rbgn.core.common.exceptions import (
    ConfigurationError,
    MalformedInputError,
    RbgnError,
)
from rbgn.core.common.logging_utils import configure_logging
from rbgn.core.config.app_config import AppConfig, LogLevel, load_config
from rbgn.core.domain.run_mode import RunMode
from rbgn.core.runtime.session import Session, SessionResult

EXIT_INTERRUPTED = 130


def banner() -> str:
    return f"RBGN v{__version__} created by {__author__}"


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="rbgn",
        description="Interpret an RBGN script or compile it to a shell script",
    )
    parser.add_argument("file", metavar="FILE", help="File to build")
    parser.add_argument(
        "-i",
        "--interpret",
        action="store_true",
        help="Interpret the script instead of compiling it to Bash",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Specify the output file (default: print compiled lines to the console)",
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="FILE",
        help="Path to a YAML configuration file (env: RBGN_CONFIG)",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[level.value for level in LogLevel],
        default=None,
        help="Set the logging level (default: use config or WARNING)",
    )
    parser.add_argument(
        "--log",
        dest="log_file",
        metavar="FILE",
        help="Also write logs to FILE",
    )
    parser.add_argument(
        "--no-banner",
        dest="show_banner",
        action="store_false",
        default=None,
        help="Do not print the version banner on startup",
    )
    parser.add_argument("--version", action="version", version=banner())
    return parser


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_cli_parser().parse_args(argv)


def apply_cli_args(args: argparse.Namespace, **load_kwargs: Any) -> AppConfig:
    """Load configuration and apply CLI overrides on top of it."""
    cfg = load_config(args.config_file, **load_kwargs)

    if args.log_level:
        cfg.logging.level = LogLevel(args.log_level)
    if args.log_file:
        cfg.logging.log_file = args.log_file
    if args.show_banner is not None:
        cfg.show_banner = args.show_banner

    return cfg


def _configure_logging(cfg: AppConfig) -> None:
    """Configure logging based on configuration."""
    try:
        configure_logging(
            level=getattr(logging, cfg.logging.level.value),
            log_file=cfg.logging.log_file,
        )
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot open log file {cfg.logging.log_file}: {exc.strerror or exc}",
            details={"path": cfg.logging.log_file},
        ) from exc


def _report_error(error: RbgnError) -> None:
    """Write a fatal error to stderr."""
    location = f" (line {error.line_number})" if error.line_number else ""
    sys.stderr.write(f"ERROR{location}: {error.message}\n")


def run_script(
    args: argparse.Namespace,
    cfg: AppConfig,
    session_factory: Callable[..., Session] = Session,
) -> SessionResult:
    """Open the script named on the command line and run it."""
    mode = RunMode.INTERPRET if args.interpret else RunMode.COMPILE
    try:
        script = open(args.file, "rb")
    except OSError as exc:
        raise MalformedInputError(
            f"Cannot open script {args.file}: {exc.strerror or exc}",
            details={"path": args.file},
        ) from exc

    with script:
        session = session_factory(
            cfg,
            mode,
            script,
            script_name=os.fspath(args.file),
            output_path=args.output,
        )
        return session.run()


def main(argv: list[str] | None = None) -> None:
    """
    Main entry point.

    Exits with status 0 on success, the error's exit code on a fatal script
    error, and 130 when interrupted (the only way to leave a FOREVER loop).
    """
    args = parse_cli_args(argv)

    try:
        cfg = apply_cli_args(args)
        _configure_logging(cfg)
    except RbgnError as e:
        _report_error(e)
        sys.exit(e.exit_code)

    if cfg.show_banner:
        sys.stderr.write(banner() + "\n")

    try:
        result = run_script(args, cfg)
    except RbgnError as e:
        logging.debug("Fatal error: %s", e.to_dict())
        _report_error(e)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        sys.stderr.write("\nInterrupted\n")
        sys.exit(EXIT_INTERRUPTED)

    logging.debug("Session result: %s", result)


if __name__ == "__main__":
    main()
