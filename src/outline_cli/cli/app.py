"""
CLI App - Main entry point for the outline command line tool.
"""

import argparse
import logging
import sys
from pathlib import Path

from outline_cli import __version__
from outline_cli.adapters.config import EnvironmentConfigProvider
from outline_cli.core.domain.value_objects import DEFAULT_RESULTS_PER_PAGE
from outline_cli.core.exceptions import ConfigError

from .commands import run_list, run_save, run_whoami
from .exit_codes import ExitCode
from .logging import setup_logging
from .output import Console


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """
    Create the command-line argument parser for outline.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="outline",
        description="List and download Markdown documents from Outline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show who the API key belongs to
  outline whoami

  # List the first page of documents
  outline documents list

  # List your own documents, 30 per page, third page
  outline documents list --mine-only --results-per-page 30 --page 2

  # Save a document under its own title
  outline documents save 9bcd1d1f-0b57-4a43-9a0f-6d1c2e1a7c21

  # Save a document under a chosen name (.md is added if missing)
  outline documents save 9bcd1d1f-0b57-4a43-9a0f-6d1c2e1a7c21 --file-name notes

Configuration:
  GETOUTLINE_API_KEY is read from the environment, a .env file in the
  working directory, or .outline-cli.yaml.
""",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug output")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print results and errors")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default="text",
        help="Log output format (default: text)",
    )
    parser.add_argument("--config", metavar="PATH", help="Path to a YAML config file")
    parser.add_argument("--api-key", help="Outline API key (overrides GETOUTLINE_API_KEY)")
    parser.add_argument("--base-url", help="Outline instance URL (overrides GETOUTLINE_BASE_URL)")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    subparsers.add_parser("whoami", help="Show who the API key belongs to")

    documents = subparsers.add_parser("documents", help="Work with Outline documents")
    documents_sub = documents.add_subparsers(dest="documents_command", metavar="SUBCOMMAND")
    documents_sub.required = True

    list_parser = documents_sub.add_parser(
        "list", help="List documents that you have access to in Outline"
    )
    list_parser.add_argument(
        "-p",
        "--page",
        type=_non_negative_int,
        default=0,
        help="The page of results to display (default: 0)",
    )
    list_parser.add_argument(
        "-r",
        "--results-per-page",
        type=_positive_int,
        default=DEFAULT_RESULTS_PER_PAGE,
        help=f"The number of documents to show per page (default: {DEFAULT_RESULTS_PER_PAGE})",
    )
    list_parser.add_argument(
        "-o", "--mine-only", action="store_true", help="Only show documents you wrote"
    )

    save_parser = documents_sub.add_parser(
        "save", help="Fetch a document from Outline and save it to disk"
    )
    save_parser.add_argument("doc_id", help="The ID of the document in Outline to download")
    save_parser.add_argument(
        "-f",
        "--file-name",
        help="The name of the new file (.md is appended automatically if missing)",
    )
    save_parser.add_argument(
        "-d", "--output-dir", help="Directory to save into (default: current directory)"
    )

    return parser


COMMANDS = {
    ("whoami", None): run_whoami,
    ("documents", "list"): run_list,
    ("documents", "save"): run_save,
}


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the outline CLI.

    Parses arguments, sets up logging, loads configuration once and
    dispatches to the selected command.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    redacting_filter = setup_logging(level=log_level, log_format=args.log_format)

    console = Console(
        color=not args.no_color,
        verbose=args.verbose,
        quiet=args.quiet,
        json_mode=args.json,
    )

    config_provider = EnvironmentConfigProvider(
        config_file=Path(args.config) if args.config else None,
        cli_overrides=vars(args),
    )
    errors = config_provider.validate()
    if errors:
        console.config_errors(errors)
        return ExitCode.CONFIG_ERROR

    try:
        config = config_provider.load()
    except ConfigError as e:
        console.config_errors([str(e)])
        return ExitCode.CONFIG_ERROR

    redacting_filter.register_secret(config.outline.api_key)
    console.debug(f"Configuration loaded from {config_provider.name}")

    handler = COMMANDS[(args.command, getattr(args, "documents_command", None))]
    try:
        return handler(args, console, config)
    except KeyboardInterrupt:
        console.warning("Cancelled by user")
        return ExitCode.CANCELLED


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
