"""
Output - Terminal output for the outline CLI.

Results go to stdout, errors go to stderr. Colors are only used when stdout
is a terminal.
"""

import json
import sys
from typing import Any


class Colors:
    """ANSI escape codes used by the console."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"


class Symbols:
    """Status markers printed in front of messages."""

    CHECK = "✓"
    CROSS = "✗"
    DOT = "•"
    WARN = "⚠"


class Console:
    """
    Writes command results and errors to the terminal.

    In quiet mode only results and errors are printed. JSON mode implies
    quiet, so stdout carries nothing but the JSON document.
    """

    def __init__(
        self,
        color: bool = True,
        verbose: bool = False,
        quiet: bool = False,
        json_mode: bool = False,
    ):
        self.json_mode = json_mode
        self.color = color and sys.stdout.isatty() and not json_mode
        self.quiet = quiet or json_mode
        self.verbose = verbose and not self.quiet

    def _c(self, text: str, *codes: str) -> str:
        if not self.color:
            return text
        return "".join(codes) + text + Colors.RESET

    def print(self, text: str = "", force: bool = False) -> None:
        """Print a line to stdout unless quiet. ``force`` prints it regardless."""
        if self.quiet and not force:
            return
        print(text)

    def success(self, text: str) -> None:
        """Print the result line of a successful command. Printed even when quiet."""
        self.print(self._c(f"{Symbols.CHECK} {text}", Colors.GREEN), force=True)

    def warning(self, text: str) -> None:
        if self.quiet:
            return
        self.print(self._c(f"{Symbols.WARN} {text}", Colors.YELLOW))

    def debug(self, text: str) -> None:
        if self.verbose:
            self.print(self._c(f"[DEBUG] {text}", Colors.DIM))

    def error(self, text: str) -> None:
        print(self._c(f"{Symbols.CROSS} {text}", Colors.RED), file=sys.stderr)

    def error_detail(self, exc: BaseException) -> None:
        """Print the underlying error chain below an error message."""
        print(self._c(f"  More detail: {exc}", Colors.DIM), file=sys.stderr)

    def config_errors(self, errors: list[str]) -> None:
        """Print configuration problems and how to supply the API key."""
        self.error("Configuration is incomplete:")
        for error in errors:
            print(f"  {Symbols.DOT} {error}", file=sys.stderr)
        print(
            "  Set GETOUTLINE_API_KEY in your environment or a .env file, "
            "or pass --api-key.",
            file=sys.stderr,
        )

    def table(self, headers: list[str], rows: list[list[str]], force: bool = False) -> None:
        """
        Print rows as left-aligned columns under a header and a dashed rule.

        Args:
            headers: Column titles; their count fixes the number of columns.
            rows: Cell values, one list per row.
            force: Print even in quiet mode.
        """
        if self.quiet and not force:
            return

        widths = [len(header) for header in headers]
        for row in rows:
            for i, cell in enumerate(row[: len(widths)]):
                widths[i] = max(widths[i], len(str(cell)))

        def line(cells: list[str]) -> str:
            return "  ".join(str(cell).ljust(width) for cell, width in zip(cells, widths)).rstrip()

        self.print(self._c(line(headers), Colors.BOLD), force=force)
        self.print("  ".join("-" * width for width in widths), force=force)
        for row in rows:
            self.print(line(row), force=force)

    def json(self, payload: Any) -> None:
        """Print a JSON document to stdout. Always printed."""
        print(json.dumps(payload, indent=2, ensure_ascii=False))
