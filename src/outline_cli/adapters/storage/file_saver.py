"""
File Document Saver - Implements DocumentSaverPort on the local disk.
"""

import logging
from pathlib import Path

from outline_cli.core.exceptions import AdapterError, NameCollisionError
from outline_cli.core.ports.document_saver import DocumentSaverPort


class FileDocumentSaver(DocumentSaverPort):
    """
    Saves documents as UTF-8 files in a directory.

    Existing files are never touched: the target is checked before
    writing and then opened in exclusive-create mode, so a file that
    appears in between is still reported as a collision.
    Names containing a path separator are rejected, so nothing is
    written outside the directory. A partially written file is removed.
    """

    def __init__(self, directory: str | Path | None = None):
        """
        Initialize the saver.

        Args:
            directory: Directory to write into (defaults to the working directory)
        """
        self.directory = Path(directory) if directory is not None else Path(".")
        self.logger = logging.getLogger("FileDocumentSaver")

    def target_path(self, name: str) -> Path:
        """Path a document saved under ``name`` would be written to."""
        return self.directory / name

    def save(self, content: str, name: str) -> None:
        if name in ("", ".", "..") or Path(name).name != name:
            raise AdapterError(f"{name!r} is not a plain file name")

        target = self.target_path(name)
        if target.exists():
            raise NameCollisionError(name)

        try:
            handle = target.open("x", encoding="utf-8")
        except FileExistsError as e:
            raise NameCollisionError(name, cause=e) from e
        except OSError as e:
            raise AdapterError("failed opening file to save document", cause=e) from e

        # Closing flushes, so write errors may only surface on exit
        try:
            with handle:
                handle.write(content)
        except OSError as e:
            target.unlink(missing_ok=True)
            raise AdapterError("failed writing document to file", cause=e) from e

        self.logger.debug(f"Wrote {len(content)} characters to {target}")
