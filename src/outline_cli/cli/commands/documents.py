"""
Document command handlers.

This module contains handlers for the ``documents`` subcommands:
- run_list: List one page of documents
- run_save: Download one document to a Markdown file
"""

import logging
from pathlib import Path

from outline_cli.adapters.outline import OutlineAdapter
from outline_cli.adapters.storage import FileDocumentSaver
from outline_cli.application import list_documents, retrieve_and_save_document
from outline_cli.core.domain.value_objects import ListOptions, RetrieveOptions
from outline_cli.core.exceptions import (
    AuthLookupError,
    BadAuthError,
    DocumentDoesNotExistError,
    InvalidCredentialsError,
    ListingError,
    RetrieveFailedError,
    SaveFailedError,
    SaveNameCollisionError,
)
from outline_cli.core.ports.config_provider import AppConfig

from ..exit_codes import ExitCode
from ..output import Console


__all__ = [
    "run_list",
    "run_save",
]

logger = logging.getLogger("DocumentsCommand")


def run_list(args, console: Console, config: AppConfig) -> int:
    """
    Run the ``documents list`` subcommand.

    Args:
        args: Parsed command-line arguments.
        console: Console for output.
        config: Loaded application configuration.

    Returns:
        Exit code.
    """
    adapter = OutlineAdapter(config.outline)
    options = ListOptions(
        page=args.page,
        results_per_page=args.results_per_page,
        own_documents_only=args.mine_only,
    )

    try:
        documents = list_documents(options, auth=adapter, reader=adapter)
    except InvalidCredentialsError:
        console.error(
            "The credentials used to access Outline didn't seem to work. "
            "Try using a different token!"
        )
        return ExitCode.AUTH_ERROR
    except AuthLookupError as e:
        console.error(
            "Could not list your documents because we had trouble looking up "
            "information about who you are from Outline."
        )
        console.error_detail(e)
        return ExitCode.CONNECTION_ERROR
    except ListingError as e:
        console.error("Something went wrong when trying to list your available documents!")
        console.error_detail(e)
        return ExitCode.CONNECTION_ERROR
    finally:
        adapter.close()

    if console.json_mode:
        console.json([{"id": doc.id, "title": doc.title} for doc in documents])
        return ExitCode.SUCCESS

    if not documents:
        console.print("No documents found!", force=True)
        return ExitCode.SUCCESS

    console.print(f"Retrieved documents (page {options.page}):", force=True)
    console.table(
        ["Title", "ID"],
        [[f'"{doc.title}"', doc.id] for doc in documents],
        force=True,
    )
    return ExitCode.SUCCESS


def run_save(args, console: Console, config: AppConfig) -> int:
    """
    Run the ``documents save`` subcommand.

    Args:
        args: Parsed command-line arguments.
        console: Console for output.
        config: Loaded application configuration.

    Returns:
        Exit code.
    """
    output_dir = args.output_dir or config.output_dir
    saver = FileDocumentSaver(Path(output_dir).expanduser() if output_dir else None)
    adapter = OutlineAdapter(config.outline)
    options = RetrieveOptions(suggested_name=args.file_name)

    try:
        target = retrieve_and_save_document(
            args.doc_id, options, reader=adapter, saver=saver
        )
    except BadAuthError:
        console.error(
            "The API token provided was rejected by Outline, "
            "try generating another one and try again!"
        )
        return ExitCode.AUTH_ERROR
    except DocumentDoesNotExistError as e:
        console.error(f'Outline could not find a document with the ID "{e.document_id}".')
        return ExitCode.NOT_FOUND
    except RetrieveFailedError as e:
        console.error("Could not fetch the requested document from Outline for an unknown reason!")
        console.error_detail(e)
        return ExitCode.CONNECTION_ERROR
    except SaveNameCollisionError as e:
        console.error(
            f'A file with the same name already exists ("{e.name}"), '
            "please suggest a different name using --file-name."
        )
        return ExitCode.FILE_EXISTS
    except SaveFailedError as e:
        console.error("Could not save the document to disk!")
        console.error_detail(e)
        return ExitCode.ERROR
    finally:
        adapter.close()

    path = saver.target_path(target.name)
    logger.debug(f"Saved document {args.doc_id} to {path}")

    if console.json_mode:
        console.json({"id": args.doc_id, "name": target.name, "path": str(path)})
        return ExitCode.SUCCESS

    console.success(f"Document saved successfully! ({path})")
    return ExitCode.SUCCESS
