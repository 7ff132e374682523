"""
Document Operations - List documents and save a single document.

Both operations are written against ports only, so any adapter satisfying
AuthPort, DocumentReaderPort and DocumentSaverPort can be plugged in.
Port errors are reclassified into ListError / RetrieveError subclasses;
nothing is retried.
"""

import logging

from outline_cli.core.domain.entities import DocumentSummary
from outline_cli.core.domain.value_objects import (
    ListOptions,
    ReaderQuery,
    RetrieveOptions,
    SaveTarget,
)
from outline_cli.core.exceptions import (
    AdapterError,
    AuthLookupError,
    BadAuthError,
    BadCredentialsError,
    DocumentDoesNotExistError,
    DocumentNotFoundError,
    InvalidCredentialsError,
    ListingError,
    NameCollisionError,
    RetrieveFailedError,
    SaveFailedError,
    SaveNameCollisionError,
)
from outline_cli.core.ports.auth_provider import AuthPort
from outline_cli.core.ports.document_reader import DocumentReaderPort
from outline_cli.core.ports.document_saver import DocumentSaverPort


logger = logging.getLogger("Documents")


def list_documents(
    options: ListOptions,
    auth: AuthPort,
    reader: DocumentReaderPort,
) -> list[DocumentSummary]:
    """
    List one page of documents, optionally only the caller's own.

    The current user is only looked up when ``own_documents_only`` is set.

    Args:
        options: Page, page size and author filter.
        auth: Used to find the current user's ID.
        reader: Used to list documents.

    Returns:
        Document summaries in the order the reader returned them.

    Raises:
        AuthLookupError: If the current user could not be looked up.
        InvalidCredentialsError: If the reader rejected the credentials.
        ListingError: If listing failed for any other reason.
    """
    author_id = None
    if options.own_documents_only:
        try:
            identity = auth.current()
        except AdapterError as e:
            raise AuthLookupError(
                "Tried to read authentication information while fetching document list",
                cause=e,
            ) from e
        logger.debug(f"Filtering documents by author {identity.id}")
        author_id = identity.id

    query = ReaderQuery.from_list_options(options, author_id=author_id)
    logger.debug(f"Listing documents (offset={query.offset}, limit={query.limit})")

    try:
        documents = reader.list_documents(query)
    except BadCredentialsError as e:
        raise InvalidCredentialsError(cause=e) from e
    except AdapterError as e:
        raise ListingError("Fetching the list of documents failed", cause=e) from e

    logger.info(f"Retrieved {len(documents)} documents for page {options.page}")
    return documents


def retrieve_and_save_document(
    document_id: str,
    options: RetrieveOptions,
    reader: DocumentReaderPort,
    saver: DocumentSaverPort,
) -> SaveTarget:
    """
    Fetch one document and save its text.

    Performs exactly one read and, if that succeeds, exactly one write.
    An existing target is never overwritten.

    Args:
        document_id: ID of the document to fetch.
        options: Optional name to save the document under.
        reader: Used to fetch the document.
        saver: Used to persist the document text.

    Returns:
        The target the document was saved under.

    Raises:
        DocumentDoesNotExistError: If no document has this ID.
        BadAuthError: If the reader rejected the credentials.
        RetrieveFailedError: If fetching failed for any other reason.
        SaveNameCollisionError: If the target name is already taken.
        SaveFailedError: If saving failed for any other reason.
    """
    try:
        content = reader.retrieve_one(document_id)
    except DocumentNotFoundError as e:
        raise DocumentDoesNotExistError(document_id, cause=e) from e
    except BadCredentialsError as e:
        raise BadAuthError(cause=e) from e
    except AdapterError as e:
        raise RetrieveFailedError(
            f"Fetching document {document_id} failed", cause=e
        ) from e

    target = SaveTarget.derive(content.title, options.suggested_name)
    logger.debug(f"Saving document {content.id} as {target.name!r}")

    try:
        saver.save(content.text, target.name)
    except NameCollisionError as e:
        raise SaveNameCollisionError(e.name, cause=e) from e
    except AdapterError as e:
        raise SaveFailedError(f"Saving document as {target.name!r} failed", cause=e) from e

    logger.info(f"Saved document {content.id} as {target.name!r}")
    return target
