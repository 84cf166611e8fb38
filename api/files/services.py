"""
Services for the Files API
"""

from fastapi import HTTPException, status
from starlette.datastructures import UploadFile

from api.files.models import FilePublic, FileUploadResponse
from api.files.store import DuplicateFileError, FileStore, StorageError
from core.hashing import hash_stream
from core.logger import logger

FILE_EXISTS = "File already exists"


def _internal_error(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )


def _conflict() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=FILE_EXISTS,
    )


def upload_file(store: FileStore, upload: UploadFile) -> FileUploadResponse:
    """
    Store an uploaded file unless identical content is already stored.

    The uploaded part is spooled to a seekable file, so it is read twice:
    once to hash it and once to load the content for the insert.
    """
    filename = upload.filename
    stream = upload.file

    try:
        digest = hash_stream(stream)
        stream.seek(0)
    except OSError as e:
        logger.error("Failed to hash upload %s: %s", filename, e)
        raise _internal_error("Failed to read file") from e

    # Fast path only, the insert below is the authoritative check
    try:
        already_stored = store.exists(digest)
    except StorageError as e:
        logger.error("Failed to check existence of %s: %s", digest, e)
        raise _internal_error("Failed to check file existence") from e
    if already_stored:
        logger.info("Rejected duplicate upload %s (%s)", filename, digest)
        raise _conflict()

    try:
        content = stream.read()
    except OSError as e:
        logger.error("Failed to read upload %s: %s", filename, e)
        raise _internal_error("Failed to read file content") from e

    try:
        store.insert(digest, filename, content)
    except DuplicateFileError as e:
        logger.info("Concurrent duplicate upload %s (%s)", filename, digest)
        raise _conflict() from e
    except StorageError as e:
        logger.error("Failed to save %s: %s", filename, e)
        raise _internal_error("Failed to save file to database") from e

    logger.info("Stored %s (%d bytes) as %s", filename, len(content), digest)
    return FileUploadResponse(filename=filename, hash=digest)


def list_files(store: FileStore) -> list[FilePublic]:
    """ List metadata of all stored files """
    try:
        return store.list_all()
    except StorageError as e:
        logger.error("Failed to list files: %s", e)
        raise _internal_error("Failed to get files") from e
