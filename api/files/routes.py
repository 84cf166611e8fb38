"""
Routes/endpoints for the Files API

HTTP   URI        Action
----   ---        ------
POST   /upload    Upload a file (multipart field "file")
GET    /files     List metadata of all stored files
"""

from collections.abc import AsyncGenerator
from pathlib import PurePosixPath

from fastapi import APIRouter, Depends, HTTPException, Request, status
from starlette.datastructures import UploadFile

from api.files.models import FilePublic, FileUploadResponse
from api.files import services
from core.deps import FileStoreDep
from core.models import ErrorResponse

router = APIRouter(tags=["File Endpoints"])

NO_FILE = "No file is uploaded"

# The form is read by get_upload_file, so describe the body for the schema
UPLOAD_REQUEST_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {
                        "file": {"type": "string", "format": "binary"},
                    },
                    "required": ["file"],
                }
            }
        },
    }
}


async def get_upload_file(request: Request) -> AsyncGenerator[UploadFile, None]:
    """
    Extract the single "file" part from a multipart request.
    Responds 400 unless there is exactly one "file" field and it is a file
    with a filename. Only the last path component of the filename is kept.
    The parsed form is closed once the request is done.
    """
    try:
        form = await request.form()
    except Exception as e:  # pylint: disable=broad-exception-caught
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=NO_FILE
        ) from e
    try:
        parts = form.getlist("file")
        upload = parts[0] if len(parts) == 1 else None
        if not isinstance(upload, UploadFile) or not upload.filename:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=NO_FILE
            )
        upload.filename = PurePosixPath(upload.filename).name
        if not upload.filename:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=NO_FILE
            )
        yield upload
    finally:
        await form.close()


@router.post(
    "/upload",
    response_model=FileUploadResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra=UPLOAD_REQUEST_BODY,
)
def upload_file(
    store: FileStoreDep,
    upload: UploadFile = Depends(get_upload_file),
) -> FileUploadResponse:
    """
    Upload a file. Content already stored under the same SHA-256
    digest is rejected with 409, whatever the filename.
    """
    return services.upload_file(store=store, upload=upload)


@router.get(
    "/files",
    response_model=list[FilePublic],
    status_code=status.HTTP_200_OK,
    responses={500: {"model": ErrorResponse}},
)
def list_files(store: FileStoreDep) -> list[FilePublic]:
    """
    Retrieve id, hash and name of every stored file.
    """
    return services.list_files(store=store)
