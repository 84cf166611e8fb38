"""
Models for the Files API
"""

from sqlalchemy import Column, LargeBinary
from sqlmodel import SQLModel, Field
from pydantic import ConfigDict


class FileRecord(SQLModel, table=True):
    """
    Uploaded file, identified by the SHA-256 digest of its content
    """
    __tablename__ = "files"
    # Ids are never reused
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    hash: str = Field(max_length=64, unique=True, nullable=False)
    name: str = Field(nullable=False)
    content: bytes = Field(sa_column=Column(LargeBinary, nullable=False))


class FilePublic(SQLModel):
    """
    Public view of a stored file, without its content
    """
    id: int
    hash: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class FileUploadResponse(SQLModel):
    """Response model for file upload"""

    message: str = "File uploaded successfully"
    filename: str
    hash: str
