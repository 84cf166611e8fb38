"""
Persistence of uploaded files

The UNIQUE constraint on files.hash is the authoritative duplicate check.
FileStore.exists() only lets callers skip reading content that is already
stored; it may race with a concurrent insert of the same content.
"""
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from api.files.models import FileRecord, FilePublic


class FileStoreError(Exception):
    """ Base class for file store failures """


class StorageError(FileStoreError):
    """ Generic failure of the underlying database """


class DuplicateFileError(FileStoreError):
    """ A file with the same content hash is already stored """

    def __init__(self, digest: str):
        super().__init__(f"File with hash {digest} already exists")
        self.digest = digest


class FileStore:
    """ File records backed by a single request-scoped session """

    def __init__(self, session: Session):
        self.session = session

    def exists(self, digest: str) -> bool:
        """ Whether a file with this content hash has been committed """
        try:
            record_id = self.session.exec(
                select(FileRecord.id).where(FileRecord.hash == digest)
            ).first()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
        return record_id is not None

    def insert(self, digest: str, name: str, content: bytes) -> int:
        """
        Store a new file and return its id.

        Raises:
            DuplicateFileError: the hash is already stored; nothing was written
            StorageError: any other database failure; nothing was written
        """
        record = FileRecord(hash=digest, name=name, content=content)
        try:
            self.session.add(record)
            self.session.commit()
            self.session.refresh(record)
        except IntegrityError as e:
            self.session.rollback()
            if self.exists(digest):
                raise DuplicateFileError(digest) from e
            raise StorageError(str(e)) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError(str(e)) from e
        return record.id

    def list_all(self) -> list[FilePublic]:
        """ Metadata of every stored file, ordered by id """
        try:
            rows = self.session.exec(
                select(FileRecord.id, FileRecord.hash, FileRecord.name)
                .order_by(FileRecord.id)
            ).all()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
        return [
            FilePublic(id=row.id, hash=row.hash, name=row.name) for row in rows
        ]
