"""
Define functions/aliases for dependency injection
"""
from collections.abc import Generator
from typing import Annotated, TypeAlias
from sqlmodel import Session
from fastapi import Depends

from core.db import get_engine
from api.files.store import FileStore


# Define db dependency
def get_db() -> Generator[Session, None, None]:
    with Session(get_engine()) as session:
        yield session


SessionDep: TypeAlias = Annotated[Session, Depends(get_db)]


def get_file_store(session: SessionDep) -> FileStore:
    return FileStore(session)


FileStoreDep: TypeAlias = Annotated[FileStore, Depends(get_file_store)]
