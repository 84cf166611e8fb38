"""
Database configuration
"""
from sqlmodel import SQLModel, create_engine
from sqlmodel.pool import StaticPool
from core.config import get_settings
# Registers the table models on the SQLModel metadata
import api.files.models  # pylint: disable=unused-import

# Create engine lazily to allow test configuration to be applied
_engine = None

IN_MEMORY_SQLITE_URIS = ("sqlite://", "sqlite:///:memory:")


def get_engine():
    """
    Get or create the database engine.
    This lazy initialization allows test settings to be applied properly.
    """
    global _engine
    if _engine is None:
        uri = str(get_settings().SQLALCHEMY_DATABASE_URI)
        kwargs = {}
        if uri.startswith("sqlite"):
            # Requests are served from a thread pool
            kwargs["connect_args"] = {"check_same_thread": False}
            if uri in IN_MEMORY_SQLITE_URIS:
                kwargs["poolclass"] = StaticPool
        _engine = create_engine(uri, echo=False, **kwargs)
    return _engine


def reset_engine():
    """
    Dispose of the engine and reset it to None.
    This is useful for tests that need to switch between different settings.
    """
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = None


def create_db_and_tables():
    """ Create all tables registered on the SQLModel metadata """
    SQLModel.metadata.create_all(get_engine())

