"""Key/blob stores backing ApplicationStore persistence"""

from typing import Callable, Dict, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from loan_origination.domain.exceptions import PersistenceError
from loan_origination.infrastructure.database.repositories import BlobRepository


class BlobStore(Protocol):
    """Flat key-value store of opaque byte blobs"""

    def read(self, key: str) -> Optional[bytes]:
        ...

    def write(self, key: str, value: bytes) -> None:
        ...


class InMemoryBlobStore:
    """Dict-backed blob store for tests and previews"""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._blobs: Dict[str, bytes] = dict(initial or {})

    def read(self, key: str) -> Optional[bytes]:
        return self._blobs.get(key)

    def write(self, key: str, value: bytes) -> None:
        self._blobs[key] = bytes(value)


class SqlBlobStore:
    """Blob store persisted in a SQL table, one session per operation"""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def read(self, key: str) -> Optional[bytes]:
        """
        Read the blob stored under key.

        Raises:
            PersistenceError: On any database failure
        """
        try:
            with self.session_factory() as db:
                return BlobRepository(db).get_blob(key)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read blob {key!r}: {e}") from e

    def write(self, key: str, value: bytes) -> None:
        """
        Replace the blob stored under key.

        Raises:
            PersistenceError: On any database failure (the write is rolled back)
        """
        db = self.session_factory()
        try:
            BlobRepository(db).put_blob(key, value)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise PersistenceError(f"Failed to write blob {key!r}: {e}") from e
        finally:
            db.close()
