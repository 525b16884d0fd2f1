"""Data access layer for stored blobs"""

from typing import Optional

from sqlalchemy.orm import Session

from loan_origination.infrastructure.database.models import StoredBlob


class BlobRepository:
    """Repository for named blobs"""

    def __init__(self, db: Session):
        self.db = db

    def get_blob(self, key: str) -> Optional[bytes]:
        """Fetch blob bytes by key, None if absent"""
        row = self.db.get(StoredBlob, key)
        return bytes(row.value) if row is not None else None

    def put_blob(self, key: str, value: bytes) -> StoredBlob:
        """Insert or replace the blob stored under key"""
        row = self.db.get(StoredBlob, key)
        if row is None:
            row = StoredBlob(key=key, value=value)
            self.db.add(row)
        else:
            row.value = value
        self.db.flush()
        return row
