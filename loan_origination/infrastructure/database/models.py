"""SQLAlchemy ORM models for key/blob persistence"""

from sqlalchemy import Column, DateTime, LargeBinary, String
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class StoredBlob(Base):
    """Named opaque blob, the on-disk counterpart of a device key-value store"""

    __tablename__ = "stored_blob"

    key = Column(String(255), primary_key=True)
    value = Column(LargeBinary, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
