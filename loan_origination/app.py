"""Application factory wiring storage, store and service"""

from loan_origination.config import settings
from loan_origination.infrastructure.database.session import get_session_factory
from loan_origination.infrastructure.observability.logging import setup_logging
from loan_origination.infrastructure.storage.blob_store import BlobStore, SqlBlobStore
from loan_origination.services.application_store import ApplicationStore
from loan_origination.services.loan_service import LoanService


def create_service(blob_store: BlobStore | None = None) -> LoanService:
    """
    Create a LoanService over a loaded ApplicationStore.

    Uses the configured SQL database when no blob store is given.
    """
    setup_logging(settings.log_level)

    if blob_store is None:
        blob_store = SqlBlobStore(get_session_factory())

    store = ApplicationStore(blob_store, storage_key=settings.storage_key)
    store.load()
    return LoanService(store)
