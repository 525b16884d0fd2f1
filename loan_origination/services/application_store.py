"""Ordered in-memory collection of loan applications with blob persistence"""

import logging
from typing import List

from loan_origination.config import settings
from loan_origination.domain.exceptions import (
    InvalidStatusTransitionError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from loan_origination.domain.models import ApplicationStatus, LoanApplication, validate_application
from loan_origination.infrastructure.observability.metrics import persistence_failure_counter
from loan_origination.infrastructure.storage.blob_store import BlobStore
from loan_origination.infrastructure.storage.schemas import decode_applications, encode_applications

logger = logging.getLogger(__name__)


class ApplicationStore:
    """
    Holds submitted applications in insertion order.

    Not thread-safe: callers sharing one store across threads must
    serialize access themselves.
    """

    def __init__(self, blob_store: BlobStore, storage_key: str | None = None):
        self.blob_store = blob_store
        self.storage_key = storage_key or settings.storage_key
        self._applications: List[LoanApplication] = []

    def __len__(self) -> int:
        return len(self._applications)

    def add(self, application: LoanApplication) -> None:
        """
        Append a validated application to the end of the store.

        Raises:
            ValidationError: On empty/malformed fields or an id already stored
        """
        validate_application(application)
        if any(a.id == application.id for a in self._applications):
            raise ValidationError(f"Application id {application.id!r} already exists")
        self._applications.append(application)

    def get(self, application_id: str) -> LoanApplication:
        """
        Raises:
            NotFoundError: If no application has this id
        """
        for application in self._applications:
            if application.id == application_id:
                return application
        raise NotFoundError(f"Loan application {application_id!r} not found")

    def update(self, application_id: str, status: ApplicationStatus) -> LoanApplication:
        """
        Set the status of a stored application in place.

        Only Pending -> Approved/Rejected is allowed; writing the current
        status again is a no-op.

        Raises:
            NotFoundError: If no application has this id
            InvalidStatusTransitionError: For any other status change
        """
        application = self.get(application_id)
        try:
            status = ApplicationStatus(status)
        except ValueError as e:
            raise ValidationError(f"Unknown status {status!r}") from e

        if status == application.status:
            return application
        if application.status.is_terminal or not status.is_terminal:
            raise InvalidStatusTransitionError(
                f"Cannot move application {application_id!r} "
                f"from {application.status.value} to {status.value}"
            )

        application.status = status
        return application

    def all(self) -> List[LoanApplication]:
        """Applications in insertion order"""
        return list(self._applications)

    def load(self) -> List[LoanApplication]:
        """
        Replace contents with the persisted sequence.

        Missing or corrupt data yields an empty store; never raises.
        """
        try:
            blob = self.blob_store.read(self.storage_key)
            self._applications = decode_applications(blob) if blob else []
        except PersistenceError as e:
            persistence_failure_counter.labels(operation="load").inc()
            logger.warning(
                f"Discarding stored applications: {e}",
                extra={"storage_key": self.storage_key},
            )
            self._applications = []

        return self.all()

    def save(self) -> bool:
        """
        Persist the full ordered sequence.

        Returns False (after logging) if encoding or writing failed.
        """
        try:
            self.blob_store.write(self.storage_key, encode_applications(self._applications))
        except PersistenceError as e:
            persistence_failure_counter.labels(operation="save").inc()
            logger.warning(
                f"Failed to save applications: {e}",
                extra={"storage_key": self.storage_key},
            )
            return False
        return True
