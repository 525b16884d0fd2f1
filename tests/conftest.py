"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from pathlib import Path
from sqlalchemy.orm import sessionmaker

from loan_origination.domain.models import LoanApplication
from loan_origination.infrastructure.database.session import create_session_factory
from loan_origination.infrastructure.storage.blob_store import InMemoryBlobStore, SqlBlobStore
from loan_origination.services.application_store import ApplicationStore
from loan_origination.services.loan_service import LoanService


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    """Empty in-memory key/blob store"""
    return InMemoryBlobStore()


@pytest.fixture
def session_factory(tmp_path: Path) -> sessionmaker:
    """SQLite-backed session factory on a throwaway database file"""
    return create_session_factory(f"sqlite:///{tmp_path / 'test.db'}")


@pytest.fixture
def sql_blob_store(session_factory: sessionmaker) -> SqlBlobStore:
    """Blob store persisted in the test database"""
    return SqlBlobStore(session_factory)


@pytest.fixture
def store(blob_store: InMemoryBlobStore) -> ApplicationStore:
    """Empty application store over the in-memory blob store"""
    return ApplicationStore(blob_store, storage_key="loanApplications")


@pytest.fixture
def service(store: ApplicationStore) -> LoanService:
    return LoanService(store)


@pytest.fixture
def sample_application() -> LoanApplication:
    """Application that satisfies the approval rule"""
    return LoanApplication(
        id="3f1c2a8e-0000-4000-8000-000000000001",
        full_name="John Doe",
        loan_amount=Decimal("10000"),
        purpose="Home Renovation",
        credit_score=720,
    )


@pytest.fixture
def sample_applications() -> list[LoanApplication]:
    """Mixed dashboard history: pending, approved and rejected"""
    return [
        LoanApplication(
            id="3f1c2a8e-0000-4000-8000-000000000002",
            full_name="John Doe",
            loan_amount="10000",
            purpose="Home Renovation",
            credit_score="650",
        ),
        LoanApplication(
            id="3f1c2a8e-0000-4000-8000-000000000003",
            full_name="Jane Smith",
            loan_amount="5000",
            purpose="Car Purchase",
            credit_score="720",
            status="Approved",
        ),
        LoanApplication(
            id="3f1c2a8e-0000-4000-8000-000000000004",
            full_name="Alice Johnson",
            loan_amount="20000.50",
            purpose="Debt Consolidation",
            credit_score="450",
            status="Rejected",
        ),
    ]
