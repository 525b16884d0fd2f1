"""Pydantic schemas for the persisted application blob"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as SchemaValidationError

from loan_origination.domain.exceptions import PersistenceError, ValidationError
from loan_origination.domain.models import ApplicationStatus, LoanApplication, validate_application


class LoanApplicationRecord(BaseModel):
    """One element of the stored JSON array"""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    full_name: str = Field(..., alias="fullName")
    loan_amount: Union[str, int, float] = Field(..., alias="loanAmount")
    purpose: str
    credit_score: Optional[Union[int, str]] = Field(None, alias="creditScore")
    status: ApplicationStatus = ApplicationStatus.PENDING


_records_adapter = TypeAdapter(List[LoanApplicationRecord])


def encode_applications(applications: List[LoanApplication]) -> bytes:
    """
    Serialize applications to a JSON array.

    loanAmount is written as text and creditScore as a number, omitted when
    unknown.

    Raises:
        PersistenceError: If an application cannot be serialized
    """
    try:
        records = [
            LoanApplicationRecord(
                id=app.id,
                full_name=app.full_name,
                loan_amount=str(app.loan_amount),
                purpose=app.purpose,
                credit_score=app.credit_score,
                status=app.status,
            )
            for app in applications
        ]
        return _records_adapter.dump_json(records, by_alias=True, exclude_none=True)
    except (SchemaValidationError, TypeError, ValueError) as e:
        raise PersistenceError(f"Failed to encode applications: {e}") from e


def decode_applications(blob: bytes) -> List[LoanApplication]:
    """
    Parse a stored JSON array back into applications, order preserved.

    Older records without creditScore load with credit_score=None.

    Raises:
        PersistenceError: On malformed JSON, schema violations, unparseable
            numbers or duplicate ids
    """
    try:
        records = _records_adapter.validate_json(blob)
    except SchemaValidationError as e:
        raise PersistenceError(f"Malformed application data: {e}") from e

    applications = []
    seen_ids = set()
    for record in records:
        if record.id in seen_ids:
            raise PersistenceError(f"Duplicate application id {record.id!r}")
        seen_ids.add(record.id)

        application = LoanApplication(
            id=record.id,
            full_name=record.full_name,
            loan_amount=record.loan_amount,
            purpose=record.purpose,
            credit_score=record.credit_score,
            status=record.status,
        )
        try:
            validate_application(application, require_score=False)
        except ValidationError as e:
            raise PersistenceError(f"Invalid stored application {record.id!r}: {e}") from e

        applications.append(application)

    return applications
