"""Domain models - pure Python dataclasses representing business entities"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from loan_origination.domain.exceptions import ValidationError
from loan_origination.utils.number_utils import parse_amount, parse_score


class ApplicationStatus(str, Enum):
    """Loan application decision states"""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not ApplicationStatus.PENDING


def new_id() -> str:
    """Opaque identifier for applications and users"""
    return str(uuid.uuid4())


@dataclass
class LoanApplication:
    """Single loan request with applicant info and decision status"""

    id: str
    full_name: str
    loan_amount: Any  # Decimal once well-formed
    purpose: str
    credit_score: Any = None  # int once well-formed
    status: ApplicationStatus = ApplicationStatus.PENDING

    def __post_init__(self) -> None:
        if isinstance(self.id, uuid.UUID):
            self.id = str(self.id)
        # Normalise well-formed numeric input; malformed values stay raw so
        # ApplicationStore.add can reject them with a ValidationError.
        try:
            self.loan_amount = parse_amount(self.loan_amount)
        except ValidationError:
            pass
        if self.credit_score is not None:
            try:
                self.credit_score = parse_score(self.credit_score)
            except ValidationError:
                pass
        if not isinstance(self.status, ApplicationStatus):
            self.status = ApplicationStatus(self.status)

    @classmethod
    def new(
        cls,
        full_name: str,
        loan_amount: Any,
        purpose: str,
        credit_score: Any,
    ) -> "LoanApplication":
        """
        Build a Pending application from raw form input with a fresh id.

        Raises:
            ValidationError: On the first missing or malformed field
        """
        application = cls(
            id=new_id(),
            full_name=full_name,
            loan_amount=loan_amount,
            purpose=purpose,
            credit_score=credit_score,
        )
        validate_application(application)
        return application


def validate_application(application: LoanApplication, require_score: bool = True) -> None:
    """
    Check that an application can be submitted.

    Requirements:
    - full_name and purpose are non-empty (whitespace only counts as empty)
    - loan_amount is a finite non-negative number
    - credit_score is present and a whole number (may be None when
      require_score is False)

    Raises:
        ValidationError: Describing every failing field
    """
    errors: List[str] = []

    if not isinstance(application.id, str) or not application.id.strip():
        errors.append("id must be non-empty text")
    if not isinstance(application.full_name, str) or not application.full_name.strip():
        errors.append("full_name is required")
    if not isinstance(application.purpose, str) or not application.purpose.strip():
        errors.append("purpose is required")

    try:
        parse_amount(application.loan_amount)
    except ValidationError as e:
        errors.append(str(e))

    if require_score or application.credit_score is not None:
        try:
            parse_score(application.credit_score)
        except ValidationError as e:
            errors.append(str(e))

    if errors:
        raise ValidationError("; ".join(errors))


@dataclass
class EligibilityResult:
    """Per-rule outcome of the approval rule"""

    amount_within_limit: bool
    score_within_band: bool
    reasons: List[str] = field(default_factory=list)

    @property
    def eligible(self) -> bool:
        return self.amount_within_limit and self.score_within_band


@dataclass
class User:
    """Signed-in user, held for the session only"""

    id: str
    username: str
