"""Decision engine - approve/reject rule for loan applications"""

from decimal import Decimal

from loan_origination.domain.exceptions import ValidationError
from loan_origination.domain.models import ApplicationStatus, EligibilityResult, LoanApplication
from loan_origination.utils.number_utils import parse_amount, parse_score

# Approval thresholds (inclusive)
MAX_LOAN_AMOUNT = Decimal("100000")
MIN_CREDIT_SCORE = 500
MAX_CREDIT_SCORE = 800


def check_eligibility(application: LoanApplication) -> EligibilityResult:
    """
    Evaluate each approval rule separately.

    Rules:
    - loan_amount <= 100000
    - 500 <= credit_score <= 800

    Both are compared as parsed numbers. A value that cannot be parsed
    fails its rule instead of raising.
    """
    reasons = []

    try:
        amount = parse_amount(application.loan_amount)
        amount_ok = amount <= MAX_LOAN_AMOUNT
        if not amount_ok:
            reasons.append(f"loan amount {amount} exceeds limit {MAX_LOAN_AMOUNT}")
    except ValidationError as e:
        amount_ok = False
        reasons.append(str(e))

    try:
        score = parse_score(application.credit_score)
        score_ok = MIN_CREDIT_SCORE <= score <= MAX_CREDIT_SCORE
        if not score_ok:
            reasons.append(
                f"credit score {score} outside {MIN_CREDIT_SCORE}-{MAX_CREDIT_SCORE}"
            )
    except ValidationError as e:
        score_ok = False
        reasons.append(str(e))

    return EligibilityResult(
        amount_within_limit=amount_ok,
        score_within_band=score_ok,
        reasons=reasons,
    )


def evaluate(application: LoanApplication) -> ApplicationStatus:
    """
    Main entry point: decide an application.

    Pure and total - the application is not modified and the same snapshot
    always yields the same status.
    """
    if check_eligibility(application).eligible:
        return ApplicationStatus.APPROVED
    return ApplicationStatus.REJECTED
