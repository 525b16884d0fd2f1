"""Unit tests for the loan decision engine"""

import pytest
from decimal import Decimal
from loan_origination.domain.models import ApplicationStatus, LoanApplication
from loan_origination.domain.decision import (
    MAX_LOAN_AMOUNT,
    check_eligibility,
    evaluate,
)


def make_application(loan_amount, credit_score) -> LoanApplication:
    return LoanApplication(
        id="app-1",
        full_name="Test Applicant",
        loan_amount=loan_amount,
        purpose="Testing",
        credit_score=credit_score,
    )


@pytest.mark.parametrize(
    "loan_amount,credit_score,expected",
    [
        (100000, 500, ApplicationStatus.APPROVED),  # both at the inclusive edge
        (100000, 800, ApplicationStatus.APPROVED),
        (100001, 650, ApplicationStatus.REJECTED),
        (50000, 499, ApplicationStatus.REJECTED),
        (50000, 801, ApplicationStatus.REJECTED),
        (0, 650, ApplicationStatus.APPROVED),
    ],
)
def test_evaluate_boundaries(loan_amount, credit_score, expected):
    """Test inclusive thresholds on amount and score"""
    assert evaluate(make_application(loan_amount, credit_score)) == expected


def test_evaluate_compares_numbers_not_strings():
    """Test text input is compared numerically"""
    # Lexically "99999" > "100000" and "9000" > "800"; numerically the reverse
    assert evaluate(make_application("99999", "650")) == ApplicationStatus.APPROVED
    assert evaluate(make_application("5000", "9000")) == ApplicationStatus.REJECTED
    assert evaluate(make_application("100000.01", "650")) == ApplicationStatus.REJECTED


def test_evaluate_is_pure():
    """Test repeated evaluation gives the same result and leaves input untouched"""
    application = make_application("75000", "700")

    first = evaluate(application)
    second = evaluate(application)

    assert first == second == ApplicationStatus.APPROVED
    assert application.status == ApplicationStatus.PENDING


def test_evaluate_rejects_missing_or_malformed_values():
    """Test evaluation never raises on bad snapshots"""
    assert evaluate(make_application("10000", None)) == ApplicationStatus.REJECTED
    assert evaluate(make_application("ten thousand", 700)) == ApplicationStatus.REJECTED
    assert evaluate(make_application("-5", 700)) == ApplicationStatus.REJECTED
    assert evaluate(make_application("10000", "seven hundred")) == ApplicationStatus.REJECTED


def test_check_eligibility_reports_each_rule():
    """Test per-rule breakdown and reasons"""
    result = check_eligibility(make_application(Decimal("150000"), 450))

    assert result.amount_within_limit is False
    assert result.score_within_band is False
    assert result.eligible is False
    assert len(result.reasons) == 2
    assert str(MAX_LOAN_AMOUNT) in result.reasons[0]

    ok = check_eligibility(make_application(Decimal("1500"), 650))
    assert ok.eligible is True
    assert ok.reasons == []
