"""Submission and decision workflow driven by the UI screens"""

import logging
from typing import Any, List

from loan_origination.domain.decision import check_eligibility
from loan_origination.domain.exceptions import NotFoundError, ValidationError
from loan_origination.domain.models import ApplicationStatus, LoanApplication
from loan_origination.infrastructure.observability.logging import log_decision, log_submission
from loan_origination.infrastructure.observability.metrics import record_decision, submission_counter
from loan_origination.services.application_store import ApplicationStore

logger = logging.getLogger(__name__)


class LoanService:
    """Coordinates the store and the decision engine for one session"""

    def __init__(self, store: ApplicationStore):
        self.store = store

    def submit(
        self,
        full_name: str,
        loan_amount: Any,
        purpose: str,
        credit_score: Any,
        agreed_to_terms: bool = True,
    ) -> LoanApplication:
        """
        Create a Pending application from form input and persist it.

        Flow:
        1. Require the terms checkbox
        2. Parse and validate the form fields
        3. Append to the store and save

        Raises:
            ValidationError: On missing terms agreement or bad input; the
                store is left unchanged
        """
        if not agreed_to_terms:
            raise ValidationError("Terms and conditions must be accepted")

        application = LoanApplication.new(
            full_name=full_name,
            loan_amount=loan_amount,
            purpose=purpose,
            credit_score=credit_score,
        )
        self.store.add(application)
        self.store.save()

        submission_counter.inc()
        log_submission(application.id, application.loan_amount, application.credit_score)
        return application

    def decide(self, application_id: str) -> LoanApplication:
        """
        Run the decision engine on a stored application and persist the result.

        Approved and Rejected are final: an already decided application is
        returned unchanged without re-running the rule.

        Raises:
            NotFoundError: If no application has this id
        """
        application = self.store.get(application_id)
        if application.status.is_terminal:
            return application

        eligibility = check_eligibility(application)
        status = ApplicationStatus.APPROVED if eligibility.eligible else ApplicationStatus.REJECTED
        reasons = eligibility.reasons

        self.store.update(application_id, status)
        self.store.save()

        record_decision(status, application.loan_amount)
        log_decision(
            application.id,
            status.value,
            application.loan_amount,
            application.credit_score,
            reasons,
        )
        return application

    def status_of(self, application_id: str) -> ApplicationStatus:
        """Stored status, or Pending for an id the store does not know"""
        try:
            return self.store.get(application_id).status
        except NotFoundError:
            logger.debug(f"Status requested for unknown application {application_id}")
            return ApplicationStatus.PENDING

    def applications(self) -> List[LoanApplication]:
        return self.store.all()
