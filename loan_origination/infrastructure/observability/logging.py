"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional

from pythonjsonlogger.json import JsonFormatter

from loan_origination.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_submission(application_id: str, loan_amount: Decimal, credit_score: Optional[int]) -> None:
    """Log structured submission event"""
    logging.getLogger("loan_origination").info(
        "Application submitted",
        extra={
            "application_id": application_id,
            "step": "submission",
            "loan_amount": str(loan_amount),
            "credit_score": credit_score,
        },
    )


def log_decision(
    application_id: str,
    status: str,
    loan_amount: Decimal,
    credit_score: Optional[int],
    reasons: Optional[list] = None,
) -> None:
    """Log structured decision outcome for analysis"""
    logging.getLogger("loan_origination").info(
        "Decision completed",
        extra={
            "application_id": application_id,
            "step": "decision_complete",
            "decision_outcome": status,
            "loan_amount": str(loan_amount),
            "credit_score": credit_score,
            "reasons": reasons or [],
        },
    )
