"""Parsing helpers for numeric form fields that arrive as text or numbers"""

from decimal import Decimal, InvalidOperation
from typing import Any

from loan_origination.domain.exceptions import ValidationError


def parse_amount(value: Any, field: str = "loan_amount") -> Decimal:
    """
    Parse a money amount into a Decimal.

    Accepts Decimal, int, float or numeric text ("5000", " 1250.50 ").
    Rejects empty text, booleans, NaN/infinity and negative values.

    Raises:
        ValidationError: If the value is not a finite non-negative number
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required")

    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValidationError(f"{field} is required")

    try:
        # str() first so floats keep their short repr (0.1 -> "0.1")
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise ValidationError(f"{field} must be a number, got {value!r}") from e

    if not amount.is_finite():
        raise ValidationError(f"{field} must be a finite number, got {value!r}")
    if amount < 0:
        raise ValidationError(f"{field} must not be negative, got {value!r}")

    return amount


def parse_score(value: Any, field: str = "credit_score") -> int:
    """
    Parse a credit score into an int.

    Accepts int or integer text ("720"). Integral floats and Decimals
    (720.0) are accepted; fractional ones are not.

    Raises:
        ValidationError: If the value is not a whole number
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValidationError(f"{field} is required")
        try:
            return int(value)
        except ValueError as e:
            raise ValidationError(f"{field} must be a whole number, got {value!r}") from e

    if isinstance(value, (float, Decimal)):
        try:
            if value == int(value):
                return int(value)
        except (ValueError, OverflowError, InvalidOperation) as e:
            raise ValidationError(f"{field} must be a whole number, got {value!r}") from e

    raise ValidationError(f"{field} must be a whole number, got {value!r}")
