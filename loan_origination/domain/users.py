"""Simulated sign-in and sign-up producing session-only users"""

from datetime import date

from loan_origination.domain.exceptions import ValidationError
from loan_origination.domain.models import User, new_id
from loan_origination.utils.date_utils import calculate_age

MINIMUM_AGE = 18


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def sign_in(username: str, password: str) -> User:
    """
    Start a session for username. Credentials are not checked.

    Raises:
        ValidationError: If username or password is blank
    """
    if _is_blank(username) or _is_blank(password):
        raise ValidationError("Username and password are required")
    return User(id=new_id(), username=username.strip())


def sign_up(
    full_name: str,
    username: str,
    password: str,
    confirm_password: str,
    agreed_to_terms: bool,
    date_of_birth: date | None = None,
    today: date | None = None,
) -> User:
    """
    Register and sign in a new user.

    Requirements:
    - full name, username, password and confirmation are non-blank
    - password and confirmation match exactly
    - terms and conditions accepted
    - applicant at least 18 years old, when date_of_birth is given

    Raises:
        ValidationError: Listing every failed requirement
    """
    errors = []
    if any(_is_blank(v) for v in (full_name, username, password, confirm_password)):
        errors.append("all fields are required")
    if password != confirm_password:
        errors.append("passwords do not match")
    if not agreed_to_terms:
        errors.append("terms and conditions must be accepted")
    if date_of_birth is not None and calculate_age(date_of_birth, today) < MINIMUM_AGE:
        errors.append(f"applicant must be at least {MINIMUM_AGE} years old")

    if errors:
        raise ValidationError("; ".join(errors))

    return User(id=new_id(), username=username.strip())
