"""Date manipulation utilities"""

from datetime import date


def calculate_age(birth_date: date, today: date | None = None) -> int:
    """Whole years between birth_date and today (a birthday not yet reached this year doesn't count)"""
    today = today or date.today()
    before_birthday = (today.month, today.day) < (birth_date.month, birth_date.day)
    return today.year - birth_date.year - int(before_birthday)
