"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Submission input is missing or malformed"""

    pass


class InvalidStatusTransitionError(ValidationError):
    """Requested status change is not allowed from the current status"""

    pass


class NotFoundError(DomainException):
    """No loan application exists with the given id"""

    pass


class PersistenceError(DomainException):
    """Stored applications could not be encoded, decoded, read or written"""

    pass
