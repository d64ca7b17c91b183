"""Base domain exceptions."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent business rule violations or
    domain-specific error conditions. Every mutating operation raises one
    of these before writing anything, so a raised error means no record
    was changed.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundException(DomainException):
    """Raised when a profile, application or loan does not exist."""

    def __init__(self, message: str):
        super().__init__(message=message, code="NOT_FOUND")


class AlreadyExistsException(DomainException):
    """Raised when a record that must be unique already exists."""

    def __init__(self, message: str):
        super().__init__(message=message, code="ALREADY_EXISTS")


class InvalidParametersException(DomainException):
    """Raised for out-of-range inputs and illegal state transitions."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_PARAMETERS")
