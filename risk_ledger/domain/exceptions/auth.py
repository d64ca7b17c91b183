"""Authorization domain exceptions."""

from .base import DomainException


class UnauthorizedException(DomainException):
    """Raised when the caller may not perform an operation."""

    def __init__(self, message: str = "Caller is not authorized for this operation"):
        super().__init__(message=message, code="UNAUTHORIZED")
