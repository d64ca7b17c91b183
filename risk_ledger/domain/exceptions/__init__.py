"""Domain Exceptions - Business rule violations and domain errors."""

from .base import (
    AlreadyExistsException,
    DomainException,
    InvalidParametersException,
    NotFoundException,
)
from .auth import UnauthorizedException
from .profile import ProfileNotFoundException
from .loan import (
    ApplicationNotFoundException,
    InsufficientScoreException,
    InvalidAmountException,
    LoanAlreadyExistsException,
    LoanNotFoundException,
)

__all__ = [
    "DomainException",
    "NotFoundException",
    "AlreadyExistsException",
    "InvalidParametersException",
    "UnauthorizedException",
    "ProfileNotFoundException",
    "ApplicationNotFoundException",
    "LoanNotFoundException",
    "LoanAlreadyExistsException",
    "InvalidAmountException",
    "InsufficientScoreException",
]
