"""Data Transfer Objects for application layer."""

from .profile import RegisterProfileRequest
from .loan import LoanApplicationRequest, PaymentRequest
from .assessment import AssessmentRequest

__all__ = [
    "RegisterProfileRequest",
    "LoanApplicationRequest",
    "PaymentRequest",
    "AssessmentRequest",
]
