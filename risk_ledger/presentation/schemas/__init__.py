"""Pydantic schemas for API request/response validation."""

from .profile import ProfileRequestSchema, ProfileResponseSchema
from .loan import (
    ApplicationRequestSchema,
    ApplicationCreatedSchema,
    ApplicationResponseSchema,
    ApplicationListResponseSchema,
    LoanResponseSchema,
    PaymentRequestSchema,
    PaymentResponseSchema,
)
from .assessment import (
    AssessmentRequestSchema,
    AssessmentResponseSchema,
    FactorScoresSchema,
)
from .stats import StatsResponseSchema
from .error import ErrorResponseSchema

__all__ = [
    "ProfileRequestSchema",
    "ProfileResponseSchema",
    "ApplicationRequestSchema",
    "ApplicationCreatedSchema",
    "ApplicationResponseSchema",
    "ApplicationListResponseSchema",
    "LoanResponseSchema",
    "PaymentRequestSchema",
    "PaymentResponseSchema",
    "AssessmentRequestSchema",
    "AssessmentResponseSchema",
    "FactorScoresSchema",
    "StatsResponseSchema",
    "ErrorResponseSchema",
]
