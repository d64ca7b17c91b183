"""Application services (use cases)."""

from .profile_service import ProfileService
from .loan_service import LoanService
from .assessment_service import AssessmentService
from .stats_service import StatsService

__all__ = [
    "ProfileService",
    "LoanService",
    "AssessmentService",
    "StatsService",
]
