"""Repository implementations."""

from .profile_repository import PostgresProfileRepository
from .application_repository import PostgresApplicationRepository
from .loan_repository import PostgresActiveLoanRepository
from .stats_repository import PostgresLedgerStatsRepository

__all__ = [
    "PostgresProfileRepository",
    "PostgresApplicationRepository",
    "PostgresActiveLoanRepository",
    "PostgresLedgerStatsRepository",
]
