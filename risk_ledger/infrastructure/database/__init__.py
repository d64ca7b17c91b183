"""Database infrastructure."""

from .connection import (
    get_db_session,
    get_write_session,
    DatabaseSessionManager,
    db_manager,
)
from .models import (
    Base,
    BorrowerProfileModel,
    LoanApplicationModel,
    ActiveLoanModel,
    LedgerStatsModel,
)

__all__ = [
    "get_db_session",
    "get_write_session",
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "BorrowerProfileModel",
    "LoanApplicationModel",
    "ActiveLoanModel",
    "LedgerStatsModel",
]
