"""Domain Entities - Core business objects."""

from .caller import Caller
from .loan import ActiveLoan, ApplicationStatus, LoanApplication, LoanState
from .profile import BorrowerProfile, RiskCategory
from .stats import LedgerStats

__all__ = [
    "Caller",
    "ActiveLoan",
    "ApplicationStatus",
    "LoanApplication",
    "LoanState",
    "BorrowerProfile",
    "RiskCategory",
    "LedgerStats",
]
