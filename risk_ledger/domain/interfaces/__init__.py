"""
Domain Interfaces (Ports)
"""

from .repositories import (
    ActiveLoanRepository,
    ApplicationRepository,
    LedgerStatsRepository,
    ProfileRepository,
)
from .clock import Clock

__all__ = [
    "ProfileRepository",
    "ApplicationRepository",
    "ActiveLoanRepository",
    "LedgerStatsRepository",
    "Clock",
]
