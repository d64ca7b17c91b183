"""Borrower profile entity."""

from dataclasses import dataclass
from enum import Enum


class RiskCategory(str, Enum):
    """Coarse risk bucket derived from a risk score."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very-high"


@dataclass
class BorrowerProfile:
    """
    Financial profile of a borrower, one per identity.

    Attributes:
        borrower: Identity of the borrower (the only writer of this record)
        credit_score: Bureau-style score in [300, 850]
        annual_income: Annual income in monetary units
        total_debt: Outstanding debt in monetary units
        employment_years: Years in current employment
        previous_defaults: Number of prior loan defaults
        on_time_payments: Number of loans repaid on time
        total_loans: Number of loans taken in the past
        risk_category: Derived from credit_score on every write
        last_updated: Clock timestamp of the last write
    """

    borrower: str
    credit_score: int
    annual_income: int
    total_debt: int
    employment_years: int
    previous_defaults: int
    on_time_payments: int
    total_loans: int
    risk_category: RiskCategory
    last_updated: int

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "borrower": self.borrower,
            "credit_score": self.credit_score,
            "annual_income": self.annual_income,
            "total_debt": self.total_debt,
            "employment_years": self.employment_years,
            "previous_defaults": self.previous_defaults,
            "on_time_payments": self.on_time_payments,
            "total_loans": self.total_loans,
            "risk_category": self.risk_category.value,
            "last_updated": self.last_updated,
        }
