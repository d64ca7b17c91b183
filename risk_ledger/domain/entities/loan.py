"""Loan application and active loan entities."""

from dataclasses import dataclass
from enum import Enum


class ApplicationStatus(str, Enum):
    """Forward-only status of a loan application."""

    PENDING = "pending"
    APPROVED = "approved"
    DISBURSED = "disbursed"


class LoanState(str, Enum):
    """Repayment state of a disbursed loan, derived from its balance."""

    REPAYING = "repaying"
    REPAID = "repaid"


@dataclass
class LoanApplication:
    """
    A request for a loan, kept for audit after disbursement.

    risk_score and interest_rate are snapshots taken at application time;
    later profile updates do not change them.
    """

    id: int
    borrower: str
    amount: int
    purpose: str
    term_months: int
    risk_score: int
    interest_rate: int
    status: ApplicationStatus
    applied_at: int
    approved_at: int = 0

    @property
    def is_pending(self) -> bool:
        return self.status == ApplicationStatus.PENDING

    @property
    def is_approved(self) -> bool:
        return self.status == ApplicationStatus.APPROVED

    def to_dict(self) -> dict:
        return {
            "application_id": self.id,
            "borrower": self.borrower,
            "amount": self.amount,
            "purpose": self.purpose,
            "term_months": self.term_months,
            "risk_score": self.risk_score,
            "interest_rate": self.interest_rate,
            "status": self.status.value,
            "applied_at": self.applied_at,
            "approved_at": self.approved_at,
        }


@dataclass
class ActiveLoan:
    """
    A disbursed loan being repaid.

    Shares its id with the originating LoanApplication. The id is a lookup
    key back to the application, not an ownership link.
    """

    id: int
    borrower: str
    principal_amount: int
    outstanding_balance: int
    interest_rate: int
    monthly_payment: int
    term_months: int
    disbursed_at: int
    payments_made: int = 0
    payments_missed: int = 0

    @property
    def state(self) -> LoanState:
        if self.outstanding_balance > 0:
            return LoanState.REPAYING
        return LoanState.REPAID

    @property
    def is_repaid(self) -> bool:
        return self.state == LoanState.REPAID

    def to_dict(self) -> dict:
        return {
            "loan_id": self.id,
            "borrower": self.borrower,
            "principal_amount": self.principal_amount,
            "outstanding_balance": self.outstanding_balance,
            "interest_rate": self.interest_rate,
            "monthly_payment": self.monthly_payment,
            "payments_made": self.payments_made,
            "payments_missed": self.payments_missed,
            "term_months": self.term_months,
            "disbursed_at": self.disbursed_at,
            "state": self.state.value,
        }
