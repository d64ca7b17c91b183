"""Data transfer objects for loan lifecycle operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoanApplicationRequest:
    """Input data for applying for a loan as the caller."""

    amount: int
    purpose: str
    term_months: int


@dataclass(frozen=True)
class PaymentRequest:
    """Input data for a repayment against an active loan."""

    loan_id: int
    amount: int
