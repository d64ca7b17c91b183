"""Data transfer objects for risk assessment."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AssessmentRequest:
    """Input data for a comprehensive risk assessment of any borrower."""

    borrower: str
    requested_amount: int
    purpose: str = ""
