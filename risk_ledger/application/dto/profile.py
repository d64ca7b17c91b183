"""Data transfer objects for borrower profile operations."""

from dataclasses import dataclass
from typing import List

from risk_ledger.service.scoring import ScoringSettings, scoring_settings


@dataclass(frozen=True)
class RegisterProfileRequest:
    """Input data for registering or updating the caller's own profile."""

    credit_score: int
    annual_income: int
    total_debt: int
    employment_years: int
    previous_defaults: int
    on_time_payments: int
    total_loans: int

    def validate(self, settings: ScoringSettings = scoring_settings) -> List[str]:
        errors = []

        if not settings.min_credit_score <= self.credit_score <= settings.max_credit_score:
            errors.append(
                f"credit_score must be between {settings.min_credit_score} "
                f"and {settings.max_credit_score}"
            )

        for name in (
            "annual_income",
            "total_debt",
            "employment_years",
            "previous_defaults",
            "on_time_payments",
            "total_loans",
        ):
            if getattr(self, name) < 0:
                errors.append(f"{name} must not be negative")

        for name in (
            "annual_income",
            "total_debt",
        ):
            if getattr(self, name) > settings.max_amount:
                errors.append(f"{name} must not exceed {settings.max_amount}")

        for name in (
            "employment_years",
            "previous_defaults",
            "on_time_payments",
            "total_loans",
        ):
            if getattr(self, name) > settings.max_count:
                errors.append(f"{name} must not exceed {settings.max_count}")

        return errors
