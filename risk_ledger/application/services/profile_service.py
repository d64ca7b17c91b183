"""Profile service - owns borrower profile registration and lookup."""

from typing import Optional

import structlog

from risk_ledger.application.dto import RegisterProfileRequest
from risk_ledger.domain.entities import BorrowerProfile, Caller
from risk_ledger.domain.exceptions import (
    InvalidParametersException,
    ProfileNotFoundException,
)
from risk_ledger.domain.interfaces import Clock, ProfileRepository
from risk_ledger.service.scoring import (
    ScoringSettings,
    derive_risk_category,
    scoring_settings,
)

logger = structlog.get_logger(__name__)


class ProfileService:
    """
    Application service for borrower profiles.

    A caller can only write its own profile. The risk category is
    recomputed from the credit score on every write.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        clock: Clock,
        settings: ScoringSettings = scoring_settings,
    ):
        self._profile_repo = profile_repository
        self._clock = clock
        self._settings = settings

    async def register_profile(
        self,
        caller: Caller,
        request: RegisterProfileRequest,
    ) -> BorrowerProfile:
        """
        Register or replace the caller's financial profile.

        Args:
            caller: The authenticated caller; the profile is stored under its identity
            request: Profile fields

        Returns:
            The stored profile with its derived risk category

        Raises:
            InvalidParametersException: If the score is out of range or a
                field is negative
        """
        errors = request.validate(self._settings)
        if errors:
            raise InvalidParametersException("; ".join(errors))

        profile = BorrowerProfile(
            borrower=caller.identity,
            credit_score=request.credit_score,
            annual_income=request.annual_income,
            total_debt=request.total_debt,
            employment_years=request.employment_years,
            previous_defaults=request.previous_defaults,
            on_time_payments=request.on_time_payments,
            total_loans=request.total_loans,
            risk_category=derive_risk_category(request.credit_score, self._settings),
            last_updated=self._clock.now(),
        )
        await self._profile_repo.save(profile)

        logger.info(
            "profile_registered",
            borrower=profile.borrower,
            credit_score=profile.credit_score,
            risk_category=profile.risk_category.value,
        )
        return profile

    async def get_profile(self, borrower: str) -> Optional[BorrowerProfile]:
        """Get a borrower's profile, or None if not registered."""
        return await self._profile_repo.get(borrower)

    async def get_profile_or_raise(self, borrower: str) -> BorrowerProfile:
        """
        Get a borrower's profile.

        Raises:
            ProfileNotFoundException: If the borrower has no profile
        """
        profile = await self._profile_repo.get(borrower)
        if profile is None:
            logger.warning("profile_not_found", borrower=borrower)
            raise ProfileNotFoundException(borrower)
        return profile
