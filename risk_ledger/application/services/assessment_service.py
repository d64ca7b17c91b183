"""Assessment service - comprehensive risk evaluation of any registered borrower."""

import structlog

from risk_ledger.application.dto import AssessmentRequest
from risk_ledger.domain.exceptions import (
    InvalidAmountException,
    ProfileNotFoundException,
)
from risk_ledger.domain.interfaces import LedgerStatsRepository, ProfileRepository
from risk_ledger.service.scoring import (
    RiskAssessment,
    ScoringSettings,
    assess_comprehensive_risk,
    scoring_settings,
)

logger = structlog.get_logger(__name__)


class AssessmentService:
    """
    Application service for comprehensive risk assessments.

    Read-only: anyone may assess any registered borrower at any time,
    independent of the state of that borrower's applications.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        stats_repository: LedgerStatsRepository,
        settings: ScoringSettings = scoring_settings,
    ):
        self._profile_repo = profile_repository
        self._stats_repo = stats_repository
        self._settings = settings

    async def assess(self, request: AssessmentRequest) -> RiskAssessment:
        """
        Run the full multi-factor assessment for a candidate amount.

        Args:
            request: Borrower identity, requested amount and purpose

        Returns:
            RiskAssessment stamped with the current model version

        Raises:
            ProfileNotFoundException: If the borrower has no profile
            InvalidAmountException: If the requested amount is not positive
                or above max_amount
        """
        profile = await self._profile_repo.get(request.borrower)
        if profile is None:
            raise ProfileNotFoundException(request.borrower)

        if request.requested_amount <= 0:
            raise InvalidAmountException("requested_amount must be positive")

        if request.requested_amount > self._settings.max_amount:
            raise InvalidAmountException(
                f"requested_amount must not exceed {self._settings.max_amount}"
            )

        stats = await self._stats_repo.get()
        assessment = assess_comprehensive_risk(
            profile,
            request.requested_amount,
            purpose=request.purpose,
            model_version=stats.model_version,
            settings=self._settings,
        )

        logger.info(
            "risk_assessed",
            borrower=request.borrower,
            requested_amount=request.requested_amount,
            final_risk_score=assessment.final_risk_score,
            risk_category=assessment.risk_category.value,
            lti_adjusted=assessment.lti_adjusted,
        )
        return assessment
