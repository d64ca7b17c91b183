"""PostgreSQL repository implementation for borrower profiles."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from risk_ledger.domain.entities import BorrowerProfile, RiskCategory
from risk_ledger.domain.interfaces import ProfileRepository
from risk_ledger.infrastructure.database.models import BorrowerProfileModel


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL-backed profile repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, profile: BorrowerProfile) -> BorrowerProfile:
        model = BorrowerProfileModel(
            borrower=profile.borrower,
            credit_score=profile.credit_score,
            annual_income=profile.annual_income,
            total_debt=profile.total_debt,
            employment_years=profile.employment_years,
            previous_defaults=profile.previous_defaults,
            on_time_payments=profile.on_time_payments,
            total_loans=profile.total_loans,
            risk_category=profile.risk_category.value,
            last_updated=profile.last_updated,
        )

        await self._session.merge(model)
        await self._session.flush()

        return profile

    async def get(self, borrower: str) -> Optional[BorrowerProfile]:
        model = await self._session.get(BorrowerProfileModel, borrower)

        if model is None:
            return None

        return self._to_entity(model)

    def _to_entity(self, model: BorrowerProfileModel) -> BorrowerProfile:
        return BorrowerProfile(
            borrower=model.borrower,
            credit_score=model.credit_score,
            annual_income=model.annual_income,
            total_debt=model.total_debt,
            employment_years=model.employment_years,
            previous_defaults=model.previous_defaults,
            on_time_payments=model.on_time_payments,
            total_loans=model.total_loans,
            risk_category=RiskCategory(model.risk_category),
            last_updated=model.last_updated,
        )
