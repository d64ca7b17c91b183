"""PostgreSQL implementation of ApplicationRepository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from risk_ledger.domain.entities import ApplicationStatus, LoanApplication
from risk_ledger.domain.interfaces import ApplicationRepository
from risk_ledger.infrastructure.database.models import LoanApplicationModel


class PostgresApplicationRepository(ApplicationRepository):
    """
    PostgreSQL implementation of the LoanApplication repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, application: LoanApplication) -> LoanApplication:
        """Insert a new application or update an existing one."""
        model = LoanApplicationModel(
            id=application.id,
            borrower=application.borrower,
            amount=application.amount,
            purpose=application.purpose,
            term_months=application.term_months,
            risk_score=application.risk_score,
            interest_rate=application.interest_rate,
            status=application.status.value,
            applied_at=application.applied_at,
            approved_at=application.approved_at,
        )

        await self._session.merge(model)
        await self._session.flush()

        return application

    async def get(self, application_id: int) -> Optional[LoanApplication]:
        """Retrieve an application by id."""
        model = await self._session.get(LoanApplicationModel, application_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_borrower(
        self,
        borrower: str,
        limit: int = 10,
        offset: int = 0,
    ) -> List[LoanApplication]:
        """Retrieve a borrower's applications, newest first."""
        stmt = (
            select(LoanApplicationModel)
            .where(LoanApplicationModel.borrower == borrower)
            .order_by(LoanApplicationModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def last_id(self) -> int:
        """Highest application id handed out so far, 0 if none."""
        stmt = select(func.max(LoanApplicationModel.id))
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() or 0

    def _to_entity(self, model: LoanApplicationModel) -> LoanApplication:
        """Convert database model to domain entity."""
        return LoanApplication(
            id=model.id,
            borrower=model.borrower,
            amount=model.amount,
            purpose=model.purpose,
            term_months=model.term_months,
            risk_score=model.risk_score,
            interest_rate=model.interest_rate,
            status=ApplicationStatus(model.status),
            applied_at=model.applied_at,
            approved_at=model.approved_at,
        )
