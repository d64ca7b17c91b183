"""PostgreSQL repository implementation for active loans."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from risk_ledger.domain.entities import ActiveLoan
from risk_ledger.domain.interfaces import ActiveLoanRepository
from risk_ledger.infrastructure.database.models import ActiveLoanModel


class PostgresActiveLoanRepository(ActiveLoanRepository):
    """PostgreSQL-backed active loan repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, loan: ActiveLoan) -> ActiveLoan:
        model = ActiveLoanModel(
            id=loan.id,
            borrower=loan.borrower,
            principal_amount=loan.principal_amount,
            outstanding_balance=loan.outstanding_balance,
            interest_rate=loan.interest_rate,
            monthly_payment=loan.monthly_payment,
            payments_made=loan.payments_made,
            payments_missed=loan.payments_missed,
            term_months=loan.term_months,
            disbursed_at=loan.disbursed_at,
        )

        await self._session.merge(model)
        await self._session.flush()

        return loan

    async def get(self, loan_id: int) -> Optional[ActiveLoan]:
        model = await self._session.get(ActiveLoanModel, loan_id)

        if model is None:
            return None

        return ActiveLoan(
            id=model.id,
            borrower=model.borrower,
            principal_amount=model.principal_amount,
            outstanding_balance=model.outstanding_balance,
            interest_rate=model.interest_rate,
            monthly_payment=model.monthly_payment,
            payments_made=model.payments_made,
            payments_missed=model.payments_missed,
            term_months=model.term_months,
            disbursed_at=model.disbursed_at,
        )
