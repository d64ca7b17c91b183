"""PostgreSQL repository implementation for the ledger stats singleton."""

from sqlalchemy.ext.asyncio import AsyncSession

from risk_ledger.domain.entities import LedgerStats
from risk_ledger.domain.interfaces import LedgerStatsRepository
from risk_ledger.infrastructure.database.models import LedgerStatsModel

STATS_ROW_ID = 1


class PostgresLedgerStatsRepository(LedgerStatsRepository):
    """
    PostgreSQL-backed ledger stats repository.

    The row is created on the first save; until then get() returns zeroed
    stats carrying the configured model version.
    """

    def __init__(self, session: AsyncSession, model_version: int = 1):
        self._session = session
        self._model_version = model_version

    async def get(self) -> LedgerStats:
        model = await self._session.get(LedgerStatsModel, STATS_ROW_ID)

        if model is None:
            return LedgerStats(model_version=self._model_version)

        return LedgerStats(
            total_loans_issued=model.total_loans_issued,
            total_amount_disbursed=model.total_amount_disbursed,
            model_version=model.model_version,
        )

    async def save(self, stats: LedgerStats) -> LedgerStats:
        model = LedgerStatsModel(
            id=STATS_ROW_ID,
            total_loans_issued=stats.total_loans_issued,
            total_amount_disbursed=stats.total_amount_disbursed,
            model_version=stats.model_version,
        )

        await self._session.merge(model)
        await self._session.flush()

        return stats
