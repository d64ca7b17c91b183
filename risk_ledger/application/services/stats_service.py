"""Stats service - read access to the ledger aggregates."""

from risk_ledger.domain.entities import LedgerStats
from risk_ledger.domain.interfaces import LedgerStatsRepository


class StatsService:
    """Application service for ledger statistics."""

    def __init__(self, stats_repository: LedgerStatsRepository):
        self._stats_repo = stats_repository

    async def get_stats(self) -> LedgerStats:
        """Get loans issued, total disbursed and the scoring model version."""
        return await self._stats_repo.get()
