"""
Integration tests for data persistence.

These tests verify:
1. The SQLAlchemy repositories round-trip ledger entities
2. Application ids continue from the stored maximum
3. Concurrent writers are serialized by the session manager
"""

import asyncio

import pytest
from httpx import AsyncClient

from risk_ledger.domain.entities import (
    ActiveLoan,
    ApplicationStatus,
    BorrowerProfile,
    LedgerStats,
    LoanApplication,
    RiskCategory,
)
from risk_ledger.infrastructure.database import db_manager
from risk_ledger.infrastructure.repositories import (
    PostgresActiveLoanRepository,
    PostgresApplicationRepository,
    PostgresLedgerStatsRepository,
    PostgresProfileRepository,
)


def make_application(application_id: int, borrower: str = "alice") -> LoanApplication:
    return LoanApplication(
        id=application_id,
        borrower=borrower,
        amount=50000,
        purpose="Car",
        term_months=60,
        risk_score=720,
        interest_rate=300,
        status=ApplicationStatus.PENDING,
        applied_at=1_700_000_000,
    )


# =============================================================================
# Repository Round Trips
# =============================================================================

class TestRepositories:
    """Tests for the SQLAlchemy repositories."""

    @pytest.mark.asyncio
    async def test_profile_round_trip(self, database):
        profile = BorrowerProfile(
            borrower="alice",
            credit_score=720,
            annual_income=100000,
            total_debt=20000,
            employment_years=5,
            previous_defaults=0,
            on_time_payments=18,
            total_loans=20,
            risk_category=RiskCategory.LOW,
            last_updated=1_700_000_000,
        )
        async with db_manager.session() as session:
            await PostgresProfileRepository(session).save(profile)

        async with db_manager.session() as session:
            stored = await PostgresProfileRepository(session).get("alice")

        assert stored == profile

    @pytest.mark.asyncio
    async def test_profile_missing(self, database):
        async with db_manager.session() as session:
            assert await PostgresProfileRepository(session).get("nobody") is None

    @pytest.mark.asyncio
    async def test_application_ids_and_history(self, database):
        async with db_manager.session() as session:
            repo = PostgresApplicationRepository(session)
            assert await repo.last_id() == 0
            await repo.save(make_application(1))
            await repo.save(make_application(2, borrower="bob"))
            await repo.save(make_application(3))

        async with db_manager.session() as session:
            repo = PostgresApplicationRepository(session)
            assert await repo.last_id() == 3
            history = await repo.get_by_borrower("alice")
            stored = await repo.get(2)

        assert [a.id for a in history] == [3, 1]
        assert stored == make_application(2, borrower="bob")

    @pytest.mark.asyncio
    async def test_application_update(self, database):
        application = make_application(1)
        async with db_manager.session() as session:
            await PostgresApplicationRepository(session).save(application)

        application.status = ApplicationStatus.APPROVED
        application.approved_at = 1_700_000_100
        async with db_manager.session() as session:
            await PostgresApplicationRepository(session).save(application)

        async with db_manager.session() as session:
            stored = await PostgresApplicationRepository(session).get(1)

        assert stored.status == ApplicationStatus.APPROVED
        assert stored.approved_at == 1_700_000_100

    @pytest.mark.asyncio
    async def test_active_loan_round_trip(self, database):
        loan = ActiveLoan(
            id=1,
            borrower="alice",
            principal_amount=50000,
            outstanding_balance=20000,
            interest_rate=300,
            monthly_payment=958,
            term_months=60,
            disbursed_at=1_700_000_200,
            payments_made=1,
        )
        async with db_manager.session() as session:
            await PostgresApplicationRepository(session).save(make_application(1))
            await PostgresActiveLoanRepository(session).save(loan)

        async with db_manager.session() as session:
            stored = await PostgresActiveLoanRepository(session).get(1)
            missing = await PostgresActiveLoanRepository(session).get(2)

        assert stored == loan
        assert missing is None

    @pytest.mark.asyncio
    async def test_stats_default_and_update(self, database):
        async with db_manager.session() as session:
            stats = await PostgresLedgerStatsRepository(session, model_version=2).get()

        assert stats == LedgerStats(model_version=2)

        stats.record_disbursement(50000)
        async with db_manager.session() as session:
            await PostgresLedgerStatsRepository(session, model_version=2).save(stats)

        async with db_manager.session() as session:
            stored = await PostgresLedgerStatsRepository(session, model_version=2).get()

        assert stored.total_loans_issued == 1
        assert stored.total_amount_disbursed == 50000

    @pytest.mark.asyncio
    async def test_failed_session_rolls_back(self, database):
        with pytest.raises(RuntimeError):
            async with db_manager.serialized_session() as session:
                await PostgresApplicationRepository(session).save(make_application(1))
                raise RuntimeError("abort")

        async with db_manager.session() as session:
            assert await PostgresApplicationRepository(session).get(1) is None


# =============================================================================
# Serialized Writes Through the API
# =============================================================================

class TestSerializedWrites:
    """Concurrent mutating requests never share an application id."""

    @pytest.mark.asyncio
    async def test_concurrent_applications_get_distinct_ids(
        self,
        client: AsyncClient,
        good_profile: dict,
        car_loan_request: dict,
    ):
        borrowers = [f"borrower-{i}" for i in range(5)]
        for borrower in borrowers:
            response = await client.post(
                "/v1/profiles", json=good_profile, headers={"X-Caller-Id": borrower}
            )
            assert response.status_code == 200

        async def apply(borrower: str):
            return await client.post(
                "/v1/applications",
                json=car_loan_request,
                headers={"X-Caller-Id": borrower},
            )

        responses = await asyncio.gather(*[apply(b) for b in borrowers])

        assert all(r.status_code == 201 for r in responses)
        ids = sorted(r.json()["application_id"] for r in responses)
        assert ids == [1, 2, 3, 4, 5]
