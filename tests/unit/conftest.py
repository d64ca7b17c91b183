"""
Fixtures for unit tests.

Provides in-memory repositories and a deterministic clock so the
application services can be exercised without a database.
"""

from dataclasses import replace
from typing import Dict, List, Optional

import pytest

from risk_ledger.application.dto import RegisterProfileRequest
from risk_ledger.application.services import (
    AssessmentService,
    LoanService,
    ProfileService,
)
from risk_ledger.domain.entities import (
    ActiveLoan,
    BorrowerProfile,
    Caller,
    LedgerStats,
    LoanApplication,
)
from risk_ledger.domain.interfaces import (
    ActiveLoanRepository,
    ApplicationRepository,
    Clock,
    LedgerStatsRepository,
    ProfileRepository,
)


# =============================================================================
# In-Memory Repositories
# =============================================================================

class InMemoryProfileRepository(ProfileRepository):
    def __init__(self):
        self.profiles: Dict[str, BorrowerProfile] = {}

    async def save(self, profile: BorrowerProfile) -> BorrowerProfile:
        self.profiles[profile.borrower] = replace(profile)
        return profile

    async def get(self, borrower: str) -> Optional[BorrowerProfile]:
        profile = self.profiles.get(borrower)
        return replace(profile) if profile else None


class InMemoryApplicationRepository(ApplicationRepository):
    def __init__(self):
        self.applications: Dict[int, LoanApplication] = {}

    async def save(self, application: LoanApplication) -> LoanApplication:
        self.applications[application.id] = replace(application)
        return application

    async def get(self, application_id: int) -> Optional[LoanApplication]:
        application = self.applications.get(application_id)
        return replace(application) if application else None

    async def get_by_borrower(
        self,
        borrower: str,
        limit: int = 10,
        offset: int = 0,
    ) -> List[LoanApplication]:
        matches = sorted(
            (a for a in self.applications.values() if a.borrower == borrower),
            key=lambda a: a.id,
            reverse=True,
        )
        return [replace(a) for a in matches[offset:offset + limit]]

    async def last_id(self) -> int:
        return max(self.applications, default=0)


class InMemoryActiveLoanRepository(ActiveLoanRepository):
    def __init__(self):
        self.loans: Dict[int, ActiveLoan] = {}

    async def save(self, loan: ActiveLoan) -> ActiveLoan:
        self.loans[loan.id] = replace(loan)
        return loan

    async def get(self, loan_id: int) -> Optional[ActiveLoan]:
        loan = self.loans.get(loan_id)
        return replace(loan) if loan else None


class InMemoryLedgerStatsRepository(LedgerStatsRepository):
    def __init__(self, model_version: int = 1):
        self.stats = LedgerStats(model_version=model_version)

    async def get(self) -> LedgerStats:
        return replace(self.stats)

    async def save(self, stats: LedgerStats) -> LedgerStats:
        self.stats = replace(stats)
        return stats


class FakeClock(Clock):
    """Clock that advances by one second per reading."""

    def __init__(self, start: int = 1_700_000_000):
        self.current = start

    def now(self) -> int:
        self.current += 1
        return self.current


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def application_repository() -> InMemoryApplicationRepository:
    return InMemoryApplicationRepository()


@pytest.fixture
def loan_repository() -> InMemoryActiveLoanRepository:
    return InMemoryActiveLoanRepository()


@pytest.fixture
def stats_repository() -> InMemoryLedgerStatsRepository:
    return InMemoryLedgerStatsRepository()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def profile_service(profile_repository, clock) -> ProfileService:
    return ProfileService(profile_repository=profile_repository, clock=clock)


@pytest.fixture
def loan_service(
    profile_repository,
    application_repository,
    loan_repository,
    stats_repository,
    clock,
) -> LoanService:
    return LoanService(
        profile_repository=profile_repository,
        application_repository=application_repository,
        loan_repository=loan_repository,
        stats_repository=stats_repository,
        clock=clock,
    )


@pytest.fixture
def assessment_service(profile_repository, stats_repository) -> AssessmentService:
    return AssessmentService(
        profile_repository=profile_repository,
        stats_repository=stats_repository,
    )


@pytest.fixture
def owner() -> Caller:
    return Caller(identity="ledger-owner", is_owner=True)


@pytest.fixture
def alice() -> Caller:
    return Caller(identity="alice")


@pytest.fixture
def bob() -> Caller:
    return Caller(identity="bob")


@pytest.fixture
def good_profile_request() -> RegisterProfileRequest:
    """A low-risk borrower: 720 score, 20% DTI, 18 of 20 loans on time."""
    return RegisterProfileRequest(
        credit_score=720,
        annual_income=100000,
        total_debt=20000,
        employment_years=5,
        previous_defaults=0,
        on_time_payments=18,
        total_loans=20,
    )
