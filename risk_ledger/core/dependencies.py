"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from risk_ledger.application.services import (
    AssessmentService,
    LoanService,
    ProfileService,
    StatsService,
)
from risk_ledger.core.config import settings
from risk_ledger.domain.entities import Caller
from risk_ledger.domain.exceptions import UnauthorizedException
from risk_ledger.domain.interfaces import Clock
from risk_ledger.infrastructure.clock import MonotonicClock
from risk_ledger.infrastructure.database import get_db_session, get_write_session
from risk_ledger.infrastructure.repositories import (
    PostgresActiveLoanRepository,
    PostgresApplicationRepository,
    PostgresLedgerStatsRepository,
    PostgresProfileRepository,
)
from risk_ledger.service.scoring import scoring_settings

_clock = MonotonicClock()


# Caller identity
def get_caller(
    x_caller_id: Annotated[str | None, Header()] = None,
) -> Caller:
    """
    Resolve the authenticated caller from the X-Caller-Id header.

    Authentication happens upstream; this only maps the identity to a role.
    """
    if x_caller_id is None or not x_caller_id.strip():
        raise UnauthorizedException("Caller identity is required")
    identity = x_caller_id.strip()
    return Caller(identity=identity, is_owner=identity == settings.owner_identity)


def get_clock() -> Clock:
    """Get the process-wide timestamp source."""
    return _clock


# Service dependencies (mutating, serialized)
async def get_profile_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ProfileService:
    """Get a ProfileService bound to a serialized session."""
    return ProfileService(
        profile_repository=PostgresProfileRepository(session),
        clock=clock,
        settings=scoring_settings,
    )


async def get_loan_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> LoanService:
    """Get a LoanService bound to a serialized session."""
    return LoanService(
        profile_repository=PostgresProfileRepository(session),
        application_repository=PostgresApplicationRepository(session),
        loan_repository=PostgresActiveLoanRepository(session),
        stats_repository=PostgresLedgerStatsRepository(session, settings.model_version),
        clock=clock,
        settings=scoring_settings,
    )


# Service dependencies (read-only)
async def get_profile_query_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ProfileService:
    """Get a ProfileService for lookups."""
    return ProfileService(
        profile_repository=PostgresProfileRepository(session),
        clock=clock,
        settings=scoring_settings,
    )


async def get_loan_query_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> LoanService:
    """Get a LoanService for application and loan lookups."""
    return LoanService(
        profile_repository=PostgresProfileRepository(session),
        application_repository=PostgresApplicationRepository(session),
        loan_repository=PostgresActiveLoanRepository(session),
        stats_repository=PostgresLedgerStatsRepository(session, settings.model_version),
        clock=clock,
        settings=scoring_settings,
    )


async def get_assessment_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> AssessmentService:
    """Get an AssessmentService instance."""
    return AssessmentService(
        profile_repository=PostgresProfileRepository(session),
        stats_repository=PostgresLedgerStatsRepository(session, settings.model_version),
        settings=scoring_settings,
    )


async def get_stats_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> StatsService:
    """Get a StatsService instance."""
    return StatsService(
        stats_repository=PostgresLedgerStatsRepository(session, settings.model_version),
    )
