"""Borrower profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from risk_ledger.application.dto import RegisterProfileRequest
from risk_ledger.application.services import ProfileService
from risk_ledger.core.dependencies import (
    get_caller,
    get_profile_query_service,
    get_profile_service,
)
from risk_ledger.domain.entities import Caller
from risk_ledger.presentation.schemas import (
    ErrorResponseSchema,
    ProfileRequestSchema,
    ProfileResponseSchema,
)

profile_router = APIRouter(
    prefix="/profiles",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid profile"},
        403: {"model": ErrorResponseSchema, "description": "Caller identity missing"},
    },
)


@profile_router.post(
    "",
    response_model=ProfileResponseSchema,
    status_code=200,
    summary="Register Profile",
    description="Create or replace the caller's financial profile.",
)
async def register_profile(
    request: ProfileRequestSchema,
    caller: Annotated[Caller, Depends(get_caller)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
) -> ProfileResponseSchema:
    """
    Register the caller's profile.

    The risk category is derived from the credit score on every write.
    """
    dto = RegisterProfileRequest(
        credit_score=request.credit_score,
        annual_income=request.annual_income,
        total_debt=request.total_debt,
        employment_years=request.employment_years,
        previous_defaults=request.previous_defaults,
        on_time_payments=request.on_time_payments,
        total_loans=request.total_loans,
    )
    profile = await profile_service.register_profile(caller, dto)
    return ProfileResponseSchema(**profile.to_dict())


@profile_router.get(
    "/{identity}",
    response_model=ProfileResponseSchema,
    summary="Get Profile",
    responses={404: {"model": ErrorResponseSchema, "description": "Profile not found"}},
)
async def get_profile(
    identity: Annotated[str, Path(min_length=1, max_length=255)],
    profile_service: Annotated[ProfileService, Depends(get_profile_query_service)],
) -> ProfileResponseSchema:
    profile = await profile_service.get_profile_or_raise(identity)
    return ProfileResponseSchema(**profile.to_dict())
