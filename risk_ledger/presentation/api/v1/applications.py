"""Loan application API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from risk_ledger.application.dto import LoanApplicationRequest
from risk_ledger.application.services import LoanService
from risk_ledger.core.dependencies import (
    get_caller,
    get_loan_query_service,
    get_loan_service,
)
from risk_ledger.core.metrics import record_application, record_disbursement
from risk_ledger.domain.entities import Caller
from risk_ledger.domain.exceptions import InsufficientScoreException
from risk_ledger.presentation.schemas import (
    ApplicationCreatedSchema,
    ApplicationListResponseSchema,
    ApplicationRequestSchema,
    ApplicationResponseSchema,
    ErrorResponseSchema,
    LoanResponseSchema,
)

application_router = APIRouter(
    prefix="/applications",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        403: {"model": ErrorResponseSchema, "description": "Caller not authorized"},
        404: {"model": ErrorResponseSchema, "description": "Application not found"},
    },
)


@application_router.post(
    "",
    response_model=ApplicationCreatedSchema,
    status_code=201,
    summary="Apply for Loan",
    description="""
    Submit a loan application for the caller.

    The caller must have a registered profile whose credit score meets the
    application floor. The score and recommended rate are captured at
    submission time.
    """,
)
async def apply_for_loan(
    request: ApplicationRequestSchema,
    caller: Annotated[Caller, Depends(get_caller)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> ApplicationCreatedSchema:
    dto = LoanApplicationRequest(
        amount=request.amount,
        purpose=request.purpose,
        term_months=request.term_months,
    )

    try:
        application_id = await loan_service.apply(caller, dto)
    except InsufficientScoreException:
        record_application(submitted=False)
        raise

    record_application(submitted=True)
    return ApplicationCreatedSchema(application_id=application_id)


@application_router.get(
    "",
    response_model=ApplicationListResponseSchema,
    summary="List Applications",
    description="Recent applications of a borrower, newest first.",
)
async def list_applications(
    borrower: Annotated[
        str,
        Query(min_length=1, max_length=255, description="Borrower identity"),
    ],
    loan_service: Annotated[LoanService, Depends(get_loan_query_service)],
    limit: Annotated[
        int,
        Query(ge=1, le=100, description="Maximum number of applications to return"),
    ] = 10,
) -> ApplicationListResponseSchema:
    applications = await loan_service.list_applications(borrower, limit)
    return ApplicationListResponseSchema(
        borrower=borrower,
        applications=[ApplicationResponseSchema(**a.to_dict()) for a in applications],
    )


@application_router.get(
    "/{application_id}",
    response_model=ApplicationResponseSchema,
    summary="Get Application",
)
async def get_application(
    application_id: Annotated[int, Path(ge=1)],
    loan_service: Annotated[LoanService, Depends(get_loan_query_service)],
) -> ApplicationResponseSchema:
    application = await loan_service.get_application(application_id)
    return ApplicationResponseSchema(**application.to_dict())


@application_router.post(
    "/{application_id}/approve",
    response_model=ApplicationResponseSchema,
    summary="Approve Application",
    description="Owner only. Moves a pending application to approved.",
)
async def approve_application(
    application_id: Annotated[int, Path(ge=1)],
    caller: Annotated[Caller, Depends(get_caller)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> ApplicationResponseSchema:
    application = await loan_service.approve(caller, application_id)
    return ApplicationResponseSchema(**application.to_dict())


@application_router.post(
    "/{application_id}/disburse",
    response_model=LoanResponseSchema,
    status_code=201,
    summary="Disburse Loan",
    description="Owner only. Creates the active loan for an approved application.",
    responses={409: {"model": ErrorResponseSchema, "description": "Loan already exists"}},
)
async def disburse_loan(
    application_id: Annotated[int, Path(ge=1)],
    caller: Annotated[Caller, Depends(get_caller)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanResponseSchema:
    loan = await loan_service.disburse(caller, application_id)

    record_disbursement(loan.principal_amount)

    return LoanResponseSchema(**loan.to_dict())
