"""Active loan API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from risk_ledger.application.dto import PaymentRequest
from risk_ledger.application.services import LoanService
from risk_ledger.core.dependencies import (
    get_caller,
    get_loan_query_service,
    get_loan_service,
)
from risk_ledger.core.metrics import record_payment
from risk_ledger.domain.entities import Caller
from risk_ledger.presentation.schemas import (
    ErrorResponseSchema,
    LoanResponseSchema,
    PaymentRequestSchema,
    PaymentResponseSchema,
)

loan_router = APIRouter(
    prefix="/loans",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Loan not found"},
    },
)


@loan_router.get(
    "/{loan_id}",
    response_model=LoanResponseSchema,
    summary="Get Loan",
)
async def get_loan(
    loan_id: Annotated[int, Path(ge=1)],
    loan_service: Annotated[LoanService, Depends(get_loan_query_service)],
) -> LoanResponseSchema:
    loan = await loan_service.get_active_loan(loan_id)
    return LoanResponseSchema(**loan.to_dict())


@loan_router.post(
    "/{loan_id}/payments",
    response_model=PaymentResponseSchema,
    summary="Make Payment",
    description="""
    Record a repayment by the loan's borrower.

    Any amount above the outstanding balance is discarded; the balance
    never goes below zero.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid amount"},
        403: {"model": ErrorResponseSchema, "description": "Caller is not the borrower"},
    },
)
async def make_payment(
    loan_id: Annotated[int, Path(ge=1)],
    request: PaymentRequestSchema,
    caller: Annotated[Caller, Depends(get_caller)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> PaymentResponseSchema:
    loan = await loan_service.record_payment(
        caller,
        PaymentRequest(loan_id=loan_id, amount=request.amount),
    )

    record_payment(loan.is_repaid)

    return PaymentResponseSchema(
        loan_id=loan.id,
        outstanding_balance=loan.outstanding_balance,
        payments_made=loan.payments_made,
        state=loan.state.value,
    )
