"""Risk assessment API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from risk_ledger.application.dto import AssessmentRequest
from risk_ledger.application.services import AssessmentService
from risk_ledger.core.dependencies import get_assessment_service
from risk_ledger.core.metrics import record_assessment, track_assessment_latency
from risk_ledger.presentation.schemas import (
    AssessmentRequestSchema,
    AssessmentResponseSchema,
    ErrorResponseSchema,
)

assessment_router = APIRouter(
    prefix="/assessments",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "Profile not found"},
    },
)


@assessment_router.post(
    "",
    response_model=AssessmentResponseSchema,
    status_code=200,
    summary="Assess Risk",
    description="""
    Compute a comprehensive risk assessment of a borrower for a candidate
    loan amount. Read-only: nothing is stored.
    """,
)
async def assess_risk(
    request: AssessmentRequestSchema,
    assessment_service: Annotated[AssessmentService, Depends(get_assessment_service)],
) -> AssessmentResponseSchema:
    dto = AssessmentRequest(
        borrower=request.borrower,
        requested_amount=request.requested_amount,
        purpose=request.purpose,
    )

    with track_assessment_latency():
        assessment = await assessment_service.assess(dto)

    record_assessment(assessment.risk_category.value)

    return AssessmentResponseSchema(**assessment.to_dict())
