"""Loan lifecycle Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ApplicationRequestSchema(BaseModel):
    """Schema for POST /v1/applications request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "amount": 50000,
                    "purpose": "Home renovation",
                    "term_months": 60,
                }
            ]
        }
    )

    amount: int = Field(..., description="Requested loan amount", examples=[50000])
    purpose: str = Field("", description="Purpose of the loan", examples=["Home renovation"])
    term_months: int = Field(..., description="Loan term in months (6-360)", examples=[60])


class ApplicationCreatedSchema(BaseModel):
    """Schema for POST /v1/applications response body."""

    application_id: int = Field(..., ge=1, description="Id of the new application")


class ApplicationResponseSchema(BaseModel):
    """Schema for a loan application."""

    application_id: int = Field(..., ge=1)
    borrower: str
    amount: int = Field(..., gt=0)
    purpose: str
    term_months: int
    risk_score: int = Field(..., description="Credit score snapshot at application time")
    interest_rate: int = Field(..., description="Annual rate in basis points", examples=[300])
    status: str = Field(..., description="pending, approved or disbursed", examples=["pending"])
    applied_at: int
    approved_at: int = Field(..., description="0 until approved")


class ApplicationListResponseSchema(BaseModel):
    """Schema for a borrower's application history."""

    borrower: str
    applications: list[ApplicationResponseSchema]


class LoanResponseSchema(BaseModel):
    """Schema for an active loan."""

    loan_id: int = Field(..., ge=1)
    borrower: str
    principal_amount: int = Field(..., gt=0)
    outstanding_balance: int = Field(..., ge=0)
    interest_rate: int = Field(..., description="Annual rate in basis points")
    monthly_payment: int = Field(..., ge=0)
    payments_made: int = Field(..., ge=0)
    payments_missed: int = Field(..., ge=0)
    term_months: int
    disbursed_at: int
    state: str = Field(..., description="repaying or repaid", examples=["repaying"])


class PaymentRequestSchema(BaseModel):
    """Schema for POST /v1/loans/{loan_id}/payments request body."""

    amount: int = Field(..., description="Payment amount", examples=[30000])


class PaymentResponseSchema(BaseModel):
    """Schema for a recorded payment."""

    loan_id: int
    outstanding_balance: int = Field(..., ge=0)
    payments_made: int = Field(..., ge=0)
    state: str
