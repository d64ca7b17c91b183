"""Borrower profile Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ProfileRequestSchema(BaseModel):
    """Schema for POST /v1/profiles request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "credit_score": 720,
                    "annual_income": 100000,
                    "total_debt": 20000,
                    "employment_years": 5,
                    "previous_defaults": 0,
                    "on_time_payments": 18,
                    "total_loans": 20,
                }
            ]
        }
    )

    credit_score: int = Field(..., description="Credit score (300-850)", examples=[720])
    annual_income: int = Field(..., description="Annual income", examples=[100000])
    total_debt: int = Field(..., description="Outstanding debt", examples=[20000])
    employment_years: int = Field(..., description="Years in current employment", examples=[5])
    previous_defaults: int = Field(..., description="Number of prior defaults", examples=[0])
    on_time_payments: int = Field(..., description="Loans repaid on time", examples=[18])
    total_loans: int = Field(..., description="Loans taken in the past", examples=[20])


class ProfileResponseSchema(BaseModel):
    """Schema for a stored borrower profile."""

    borrower: str = Field(..., description="Borrower identity")
    credit_score: int = Field(..., ge=300, le=850)
    annual_income: int = Field(..., ge=0)
    total_debt: int = Field(..., ge=0)
    employment_years: int = Field(..., ge=0)
    previous_defaults: int = Field(..., ge=0)
    on_time_payments: int = Field(..., ge=0)
    total_loans: int = Field(..., ge=0)
    risk_category: str = Field(
        ...,
        description="Risk category derived from the credit score",
        examples=["low"],
    )
    last_updated: int = Field(..., description="Timestamp of the last write")
