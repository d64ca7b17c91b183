"""Risk assessment Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AssessmentRequestSchema(BaseModel):
    """Schema for POST /v1/assessments request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "borrower": "alice",
                    "requested_amount": 50000,
                    "purpose": "Home renovation",
                }
            ]
        }
    )

    borrower: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Identity of the borrower to assess",
        examples=["alice"],
    )
    requested_amount: int = Field(..., description="Candidate loan amount", examples=[50000])
    purpose: str = Field("", description="Purpose of the loan")

    @field_validator("borrower")
    @classmethod
    def validate_borrower(cls, v: str) -> str:
        """Ensure borrower is not just whitespace."""
        if not v.strip():
            raise ValueError("borrower cannot be empty or whitespace")
        return v.strip()


class FactorScoresSchema(BaseModel):
    """The five normalized sub-scores (higher is safer)."""

    credit: int = Field(..., ge=0, le=100)
    dti: int = Field(..., ge=0, le=100)
    payment_history: int = Field(
        ...,
        ge=0,
        description="On-time share; above 100 when on_time_payments exceeds total_loans",
    )
    employment: int = Field(..., ge=0, le=100)
    defaults: int = Field(..., ge=0, le=100)


class AssessmentResponseSchema(BaseModel):
    """Schema for a comprehensive risk assessment."""

    borrower: str
    requested_amount: int
    purpose: str
    factors: FactorScoresSchema
    dti_bps: int = Field(..., description="Debt-to-income in basis points")
    lti_percent: int = Field(..., description="Loan-to-income in percent")
    lti_adjusted: bool = Field(..., description="Whether the LTI discount was applied")
    composite_score: int = Field(..., description="Weighted composite (0-100)")
    adjusted_score: int = Field(..., description="Composite after LTI discount (0-100)")
    final_risk_score: int = Field(..., description="Final score (500-850)", examples=[759])
    risk_category: str = Field(..., examples=["low"])
    recommended_interest_rate: int = Field(..., description="Annual rate in basis points")
    max_recommended_amount: int = Field(..., ge=0)
    approval_recommendation: bool
    model_version: int
