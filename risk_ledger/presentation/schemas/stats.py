"""Ledger statistics Pydantic schema."""

from pydantic import BaseModel, Field


class StatsResponseSchema(BaseModel):
    """Schema for GET /v1/stats response body."""

    total_loans_issued: int = Field(..., ge=0)
    total_amount_disbursed: int = Field(..., ge=0)
    model_version: int = Field(..., ge=1)
