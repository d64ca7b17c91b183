"""Pydantic schema for API error responses."""

from pydantic import BaseModel, ConfigDict, Field

ERROR_CODES = (
    "NOT_FOUND",
    "ALREADY_EXISTS",
    "UNAUTHORIZED",
    "INVALID_AMOUNT",
    "INVALID_PARAMETERS",
    "INSUFFICIENT_SCORE",
    "INTERNAL_ERROR",
)


class ErrorResponseSchema(BaseModel):
    """
    Body of every rejected ledger operation.

    A rejected operation has made no change; ``error`` names the reason.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error": "INSUFFICIENT_SCORE",
                    "message": "Credit score 480 is below the minimum of 500",
                    "request_id": "3f2b6a52-0c1e-4f4e-9d8b-1c2a7e5d9f10",
                }
            ]
        }
    )

    error: str = Field(
        ...,
        description=f"Error code, one of: {', '.join(ERROR_CODES)}",
        examples=["NOT_FOUND"],
    )
    message: str = Field(
        ...,
        description="Human-readable detail",
        examples=["Application not found: 42"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing (echoed in X-Request-ID)",
    )
