"""
Scoring Settings for the Risk Ledger scoring engine.

This module contains all configurable parameters for the risk scoring system.
They can be adjusted via environment variables, e.g. to trial a different
weighting or a stricter application floor.

Environment variables use the SCORING_ prefix:
    SCORING_APPLICATION_SCORE_FLOOR=500
    SCORING_WEIGHT_CREDIT=35
    SCORING_LTI_DISCOUNT_NUMERATOR=950

Usage:
    from risk_ledger.service.scoring.settings import scoring_settings

    # Use default settings (loaded from env)
    floor = scoring_settings.application_score_floor

    # Or create custom settings for testing
    custom = ScoringSettings(application_score_floor=600)
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringSettings(BaseSettings):
    """
    Configurable parameters for the risk scoring algorithm.

    All settings can be overridden via environment variables with SCORING_ prefix.
    All monetary values are integer units, all rates are basis points,
    all sub-scores are 0-100.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Credit Score Range ===
    min_credit_score: int = Field(
        default=300,
        description="Lowest credit score accepted on a borrower profile",
    )
    max_credit_score: int = Field(
        default=850,
        description="Highest credit score accepted on a borrower profile",
    )

    # === Risk Bands (score threshold -> category, rate) ===
    low_risk_threshold: int = Field(
        default=700,
        description="Scores at or above this are low risk",
    )
    medium_risk_threshold: int = Field(
        default=600,
        description="Scores at or above this are medium risk",
    )
    high_risk_threshold: int = Field(
        default=500,
        description="Scores at or above this are high risk; below is very high",
    )
    low_risk_rate_bps: int = Field(default=300, ge=0, description="Annual rate for low risk (bps)")
    medium_risk_rate_bps: int = Field(default=800, ge=0, description="Annual rate for medium risk (bps)")
    high_risk_rate_bps: int = Field(default=1500, ge=0, description="Annual rate for high risk (bps)")
    very_high_risk_rate_bps: int = Field(
        default=2000,
        ge=0,
        description="Annual rate for very high risk (bps)",
    )

    # === Application Rules ===
    application_score_floor: int = Field(
        default=500,
        description="Minimum stored credit score required to apply for a loan",
    )
    min_term_months: int = Field(default=6, gt=0, description="Shortest loan term accepted")
    max_term_months: int = Field(default=360, gt=0, description="Longest loan term accepted")
    max_purpose_length: int = Field(
        default=500,
        gt=0,
        description="Maximum length of the free-text loan purpose",
    )
    max_amount: int = Field(
        default=10**15,
        gt=0,
        le=2**62,
        description="Largest accepted loan, payment, income or debt amount",
    )
    max_count: int = Field(
        default=1_000_000,
        gt=0,
        le=2**31 - 1,
        description="Largest accepted employment year, default or loan count",
    )

    # === Factor Weights (integers summing to 100) ===
    weight_credit: int = Field(default=35, ge=0, le=100, description="Weight for normalized credit score")
    weight_dti: int = Field(default=25, ge=0, le=100, description="Weight for debt-to-income score")
    weight_payment_history: int = Field(
        default=20,
        ge=0,
        le=100,
        description="Weight for on-time payment history score",
    )
    weight_employment: int = Field(default=10, ge=0, le=100, description="Weight for employment score")
    weight_defaults: int = Field(default=10, ge=0, le=100, description="Weight for prior defaults score")

    # === Sub-score Parameters ===
    dti_ceiling_bps: int = Field(
        default=5000,
        gt=0,
        description="DTI at or above this (in bps, 5000 = 50%) scores 0",
    )
    dti_bps_per_point: int = Field(
        default=50,
        gt=0,
        description="Each this many DTI bps removes one point from the DTI score",
    )
    neutral_payment_history_score: int = Field(
        default=50,
        ge=0,
        le=100,
        description="Payment history score for borrowers with no loan history",
    )
    employment_points_per_year: int = Field(
        default=10,
        ge=0,
        description="Employment score points per year employed (capped at 100)",
    )
    defaults_partial_max: int = Field(
        default=2,
        ge=1,
        description="Prior defaults up to this count receive partial credit",
    )

    # === Loan-to-Income Adjustment ===
    lti_threshold_percent: int = Field(
        default=50,
        ge=0,
        description="Requested amount above this percentage of income triggers the discount",
    )
    lti_discount_numerator: int = Field(
        default=950,
        ge=0,
        description="Composite is multiplied by numerator/denominator when LTI is exceeded",
    )
    lti_discount_denominator: int = Field(default=1000, gt=0)

    # === Final Score Remapping ===
    final_score_base: int = Field(
        default=500,
        description="Final risk score for a composite of 0",
    )
    final_score_span: int = Field(
        default=350,
        gt=0,
        description="Points added to the base for a composite of 100",
    )

    # === Recommendations ===
    max_amount_income_percent: int = Field(
        default=40,
        ge=0,
        description="Recommended max loan amount as a percentage of annual income",
    )
    approval_score_threshold: int = Field(
        default=500,
        description="Final risk score at or above this is recommended for approval",
    )

    @model_validator(mode="after")
    def validate_weights_and_bands(self) -> "ScoringSettings":
        """Weights must sum to 100 and band thresholds must strictly descend."""
        total = (
            self.weight_credit
            + self.weight_dti
            + self.weight_payment_history
            + self.weight_employment
            + self.weight_defaults
        )
        if total != 100:
            raise ValueError(f"Factor weights must sum to 100, got {total}")
        if not (
            self.low_risk_threshold > self.medium_risk_threshold > self.high_risk_threshold
        ):
            raise ValueError("Risk band thresholds must be strictly descending")
        if self.min_credit_score >= self.max_credit_score:
            raise ValueError(
                f"min_credit_score ({self.min_credit_score}) must be below "
                f"max_credit_score ({self.max_credit_score})"
            )
        if self.min_term_months > self.max_term_months:
            raise ValueError(
                f"min_term_months ({self.min_term_months}) > max_term_months ({self.max_term_months})"
            )
        return self

    @property
    def credit_score_span(self) -> int:
        """Width of the accepted credit score range (550 by default)."""
        return self.max_credit_score - self.min_credit_score


@lru_cache
def get_scoring_settings() -> ScoringSettings:
    """Get cached scoring settings instance."""
    return ScoringSettings()


scoring_settings = get_scoring_settings()
