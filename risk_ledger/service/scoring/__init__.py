"""
Risk Scoring Module for the Risk Ledger
"""

from .models import RiskBand, FactorScores, RiskAssessment
from .settings import ScoringSettings, scoring_settings
from .fixed_point import (
    amortized_monthly_payment,
    apply_discount,
    ratio_basis_points,
    truncating_div,
)
from .risk_factors import (
    calculate_dti_bps,
    calculate_lti_percent,
    calculate_on_time_percent,
)
from .risk_score import (
    score_credit,
    score_dti,
    score_payment_history,
    score_employment,
    score_defaults,
    calculate_composite_score,
    apply_lti_adjustment,
    remap_to_risk_score,
)
from .risk_category import derive_risk_band, derive_risk_category, derive_interest_rate
from .assessment import assess_comprehensive_risk, calculate_factor_scores, explain_assessment

__all__ = [
    # Settings
    "ScoringSettings",
    "scoring_settings",
    # Models
    "RiskBand",
    "FactorScores",
    "RiskAssessment",
    # Fixed Point
    "amortized_monthly_payment",
    "apply_discount",
    "ratio_basis_points",
    "truncating_div",
    # Risk Factors
    "calculate_dti_bps",
    "calculate_lti_percent",
    "calculate_on_time_percent",
    # Scoring
    "score_credit",
    "score_dti",
    "score_payment_history",
    "score_employment",
    "score_defaults",
    "calculate_composite_score",
    "apply_lti_adjustment",
    "remap_to_risk_score",
    # Risk Bands
    "derive_risk_band",
    "derive_risk_category",
    "derive_interest_rate",
    # Assessment
    "assess_comprehensive_risk",
    "calculate_factor_scores",
    "explain_assessment",
]
