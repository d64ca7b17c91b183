"""
Risk Score Calculation for the Risk Ledger scoring engine.

This module normalizes profile data into five 0-100 factor scores,
combines them with integer weights into a composite, applies the
loan-to-income discount and remaps the result into the credit-score range.
"""

from .fixed_point import apply_discount, truncating_div
from .models import FactorScores
from .risk_factors import calculate_dti_bps, calculate_on_time_percent
from .settings import ScoringSettings, scoring_settings

MAX_FACTOR_SCORE = 100


def score_credit(
    credit_score: int,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """
    Linearly rescale a credit score from [300, 850] to [0, 100].

    Args:
        credit_score: Profile credit score (validated to be in range)
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        Score from 0-100
    """
    return truncating_div(
        (credit_score - settings.min_credit_score) * MAX_FACTOR_SCORE,
        settings.credit_score_span,
    )


def score_dti(
    total_debt: int,
    annual_income: int,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """
    Convert debt-to-income into a 0-100 score (lower debt burden is better).

    A DTI at or above 50% scores 0; below that, every 0.5% of DTI costs
    one point.

    Returns:
        Score from 0-100
    """
    dti = calculate_dti_bps(total_debt, annual_income)
    if dti >= settings.dti_ceiling_bps:
        return 0
    return MAX_FACTOR_SCORE - truncating_div(dti, settings.dti_bps_per_point)


def score_payment_history(
    on_time_payments: int,
    total_loans: int,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """
    Convert loan repayment history into a 0-100 score.

    A borrower with no loans is neither rewarded nor penalized: the score
    is the neutral 50, regardless of on_time_payments.
    """
    if total_loans == 0:
        return settings.neutral_payment_history_score
    return calculate_on_time_percent(on_time_payments, total_loans)


def score_employment(
    employment_years: int,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """Employment tenure score; saturates at 10 years by default."""
    return min(employment_years * settings.employment_points_per_year, MAX_FACTOR_SCORE)


def score_defaults(
    previous_defaults: int,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """
    Convert prior default count into a 0-100 score (fewer is better).

    Returns:
        100 for no defaults, 50 for one or two, 0 for three or more
    """
    if previous_defaults == 0:
        return MAX_FACTOR_SCORE
    elif previous_defaults <= settings.defaults_partial_max:
        return MAX_FACTOR_SCORE // 2
    else:
        return 0


def calculate_composite_score(
    factors: FactorScores,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """
    Integer-weighted average of the factor scores.

    Weights sum to 100, so the result stays on the 0-100 scale.

    Returns:
        Composite score from 0-100 (higher = lower risk)
    """
    weighted = (
        factors.credit * settings.weight_credit
        + factors.dti * settings.weight_dti
        + factors.payment_history * settings.weight_payment_history
        + factors.employment * settings.weight_employment
        + factors.defaults * settings.weight_defaults
    )
    return truncating_div(weighted, 100)


def apply_lti_adjustment(
    composite: int,
    lti_percent: int,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """Discount the composite by 5% when LTI exceeds the threshold."""
    if lti_percent > settings.lti_threshold_percent:
        return apply_discount(
            composite,
            settings.lti_discount_numerator,
            settings.lti_discount_denominator,
        )
    return composite


def remap_to_risk_score(
    adjusted_composite: int,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """Map a 0-100 composite onto the [500, 850] risk score range."""
    return settings.final_score_base + truncating_div(
        adjusted_composite * settings.final_score_span,
        MAX_FACTOR_SCORE,
    )
