"""
Risk Band Mapping for the Risk Ledger scoring engine.

Maps a single risk score to a category and an annual interest rate. The
same mapping is used for a borrower's raw credit score (profile writes and
loan applications) and for the final blended score of a comprehensive
assessment, so the thresholds can never drift apart.
"""

from risk_ledger.domain.entities import RiskCategory

from .models import RiskBand
from .settings import ScoringSettings, scoring_settings


def derive_risk_band(
    score: int,
    settings: ScoringSettings = scoring_settings,
) -> RiskBand:
    """
    Map a score to its risk band, checking the highest threshold first.

    Thresholds are inclusive: a score exactly on a threshold gets the more
    favorable band.

    Args:
        score: Credit score or final risk score
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        RiskBand with category and interest rate in bps
    """
    if score >= settings.low_risk_threshold:
        return RiskBand(RiskCategory.LOW, settings.low_risk_rate_bps)
    elif score >= settings.medium_risk_threshold:
        return RiskBand(RiskCategory.MEDIUM, settings.medium_risk_rate_bps)
    elif score >= settings.high_risk_threshold:
        return RiskBand(RiskCategory.HIGH, settings.high_risk_rate_bps)
    else:
        return RiskBand(RiskCategory.VERY_HIGH, settings.very_high_risk_rate_bps)


def derive_risk_category(
    score: int,
    settings: ScoringSettings = scoring_settings,
) -> RiskCategory:
    """Risk category for a score."""
    return derive_risk_band(score, settings).category


def derive_interest_rate(
    score: int,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """Annual interest rate in basis points for a score."""
    return derive_risk_band(score, settings).interest_rate_bps
