"""
Comprehensive Risk Assessment for the Risk Ledger scoring engine.

This module orchestrates the full multi-factor evaluation:
1. Normalize the profile into five factor scores
2. Blend them into a weighted composite
3. Discount for a high loan-to-income ratio
4. Remap into the credit-score range
5. Derive category, rate and amount recommendations

It is a pure function of the stored profile and the requested amount: it
never writes a record and returns identical results for identical inputs.
"""

from risk_ledger.domain.entities import BorrowerProfile

from .fixed_point import truncating_div
from .models import FactorScores, RiskAssessment
from .risk_category import derive_risk_band
from .risk_factors import calculate_dti_bps, calculate_lti_percent
from .risk_score import (
    apply_lti_adjustment,
    calculate_composite_score,
    remap_to_risk_score,
    score_credit,
    score_defaults,
    score_dti,
    score_employment,
    score_payment_history,
)
from .settings import ScoringSettings, scoring_settings


def calculate_factor_scores(
    profile: BorrowerProfile,
    settings: ScoringSettings = scoring_settings,
) -> FactorScores:
    """Normalize every scored profile field onto the 0-100 scale."""
    return FactorScores(
        credit=score_credit(profile.credit_score, settings),
        dti=score_dti(profile.total_debt, profile.annual_income, settings),
        payment_history=score_payment_history(
            profile.on_time_payments,
            profile.total_loans,
            settings,
        ),
        employment=score_employment(profile.employment_years, settings),
        defaults=score_defaults(profile.previous_defaults, settings),
    )


def assess_comprehensive_risk(
    profile: BorrowerProfile,
    requested_amount: int,
    purpose: str = "",
    model_version: int = 1,
    settings: ScoringSettings = scoring_settings,
) -> RiskAssessment:
    """
    Evaluate a borrower for a candidate loan amount.

    Decision Logic:
        - composite = weighted blend of the five factor scores
        - LTI above 50% of income discounts the composite to 95%
          (zero income counts as LTI 100%)
        - final_risk_score = 500 + adjusted * 350 / 100
        - category and rate come from the same bands as the application path

    Args:
        profile: Stored profile of the borrower
        requested_amount: Candidate loan amount
        purpose: Free-text purpose, echoed in the result
        model_version: Version stamped on the result
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        RiskAssessment with every intermediate score and the recommendation
    """
    factors = calculate_factor_scores(profile, settings)
    composite = calculate_composite_score(factors, settings)

    lti_percent = calculate_lti_percent(requested_amount, profile.annual_income)
    adjusted = apply_lti_adjustment(composite, lti_percent, settings)
    final_score = remap_to_risk_score(adjusted, settings)

    band = derive_risk_band(final_score, settings)

    return RiskAssessment(
        borrower=profile.borrower,
        requested_amount=requested_amount,
        purpose=purpose,
        factors=factors,
        dti_bps=calculate_dti_bps(profile.total_debt, profile.annual_income),
        lti_percent=lti_percent,
        lti_adjusted=lti_percent > settings.lti_threshold_percent,
        composite_score=composite,
        adjusted_score=adjusted,
        final_risk_score=final_score,
        risk_category=band.category,
        recommended_interest_rate=band.interest_rate_bps,
        max_recommended_amount=truncating_div(
            profile.annual_income * settings.max_amount_income_percent,
            100,
        ),
        approval_recommendation=final_score >= settings.approval_score_threshold,
        model_version=model_version,
    )


def explain_assessment(assessment: RiskAssessment) -> str:
    """
    Generate a human-readable explanation of an assessment.

    This can be used for:
    - Logging and debugging
    - Support team reference

    Args:
        assessment: The assessment to explain

    Returns:
        Human-readable explanation string
    """
    factors = assessment.factors
    lines = []

    verdict = "RECOMMENDED" if assessment.approval_recommendation else "NOT RECOMMENDED"
    lines.append(
        f"Assessment: {verdict} "
        f"({assessment.risk_category.value} risk, {assessment.recommended_interest_rate} bps)"
    )
    lines.append(f"Risk Score: {assessment.final_risk_score}/850")
    lines.append(f"Composite: {assessment.composite_score}/100")
    if assessment.lti_adjusted:
        lines.append(
            f"  - Loan-to-income {assessment.lti_percent}% exceeds threshold, "
            f"composite discounted to {assessment.adjusted_score}"
        )
    lines.append("")
    lines.append("Contributing Factors:")

    lines.append(f"  - Credit score: {factors.credit}/100")

    dti_percent = f"{assessment.dti_bps // 100}.{assessment.dti_bps % 100:02d}%"
    if factors.dti == 0:
        lines.append(f"  - Debt-to-income: {dti_percent} (too high)")
    else:
        lines.append(f"  - Debt-to-income: {dti_percent} (score {factors.dti}/100)")

    lines.append(f"  - Payment history: {factors.payment_history}/100")
    lines.append(f"  - Employment: {factors.employment}/100")

    if factors.defaults == 100:
        lines.append("  - Prior defaults: none")
    elif factors.defaults > 0:
        lines.append("  - Prior defaults: minor concern")
    else:
        lines.append("  - Prior defaults: significant concern")

    lines.append(f"Max recommended amount: {assessment.max_recommended_amount}")

    return "\n".join(lines)
