"""
Data models for risk scoring.

These models carry the outputs of the scoring pipeline, from the five
normalized factor scores to the final recommendation.
"""

from dataclasses import dataclass

from risk_ledger.domain.entities import RiskCategory


@dataclass(frozen=True)
class RiskBand:
    """A risk category together with the annual rate it is priced at."""

    category: RiskCategory
    interest_rate_bps: int


@dataclass(frozen=True)
class FactorScores:
    """
    The five normalized sub-scores, each on a 0-100 scale (higher = safer).

    Attributes:
        credit: Credit score linearly rescaled from [300, 850]
        dti: Debt-to-income score; 0 at or above a 50% DTI
        payment_history: Share of past loans repaid on time; 50 with no history
        employment: Ten points per year employed, capped at 100
        defaults: 100 with no defaults, 50 for one or two, 0 beyond
    """

    credit: int
    dti: int
    payment_history: int
    employment: int
    defaults: int


@dataclass(frozen=True)
class RiskAssessment:
    """
    Full multi-factor evaluation of a borrower for a candidate amount.

    Attributes:
        borrower: Identity that was assessed
        requested_amount: Candidate loan amount
        purpose: Free-text purpose, echoed back unchanged
        factors: The five normalized sub-scores
        dti_bps: Debt-to-income ratio in basis points (10000 = 100%)
        lti_percent: Loan-to-income ratio as a whole percentage
        lti_adjusted: True if the LTI discount was applied
        composite_score: Weighted blend of the factors (0-100)
        adjusted_score: Composite after the LTI discount (0-100)
        final_risk_score: Adjusted score remapped to [500, 850]
        risk_category: Category of the final score
        recommended_interest_rate: Rate of the final score's band (bps)
        max_recommended_amount: Largest amount recommended for this income
        approval_recommendation: Whether approval is recommended
        model_version: Scoring model version that produced this result
    """

    borrower: str
    requested_amount: int
    purpose: str
    factors: FactorScores
    dti_bps: int
    lti_percent: int
    lti_adjusted: bool
    composite_score: int
    adjusted_score: int
    final_risk_score: int
    risk_category: RiskCategory
    recommended_interest_rate: int
    max_recommended_amount: int
    approval_recommendation: bool
    model_version: int

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "borrower": self.borrower,
            "requested_amount": self.requested_amount,
            "purpose": self.purpose,
            "factors": {
                "credit": self.factors.credit,
                "dti": self.factors.dti,
                "payment_history": self.factors.payment_history,
                "employment": self.factors.employment,
                "defaults": self.factors.defaults,
            },
            "dti_bps": self.dti_bps,
            "lti_percent": self.lti_percent,
            "lti_adjusted": self.lti_adjusted,
            "composite_score": self.composite_score,
            "adjusted_score": self.adjusted_score,
            "final_risk_score": self.final_risk_score,
            "risk_category": self.risk_category.value,
            "recommended_interest_rate": self.recommended_interest_rate,
            "max_recommended_amount": self.max_recommended_amount,
            "approval_recommendation": self.approval_recommendation,
            "model_version": self.model_version,
        }
