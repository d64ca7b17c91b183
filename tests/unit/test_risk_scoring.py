"""
Unit Tests for the Risk Ledger scoring engine.

These tests verify:
1. Factor score normalization and its boundaries
2. Composite weighting and the loan-to-income discount
3. Risk band mapping at every threshold
4. The complete comprehensive assessment

Test Categories:
- Test{Factor}Score: individual factor scores
- TestComposite*: weighting, discount and remapping
- TestRiskBands: category and rate mapping
- TestComprehensiveAssessment: end-to-end assessment
"""

import pytest

from risk_ledger.domain.entities import BorrowerProfile, RiskCategory
from risk_ledger.service.scoring import (
    FactorScores,
    ScoringSettings,
    apply_lti_adjustment,
    assess_comprehensive_risk,
    calculate_composite_score,
    calculate_dti_bps,
    calculate_factor_scores,
    calculate_lti_percent,
    derive_interest_rate,
    derive_risk_band,
    derive_risk_category,
    explain_assessment,
    remap_to_risk_score,
    score_credit,
    score_defaults,
    score_dti,
    score_employment,
    score_payment_history,
)


# =============================================================================
# Test Fixtures
# =============================================================================

def make_profile(
    credit_score: int = 720,
    annual_income: int = 100000,
    total_debt: int = 20000,
    employment_years: int = 5,
    previous_defaults: int = 0,
    on_time_payments: int = 18,
    total_loans: int = 20,
) -> BorrowerProfile:
    """Helper to create a profile; defaults describe a low-risk borrower."""
    return BorrowerProfile(
        borrower="alice",
        credit_score=credit_score,
        annual_income=annual_income,
        total_debt=total_debt,
        employment_years=employment_years,
        previous_defaults=previous_defaults,
        on_time_payments=on_time_payments,
        total_loans=total_loans,
        risk_category=derive_risk_category(credit_score),
        last_updated=1,
    )


# =============================================================================
# Risk Factor Tests
# =============================================================================

class TestRiskFactors:
    """Tests for the raw ratio calculations."""

    def test_dti_in_basis_points(self):
        assert calculate_dti_bps(20000, 100000) == 2000

    def test_dti_zero_income_is_worst_case(self):
        assert calculate_dti_bps(0, 0) == 10000

    def test_lti_in_percent(self):
        assert calculate_lti_percent(50000, 100000) == 50
        assert calculate_lti_percent(50001, 100000) == 50
        assert calculate_lti_percent(51000, 100000) == 51

    def test_lti_zero_income_is_worst_case(self):
        assert calculate_lti_percent(1000, 0) == 100


# =============================================================================
# Factor Score Tests
# =============================================================================

class TestCreditScore:
    """Tests for score_credit."""

    def test_range_endpoints(self):
        assert score_credit(300) == 0
        assert score_credit(850) == 100

    def test_truncates(self):
        # (720 - 300) * 100 / 550 = 76.36
        assert score_credit(720) == 76


class TestDTIScore:
    """Tests for score_dti."""

    def test_no_debt_scores_full(self):
        assert score_dti(0, 100000) == 100

    def test_twenty_percent_dti(self):
        assert score_dti(20000, 100000) == 60

    def test_ceiling_scores_zero(self):
        assert score_dti(50000, 100000) == 0
        assert score_dti(90000, 100000) == 0

    def test_just_below_ceiling(self):
        # 4999 bps -> 100 - 99
        assert score_dti(49990, 100000) == 1

    def test_zero_income_scores_zero(self):
        assert score_dti(0, 0) == 0

    def test_rising_income_never_lowers_score(self):
        previous = 0
        for annual_income in range(0, 200001, 2500):
            score = score_dti(20000, annual_income)
            assert 0 <= score <= 100
            assert score >= previous
            previous = score


class TestPaymentHistoryScore:
    """Tests for score_payment_history."""

    def test_no_history_is_neutral(self):
        assert score_payment_history(0, 0) == 50

    def test_no_history_ignores_on_time_count(self):
        assert score_payment_history(5, 0) == 50

    def test_on_time_share(self):
        assert score_payment_history(18, 20) == 90
        assert score_payment_history(1, 3) == 33

    def test_more_on_time_than_loans_is_used_as_computed(self):
        assert score_payment_history(5, 2) == 250


class TestEmploymentScore:
    """Tests for score_employment."""

    @pytest.mark.parametrize(
        "years,expected",
        [(0, 0), (5, 50), (10, 100), (25, 100)],
    )
    def test_ten_points_per_year_capped(self, years, expected):
        assert score_employment(years) == expected


class TestDefaultsScore:
    """Tests for score_defaults."""

    @pytest.mark.parametrize(
        "defaults,expected",
        [(0, 100), (1, 50), (2, 50), (3, 0), (10, 0)],
    )
    def test_tiers(self, defaults, expected):
        assert score_defaults(defaults) == expected


# =============================================================================
# Composite, Discount and Remapping Tests
# =============================================================================

class TestCompositeScore:
    """Tests for weighting and remapping."""

    def test_weighted_blend(self):
        factors = FactorScores(credit=76, dti=60, payment_history=90, employment=50, defaults=100)
        # 2660 + 1500 + 1800 + 500 + 1000 = 7460
        assert calculate_composite_score(factors) == 74

    def test_bounds(self):
        best = FactorScores(100, 100, 100, 100, 100)
        worst = FactorScores(0, 0, 0, 0, 0)
        assert calculate_composite_score(best) == 100
        assert calculate_composite_score(worst) == 0

    def test_lti_at_threshold_not_discounted(self):
        assert apply_lti_adjustment(74, 50) == 74

    def test_lti_above_threshold_discounted(self):
        assert apply_lti_adjustment(74, 51) == 70
        assert apply_lti_adjustment(100, 100) == 95

    def test_remap_range(self):
        assert remap_to_risk_score(0) == 500
        assert remap_to_risk_score(100) == 850
        assert remap_to_risk_score(74) == 759


# =============================================================================
# Risk Band Tests
# =============================================================================

class TestRiskBands:
    """Tests for derive_risk_band at each inclusive threshold."""

    @pytest.mark.parametrize(
        "score,category,rate",
        [
            (850, RiskCategory.LOW, 300),
            (700, RiskCategory.LOW, 300),
            (699, RiskCategory.MEDIUM, 800),
            (600, RiskCategory.MEDIUM, 800),
            (599, RiskCategory.HIGH, 1500),
            (500, RiskCategory.HIGH, 1500),
            (499, RiskCategory.VERY_HIGH, 2000),
            (300, RiskCategory.VERY_HIGH, 2000),
        ],
    )
    def test_band_boundaries(self, score, category, rate):
        band = derive_risk_band(score)
        assert band.category == category
        assert band.interest_rate_bps == rate
        assert derive_risk_category(score) == category
        assert derive_interest_rate(score) == rate

    def test_category_values(self):
        assert RiskCategory.VERY_HIGH.value == "very-high"


class TestScoringSettings:
    """Tests for settings validation."""

    def test_weights_must_sum_to_100(self):
        with pytest.raises(ValueError):
            ScoringSettings(weight_credit=40)

    def test_thresholds_must_descend(self):
        with pytest.raises(ValueError):
            ScoringSettings(medium_risk_threshold=750)

    def test_defaults_are_valid(self):
        settings = ScoringSettings()
        assert settings.credit_score_span == 550


# =============================================================================
# Comprehensive Assessment Tests
# =============================================================================

class TestComprehensiveAssessment:
    """Tests for assess_comprehensive_risk."""

    def test_low_risk_borrower(self):
        """
        720 score, 20% DTI, 18/20 on time, 5 years employed, no defaults,
        requesting half of annual income.
        """
        assessment = assess_comprehensive_risk(make_profile(), 50000, purpose="Car")

        assert assessment.factors == FactorScores(76, 60, 90, 50, 100)
        assert assessment.composite_score == 74
        assert assessment.lti_percent == 50
        assert assessment.lti_adjusted is False
        assert assessment.adjusted_score == 74
        assert assessment.final_risk_score == 759
        assert assessment.risk_category == RiskCategory.LOW
        assert assessment.recommended_interest_rate == 300
        assert assessment.max_recommended_amount == 40000
        assert assessment.approval_recommendation is True
        assert assessment.purpose == "Car"

    def test_high_lti_discounts_composite(self):
        assessment = assess_comprehensive_risk(make_profile(), 60000)

        assert assessment.lti_percent == 60
        assert assessment.lti_adjusted is True
        assert assessment.adjusted_score == 70
        assert assessment.final_risk_score == 745

    def test_zero_income_applies_discount(self):
        profile = make_profile(annual_income=0, total_debt=0)
        assessment = assess_comprehensive_risk(profile, 1000)

        assert assessment.dti_bps == 10000
        assert assessment.factors.dti == 0
        assert assessment.lti_percent == 100
        assert assessment.lti_adjusted is True
        assert assessment.max_recommended_amount == 0

    def test_worst_profile_stays_in_range(self):
        profile = make_profile(
            credit_score=300,
            annual_income=0,
            total_debt=0,
            employment_years=0,
            previous_defaults=5,
            on_time_payments=0,
            total_loans=0,
        )
        assessment = assess_comprehensive_risk(profile, 1000)

        # only the neutral payment history contributes: 50 * 20 / 100 = 10
        assert assessment.composite_score == 10
        assert assessment.adjusted_score == 9
        assert assessment.final_risk_score == 531
        assert assessment.risk_category == RiskCategory.HIGH

    def test_more_on_time_payments_than_loans(self):
        """The on-time share is not capped; it lifts the composite past 100."""
        profile = make_profile(on_time_payments=5, total_loans=2)
        assessment = assess_comprehensive_risk(profile, 1000)

        assert assessment.factors.payment_history == 250
        # 2660 + 1500 + 5000 + 500 + 1000 = 10660
        assert assessment.composite_score == 106
        assert assessment.lti_adjusted is False
        assert assessment.final_risk_score == 871
        assert assessment.risk_category == RiskCategory.LOW
        assert assessment.to_dict()["factors"]["payment_history"] == 250

    def test_final_score_monotonic_in_credit_score(self):
        previous = 0
        for credit_score in range(300, 851, 10):
            result = assess_comprehensive_risk(make_profile(credit_score=credit_score), 10000)
            assert 500 <= result.final_risk_score <= 850
            assert result.final_risk_score >= previous
            previous = result.final_risk_score

    def test_identical_inputs_give_identical_results(self):
        profile = make_profile()
        first = assess_comprehensive_risk(profile, 50000, model_version=3)
        second = assess_comprehensive_risk(profile, 50000, model_version=3)

        assert first == second
        assert first.model_version == 3

    def test_factor_scores_match_profile(self):
        factors = calculate_factor_scores(make_profile(total_loans=0, on_time_payments=0))
        assert factors.payment_history == 50

    def test_to_dict_nests_factors(self):
        data = assess_comprehensive_risk(make_profile(), 50000).to_dict()

        assert data["factors"]["credit"] == 76
        assert data["risk_category"] == "low"
        assert data["final_risk_score"] == 759


class TestExplainAssessment:
    """Tests for explain_assessment."""

    def test_explanation_mentions_key_figures(self):
        text = explain_assessment(assess_comprehensive_risk(make_profile(), 50000))

        assert "RECOMMENDED" in text
        assert "759/850" in text
        assert "20.00%" in text
        assert "Prior defaults: none" in text
        assert "exceeds threshold" not in text

    def test_explanation_mentions_lti_discount(self):
        text = explain_assessment(assess_comprehensive_risk(make_profile(), 60000))
        assert "Loan-to-income 60% exceeds threshold" in text
