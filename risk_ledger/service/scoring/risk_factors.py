"""
Risk Factor Calculations for the Risk Ledger scoring engine.

This module calculates the raw ratios the scoring engine works from:
- Debt-to-Income (DTI), in basis points
- Loan-to-Income (LTI), in whole percent
- On-time payment share, in whole percent

All of them go through ratio_basis_points, so a zero denominator (no
income, no loan history) yields the full scale instead of an error. The
callers decide what the worst case means for their factor.
"""

from .fixed_point import ratio_basis_points

BPS_SCALE = 10_000
PERCENT_SCALE = 100


def calculate_dti_bps(total_debt: int, annual_income: int) -> int:
    """
    Debt-to-income ratio in basis points (10000 = 100%).

    Business Rationale:
        Borrowers carrying a large debt load relative to income have less
        room to absorb a new monthly payment. Zero income is treated as a
        100% DTI, the worst case.

    Args:
        total_debt: Outstanding debt
        annual_income: Annual income

    Returns:
        DTI in bps; 10000 when income is zero
    """
    return ratio_basis_points(total_debt, annual_income, BPS_SCALE)


def calculate_lti_percent(requested_amount: int, annual_income: int) -> int:
    """
    Loan-to-income ratio as a whole percentage.

    Edge Cases:
        Zero income uses the same worst-case convention as DTI and returns
        100, which always exceeds the discount threshold.

    Args:
        requested_amount: Candidate loan amount
        annual_income: Annual income

    Returns:
        LTI in percent; 100 when income is zero
    """
    return ratio_basis_points(requested_amount, annual_income, PERCENT_SCALE)


def calculate_on_time_percent(on_time_payments: int, total_loans: int) -> int:
    """
    Share of past loans repaid on time, in percent.

    Returns 100 when there is no loan history; calculate_payment_history_score
    replaces that case with a neutral score.
    """
    return ratio_basis_points(on_time_payments, total_loans, PERCENT_SCALE)
