"""
Integer-only arithmetic for ratios, percentages and basis-point interest.

No floating point is used anywhere in scoring or loan accounting. Every
division truncates toward zero; nothing rounds to nearest.
"""

# Annual bps -> monthly fraction: 10_000 bps per unit times 12 months.
BPS_MONTHS_DIVISOR = 120_000


def truncating_div(numerator: int, denominator: int) -> int:
    """
    Integer division truncating toward zero (Python's // floors).

    Raises:
        ZeroDivisionError: If denominator is 0
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def ratio_basis_points(numerator: int, denominator: int, scale: int) -> int:
    """
    Return numerator * scale / denominator, truncated.

    A zero denominator is the worst case, not a fault: the ratio is the
    full ``scale`` (e.g. zero income means DTI = 100.00% = 10000 bps).

    Args:
        numerator: Ratio numerator (e.g. total debt)
        denominator: Ratio denominator (e.g. annual income)
        scale: Value representing a ratio of 1 (100, 10000, ...)

    Returns:
        Scaled ratio as an integer
    """
    if denominator == 0:
        return scale
    return truncating_div(numerator * scale, denominator)


def apply_discount(value: int, numerator: int, denominator: int) -> int:
    """Scale ``value`` by numerator/denominator, truncating."""
    return truncating_div(value * numerator, denominator)


def amortized_monthly_payment(principal: int, annual_rate_bps: int, months: int) -> int:
    """
    Straight-line monthly payment estimate.

    Total interest is simple, non-compounding interest over the whole term:
    ``principal * annual_rate_bps * months / 120000``. The payment is
    ``(principal + total_interest) / months``. This is not true
    amortization; there is no declining-balance compounding.

    Example:
        >>> amortized_monthly_payment(50_000, 300, 60)
        958

    Raises:
        ValueError: If months is not positive
    """
    if months <= 0:
        raise ValueError(f"months must be positive, got {months}")
    total_interest = truncating_div(principal * annual_rate_bps * months, BPS_MONTHS_DIVISOR)
    return truncating_div(principal + total_interest, months)
