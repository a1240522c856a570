from models import AmortizationStep


def _monthly_rate(annual_rate_pct: float) -> float:
    return annual_rate_pct / (12 * 100)


def _compound(r: float, months: int) -> float:
    # Overflow becomes inf; compare() zeroes non-finite output.
    try:
        return (1 + r) ** months
    except OverflowError:
        return float("inf")


def monthly_payment(principal: float, annual_rate_pct: float, years: int) -> float:
    n = years * 12
    if n <= 0:
        raise ValueError("years must be > 0")
    r = _monthly_rate(annual_rate_pct)
    if r == 0:
        return principal / n
    pow_ = _compound(r, n)
    if pow_ == float("inf"):
        return float("inf")
    return principal * (r * pow_) / (pow_ - 1)


def remaining_balance(
    principal: float, annual_rate_pct: float, years: int, months_paid: int
) -> float:
    """Closed-form balance after `months_paid` payments, never negative."""
    n = years * 12
    if n <= 0:
        raise ValueError("years must be > 0")
    m = max(0, min(months_paid, n))
    r = _monthly_rate(annual_rate_pct)

    if r == 0:
        bal = principal * (1 - m / n)
        return max(0.0, bal)

    pow_n = _compound(r, n)
    if pow_n == float("inf"):
        return float("inf")
    pow_m = _compound(r, m)
    bal = principal * (pow_n - pow_m) / (pow_n - 1)
    return max(0.0, bal)


def amortize_month(
    principal: float, annual_rate_pct: float, years: int, month_index: int
) -> AmortizationStep:
    """
    Split payment number `month_index` (1-based) into principal and interest.

    The balance before the payment comes from `remaining_balance`, so each call
    is O(1) regardless of the month asked for. Past the end of the term the
    loan is retired and everything is zero.
    """
    if month_index < 1:
        raise ValueError("month_index must be >= 1")
    n = years * 12
    if month_index > n:
        return AmortizationStep(0.0, 0.0, 0.0)

    r = _monthly_rate(annual_rate_pct)
    payment = monthly_payment(principal, annual_rate_pct, years)
    balance = remaining_balance(principal, annual_rate_pct, years, month_index - 1)

    interest = balance * r
    principal_part = payment - interest
    return AmortizationStep(
        principal_payment=principal_part,
        interest_payment=interest,
        remaining_balance=max(0.0, balance - principal_part),
    )
