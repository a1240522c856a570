def monthly_return_rate(annual_rate_pct: float) -> float:
    """Effective monthly rate that compounds to the annual nominal rate."""
    return (1 + annual_rate_pct / 100.0) ** (1 / 12) - 1


def grow_one_month(balance: float, contribution: float, annual_rate_pct: float) -> float:
    # Contribution lands at the start of the month and earns the full month.
    return (balance + contribution) * (1 + monthly_return_rate(annual_rate_pct))


def investment_earnings(previous: float, current: float, contribution: float) -> float:
    """Growth over a period, excluding money put in during it."""
    return current - (previous + contribution)
