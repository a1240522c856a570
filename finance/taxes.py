from typing import Tuple


def capital_gains_tax(gain: float, rate_pct: float) -> float:
    """
    Tax on an investment gain at a flat rate (percentage).

    Losses are not credited: a negative gain owes nothing, so the result is
    never below zero.
    """
    return max(0.0, gain) * rate_pct / 100.0


def settle_capital_gains(
    balance: float, cost_basis: float, rate_pct: float
) -> Tuple[float, float]:
    """
    Liquidate a holding at the end of the horizon.

    The gain is everything above the cost basis (seed money plus contributions),
    i.e. the cumulative earnings over the whole horizon. Tax is settled once,
    here, rather than accrued year by year.

    Returns: (tax, balance after tax).
    """
    tax = capital_gains_tax(balance - cost_basis, rate_pct)
    return tax, balance - tax
