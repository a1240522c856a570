def monthly_property_tax(home_value: float, rate_pct: float) -> float:
    return (home_value * rate_pct) / (12 * 100)


def monthly_home_insurance(home_value: float, rate_pct: float) -> float:
    return (home_value * rate_pct) / (12 * 100)


def monthly_maintenance(home_value: float, amount: float, use_percentage: bool) -> float:
    """
    Maintenance for one month.

    use_percentage=True  : `amount` is an annual % of the current home value.
    use_percentage=False : `amount` is a flat annual dollar figure; home value is ignored.
    """
    if use_percentage:
        return (home_value * amount) / (12 * 100)
    return amount / 12.0
