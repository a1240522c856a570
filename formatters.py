def format_currency(value: float, cur: str = "$") -> str:
    """Whole-dollar currency string, e.g. -1234.6 -> '-$1,235'."""
    sign = "-" if value < 0 else ""
    return f"{sign}{cur}{abs(value):,.0f}"


def format_signed_currency(value: float, cur: str = "$") -> str:
    if value > 0:
        return "+" + format_currency(value, cur)
    return format_currency(value, cur)


def format_percentage(value: float) -> str:
    """`value` is already a percentage: 4 -> '4.00%'."""
    return f"{value:.2f}%"
