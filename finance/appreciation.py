from config import APPRECIATION_RATES, FALLBACK_APPRECIATION_RATE
from finance.investment import monthly_return_rate
from models import AppreciationScenario


def appreciation_rate(scenario: str, custom_rate: float = 0.0) -> float:
    """Annual appreciation (%) for a scenario tag; unknown tags fall back to 3%."""
    tag = getattr(scenario, "value", scenario)
    if tag == AppreciationScenario.CUSTOM.value:
        return custom_rate
    return APPRECIATION_RATES.get(tag, FALLBACK_APPRECIATION_RATE)


def monthly_appreciation_rate(annual_rate_pct: float) -> float:
    # Same effective-rate conversion as investment growth.
    return monthly_return_rate(annual_rate_pct)
