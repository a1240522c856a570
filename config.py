from models import (
    BuyingInputs,
    GeneralInputs,
    InvestmentInputs,
    RentingInputs,
    ScenarioInputs,
)

DEFAULT_VALUES = {
    "general": {
        "time_horizon": 30,
        "annual_income": 100000.0,
        "income_increase": False,
        "annual_income_growth_rate": 3.0,  # percentage
        "current_savings": 100000.0,
    },
    "buying": {
        "house_price": 400000.0,
        "down_payment_percent": 20.0,  # percentage
        "interest_rate": 6.0,  # percentage
        "loan_term": 30,
        "loan_type": "fixed",
        "property_tax_rate": 1.2,  # percentage
        "home_insurance_rate": 0.5,  # percentage
        "maintenance_costs": 1.0,  # percentage (or annual dollars, see flag)
        "use_percentage_for_maintenance": True,
        "appreciation_scenario": "medium",
        "custom_appreciation_rate": 3.0,  # percentage
    },
    "renting": {
        "monthly_rent": 2000.0,
        "annual_rent_increase": 3.0,  # percentage
    },
    "investment": {
        "annual_return": 10.0,  # percentage
        "capital_gains_tax_rate": 15.0,  # percentage
    },
}

# Annual home appreciation (%) per scenario tag
APPRECIATION_RATES = {
    "low": 2.0,
    "medium": 4.0,
    "high": 6.0,
}
FALLBACK_APPRECIATION_RATE = 3.0

# Final wealth within this fraction of the larger side counts as a tie
VERDICT_DEAD_BAND = 0.01


def default_inputs(**overrides) -> ScenarioInputs:
    """
    Build ScenarioInputs from DEFAULT_VALUES.

    Overrides are given per section, e.g. default_inputs(buying={"interest_rate": 0.0}).
    """
    sections = {
        name: {**values, **overrides.get(name, {})}
        for name, values in DEFAULT_VALUES.items()
    }
    return ScenarioInputs(
        general=GeneralInputs(**sections["general"]),
        buying=BuyingInputs(**sections["buying"]),
        renting=RentingInputs(**sections["renting"]),
        investment=InvestmentInputs(**sections["investment"]),
    )
