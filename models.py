from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class AppreciationScenario(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CUSTOM = "custom"


class BetterOption(str, Enum):
    BUYING = "buying"
    RENTING = "renting"
    EQUAL = "equal"


class InvalidInputError(ValueError):
    """Raised before simulating when an input field is out of range."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


@dataclass(frozen=True)
class GeneralInputs:
    time_horizon: int
    annual_income: float
    income_increase: bool = False
    annual_income_growth_rate: float = 0.0  # percentage
    current_savings: float = 0.0


@dataclass(frozen=True)
class BuyingInputs:
    house_price: float
    down_payment_percent: float  # percentage
    interest_rate: float  # percentage
    loan_term: int
    property_tax_rate: float  # percentage of value per year
    home_insurance_rate: float  # percentage of value per year
    maintenance_costs: float  # percentage of value per year, or annual dollars
    use_percentage_for_maintenance: bool = True
    appreciation_scenario: str = AppreciationScenario.MEDIUM.value
    custom_appreciation_rate: float = 0.0  # percentage
    loan_type: str = "fixed"

    @property
    def down_payment(self) -> float:
        return self.house_price * self.down_payment_percent / 100.0

    @property
    def loan_amount(self) -> float:
        return self.house_price - self.down_payment


@dataclass(frozen=True)
class RentingInputs:
    monthly_rent: float
    annual_rent_increase: float = 0.0  # percentage


@dataclass(frozen=True)
class InvestmentInputs:
    annual_return: float  # percentage
    capital_gains_tax_rate: float = 0.0  # percentage


@dataclass(frozen=True)
class ScenarioInputs:
    general: GeneralInputs
    buying: BuyingInputs
    renting: RentingInputs
    investment: InvestmentInputs


@dataclass(frozen=True)
class AmortizationStep:
    principal_payment: float
    interest_payment: float
    remaining_balance: float

    @property
    def payment(self) -> float:
        return self.principal_payment + self.interest_payment


@dataclass
class MonthlyBuyingPoint:
    month: int  # 1..12 within the year
    home_value: float
    home_equity: float
    loan_balance: float
    monthly_income: float
    mortgage_payment: float
    principal_payment: float
    interest_payment: float
    property_tax: float
    insurance: float
    maintenance: float
    leftover_income: float
    invested_balance: float


@dataclass
class MonthlyRentingPoint:
    month: int
    monthly_income: float
    rent: float
    leftover_income: float
    invested_balance: float


@dataclass
class YearlyBuyingRecord:
    year: int
    mortgage_payment: float
    principal_paid: float
    interest_paid: float
    loan_balance: float
    property_tax: float
    insurance: float
    maintenance: float
    home_value: float
    home_equity: float
    yearly_income: float
    leftover_income: float
    amount_invested: float
    investment_earnings: float
    invested_balance: float
    capital_gains_tax: float
    invested_balance_after_tax: float
    total_wealth: float
    monthly: Tuple[MonthlyBuyingPoint, ...] = field(default_factory=tuple)

    @property
    def true_cost(self) -> float:
        """Cash spent on the home this year; principal is excluded (it becomes equity)."""
        return self.interest_paid + self.property_tax + self.insurance + self.maintenance


@dataclass
class YearlyRentingRecord:
    year: int
    total_rent: float
    monthly_savings: float
    leftover_income: float
    amount_invested: float
    investment_earnings: float
    invested_balance_before_tax: float
    capital_gains_tax: float
    invested_balance_after_tax: float
    total_wealth: float
    yearly_income: float
    monthly: Tuple[MonthlyRentingPoint, ...] = field(default_factory=tuple)


@dataclass
class YearlyComparisonRecord:
    year: int
    buying_wealth: float
    renting_wealth: float
    difference: float
    cumulative_buying_costs: float
    cumulative_renting_costs: float
    yearly_income: float
    buying_leftover_income: float
    renting_leftover_income: float
    buying_invested_balance: float
    renting_invested_balance: float


@dataclass
class Summary:
    final_buying_wealth: float
    final_renting_wealth: float
    difference: float  # absolute
    better_option: BetterOption


@dataclass
class ComparisonResult:
    buying_results: Tuple[YearlyBuyingRecord, ...]
    renting_results: Tuple[YearlyRentingRecord, ...]
    yearly_comparisons: Tuple[YearlyComparisonRecord, ...]
    summary: Summary
    degraded: bool = False


def _require(condition: bool, field_name: str, message: str) -> None:
    if not condition:
        raise InvalidInputError(field_name, message)


def _is_whole(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_inputs(inputs: ScenarioInputs) -> None:
    """Reject out-of-range inputs, naming the offending field.

    Comparisons are written so that NaN passes; non-finite values are handled
    downstream by the orchestrator, which flags the result as degraded.
    """
    g, b, r, i = inputs.general, inputs.buying, inputs.renting, inputs.investment

    _require(_is_whole(g.time_horizon) and g.time_horizon >= 1,
             "general.time_horizon", "must be a whole number of years >= 1")
    _require(not g.annual_income < 0, "general.annual_income", "must be >= 0")
    _require(not g.annual_income_growth_rate < 0,
             "general.annual_income_growth_rate", "must be >= 0")
    _require(not g.current_savings < 0, "general.current_savings", "must be >= 0")

    _require(not b.house_price < 0, "buying.house_price", "must be >= 0")
    _require(not (b.down_payment_percent < 0 or b.down_payment_percent > 100),
             "buying.down_payment_percent", "must be between 0 and 100")
    _require(not b.loan_amount < 0, "buying.down_payment_percent",
             "down payment exceeds house price")
    _require(not b.interest_rate < 0, "buying.interest_rate", "must be >= 0")
    _require(_is_whole(b.loan_term) and b.loan_term >= 1,
             "buying.loan_term", "must be a whole number of years >= 1")
    _require(not b.property_tax_rate < 0, "buying.property_tax_rate", "must be >= 0")
    _require(not b.home_insurance_rate < 0, "buying.home_insurance_rate", "must be >= 0")
    _require(not b.maintenance_costs < 0, "buying.maintenance_costs", "must be >= 0")
    if b.appreciation_scenario == AppreciationScenario.CUSTOM:
        _require(not b.custom_appreciation_rate <= -100,
                 "buying.custom_appreciation_rate", "must be > -100")

    _require(not r.monthly_rent < 0, "renting.monthly_rent", "must be >= 0")
    _require(not r.annual_rent_increase < 0, "renting.annual_rent_increase", "must be >= 0")

    _require(not i.annual_return <= -100, "investment.annual_return", "must be > -100")
    _require(not (i.capital_gains_tax_rate < 0 or i.capital_gains_tax_rate > 100),
             "investment.capital_gains_tax_rate", "must be between 0 and 100")

