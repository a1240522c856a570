import logging
from dataclasses import dataclass
from typing import List

from finance.appreciation import appreciation_rate, monthly_appreciation_rate
from finance.income import IncomeSchedule
from finance.investment import grow_one_month, investment_earnings
from finance.mortgage import amortize_month
from finance.property import (
    monthly_home_insurance,
    monthly_maintenance,
    monthly_property_tax,
)
from finance.taxes import settle_capital_gains
from models import MonthlyBuyingPoint, ScenarioInputs, YearlyBuyingRecord

LOGGER = logging.getLogger(__name__)


@dataclass
class _BuyingState:
    """Running totals for a single run; never shared between runs."""

    home_value: float
    loan_balance: float
    invested: float
    seed: float
    contributions: float = 0.0


def _baseline(inputs: ScenarioInputs, schedule: IncomeSchedule, state: _BuyingState) -> YearlyBuyingRecord:
    # Year 0: down payment made, no recurring payment yet.
    down_payment = inputs.buying.down_payment
    return YearlyBuyingRecord(
        year=0,
        mortgage_payment=0.0,
        principal_paid=0.0,
        interest_paid=0.0,
        loan_balance=state.loan_balance,
        property_tax=0.0,
        insurance=0.0,
        maintenance=0.0,
        home_value=state.home_value,
        home_equity=down_payment,
        yearly_income=schedule.yearly_income(0),
        leftover_income=0.0,
        amount_invested=state.seed,
        investment_earnings=0.0,
        invested_balance=state.invested,
        capital_gains_tax=0.0,
        invested_balance_after_tax=state.invested,
        total_wealth=down_payment + state.invested,
    )


def simulate_buying(inputs: ScenarioInputs, schedule: IncomeSchedule) -> List[YearlyBuyingRecord]:
    """
    Month-by-month projection of the buying path, one record per year 0..N.

    Each month: pay the mortgage, pay property costs on the current home value,
    invest whatever income is left (principal counts as a transfer into equity,
    not as leftover), then appreciate the home by one month.
    Capital gains on the investments are settled only in the final year.
    """
    buying, investment = inputs.buying, inputs.investment
    horizon = inputs.general.time_horizon
    loan = buying.loan_amount
    monthly_appreciation = monthly_appreciation_rate(
        appreciation_rate(buying.appreciation_scenario, buying.custom_appreciation_rate)
    )

    seed = max(0.0, inputs.general.current_savings - buying.down_payment)
    state = _BuyingState(
        home_value=buying.house_price,
        loan_balance=loan,
        invested=seed,
        seed=seed,
    )
    LOGGER.debug("Buying simulation: loan=%.2f seed=%.2f horizon=%d", loan, seed, horizon)

    records = [_baseline(inputs, schedule, state)]

    for year in range(1, horizon + 1):
        monthly_income = schedule.monthly_income(year)
        start_balance = state.invested
        year_contributions = 0.0
        totals = dict.fromkeys(
            ("payment", "principal", "interest", "tax", "insurance", "maintenance", "leftover"), 0.0
        )
        points = []

        for month in range(1, 13):
            step = amortize_month(loan, buying.interest_rate, buying.loan_term, (year - 1) * 12 + month)
            tax = monthly_property_tax(state.home_value, buying.property_tax_rate)
            insurance = monthly_home_insurance(state.home_value, buying.home_insurance_rate)
            maintenance = monthly_maintenance(
                state.home_value, buying.maintenance_costs, buying.use_percentage_for_maintenance
            )

            leftover = monthly_income - (step.interest_payment + tax + insurance + maintenance) - step.principal_payment
            contribution = max(0.0, leftover)
            state.invested = grow_one_month(state.invested, contribution, investment.annual_return)
            state.contributions += contribution
            year_contributions += contribution
            state.loan_balance = step.remaining_balance

            totals["payment"] += step.payment
            totals["principal"] += step.principal_payment
            totals["interest"] += step.interest_payment
            totals["tax"] += tax
            totals["insurance"] += insurance
            totals["maintenance"] += maintenance
            totals["leftover"] += leftover

            points.append(MonthlyBuyingPoint(
                month=month,
                home_value=state.home_value,
                home_equity=state.home_value - state.loan_balance,
                loan_balance=state.loan_balance,
                monthly_income=monthly_income,
                mortgage_payment=step.payment,
                principal_payment=step.principal_payment,
                interest_payment=step.interest_payment,
                property_tax=tax,
                insurance=insurance,
                maintenance=maintenance,
                leftover_income=leftover,
                invested_balance=state.invested,
            ))

            state.home_value *= 1 + monthly_appreciation

        home_equity = state.home_value - state.loan_balance
        if year == horizon:
            cgt, after_tax = settle_capital_gains(
                state.invested, state.seed + state.contributions, investment.capital_gains_tax_rate
            )
        else:
            cgt, after_tax = 0.0, state.invested

        records.append(YearlyBuyingRecord(
            year=year,
            mortgage_payment=totals["payment"],
            principal_paid=totals["principal"],
            interest_paid=totals["interest"],
            loan_balance=state.loan_balance,
            property_tax=totals["tax"],
            insurance=totals["insurance"],
            maintenance=totals["maintenance"],
            home_value=state.home_value,
            home_equity=home_equity,
            yearly_income=schedule.yearly_income(year),
            leftover_income=totals["leftover"],
            amount_invested=state.seed + state.contributions,
            investment_earnings=investment_earnings(start_balance, state.invested, year_contributions),
            invested_balance=state.invested,
            capital_gains_tax=cgt,
            invested_balance_after_tax=after_tax,
            total_wealth=home_equity + after_tax,
            monthly=tuple(points),
        ))

    LOGGER.debug("Buying simulation done: final wealth=%.2f", records[-1].total_wealth)
    return records
