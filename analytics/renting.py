import logging
from typing import List

from finance.income import IncomeSchedule
from finance.investment import grow_one_month, investment_earnings
from finance.taxes import settle_capital_gains
from models import MonthlyRentingPoint, ScenarioInputs, YearlyRentingRecord

LOGGER = logging.getLogger(__name__)


def simulate_renting(inputs: ScenarioInputs, schedule: IncomeSchedule) -> List[YearlyRentingRecord]:
    """
    Month-by-month projection of the renting path, one record per year 0..N.

    All current savings are invested up front (no down payment). Rent steps up
    once a year; income follows the shared schedule.
    """
    renting, investment = inputs.renting, inputs.investment
    horizon = inputs.general.time_horizon

    seed = inputs.general.current_savings
    invested = seed
    contributions = 0.0
    rent = renting.monthly_rent
    LOGGER.debug("Renting simulation: seed=%.2f rent=%.2f horizon=%d", seed, rent, horizon)

    records = [YearlyRentingRecord(
        year=0,
        total_rent=0.0,
        monthly_savings=0.0,
        leftover_income=0.0,
        amount_invested=seed,
        investment_earnings=0.0,
        invested_balance_before_tax=invested,
        capital_gains_tax=0.0,
        invested_balance_after_tax=invested,
        total_wealth=invested,
        yearly_income=schedule.yearly_income(0),
    )]

    for year in range(1, horizon + 1):
        monthly_income = schedule.monthly_income(year)
        start_balance = invested
        year_rent = 0.0
        year_leftover = 0.0
        year_contributions = 0.0
        points = []

        for month in range(1, 13):
            leftover = monthly_income - rent
            contribution = max(0.0, leftover)
            invested = grow_one_month(invested, contribution, investment.annual_return)
            contributions += contribution
            year_contributions += contribution
            year_rent += rent
            year_leftover += leftover
            points.append(MonthlyRentingPoint(
                month=month,
                monthly_income=monthly_income,
                rent=rent,
                leftover_income=leftover,
                invested_balance=invested,
            ))

        if year == horizon:
            cgt, after_tax = settle_capital_gains(
                invested, seed + contributions, investment.capital_gains_tax_rate
            )
        else:
            cgt, after_tax = 0.0, invested

        records.append(YearlyRentingRecord(
            year=year,
            total_rent=year_rent,
            monthly_savings=year_contributions / 12,
            leftover_income=year_leftover,
            amount_invested=seed + contributions,
            investment_earnings=investment_earnings(start_balance, invested, year_contributions),
            invested_balance_before_tax=invested,
            capital_gains_tax=cgt,
            invested_balance_after_tax=after_tax,
            total_wealth=after_tax,
            yearly_income=schedule.yearly_income(year),
            monthly=tuple(points),
        ))

        rent *= 1 + renting.annual_rent_increase / 100

    LOGGER.debug("Renting simulation done: final wealth=%.2f", records[-1].total_wealth)
    return records
