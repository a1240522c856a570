from dataclasses import dataclass
from typing import Tuple

from models import GeneralInputs


@dataclass(frozen=True)
class IncomeSchedule:
    """
    Gross income per year for one run, shared by both scenarios.

    yearly_incomes[y] is the income earned during year y (index 0 is the
    baseline). Income steps up at year boundaries only, starting with year 2.
    """

    yearly_incomes: Tuple[float, ...]

    @classmethod
    def from_inputs(cls, general: GeneralInputs, horizon: int) -> "IncomeSchedule":
        growth = general.annual_income_growth_rate / 100.0 if general.income_increase else 0.0
        incomes = [general.annual_income]
        for year in range(1, horizon + 1):
            incomes.append(general.annual_income * (1 + growth) ** (year - 1))
        return cls(tuple(incomes))

    @property
    def horizon(self) -> int:
        return len(self.yearly_incomes) - 1

    def yearly_income(self, year: int) -> float:
        return self.yearly_incomes[year]

    def monthly_income(self, year: int) -> float:
        return self.yearly_incomes[year] / 12.0
