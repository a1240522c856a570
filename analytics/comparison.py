import logging
from dataclasses import fields, is_dataclass, replace
from typing import Tuple

import numpy as np

from analytics.buying import simulate_buying
from analytics.renting import simulate_renting
from config import VERDICT_DEAD_BAND
from finance.income import IncomeSchedule
from models import (
    BetterOption,
    ComparisonResult,
    ScenarioInputs,
    Summary,
    YearlyComparisonRecord,
    validate_inputs,
)

LOGGER = logging.getLogger(__name__)


def classify_verdict(final_buying_wealth: float, final_renting_wealth: float) -> BetterOption:
    """Pick the better path, treating differences within 1% of the larger side as a tie."""
    difference = final_buying_wealth - final_renting_wealth
    threshold = abs(max(final_buying_wealth, final_renting_wealth)) * VERDICT_DEAD_BAND
    if difference > threshold:
        return BetterOption.BUYING
    if difference < -threshold:
        return BetterOption.RENTING
    return BetterOption.EQUAL


def _sanitize(record):
    """Replace NaN/inf floats (recursively) with 0. Returns (record, changed)."""
    changes = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if isinstance(value, tuple):
            cleaned = [_sanitize(item) if is_dataclass(item) else (item, False) for item in value]
            if any(changed for _, changed in cleaned):
                changes[f.name] = tuple(item for item, _ in cleaned)
        elif isinstance(value, float) and not np.isfinite(value):
            changes[f.name] = 0.0
    if not changes:
        return record, False
    return replace(record, **changes), True


def _sanitize_all(records) -> Tuple[tuple, bool]:
    cleaned = [_sanitize(r) for r in records]
    return tuple(r for r, _ in cleaned), any(changed for _, changed in cleaned)


def compare(inputs: ScenarioInputs) -> ComparisonResult:
    """
    Run both scenarios over the same horizon and line them up year by year.

    Raises InvalidInputError before simulating if any input is out of range.
    Non-finite numbers in the output are replaced by 0 and the result is
    flagged as degraded.
    """
    validate_inputs(inputs)
    horizon = inputs.general.time_horizon
    schedule = IncomeSchedule.from_inputs(inputs.general, horizon)
    LOGGER.debug("Comparing scenarios over %d years", horizon)

    buying_results, buying_degraded = _sanitize_all(simulate_buying(inputs, schedule))
    renting_results, renting_degraded = _sanitize_all(simulate_renting(inputs, schedule))

    comparisons = []
    cumulative_buying = 0.0
    cumulative_renting = 0.0
    for buy, rent in zip(buying_results, renting_results):
        cumulative_buying += buy.true_cost
        cumulative_renting += rent.total_rent
        comparisons.append(YearlyComparisonRecord(
            year=buy.year,
            buying_wealth=buy.total_wealth,
            renting_wealth=rent.total_wealth,
            difference=buy.total_wealth - rent.total_wealth,
            cumulative_buying_costs=cumulative_buying,
            cumulative_renting_costs=cumulative_renting,
            yearly_income=schedule.yearly_income(buy.year),
            buying_leftover_income=buy.leftover_income,
            renting_leftover_income=rent.leftover_income,
            buying_invested_balance=buy.invested_balance_after_tax,
            renting_invested_balance=rent.invested_balance_after_tax,
        ))
    yearly_comparisons, comparison_degraded = _sanitize_all(comparisons)

    final_buying = buying_results[-1].total_wealth
    final_renting = renting_results[-1].total_wealth
    summary = Summary(
        final_buying_wealth=final_buying,
        final_renting_wealth=final_renting,
        difference=abs(final_buying - final_renting),
        better_option=classify_verdict(final_buying, final_renting),
    )

    degraded = buying_degraded or renting_degraded or comparison_degraded
    if degraded:
        LOGGER.warning("Non-finite values replaced with 0; result is degraded")
    LOGGER.debug("Verdict: %s (difference %.2f)", summary.better_option.value, summary.difference)

    return ComparisonResult(
        buying_results=buying_results,
        renting_results=renting_results,
        yearly_comparisons=yearly_comparisons,
        summary=summary,
        degraded=degraded,
    )
