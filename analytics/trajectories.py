# Tabular views of a ComparisonResult for tables and charts
from dataclasses import asdict

import pandas as pd

from models import ComparisonResult, YearlyBuyingRecord, YearlyRentingRecord


def _records_frame(records) -> pd.DataFrame:
    rows = []
    for record in records:
        row = asdict(record)
        row.pop("monthly", None)
        rows.append(row)
    return pd.DataFrame(rows)


def buying_frame(result: ComparisonResult) -> pd.DataFrame:
    df = _records_frame(result.buying_results)
    df["true_cost"] = [r.true_cost for r in result.buying_results]
    return df


def renting_frame(result: ComparisonResult) -> pd.DataFrame:
    return _records_frame(result.renting_results)


def comparison_frame(result: ComparisonResult) -> pd.DataFrame:
    return _records_frame(result.yearly_comparisons)


def monthly_frame(record) -> pd.DataFrame:
    """Month-by-month breakdown under one yearly record (empty for year 0)."""
    if not isinstance(record, (YearlyBuyingRecord, YearlyRentingRecord)):
        raise TypeError(f"expected a yearly record, got {type(record).__name__}")
    return pd.DataFrame([asdict(point) for point in record.monthly])


def wealth_trajectories(result: ComparisonResult) -> pd.DataFrame:
    """
    Long-form net worth per year, one row per (year, path).
    Columns: Year, Path, Net Worth.
    """
    chart_data = pd.DataFrame({
        "Year": [c.year for c in result.yearly_comparisons],
        "Buying": [c.buying_wealth for c in result.yearly_comparisons],
        "Renting": [c.renting_wealth for c in result.yearly_comparisons],
    })
    return pd.melt(
        chart_data,
        id_vars=["Year"],
        value_vars=["Buying", "Renting"],
        var_name="Path",
        value_name="Net Worth",
    )


def cost_breakdown(result: ComparisonResult) -> pd.DataFrame:
    """Where the buyer's money went over the whole horizon."""
    years = result.buying_results[1:]
    data = {
        "Category": ["Down payment", "Principal", "Interest", "Property tax", "Insurance", "Maintenance"],
        "Amount": [
            result.buying_results[0].home_equity,
            sum(r.principal_paid for r in years),
            sum(r.interest_paid for r in years),
            sum(r.property_tax for r in years),
            sum(r.insurance for r in years),
            sum(r.maintenance for r in years),
        ],
    }
    return pd.DataFrame(data)
