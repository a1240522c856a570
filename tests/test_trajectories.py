import pytest

from analytics.charts import cost_mix_chart, wealth_chart
from analytics.trajectories import (
    buying_frame,
    comparison_frame,
    cost_breakdown,
    monthly_frame,
    renting_frame,
    wealth_trajectories,
)
from formatters import format_currency, format_percentage, format_signed_currency


def _mark_type(chart):
    mark = chart.to_dict()["mark"]
    return mark["type"] if isinstance(mark, dict) else mark


class TestFrames:
    def test_yearly_frames(self, seed_result):
        buying = buying_frame(seed_result)
        renting = renting_frame(seed_result)
        comparison = comparison_frame(seed_result)
        assert len(buying) == len(renting) == len(comparison) == 31
        assert list(comparison["year"]) == list(range(31))
        assert "monthly" not in buying.columns
        assert buying.loc[0, "home_equity"] == pytest.approx(80_000.0)
        assert buying.loc[5, "true_cost"] == pytest.approx(seed_result.buying_results[5].true_cost)

    def test_monthly_frame(self, seed_result):
        assert len(monthly_frame(seed_result.buying_results[3])) == 12
        assert list(monthly_frame(seed_result.renting_results[3])["month"]) == list(range(1, 13))
        assert monthly_frame(seed_result.buying_results[0]).empty

    def test_monthly_frame_rejects_comparison_rows(self, seed_result):
        with pytest.raises(TypeError):
            monthly_frame(seed_result.yearly_comparisons[1])

    def test_wealth_trajectories_long_form(self, seed_result):
        df = wealth_trajectories(seed_result)
        assert list(df.columns) == ["Year", "Path", "Net Worth"]
        assert len(df) == 62
        assert set(df["Path"]) == {"Buying", "Renting"}
        final_rent = df[(df["Year"] == 30) & (df["Path"] == "Renting")]["Net Worth"].iloc[0]
        assert final_rent == pytest.approx(seed_result.summary.final_renting_wealth)

    def test_cost_breakdown(self, seed_result):
        df = cost_breakdown(seed_result)
        amounts = dict(zip(df["Category"], df["Amount"]))
        assert amounts["Down payment"] == pytest.approx(80_000.0)
        assert amounts["Principal"] == pytest.approx(320_000.0, abs=0.01)
        assert all(value >= 0 for value in amounts.values())


class TestCharts:
    def test_wealth_chart(self, seed_result):
        assert _mark_type(wealth_chart(wealth_trajectories(seed_result))) == "bar"

    def test_wealth_chart_is_labelled_as_net_worth(self, seed_result):
        vega = wealth_chart(wealth_trajectories(seed_result)).to_dict()
        assert vega["encoding"]["y"]["title"] == "Net worth ($)"
        assert vega["encoding"]["color"]["field"] == "Path"
        assert vega["encoding"]["color"]["scale"]["domain"] == ["Buying", "Renting"]
        assert "Net worth" in vega["title"]

    def test_cost_mix_chart(self, seed_result):
        assert _mark_type(cost_mix_chart(cost_breakdown(seed_result))) == "arc"


class TestFormatters:
    def test_currency(self):
        assert format_currency(1234.6) == "$1,235"
        assert format_currency(-1234.6) == "-$1,235"
        assert format_currency(0) == "$0"

    def test_signed_currency(self):
        assert format_signed_currency(2500) == "+$2,500"
        assert format_signed_currency(-2500) == "-$2,500"

    def test_percentage(self):
        assert format_percentage(4) == "4.00%"
        assert format_percentage(0.126) == "0.13%"
