import altair as alt
import pandas as pd

BUY_RENT_COLORS = ["#2E86AB", "#F18F01"]


def wealth_chart(wealth_df: pd.DataFrame, height: int = 400) -> alt.Chart:
    """Side-by-side net worth bars per year (input: wealth_trajectories).

    Buying is home equity plus invested savings, renting is invested savings;
    the last year is after capital gains tax.
    """
    return alt.Chart(wealth_df).mark_bar().encode(
        x=alt.X("Year:O", title="Year", axis=alt.Axis(labelAngle=0)),
        y=alt.Y("Net Worth:Q", title="Net worth ($)", axis=alt.Axis(format="$,.0f")),
        color=alt.Color("Path:N",
                        title="Path",
                        sort=["Buying", "Renting"],
                        scale=alt.Scale(domain=["Buying", "Renting"], range=BUY_RENT_COLORS),
                        legend=alt.Legend(orient="top")),
        xOffset=alt.XOffset("Path:N", sort=["Buying", "Renting"]),
        tooltip=[alt.Tooltip("Year:O"),
                 alt.Tooltip("Path:N"),
                 alt.Tooltip("Net Worth:Q", title="Net worth", format="$,.0f")],
    ).properties(
        height=height,
        title="Net worth by year: buying vs renting",
    )


def cost_mix_chart(cost_df: pd.DataFrame) -> alt.Chart:
    """Donut of the buyer's cumulative spending (input: cost_breakdown)."""
    return alt.Chart(cost_df).mark_arc(innerRadius=50, outerRadius=120).encode(
        theta=alt.Theta("Amount:Q"),
        color=alt.Color("Category:N",
                        title="Spent on",
                        scale=alt.Scale(scheme="tableau10"),
                        legend=alt.Legend(orient="bottom", columns=2)),
        tooltip=["Category:N", alt.Tooltip("Amount:Q", title="Total", format="$,.0f")],
    ).properties(
        title="Where the buyer's money went",
    )
