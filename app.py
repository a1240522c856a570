import streamlit as st

from analytics.charts import cost_mix_chart, wealth_chart
from analytics.comparison import compare
from analytics.trajectories import comparison_frame, cost_breakdown, wealth_trajectories
from config import DEFAULT_VALUES
from formatters import format_currency, format_percentage, format_signed_currency
from models import (
    BuyingInputs,
    GeneralInputs,
    InvalidInputError,
    InvestmentInputs,
    RentingInputs,
    ScenarioInputs,
)

st.set_page_config(page_title="Rent vs Buy — Net Worth", page_icon="🏠", layout="wide")

g0 = DEFAULT_VALUES["general"]
b0 = DEFAULT_VALUES["buying"]
r0 = DEFAULT_VALUES["renting"]
i0 = DEFAULT_VALUES["investment"]

# ------------------------- Inputs -------------------------

with st.sidebar:
    st.markdown("### General")
    time_horizon = st.slider("Time horizon (years)", 1, 50, g0["time_horizon"], 1)
    annual_income = st.number_input("Annual income", min_value=0.0, value=g0["annual_income"], step=1000.0, format="%.0f")
    income_increase = st.checkbox("Income grows every year", value=g0["income_increase"])
    income_growth = st.slider("Income growth (annual %)", 0.0, 10.0, g0["annual_income_growth_rate"], 0.25,
                              disabled=not income_increase)
    current_savings = st.number_input("Current savings", min_value=0.0, value=g0["current_savings"], step=1000.0, format="%.0f")

    st.markdown("### Buying")
    house_price = st.number_input("House price", min_value=0.0, value=b0["house_price"], step=1000.0, format="%.0f")
    down_payment_percent = st.slider("Down payment (%)", 0.0, 100.0, b0["down_payment_percent"], 1.0)
    interest_rate = st.slider("Mortgage rate (annual %)", 0.0, 15.0, b0["interest_rate"], 0.05)
    loan_term = st.selectbox("Loan term (years)", [10, 15, 20, 25, 30], index=4)
    loan_type = st.radio("Loan type", ["fixed", "adjustable"], horizontal=True)
    property_tax_rate = st.slider("Property tax (annual % of value)", 0.0, 5.0, b0["property_tax_rate"], 0.05)
    home_insurance_rate = st.slider("Home insurance (annual % of value)", 0.0, 3.0, b0["home_insurance_rate"], 0.05)
    use_pct = st.checkbox("Maintenance as % of value", value=b0["use_percentage_for_maintenance"])
    if use_pct:
        maintenance = st.slider("Maintenance (annual % of value)", 0.0, 5.0, b0["maintenance_costs"], 0.1)
    else:
        maintenance = st.number_input("Maintenance (annual $)", min_value=0.0, value=4000.0, step=100.0)
    appreciation_scenario = st.radio("Appreciation", ["low", "medium", "high", "custom"], index=1, horizontal=True)
    custom_rate = st.slider("Custom appreciation (annual %)", -5.0, 15.0, b0["custom_appreciation_rate"], 0.25,
                            disabled=appreciation_scenario != "custom")

    st.markdown("### Renting")
    monthly_rent = st.number_input("Monthly rent", min_value=0.0, value=r0["monthly_rent"], step=50.0, format="%.0f")
    rent_increase = st.slider("Rent increase (annual %)", 0.0, 10.0, r0["annual_rent_increase"], 0.25)

    st.markdown("### Investment")
    annual_return = st.slider("Investment return (annual %)", 0.0, 15.0, i0["annual_return"], 0.25)
    cgt_rate = st.slider("Capital gains tax (%)", 0.0, 40.0, i0["capital_gains_tax_rate"], 0.5)

inputs = ScenarioInputs(
    general=GeneralInputs(time_horizon, annual_income, income_increase, income_growth, current_savings),
    buying=BuyingInputs(
        house_price=house_price,
        down_payment_percent=down_payment_percent,
        interest_rate=interest_rate,
        loan_term=loan_term,
        property_tax_rate=property_tax_rate,
        home_insurance_rate=home_insurance_rate,
        maintenance_costs=maintenance,
        use_percentage_for_maintenance=use_pct,
        appreciation_scenario=appreciation_scenario,
        custom_appreciation_rate=custom_rate,
        loan_type=loan_type,
    ),
    renting=RentingInputs(monthly_rent, rent_increase),
    investment=InvestmentInputs(annual_return, cgt_rate),
)

# ------------------------- Results -------------------------

st.title("🏠 Rent vs Buy — Net Worth Projection")

try:
    result = compare(inputs)
except InvalidInputError as exc:
    st.error(f"Invalid input ({exc.field}): {exc}")
    st.stop()

if result.degraded:
    st.warning("Some values could not be computed and were shown as 0. Check the inputs.")

summary = result.summary
col1, col2, col3 = st.columns(3)
col1.metric("Buying — final net worth", format_currency(summary.final_buying_wealth), border=True)
col2.metric("Renting — final net worth", format_currency(summary.final_renting_wealth), border=True)
verdict = {"buying": "Buying wins", "renting": "Renting wins", "equal": "Roughly equal"}[summary.better_option.value]
col3.metric(verdict, format_currency(summary.difference), border=True,
            help="Differences within 1% of the larger net worth count as equal")

chart_left, chart_right = st.columns([2, 1], gap="medium")
with chart_left:
    st.altair_chart(wealth_chart(wealth_trajectories(result)), use_container_width=True)
    st.caption("Buying = home equity + invested savings. Renting = invested savings. "
               "Capital gains tax is settled in the final year only.")
with chart_right:
    st.altair_chart(cost_mix_chart(cost_breakdown(result)), use_container_width=False)

st.markdown("### Year by year")
table = comparison_frame(result)
money_columns = [c for c in table.columns if c != "year"]
display = table.copy()
for column in money_columns:
    formatter = format_signed_currency if column == "difference" else format_currency
    display[column] = table[column].map(formatter)
st.dataframe(display, hide_index=True, use_container_width=True)
st.caption(f"Appreciation scenario: {appreciation_scenario} · "
           f"Mortgage rate {format_percentage(interest_rate)} · Return {format_percentage(annual_return)}")
