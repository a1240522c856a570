import pytest

from config import DEFAULT_VALUES, default_inputs
from models import InvalidInputError, validate_inputs


class TestScenarioInputs:
    def test_defaults_match_seed_scenario(self):
        inputs = default_inputs()
        assert inputs.general.time_horizon == 30
        assert inputs.buying.down_payment == pytest.approx(80_000.0)
        assert inputs.buying.loan_amount == pytest.approx(320_000.0)
        assert inputs.buying.appreciation_scenario == "medium"

    def test_overrides_do_not_touch_defaults(self):
        default_inputs(buying={"house_price": 1.0})
        assert DEFAULT_VALUES["buying"]["house_price"] == 400000.0

    def test_inputs_are_immutable(self):
        inputs = default_inputs()
        with pytest.raises(AttributeError):
            inputs.general.time_horizon = 5


class TestValidation:
    def test_seed_scenario_is_valid(self):
        validate_inputs(default_inputs())

    @pytest.mark.parametrize("overrides", [
        {"buying": {"interest_rate": 0.0}},
        {"buying": {"down_payment_percent": 100.0}},
        {"investment": {"annual_return": 0.0}},
        {"buying": {"appreciation_scenario": "custom", "custom_appreciation_rate": -2.0}},
        {"investment": {"annual_return": -20.0}},
    ])
    def test_edge_values_are_accepted(self, overrides):
        validate_inputs(default_inputs(**overrides))

    @pytest.mark.parametrize("overrides, field", [
        ({"general": {"time_horizon": 0}}, "general.time_horizon"),
        ({"general": {"time_horizon": 2.5}}, "general.time_horizon"),
        ({"general": {"annual_income": -1.0}}, "general.annual_income"),
        ({"general": {"current_savings": -1.0}}, "general.current_savings"),
        ({"buying": {"house_price": -1.0}}, "buying.house_price"),
        ({"buying": {"down_payment_percent": -5.0}}, "buying.down_payment_percent"),
        ({"buying": {"down_payment_percent": 100.5}}, "buying.down_payment_percent"),
        ({"buying": {"interest_rate": -0.5}}, "buying.interest_rate"),
        ({"buying": {"loan_term": 0}}, "buying.loan_term"),
        ({"buying": {"property_tax_rate": -1.0}}, "buying.property_tax_rate"),
        ({"buying": {"home_insurance_rate": -1.0}}, "buying.home_insurance_rate"),
        ({"buying": {"maintenance_costs": -1.0}}, "buying.maintenance_costs"),
        ({"buying": {"appreciation_scenario": "custom", "custom_appreciation_rate": -100.0}},
         "buying.custom_appreciation_rate"),
        ({"renting": {"monthly_rent": -1.0}}, "renting.monthly_rent"),
        ({"renting": {"annual_rent_increase": -1.0}}, "renting.annual_rent_increase"),
        ({"investment": {"annual_return": -100.0}}, "investment.annual_return"),
        ({"investment": {"capital_gains_tax_rate": 101.0}}, "investment.capital_gains_tax_rate"),
    ])
    def test_rejects_with_field_name(self, overrides, field):
        with pytest.raises(InvalidInputError) as excinfo:
            validate_inputs(default_inputs(**overrides))
        assert excinfo.value.field == field
        assert field in str(excinfo.value)

    def test_is_a_value_error(self):
        assert issubclass(InvalidInputError, ValueError)
