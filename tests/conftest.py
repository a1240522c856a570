import pytest

from analytics.comparison import compare
from config import default_inputs


@pytest.fixture
def seed_inputs():
    """$400k house, 20% down, 6% / 30y, $2,000 rent, 10% return, 30-year horizon."""
    return default_inputs()


@pytest.fixture
def seed_result(seed_inputs):
    return compare(seed_inputs)
