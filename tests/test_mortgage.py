import pytest

from finance.mortgage import amortize_month, monthly_payment, remaining_balance


class TestMonthlyPayment:
    def test_known_value(self):
        # $320,000 at 6% over 30 years is about $1,918.56/month
        assert monthly_payment(320_000, 6.0, 30) == pytest.approx(1_918.56, abs=0.01)

    def test_zero_rate_is_straight_line(self):
        assert monthly_payment(360_000, 0.0, 30) == pytest.approx(1_000.0)

    def test_rejects_non_positive_term(self):
        with pytest.raises(ValueError):
            monthly_payment(100_000, 5.0, 0)

    def test_overflowing_rate_gives_inf(self):
        assert monthly_payment(100_000, 10_000.0, 30) == float("inf")


class TestRemainingBalance:
    def test_matches_iterative_schedule(self):
        loan, rate, years = 250_000, 4.5, 25
        pmt = monthly_payment(loan, rate, years)
        r = rate / 1200
        bal = loan
        for _ in range(84):
            bal -= pmt - bal * r
        assert remaining_balance(loan, rate, years, 84) == pytest.approx(bal, rel=1e-9)

    def test_clamped_after_term(self):
        assert remaining_balance(100_000, 5.0, 10, 500) == 0.0

    def test_overflowing_rate_gives_inf(self):
        assert remaining_balance(100_000, 10_000.0, 30, 12) == float("inf")


class TestAmortizeMonth:
    def test_loan_fully_repaid_at_term(self):
        loan, rate, years = 320_000, 6.0, 30
        principal_total = 0.0
        step = None
        for month in range(1, years * 12 + 1):
            step = amortize_month(loan, rate, years, month)
            principal_total += step.principal_payment
        assert step.remaining_balance == pytest.approx(0.0, abs=1e-6)
        assert principal_total == pytest.approx(loan, abs=0.01)

    def test_payment_is_constant(self):
        pmt = monthly_payment(200_000, 7.0, 15)
        for month in (1, 60, 180):
            assert amortize_month(200_000, 7.0, 15, month).payment == pytest.approx(pmt)

    def test_first_month_split(self):
        step = amortize_month(320_000, 6.0, 30, 1)
        assert step.interest_payment == pytest.approx(1_600.0)
        assert step.principal_payment == pytest.approx(318.56, abs=0.01)
        assert step.remaining_balance == pytest.approx(320_000 - step.principal_payment)

    def test_zero_interest_principal_is_equal_each_month(self):
        loan, years = 120_000, 10
        expected = loan / (years * 12)
        balances = []
        for month in range(1, years * 12 + 1):
            step = amortize_month(loan, 0.0, years, month)
            assert step.interest_payment == 0.0
            assert step.principal_payment == pytest.approx(expected)
            balances.append(step.remaining_balance)
        assert balances[-1] == pytest.approx(0.0, abs=1e-6)
        assert all(b >= 0 for b in balances)

    def test_beyond_term_returns_zeros(self):
        step = amortize_month(100_000, 5.0, 10, 121)
        assert (step.principal_payment, step.interest_payment, step.remaining_balance) == (0.0, 0.0, 0.0)

    def test_zero_principal(self):
        step = amortize_month(0.0, 6.0, 30, 12)
        assert step.payment == 0.0
        assert step.remaining_balance == 0.0

    def test_month_index_is_one_based(self):
        with pytest.raises(ValueError):
            amortize_month(100_000, 5.0, 10, 0)
