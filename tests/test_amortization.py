import pytest
from hypothesis import given, strategies as st

from relocation.analysis.amortization import monthly_payment, remaining_balance


def test_payment_on_440k_at_6_2_pct():
    # 550k 2B2B with 20% down
    pay = monthly_payment(440_000.0, 0.062, 30)
    assert pay == pytest.approx(2693.0, abs=5.0)


def test_zero_rate_payment_is_linear():
    assert monthly_payment(360_000.0, 0.0, 30) == pytest.approx(1000.0)


def test_zero_rate_balance_is_linear():
    assert remaining_balance(360_000.0, 0.0, 30, 60) == pytest.approx(300_000.0)


@given(
    principal=st.floats(min_value=1_000.0, max_value=5_000_000.0),
    rate=st.floats(min_value=0.0005, max_value=0.20),
    years=st.integers(min_value=1, max_value=40),
)
def test_payment_matches_closed_form_annuity(principal, rate, years):
    r = rate / 12
    n = years * 12
    expected = principal * r * (1 + r) ** n / ((1 + r) ** n - 1)
    assert monthly_payment(principal, rate, years) == pytest.approx(expected, rel=1e-6)


@given(
    principal=st.floats(min_value=1_000.0, max_value=5_000_000.0),
    rate=st.one_of(st.just(0.0), st.floats(min_value=0.0005, max_value=0.20)),
    years=st.integers(min_value=1, max_value=40),
)
def test_balance_endpoints(principal, rate, years):
    assert remaining_balance(principal, rate, years, 0) == pytest.approx(principal)
    assert remaining_balance(principal, rate, years, years * 12) == pytest.approx(
        0.0, abs=1e-6 * principal
    )


def test_balance_declines_with_each_payment():
    balances = [remaining_balance(440_000.0, 0.062, 30, k) for k in range(0, 361, 60)]
    assert balances == sorted(balances, reverse=True)


def test_balance_after_five_years():
    # walk the schedule month by month and compare with the closed form
    principal, rate = 440_000.0, 0.062
    pay = monthly_payment(principal, rate, 30)
    bal = principal
    for _ in range(60):
        bal = bal * (1 + rate / 12) - pay
    assert remaining_balance(principal, rate, 30, 60) == pytest.approx(bal, rel=1e-9)
