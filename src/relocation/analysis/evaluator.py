# src/relocation/analysis/evaluator.py
from __future__ import annotations

import math

from relocation.analysis.amortization import monthly_payment, remaining_balance
from relocation.analysis.loans import best_loan
from relocation.analysis.proceeds import net_proceeds
from relocation.domain.assumptions import EvaluationPolicy
from relocation.domain.property import SourceProperty
from relocation.domain.scenario import CalculationResult, HoldAndRent, LiquidateAndBuy

_DEFAULT_POLICY = EvaluationPolicy()


def _annualized_pct(growth_ratio: float, years: int) -> float:
    # a negative ratio has no real root; the result is undefined, not clamped
    if growth_ratio < 0:
        return math.nan
    return (growth_ratio ** (1 / years) - 1) * 100


def _evaluate_hold(scenario: HoldAndRent, source: SourceProperty, years: int) -> CalculationResult:
    """
    Keep the source property and rent in the target market.
    The held asset is valued flat over the horizon; only the rent spread moves.
    """
    held_value = source.market_value_target
    rent_received = source.monthly_rent_target

    monthly_cashflow = rent_received - scenario.fallback_rent
    annual_cashflow = monthly_cashflow * 12.0

    horizon_value = held_value
    cumulative_cashflow = annual_cashflow * years
    horizon_net_worth = horizon_value + cumulative_cashflow
    total_return = horizon_net_worth - held_value

    apy = annual_cashflow / held_value * 100

    return CalculationResult(
        scenario=scenario,
        initial_investment=held_value,
        down_payment=0.0,
        closing_costs=0.0,
        remaining_cash=0.0,
        monthly_mortgage=0.0,
        monthly_carrying_cost=0.0,
        monthly_insurance=0.0,
        monthly_rental_income=rent_received,
        monthly_imputed_rent=0.0,
        monthly_total_income=rent_received,
        monthly_cashflow=monthly_cashflow,
        monthly_effective_cashflow=monthly_cashflow,
        annual_cashflow=annual_cashflow,
        annual_effective_cashflow=annual_cashflow,
        cashflow_apy=apy,
        effective_cashflow_apy=apy,
        horizon_years=years,
        horizon_property_value=horizon_value,
        horizon_equity=horizon_value,
        horizon_net_worth=horizon_net_worth,
        horizon_total_return=total_return,
        horizon_roi=total_return / held_value * 100,
        horizon_annualized_roi=_annualized_pct(1 + total_return / held_value, years),
        dti=0.0,
        mortgage_to_income=0.0,
    )


def _evaluate_buy(
    scenario: LiquidateAndBuy,
    source: SourceProperty,
    years: int,
    policy: EvaluationPolicy,
) -> CalculationResult:
    """
    Sell the source property and buy the candidate.

    Preconditions: down payment + closing costs > 0 and net proceeds != 0.
    """
    proceeds = net_proceeds(source)
    prop = scenario.candidate
    dp_fraction = scenario.down_payment_fraction

    # --- financing basics ---
    down_payment = prop.price * dp_fraction
    closing_costs = prop.price * policy.closing_cost_pct
    loan_amount = prop.price - down_payment

    # no qualifying product -> policy default rate, no insurance
    interest_rate = policy.default_interest_rate
    insurance = 0.0
    loan = best_loan(scenario.borrower, dp_fraction)
    if loan is not None:
        interest_rate = loan.interest_rate
        if loan.insurance_premium and dp_fraction < policy.insurance_waiver_down_payment:
            insurance = loan.insurance_premium

    cash_in = down_payment + closing_costs
    remaining_cash = proceeds - cash_in

    # --- monthly ---
    mortgage = monthly_payment(loan_amount, interest_rate, policy.mortgage_term_years)
    carrying = prop.carrying_cost
    rental_income = prop.rent_per_unit * scenario.units_rented

    # living in the unit avoids paying fallback_rent elsewhere
    imputed_rent = scenario.fallback_rent
    total_income = rental_income + imputed_rent

    total_payment = mortgage + carrying + insurance
    monthly_cashflow = rental_income - total_payment
    # equals monthly_cashflow + imputed_rent up to float rounding in the last bits
    monthly_effective = total_income - total_payment

    # --- annual ---
    annual_cashflow = monthly_cashflow * 12.0
    annual_effective = monthly_effective * 12.0

    # --- horizon ---
    horizon_value = prop.price * (1 + prop.appreciation_rate) ** years
    horizon_balance = remaining_balance(
        loan_amount, interest_rate, policy.mortgage_term_years, years * 12
    )
    horizon_equity = horizon_value - horizon_balance

    horizon_net_worth = horizon_equity + remaining_cash + annual_effective * years
    total_return = horizon_net_worth - proceeds

    # --- risk ---
    income = scenario.borrower.monthly_income or policy.default_monthly_income

    return CalculationResult(
        scenario=scenario,
        initial_investment=proceeds,
        down_payment=down_payment,
        closing_costs=closing_costs,
        remaining_cash=remaining_cash,
        monthly_mortgage=mortgage,
        monthly_carrying_cost=carrying,
        monthly_insurance=insurance,
        monthly_rental_income=rental_income,
        monthly_imputed_rent=imputed_rent,
        monthly_total_income=total_income,
        monthly_cashflow=monthly_cashflow,
        monthly_effective_cashflow=monthly_effective,
        annual_cashflow=annual_cashflow,
        annual_effective_cashflow=annual_effective,
        cashflow_apy=annual_cashflow / cash_in * 100,
        effective_cashflow_apy=annual_effective / cash_in * 100,
        horizon_years=years,
        horizon_property_value=horizon_value,
        horizon_equity=horizon_equity,
        horizon_net_worth=horizon_net_worth,
        horizon_total_return=total_return,
        horizon_roi=total_return / proceeds * 100,
        # compounds the net-worth ratio, not the return ratio
        horizon_annualized_roi=_annualized_pct(horizon_net_worth / proceeds, years),
        dti=total_payment / income * 100,
        mortgage_to_income=mortgage / income * 100,
    )


def evaluate_scenario(
    scenario: HoldAndRent | LiquidateAndBuy,
    source: SourceProperty,
    years: int = 5,
    policy: EvaluationPolicy | None = None,
) -> CalculationResult:
    """
    Core evaluation brain. Pure: the same inputs always produce an equal result.

    Both the grid generator and the single "current selection" path go
    through here.

    monthly_effective_cashflow - monthly_cashflow equals monthly_imputed_rent
    only to within float rounding (compare with a tolerance, not ==).
    """
    policy = policy or _DEFAULT_POLICY
    if isinstance(scenario, LiquidateAndBuy):
        return _evaluate_buy(scenario, source, years, policy)
    return _evaluate_hold(scenario, source, years)
