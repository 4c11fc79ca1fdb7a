# src/relocation/analysis/stocks.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from relocation.domain.scenario import CalculationResult


@dataclass(frozen=True)
class StockInvestmentResult:
    initial_investment: float
    annual_return: float
    horizon_value: float
    horizon_gain: float
    annualized_roi: float      # percent
    # renting continues while the cash sits in the market
    total_rent_paid: float
    net_gain_after_rent: float


@dataclass(frozen=True)
class StockComparison:
    stock: StockInvestmentResult
    buying_net_worth: float
    stock_net_worth: float
    difference: float          # buying - stocks

    @property
    def better_option(self) -> Literal["buy", "stocks"]:
        return "buy" if self.difference > 0 else "stocks"


def stock_investment(
    initial_investment: float,
    annual_return: float,
    years: int,
    monthly_rent: float,
) -> StockInvestmentResult:
    """
    Put the would-be down payment + closing costs into an index fund and keep
    renting. initial_investment must be non-zero.
    """
    horizon_value = initial_investment * (1 + annual_return) ** years
    gain = horizon_value - initial_investment
    rent_paid = monthly_rent * 12 * years

    return StockInvestmentResult(
        initial_investment=initial_investment,
        annual_return=annual_return,
        horizon_value=horizon_value,
        horizon_gain=gain,
        annualized_roi=((horizon_value / initial_investment) ** (1 / years) - 1) * 100,
        total_rent_paid=rent_paid,
        net_gain_after_rent=gain - rent_paid,
    )


def compare_with_stocks(result: CalculationResult, annual_return: float) -> StockComparison:
    """
    Buying side: horizon equity + leftover cash + cumulative effective cashflow.
    Stock side: portfolio value - rent paid + the same leftover cash.
    """
    years = result.horizon_years
    stock = stock_investment(
        result.down_payment + result.closing_costs,
        annual_return,
        years,
        result.scenario.fallback_rent,
    )

    buying = (
        result.horizon_equity
        + result.remaining_cash
        + result.annual_effective_cashflow * years
    )
    stocks = stock.horizon_value - stock.total_rent_paid + result.remaining_cash

    return StockComparison(
        stock=stock,
        buying_net_worth=buying,
        stock_net_worth=stocks,
        difference=buying - stocks,
    )
