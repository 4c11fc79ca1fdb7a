# src/relocation/domain/scenario.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from relocation.domain.financing import Borrower
from relocation.domain.property import CandidateProperty


class HoldAndRent(BaseModel):
    """Keep the source property, rent it out, and rent a home in the target market."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["hold"] = "hold"
    id: str
    name: str
    fallback_rent: float = Field(..., description="Monthly rent paid in the target market")

    @property
    def liquidate(self) -> bool:
        return False


class LiquidateAndBuy(BaseModel):
    """Sell the source property and buy `candidate` with the proceeds."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["buy"] = "buy"
    id: str
    name: str
    fallback_rent: float = Field(..., description="Rent avoided by living in the purchase")

    candidate: CandidateProperty
    down_payment_fraction: float = Field(..., ge=0.0, le=1.0)
    borrower: Borrower
    units_rented: int = Field(..., ge=0)

    @property
    def liquidate(self) -> bool:
        return True

    @model_validator(mode="after")
    def _units_within_candidate(self) -> "LiquidateAndBuy":
        if self.units_rented > self.candidate.unit_count:
            raise ValueError(
                f"units_rented={self.units_rented} exceeds unit_count="
                f"{self.candidate.unit_count} for {self.candidate.category}"
            )
        return self


Scenario = Annotated[Union[HoldAndRent, LiquidateAndBuy], Field(discriminator="kind")]


@dataclass(frozen=True)
class CalculationResult:
    scenario: HoldAndRent | LiquidateAndBuy

    # initial outlay
    initial_investment: float      # net proceeds (buy) or held value (hold)
    down_payment: float
    closing_costs: float
    remaining_cash: float          # proceeds left after down payment + closing

    # monthly
    monthly_mortgage: float
    monthly_carrying_cost: float
    monthly_insurance: float
    monthly_rental_income: float   # cash actually received
    monthly_imputed_rent: float    # rent avoided by occupying the unit
    monthly_total_income: float    # rental + imputed
    monthly_cashflow: float        # actual, excludes imputed rent
    monthly_effective_cashflow: float

    # annual
    annual_cashflow: float
    annual_effective_cashflow: float
    cashflow_apy: float            # percent
    effective_cashflow_apy: float  # percent

    # horizon
    horizon_years: int
    horizon_property_value: float
    horizon_equity: float
    horizon_net_worth: float
    horizon_total_return: float
    horizon_roi: float             # percent
    horizon_annualized_roi: float  # percent

    # risk
    dti: float                     # percent
    mortgage_to_income: float      # percent

    @property
    def scenario_id(self) -> str:
        return self.scenario.id

    @property
    def scenario_name(self) -> str:
        return self.scenario.name

    @property
    def total_monthly_payment(self) -> float:
        return self.monthly_mortgage + self.monthly_carrying_cost + self.monthly_insurance
