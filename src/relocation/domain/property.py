from pydantic import BaseModel, ConfigDict, Field


class SourceProperty(BaseModel):
    """
    The asset being liquidated to fund the purchase.

    Values are in the source currency; exchange_rate converts source -> target
    by division and must be non-zero (caller contract, not checked).
    """
    model_config = ConfigDict(frozen=True)

    market_value: float = Field(..., description="Market value in the source currency")
    monthly_rent: float = Field(..., description="Rent obtainable if kept, source currency")
    exchange_rate: float = Field(..., description="Source units per target unit, e.g. 7.27")
    selling_cost_rate: float = Field(..., description="Taxes + agent fees, 0.036 means 3.6%")

    @property
    def market_value_target(self) -> float:
        return self.market_value / self.exchange_rate

    @property
    def monthly_rent_target(self) -> float:
        return self.monthly_rent / self.exchange_rate


class CandidateProperty(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str = Field(..., description="Display label, e.g. 2B2B")
    price: float
    rent_per_unit: float = Field(..., description="Monthly rent per rentable room")
    unit_count: int = Field(..., ge=0, description="Rooms that could be rented out")
    appreciation_rate: float = Field(..., description="0.03 means 3% per year")
    carrying_cost: float = Field(..., description="HOA + property tax + insurance per month")
