# src/relocation/api/schemas.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from relocation.domain.financing import Borrower
from relocation.domain.property import CandidateProperty, SourceProperty


# --------------------------------------------
# Single selection (/evaluate, /stocks)
# --------------------------------------------

class EvaluateRequest(BaseModel):
    """The interactive "current selection": one candidate, one borrower."""

    source: SourceProperty
    candidate: CandidateProperty
    borrower: Borrower
    down_payment_fraction: float = Field(..., ge=0.0, le=1.0)
    units_rented: int = Field(default=0, ge=0)
    fallback_rent: float
    horizon_years: int = Field(default=5, gt=0)


class StockRequest(EvaluateRequest):
    # None -> AppConfig.STOCK_RETURN_RATE
    annual_return: float | None = None


# --------------------------------------------
# Responses
# --------------------------------------------

class ResultItem(BaseModel):
    """
    Flattened CalculationResult. Permissive so new result fields pass through.
    """
    model_config = ConfigDict(extra="allow")

    scenario_id: str
    scenario_name: str
    liquidate: bool


class FrontierItem(BaseModel):
    objective1: float | None
    objective2: float | None
    label: str
    id: str


class StockResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    current: ResultItem
    stock: dict[str, Any]
    buying_net_worth: float
    stock_net_worth: float
    difference: float
    better_option: str
