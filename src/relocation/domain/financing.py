# src/relocation/domain/financing.py
from __future__ import annotations

from typing import Literal, Sequence

from pydantic import BaseModel, ConfigDict, Field

LoanCategory = Literal["conventional", "va", "fha"]


class LoanProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    category: LoanCategory
    interest_rate: float = Field(..., description="e.g. 0.062 for 6.2% APR")
    min_down_payment: float = Field(..., ge=0.0, le=1.0)
    # monthly mortgage insurance; only charged below the waiver threshold
    insurance_premium: float | None = None


class Borrower(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    monthly_income: float
    loan_products: tuple[LoanProduct, ...] = ()


class CoBorrower(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    monthly_income: float


# Loan programs offered when a household picks a single loan type
LOAN_PRESETS: dict[str, dict] = {
    "conventional": {
        "name": "Conventional",
        "interest_rate": 0.062,
        "min_down_payment": 0.035,
        "insurance_premium": 150.0,
    },
    "va": {
        "name": "VA Loan",
        "interest_rate": 0.055,
        "min_down_payment": 0.0,
        "insurance_premium": 0.0,
    },
}


def loan_product_from_preset(
    category: str,
    rate_override: float | None = None,
) -> LoanProduct:
    """
    Build a LoanProduct from LOAN_PRESETS, optionally replacing the rate.
    Raises KeyError for an unknown preset.
    """
    preset = LOAN_PRESETS[category]
    rate = preset["interest_rate"] if rate_override is None else rate_override
    return LoanProduct(
        name=preset["name"],
        category=category,
        interest_rate=rate,
        min_down_payment=preset["min_down_payment"],
        insurance_premium=preset["insurance_premium"],
    )


def combine_borrowers(
    co_borrowers: Sequence[CoBorrower],
    loan_product: LoanProduct,
) -> Borrower:
    """
    Merge co-borrowers into the single household borrower used for
    qualification: names joined with " + ", incomes summed.
    """
    if not co_borrowers:
        raise ValueError("at least one co-borrower is required")
    return Borrower(
        name=" + ".join(b.name for b in co_borrowers),
        monthly_income=sum(b.monthly_income for b in co_borrowers),
        loan_products=(loan_product,),
    )
