# src/relocation/domain/parameters.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from relocation.domain.financing import Borrower, CoBorrower, combine_borrowers, loan_product_from_preset
from relocation.domain.property import CandidateProperty, SourceProperty


def _configured_years(cfg=None) -> int:
    if cfg is None:
        from relocation.adapters.config import config as cfg
    return cfg.ANALYSIS_YEARS


class AnalysisParameters(BaseModel):
    """Everything a caller supplies for one grid evaluation."""
    model_config = ConfigDict(frozen=True)

    source: SourceProperty
    candidates: tuple[CandidateProperty, ...]
    borrowers: tuple[Borrower, ...]
    fallback_rent: float = Field(..., description="Monthly rent if not buying")
    horizon_years: int = Field(default_factory=_configured_years, gt=0)


def default_candidates() -> tuple[CandidateProperty, ...]:
    return (
        CandidateProperty(
            category="1B1B", price=420_000, rent_per_unit=1_800, unit_count=1,
            appreciation_rate=0.02, carrying_cost=750,
        ),
        CandidateProperty(
            category="2B2B", price=550_000, rent_per_unit=1_200, unit_count=2,
            appreciation_rate=0.03, carrying_cost=850,
        ),
        CandidateProperty(
            category="3B2B", price=750_000, rent_per_unit=1_100, unit_count=3,
            appreciation_rate=0.035, carrying_cost=1_000,
        ),
    )


def default_parameters(cfg=None) -> AnalysisParameters:
    """Defaults of the original worksheet; the horizon comes from ANALYSIS_YEARS."""
    borrower = combine_borrowers(
        [CoBorrower(name="JJ", monthly_income=3_900)],
        loan_product_from_preset("va"),
    )
    return AnalysisParameters(
        source=SourceProperty(
            market_value=2_800_000,
            monthly_rent=2_800,
            exchange_rate=7.27,
            selling_cost_rate=0.036,
        ),
        candidates=default_candidates(),
        borrowers=(borrower,),
        fallback_rent=850,
        horizon_years=_configured_years(cfg),
    )
