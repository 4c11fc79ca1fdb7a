# src/relocation/domain/assumptions.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EvaluationPolicy(BaseModel):
    """
    Policy constants shared by the evaluator, the scenario generator and the
    frontier selector. Defaults mirror AppConfig; tests build their own.
    """
    model_config = ConfigDict(frozen=True)

    closing_cost_pct: float = 0.03
    default_interest_rate: float = 0.065
    default_monthly_income: float = 5000.0
    insurance_waiver_down_payment: float = 0.20
    mortgage_term_years: int = 30
    max_dti_pct: float = 43.0

    @classmethod
    def from_config(cls, cfg=None) -> "EvaluationPolicy":
        if cfg is None:
            from relocation.adapters.config import config as cfg
        return cls(
            closing_cost_pct=cfg.CLOSING_COST_PCT,
            default_interest_rate=cfg.DEFAULT_INTEREST_RATE,
            default_monthly_income=cfg.DEFAULT_MONTHLY_INCOME,
            insurance_waiver_down_payment=cfg.INSURANCE_WAIVER_DOWN_PAYMENT,
            mortgage_term_years=cfg.MORTGAGE_TERM_YEARS,
            max_dti_pct=cfg.MAX_DTI_PCT,
        )
