# src/relocation/api/http.py
from __future__ import annotations

import math
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, HTTPException

from relocation.adapters.config import config
from relocation.adapters.logging_utils import get_logger
from relocation.analysis.pareto import frontier_points
from relocation.analysis.stocks import compare_with_stocks
from relocation.domain.assumptions import EvaluationPolicy
from relocation.domain.parameters import AnalysisParameters, default_parameters
from relocation.domain.scenario import CalculationResult
from relocation.services.reporting import result_row
from relocation.services.scenario_space import current_selection, evaluate_grid
from .schemas import EvaluateRequest, FrontierItem, ResultItem, StockRequest, StockResponse

logger = get_logger(__name__)

app = FastAPI()

_policy = EvaluationPolicy.from_config(config)


def _finite_or_none(value: Any) -> Any:
    # JSON has no NaN / inf
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _result_item(result: CalculationResult) -> ResultItem:
    row = {k: _finite_or_none(v) for k, v in result_row(result).items()}
    return ResultItem(**row)


def _evaluate_current(payload: EvaluateRequest) -> CalculationResult:
    return current_selection(
        source=payload.source,
        candidate=payload.candidate,
        borrower=payload.borrower,
        down_payment_fraction=payload.down_payment_fraction,
        units_rented=payload.units_rented,
        fallback_rent=payload.fallback_rent,
        years=payload.horizon_years,
        policy=_policy,
    )


@app.get("/defaults", response_model=AnalysisParameters)
def get_defaults() -> AnalysisParameters:
    return default_parameters()


@app.post("/evaluate", response_model=ResultItem)
def evaluate_endpoint(payload: EvaluateRequest) -> ResultItem:
    try:
        return _result_item(_evaluate_current(payload))
    except (ZeroDivisionError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@app.post("/scenarios", response_model=list[ResultItem])
def scenarios_endpoint(payload: AnalysisParameters) -> list[ResultItem]:
    """Full grid, baseline first."""
    try:
        results = evaluate_grid(payload, _policy)
    except (ZeroDivisionError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return [_result_item(r) for r in results]


@app.post("/frontier", response_model=list[FrontierItem])
def frontier_endpoint(payload: AnalysisParameters) -> list[FrontierItem]:
    try:
        results = evaluate_grid(payload, _policy)
    except (ZeroDivisionError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    points = frontier_points(results, policy=_policy)
    logger.info(
        "frontier computed",
        extra={"context": {"grid": len(results), "frontier": len(points)}},
    )
    return [
        FrontierItem(**{k: _finite_or_none(v) for k, v in p._asdict().items()})
        for p in points
    ]


@app.post("/stocks", response_model=StockResponse)
def stocks_endpoint(payload: StockRequest) -> StockResponse:
    annual_return = (
        payload.annual_return if payload.annual_return is not None else config.STOCK_RETURN_RATE
    )
    try:
        current = _evaluate_current(payload)
        cmp = compare_with_stocks(current, annual_return)
    except (ZeroDivisionError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return StockResponse(
        current=_result_item(current),
        stock={k: _finite_or_none(v) for k, v in asdict(cmp.stock).items()},
        buying_net_worth=cmp.buying_net_worth,
        stock_net_worth=cmp.stock_net_worth,
        difference=cmp.difference,
        better_option=cmp.better_option,
    )
