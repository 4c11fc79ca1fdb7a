# src/relocation/analysis/pareto.py
from __future__ import annotations

from typing import Callable, NamedTuple, Sequence

import numpy as np

from relocation.domain.assumptions import EvaluationPolicy
from relocation.domain.scenario import CalculationResult

Objective = Callable[[CalculationResult], float]
Predicate = Callable[[CalculationResult], bool]


class FrontierPoint(NamedTuple):
    objective1: float
    objective2: float
    label: str
    id: str


def effective_cashflow_apy(result: CalculationResult) -> float:
    return result.effective_cashflow_apy


def annualized_roi(result: CalculationResult) -> float:
    return result.horizon_annualized_roi


DEFAULT_OBJECTIVES: tuple[Objective, Objective] = (effective_cashflow_apy, annualized_roi)


def dti_feasible(policy: EvaluationPolicy | None = None) -> Predicate:
    """Buy scenarios whose DTI is strictly below the policy cap."""
    max_dti = (policy or EvaluationPolicy()).max_dti_pct

    def _feasible(result: CalculationResult) -> bool:
        return result.scenario.liquidate and result.dti < max_dti

    return _feasible


def _dominated_mask(points: np.ndarray) -> np.ndarray:
    """
    points: (n, 2) objective matrix, both maximized.
    Row i is dominated if some row j is >= on both and > on at least one.
    """
    # [i, j, k]: objective k of candidate j compared with objective k of row i
    others = points[np.newaxis, :, :]
    rows = points[:, np.newaxis, :]
    weakly_better = (others >= rows).all(axis=2)
    strictly_better = (others > rows).any(axis=2)
    return (weakly_better & strictly_better).any(axis=1)


def pareto_frontier(
    results: Sequence[CalculationResult],
    objectives: tuple[Objective, Objective] = DEFAULT_OBJECTIVES,
    feasible: Predicate | None = None,
    policy: EvaluationPolicy | None = None,
) -> list[CalculationResult]:
    """
    Non-dominated subset of the feasible results, ascending by the first
    objective. O(n^2) over the filtered set; grids are a few hundred points.
    """
    keep = feasible or dti_feasible(policy)
    candidates = [r for r in results if keep(r)]
    if not candidates:
        return []

    first, second = objectives
    points = np.array([[first(r), second(r)] for r in candidates], dtype=float)

    dominated = _dominated_mask(points)
    survivors = np.flatnonzero(~dominated)
    order = survivors[np.argsort(points[survivors, 0], kind="stable")]
    return [candidates[i] for i in order]


def frontier_points(
    results: Sequence[CalculationResult],
    objectives: tuple[Objective, Objective] = DEFAULT_OBJECTIVES,
    feasible: Predicate | None = None,
    policy: EvaluationPolicy | None = None,
) -> list[FrontierPoint]:
    first, second = objectives
    return [
        FrontierPoint(first(r), second(r), r.scenario.name, r.scenario.id)
        for r in pareto_frontier(results, objectives, feasible, policy)
    ]
