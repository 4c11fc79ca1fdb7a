# src/relocation/services/scenario_space.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from relocation.adapters.logging_utils import get_logger
from relocation.analysis.evaluator import evaluate_scenario
from relocation.analysis.loans import best_loan
from relocation.analysis.proceeds import net_proceeds
from relocation.domain.assumptions import EvaluationPolicy
from relocation.domain.financing import Borrower
from relocation.domain.parameters import AnalysisParameters
from relocation.domain.property import CandidateProperty, SourceProperty
from relocation.domain.scenario import CalculationResult, HoldAndRent, LiquidateAndBuy

logger = get_logger(__name__)

# Discretized down-payment fractions; changing the steps changes the frontier.
DOWN_PAYMENT_GRID: tuple[float, ...] = (
    0.0, 0.05, 0.10, 0.15, 0.20, 0.25, 0.30, 0.35, 0.40, 0.50, 0.60, 0.70, 0.80,
)

# 0%, 5%, ... 80% for the single-property curve
CURVE_STEPS: tuple[float, ...] = tuple(round(i * 0.05, 2) for i in range(17))

BASELINE_ID = "baseline"
CURRENT_ID = "current"


@dataclass(frozen=True)
class CurvePoint:
    down_payment_pct: float
    cashflow_apy: float
    effective_cashflow_apy: float
    annualized_roi: float
    monthly_cashflow: float
    monthly_effective_cashflow: float
    dti: float


def _pct_label(fraction: float) -> int:
    return int(round(fraction * 100))


def baseline_scenario(fallback_rent: float) -> HoldAndRent:
    return HoldAndRent(
        id=BASELINE_ID,
        name="Keep source property + rent locally",
        fallback_rent=fallback_rent,
    )


def _is_affordable(
    candidate: CandidateProperty,
    fraction: float,
    proceeds: float,
    policy: EvaluationPolicy,
) -> bool:
    cash_in = candidate.price * fraction + candidate.price * policy.closing_cost_pct
    return cash_in <= proceeds


def iter_scenarios(
    source: SourceProperty,
    candidates: Sequence[CandidateProperty],
    borrowers: Sequence[Borrower],
    fallback_rent: float,
    policy: EvaluationPolicy | None = None,
) -> Iterator[HoldAndRent | LiquidateAndBuy]:
    """
    Lazily enumerate the scenario space, baseline first.

    candidate x down-payment step x borrower x rooms rented (0..unit_count),
    skipping steps with no qualifying loan and steps whose down payment +
    closing costs exceed the sale proceeds.
    """
    policy = policy or EvaluationPolicy()
    proceeds = net_proceeds(source)
    tag_borrower = len(borrowers) > 1

    yield baseline_scenario(fallback_rent)

    skipped_no_loan = 0
    skipped_unaffordable = 0
    for candidate in candidates:
        for fraction in DOWN_PAYMENT_GRID:
            for borrower in borrowers:
                if best_loan(borrower, fraction) is None:
                    skipped_no_loan += 1
                    continue
                if not _is_affordable(candidate, fraction, proceeds, policy):
                    skipped_unaffordable += 1
                    continue

                pct = _pct_label(fraction)
                prefix = f"{candidate.category}-{borrower.name}" if tag_borrower else candidate.category
                who = f"{borrower.name}, " if tag_borrower else ""
                for units in range(candidate.unit_count + 1):
                    yield LiquidateAndBuy(
                        id=f"{prefix}-{pct}%-{units}rooms",
                        name=f"{candidate.category} ({who}{pct}% down, renting {units} rooms)",
                        fallback_rent=fallback_rent,
                        candidate=candidate,
                        down_payment_fraction=fraction,
                        borrower=borrower,
                        units_rented=units,
                    )

    logger.debug(
        "scenario space enumerated",
        extra={"context": {
            "skipped_no_loan": skipped_no_loan,
            "skipped_unaffordable": skipped_unaffordable,
        }},
    )


def evaluate_grid(
    params: AnalysisParameters,
    policy: EvaluationPolicy | None = None,
) -> list[CalculationResult]:
    """Evaluate every generated scenario; the baseline result comes first."""
    policy = policy or EvaluationPolicy()
    results = [
        evaluate_scenario(s, params.source, params.horizon_years, policy)
        for s in iter_scenarios(
            params.source,
            params.candidates,
            params.borrowers,
            params.fallback_rent,
            policy,
        )
    ]
    logger.info(
        "scenario grid evaluated",
        extra={"context": {
            "results": len(results),
            "candidates": len(params.candidates),
            "borrowers": len(params.borrowers),
            "horizon_years": params.horizon_years,
        }},
    )
    return results


def current_selection(
    source: SourceProperty,
    candidate: CandidateProperty,
    borrower: Borrower,
    down_payment_fraction: float,
    units_rented: int,
    fallback_rent: float,
    years: int = 5,
    policy: EvaluationPolicy | None = None,
) -> CalculationResult:
    """
    Evaluate the interactively chosen scenario.

    Unlike the grid, nothing is pre-filtered here: an unqualified or
    unaffordable choice still evaluates, using the policy's default rate.
    """
    units = min(units_rented, candidate.unit_count)
    scenario = LiquidateAndBuy(
        id=CURRENT_ID,
        name=(
            f"{candidate.category} ({borrower.name}, "
            f"{_pct_label(down_payment_fraction)}% down, renting {units} rooms)"
        ),
        fallback_rent=fallback_rent,
        candidate=candidate,
        down_payment_fraction=down_payment_fraction,
        borrower=borrower,
        units_rented=units,
    )
    return evaluate_scenario(scenario, source, years, policy)


def down_payment_curve(
    source: SourceProperty,
    candidate: CandidateProperty,
    borrower: Borrower,
    units_rented: int,
    fallback_rent: float,
    years: int = 5,
    policy: EvaluationPolicy | None = None,
) -> list[CurvePoint]:
    """Returns across 5% down-payment steps for one property, feasible steps only."""
    policy = policy or EvaluationPolicy()
    proceeds = net_proceeds(source)
    units = min(units_rented, candidate.unit_count)

    points: list[CurvePoint] = []
    for fraction in CURVE_STEPS:
        if best_loan(borrower, fraction) is None:
            continue
        if not _is_affordable(candidate, fraction, proceeds, policy):
            continue

        scenario = LiquidateAndBuy(
            id=f"curve-{fraction}",
            name=f"{_pct_label(fraction)}% down",
            fallback_rent=fallback_rent,
            candidate=candidate,
            down_payment_fraction=fraction,
            borrower=borrower,
            units_rented=units,
        )
        result = evaluate_scenario(scenario, source, years, policy)
        points.append(
            CurvePoint(
                down_payment_pct=fraction * 100,
                cashflow_apy=result.cashflow_apy,
                effective_cashflow_apy=result.effective_cashflow_apy,
                annualized_roi=result.horizon_annualized_roi,
                monthly_cashflow=result.monthly_cashflow,
                monthly_effective_cashflow=result.monthly_effective_cashflow,
                dti=result.dti,
            )
        )
    return points
