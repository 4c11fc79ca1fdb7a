from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from relocation.adapters.config import config
from relocation.analysis.pareto import frontier_points
from relocation.analysis.proceeds import net_proceeds
from relocation.analysis.stocks import compare_with_stocks
from relocation.domain.assumptions import EvaluationPolicy
from relocation.domain.parameters import AnalysisParameters, default_parameters
from relocation.services.reporting import results_frame
from relocation.services.scenario_space import current_selection, evaluate_grid

app = typer.Typer(help="Sell-and-relocate vs hold-and-rent scenario analysis.")


def _load_params(path: Optional[Path], years: Optional[int]) -> AnalysisParameters:
    if path is None:
        params = default_parameters()
    else:
        params = AnalysisParameters.model_validate_json(path.read_text(encoding="utf-8"))
    if years is not None:
        params = params.model_copy(update={"horizon_years": years})
    return params


_PARAMS_OPTION = typer.Option(
    None, "--params", help="JSON file with AnalysisParameters (defaults if omitted)."
)
_YEARS_OPTION = typer.Option(None, "--years", help="Override the analysis horizon.")


@app.command()
def grid(
    params_file: Optional[Path] = _PARAMS_OPTION,
    years: Optional[int] = _YEARS_OPTION,
) -> None:
    """
    Evaluate the full scenario grid and print one row per scenario.
    """
    params = _load_params(params_file, years)
    policy = EvaluationPolicy.from_config(config)
    results = evaluate_grid(params, policy)
    logger.info("Grid evaluated", scenarios=len(results))

    df = results_frame(results)
    cols = [
        "scenario_id",
        "monthly_cashflow",
        "monthly_effective_cashflow",
        "effective_cashflow_apy",
        "horizon_annualized_roi",
        "dti",
    ]
    typer.echo(df[cols].to_string(index=False, float_format=lambda v: f"{v:,.2f}"))


@app.command()
def frontier(
    params_file: Optional[Path] = _PARAMS_OPTION,
    years: Optional[int] = _YEARS_OPTION,
) -> None:
    """
    Print the Pareto frontier (effective cashflow APY vs annualized ROI).
    """
    params = _load_params(params_file, years)
    policy = EvaluationPolicy.from_config(config)
    results = evaluate_grid(params, policy)
    points = frontier_points(results, policy=policy)
    logger.info("Frontier computed", grid=len(results), frontier=len(points))

    typer.echo(f"Net proceeds: ${net_proceeds(params.source):,.0f}")
    for p in points:
        typer.echo(f"{p.objective1:7.2f}%  {p.objective2:7.2f}%  {p.label}")


@app.command()
def current(
    category: str = typer.Argument(..., help="Candidate category, e.g. 2B2B."),
    down_payment: float = typer.Option(0.20, help="Down-payment fraction, e.g. 0.2."),
    rooms: int = typer.Option(0, help="Rooms rented out."),
    borrower_index: int = typer.Option(0, help="Which borrower from the parameters."),
    stock_return: Optional[float] = typer.Option(
        None, help="Annual stock return for the comparison (config default if omitted)."
    ),
    params_file: Optional[Path] = _PARAMS_OPTION,
    years: Optional[int] = _YEARS_OPTION,
) -> None:
    """
    Evaluate one selection and compare it with investing the cash in stocks.
    """
    params = _load_params(params_file, years)
    matches = [c for c in params.candidates if c.category == category]
    if not matches:
        typer.echo(f"Unknown category {category!r}", err=True)
        raise typer.Exit(code=2)
    if not 0 <= borrower_index < len(params.borrowers):
        typer.echo(
            f"Borrower index {borrower_index} out of range (0..{len(params.borrowers) - 1})",
            err=True,
        )
        raise typer.Exit(code=2)

    result = current_selection(
        source=params.source,
        candidate=matches[0],
        borrower=params.borrowers[borrower_index],
        down_payment_fraction=down_payment,
        units_rented=rooms,
        fallback_rent=params.fallback_rent,
        years=params.horizon_years,
        policy=EvaluationPolicy.from_config(config),
    )
    cmp = compare_with_stocks(
        result, stock_return if stock_return is not None else config.STOCK_RETURN_RATE
    )

    typer.echo(result.scenario.name)
    typer.echo(f"Monthly mortgage: ${result.monthly_mortgage:,.0f}")
    typer.echo(f"Monthly cashflow: ${result.monthly_cashflow:,.0f}")
    typer.echo(f"Monthly effective cashflow: ${result.monthly_effective_cashflow:,.0f}")
    typer.echo(f"Effective cashflow APY: {result.effective_cashflow_apy:.2f}%")
    typer.echo(f"{params.horizon_years}y annualized ROI: {result.horizon_annualized_roi:.2f}%")
    typer.echo(f"DTI: {result.dti:.1f}%")
    typer.echo("")
    typer.echo(f"Buying net worth: ${cmp.buying_net_worth:,.0f}")
    typer.echo(f"Stocks net worth: ${cmp.stock_net_worth:,.0f}")
    typer.echo(f"Better option: {cmp.better_option}")


if __name__ == "__main__":
    app()
