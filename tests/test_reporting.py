from relocation.services.reporting import results_frame
from relocation.services.scenario_space import evaluate_grid


def test_results_frame_one_row_per_result(params):
    results = evaluate_grid(params)
    df = results_frame(results)

    assert len(df) == len(results)
    assert list(df["scenario_id"]) == [r.scenario.id for r in results]
    assert df.loc[0, "scenario_id"] == "baseline"
    assert not df.loc[0, "liquidate"]
    assert df["liquidate"].iloc[1:].all()


def test_results_frame_carries_every_metric(params):
    df = results_frame(evaluate_grid(params))
    for col in (
        "monthly_cashflow",
        "monthly_effective_cashflow",
        "monthly_imputed_rent",
        "effective_cashflow_apy",
        "horizon_annualized_roi",
        "dti",
        "mortgage_to_income",
    ):
        assert col in df.columns
    diff = df["monthly_effective_cashflow"] - df["monthly_cashflow"]
    assert (diff - df["monthly_imputed_rent"]).abs().max() < 1e-9


def test_results_frame_empty():
    df = results_frame([])
    assert df.empty
    assert "scenario_id" in df.columns
