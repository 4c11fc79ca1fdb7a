from typer.testing import CliRunner

from entrypoints.cli.relocate import app
from relocation.domain.parameters import default_parameters

runner = CliRunner()


def test_frontier_with_defaults():
    result = runner.invoke(app, ["frontier"])
    assert result.exit_code == 0, result.output
    assert "Net proceeds" in result.output
    assert "1B1B" in result.output


def test_grid_from_params_file(tmp_path):
    params = default_parameters().model_copy(update={"horizon_years": 10})
    path = tmp_path / "params.json"
    path.write_text(params.model_dump_json(), encoding="utf-8")

    result = runner.invoke(app, ["grid", "--params", str(path)])
    assert result.exit_code == 0, result.output
    assert "baseline" in result.output
    assert "2B2B-20%-2rooms" in result.output


def test_current_unknown_category():
    result = runner.invoke(app, ["current", "9B9B"])
    assert result.exit_code == 2


def test_current_prints_comparison():
    result = runner.invoke(app, ["current", "2B2B", "--down-payment", "0.2", "--rooms", "2"])
    assert result.exit_code == 0, result.output
    assert "Better option" in result.output


def test_current_borrower_index_out_of_range():
    result = runner.invoke(app, ["current", "2B2B", "--borrower-index", "3"])
    assert result.exit_code == 2
