# src/relocation/services/reporting.py
from __future__ import annotations

from dataclasses import fields
from typing import Any, Iterable

import pandas as pd

from relocation.domain.scenario import CalculationResult

_NUMERIC_FIELDS = [f.name for f in fields(CalculationResult) if f.name != "scenario"]


def result_row(result: CalculationResult) -> dict[str, Any]:
    """Flatten one result: scenario identity first, then every computed field."""
    row: dict[str, Any] = {
        "scenario_id": result.scenario.id,
        "scenario_name": result.scenario.name,
        "liquidate": result.scenario.liquidate,
    }
    for name in _NUMERIC_FIELDS:
        row[name] = getattr(result, name)
    return row


def results_frame(results: Iterable[CalculationResult]) -> pd.DataFrame:
    """
    One row per scenario, in input order. Formatting and file output are the
    caller's concern.
    """
    rows = [result_row(r) for r in results]
    columns = ["scenario_id", "scenario_name", "liquidate", *_NUMERIC_FIELDS]
    return pd.DataFrame(rows, columns=columns)
