from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence

import numpy as np
import pandas as pd

from .config import EngineConfig
from .models import ChartDataPoint, SavedOperation, SimulatorInput, SimulatorOutput
from .simulation import run_simulation
from .utils import format_number, inclusive_grid

LOG = logging.getLogger("warrant_engine.scenarios")


class SweepAxis(str, Enum):
    RATE = "rate"
    TIME = "time"
    VOL = "vol"


class SweepMetric(str, Enum):
    ROI = "roi"
    PNL = "pnl"
    DELTA = "delta"


# (start, stop, step) in display units: percent, days, percent
SWEEP_GRIDS = {
    SweepAxis.RATE: (1.0, 7.0, 0.25),
    SweepAxis.TIME: (0.0, 365.0, 15.0),
    SweepAxis.VOL: (10.0, 100.0, 5.0),
}


def shifted_input(inp: SimulatorInput, axis: SweepAxis, x: float) -> SimulatorInput:
    """New input with the swept field overwritten; the original is left untouched."""
    axis = SweepAxis(axis)
    if axis is SweepAxis.RATE:
        return replace(inp, market=replace(inp.market, simulated_rate=x / 100.0))
    if axis is SweepAxis.TIME:
        return replace(inp, time=replace(inp.time, elapsed_days=inp.time.elapsed_days + x))
    return replace(inp, warrant=replace(inp.warrant, volatility=x / 100.0))


def axis_label(axis: SweepAxis, x: float) -> str:
    if SweepAxis(axis) is SweepAxis.TIME:
        return f"+{format_number(x)}d"
    return f"{format_number(x)}%"


def select_metric(result: SimulatorOutput, metric: SweepMetric) -> float:
    metric = SweepMetric(metric)
    if metric is SweepMetric.ROI:
        pct = result.adjusted_pnl.profit_loss_percent
        return np.nan if pct is None else pct
    if metric is SweepMetric.PNL:
        return result.adjusted_pnl.profit_loss
    return result.greeks.delta


def iter_sweep(
    operations: Sequence[SavedOperation],
    axis: SweepAxis = SweepAxis.RATE,
    metric: SweepMetric = SweepMetric.ROI,
    config: Optional[EngineConfig] = None,
) -> Iterator[ChartDataPoint]:
    """
    Yield one ChartDataPoint per grid value of `axis`, holding `metric` for
    every saved operation. Each call starts a fresh pass.
    """
    axis = SweepAxis(axis)
    metric = SweepMetric(metric)
    grid = inclusive_grid(*SWEEP_GRIDS[axis])
    LOG.debug(f"Sweeping {len(operations)} operation(s) over {axis.value} ({len(grid)} points), metric {metric.value}")

    for x in grid:
        x = float(x)
        values: Dict[str, float] = {}
        for op in operations:
            result = run_simulation(shifted_input(op.input, axis, x), config)
            values[op.id] = select_metric(result, metric)
        yield ChartDataPoint(label=axis_label(axis, x), x_points=x, values=values)


def sweep(
    operations: Sequence[SavedOperation],
    axis: SweepAxis = SweepAxis.RATE,
    metric: SweepMetric = SweepMetric.ROI,
    config: Optional[EngineConfig] = None,
) -> List[ChartDataPoint]:
    return list(iter_sweep(operations, axis, metric, config))


def sweep_frame(
    operations: Sequence[SavedOperation],
    axis: SweepAxis = SweepAxis.RATE,
    metric: SweepMetric = SweepMetric.ROI,
    config: Optional[EngineConfig] = None,
) -> pd.DataFrame:
    """Sweep as a table: index x_points, a label column, one column per operation id."""
    points = sweep(operations, axis, metric, config)
    out = pd.DataFrame(
        [{"x_points": p.x_points, "label": p.label, **p.values} for p in points],
        columns=["x_points", "label"] + [op.id for op in operations],
    )
    return out.set_index("x_points")


def compare_operations(
    operations: Sequence[SavedOperation],
    config: Optional[EngineConfig] = None,
) -> pd.DataFrame:
    """Side-by-side metrics of each saved operation at its own scenario."""
    rows = []
    for op in operations:
        res = run_simulation(op.input, config)
        w = op.input.warrant
        rows.append(
            {
                "id": op.id,
                "name": op.name,
                "type": w.type.value if isinstance(w.type, Enum) else str(w.type),
                "strike": w.strike,
                "simulated_rate": op.input.market.simulated_rate,
                "total_investment": res.adjusted_pnl.total_investment,
                "break_even_rate": res.break_even_rate,
                "profit_loss": res.adjusted_pnl.profit_loss,
                "profit_loss_percent": res.adjusted_pnl.profit_loss_percent,
                "delta": res.greeks.delta,
                "gamma": res.greeks.gamma,
                "vega": res.greeks.vega,
                "theta": res.greeks.theta,
                "rho": res.greeks.rho,
            }
        )

    return pd.DataFrame(rows).set_index("id") if rows else pd.DataFrame()
