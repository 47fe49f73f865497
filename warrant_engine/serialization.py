"""
Plain-record (dict / JSON) form of inputs, outputs and saved operations.

Field names are the camelCase names used by exported scenario files, and units
are kept as-is (decimal rates and volatility), so records written by older
exports load unchanged.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

from .models import (
    BondParams,
    CostParams,
    Greeks,
    MarketParams,
    PositionPnL,
    SavedOperation,
    SimulatorInput,
    SimulatorOutput,
    TimeParams,
    WarrantParams,
    WarrantType,
)

Record = Dict[str, Any]


def input_to_record(inp: SimulatorInput) -> Record:
    w, b, m = inp.warrant, inp.bond, inp.market
    return {
        "warrant": {
            "type": WarrantType(w.type).value,
            "strike": w.strike,
            "premium": w.premium,
            "ratio": w.ratio,
            "expiryYears": w.expiry_years,
            "volatility": w.volatility,
            "quantity": w.quantity,
        },
        "bond": {
            "faceValue": b.face_value,
            "couponRate": b.coupon_rate,
            "maturityYears": b.maturity_years,
        },
        "market": {
            "currentRate": m.current_rate,
            "simulatedRate": m.simulated_rate,
            "riskFreeRate": m.risk_free_rate,
        },
        "time": {"elapsedDays": inp.time.elapsed_days},
        "costs": {
            "fixedFee": inp.costs.fixed_fee,
            "proportionalFee": inp.costs.proportional_fee,
        },
    }


def input_from_record(record: Record) -> SimulatorInput:
    w = record["warrant"]
    b = record["bond"]
    m = record["market"]
    t = record.get("time") or {}
    c = record.get("costs") or {}

    return SimulatorInput(
        warrant=WarrantParams(
            type=WarrantType(w["type"]),
            strike=w["strike"],
            premium=w["premium"],
            ratio=w["ratio"],
            expiry_years=w["expiryYears"],
            volatility=w["volatility"],
            quantity=w["quantity"],
        ),
        bond=BondParams(
            face_value=b.get("faceValue", 100.0),
            coupon_rate=b["couponRate"],
            maturity_years=b["maturityYears"],
        ),
        market=MarketParams(
            current_rate=m["currentRate"],
            simulated_rate=m["simulatedRate"],
            risk_free_rate=m.get("riskFreeRate"),
        ),
        time=TimeParams(elapsed_days=t.get("elapsedDays", 0.0)),
        costs=CostParams(
            fixed_fee=c.get("fixedFee", 0.0),
            proportional_fee=c.get("proportionalFee", 0.0),
        ),
    )


def output_to_record(out: SimulatorOutput) -> Record:
    pnl, g = out.adjusted_pnl, out.greeks
    return {
        "currentBondPrice": out.current_bond_price,
        "simulatedBondPrice": out.simulated_bond_price,
        "currentWarrantValue": out.current_warrant_value,
        "simulatedWarrantValue": out.simulated_warrant_value,
        "adjustedPnL": {
            "totalInvestment": pnl.total_investment,
            "currentPosition": pnl.current_position,
            "simulatedPosition": pnl.simulated_position,
            "profitLoss": pnl.profit_loss,
            "profitLossPercent": pnl.profit_loss_percent,
        },
        "greeks": {"delta": g.delta, "gamma": g.gamma, "vega": g.vega, "theta": g.theta, "rho": g.rho},
        "duration": out.duration,
        "breakEvenRate": out.break_even_rate,
        "intrinsicValue": out.intrinsic_value,
        "priceChange": out.price_change,
    }


def output_from_record(record: Record) -> SimulatorOutput:
    pnl = record["adjustedPnL"]
    return SimulatorOutput(
        current_bond_price=record["currentBondPrice"],
        simulated_bond_price=record["simulatedBondPrice"],
        current_warrant_value=record["currentWarrantValue"],
        simulated_warrant_value=record["simulatedWarrantValue"],
        adjusted_pnl=PositionPnL(
            total_investment=pnl["totalInvestment"],
            current_position=pnl["currentPosition"],
            simulated_position=pnl["simulatedPosition"],
            profit_loss=pnl["profitLoss"],
            profit_loss_percent=pnl.get("profitLossPercent"),
        ),
        greeks=Greeks(**record["greeks"]),
        duration=record["duration"],
        break_even_rate=record.get("breakEvenRate"),
        intrinsic_value=record.get("intrinsicValue", 0.0),
        price_change=record.get("priceChange", 0.0),
    )


def operation_to_record(op: SavedOperation) -> Record:
    return {"id": op.id, "name": op.name, "input": input_to_record(op.input)}


def operation_from_record(record: Record) -> SavedOperation:
    return SavedOperation(id=str(record["id"]), name=record["name"], input=input_from_record(record["input"]))


def dump_operations(operations: Iterable[SavedOperation], indent: int = 2) -> str:
    return json.dumps([operation_to_record(op) for op in operations], indent=indent)


def load_operations(text: str) -> List[SavedOperation]:
    raw = json.loads(text)
    if not isinstance(raw, list):
        raise ValueError("expected a JSON list of saved operations")
    return [operation_from_record(r) for r in raw]
