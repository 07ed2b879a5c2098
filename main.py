"""
FX Treasury Risk Engine: Main Orchestrator
==========================================
Entry point for the complete treasury risk pipeline.

Execution Flow:
    1. Scenario parameters & validation
    2. Trade book generation
    3. Rate shock scenario
    4. Risk metrics (P&L, hedge cost, hedge ratio, VaR)
    5. VaR grid across confidence levels and horizons
    6. P&L sensitivity curve
    7. Loss distribution & risk summary
"""

import logging
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from fx_risk.engine import calculate_risk_metrics
from fx_risk.reporting import classify_pnl, loss_distribution, risk_badge
from fx_risk.risk_metrics import var_report
from fx_risk.scenario import (
    DEFAULT_PARAMETERS,
    ScenarioParameters,
    build_risk_scenario,
    validate_parameters,
)
from fx_risk.sensitivity import generate_pnl_sensitivity
from fx_risk.trades import generate_fx_trades, get_book_summary

# ─────────────────────────────────────────────────────────────
# Configuration
# ─────────────────────────────────────────────────────────────
RANDOM_SEED: Optional[int] = 42
SENSITIVITY_SHOCK_RANGE = 0.5
SENSITIVITY_STEPS = 50
VAR_CONFIDENCE_LEVELS = [0.95, 0.99]
VAR_HORIZONS = [1, 10, 30]
LOG_LEVEL = logging.INFO


def print_header(text: str) -> None:
    """Print formatted section header."""
    width = 60
    print("\n" + "=" * width)
    print(f"  {text}")
    print("=" * width)


def print_metrics(metrics: dict, indent: int = 4) -> None:
    """Print dictionary of metrics with formatting."""
    prefix = " " * indent
    for key, val in metrics.items():
        if isinstance(val, float):
            print(f"{prefix}{key:.<35} {val:>16,.4f}")
        else:
            print(f"{prefix}{key:.<35} {str(val):>16}")


def run_simulation(
    params: ScenarioParameters = DEFAULT_PARAMETERS,
    seed: Optional[int] = RANDOM_SEED,
) -> Dict[str, Any]:
    """
    Run the full pipeline for one parameter snapshot.

    Parameters
    ----------
    params : ScenarioParameters
        Simulation inputs.
    seed : int, optional
        Seed for trade generation; None draws a fresh book each run.

    Returns
    -------
    dict
        trades, book_summary, scenario, metrics, var_grid, sensitivity.
    """
    validate_parameters(params)

    rng = np.random.default_rng(seed)
    trades = generate_fx_trades(params.number_of_trades, rng=rng)
    scenario = build_risk_scenario(params)
    metrics = calculate_risk_metrics(trades, scenario)

    return {
        "trades": trades,
        "book_summary": get_book_summary(trades),
        "scenario": scenario,
        "metrics": metrics,
        "var_grid": var_report(
            metrics.total_exposure_usd,
            params.volatility,
            VAR_CONFIDENCE_LEVELS,
            VAR_HORIZONS,
        ),
        "sensitivity": generate_pnl_sensitivity(
            trades,
            params.current_fx_rate,
            SENSITIVITY_SHOCK_RANGE,
            SENSITIVITY_STEPS,
        ),
    }


def main(params: ScenarioParameters = DEFAULT_PARAMETERS) -> None:
    """Execute the complete risk engine pipeline."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("\n" + "╔" + "═" * 58 + "╗")
    print("║   FX TREASURY RISK ENGINE                               ║")
    print("║   USD/MYR Unhedged Exposure Simulator                   ║")
    print("╚" + "═" * 58 + "╝")

    # ── PHASE 1: Parameters & Book ────────────────────────────
    print_header("PHASE 1 — SCENARIO PARAMETERS & TRADE BOOK")

    results = run_simulation(params)
    scenario = results["scenario"]
    metrics = results["metrics"]

    print("\n  Parameters:")
    print_metrics(vars(params))

    print("\n  Book Summary:")
    print_metrics(results["book_summary"])

    # ── PHASE 2: Scenario ─────────────────────────────────────
    print_header("PHASE 2 — RATE SHOCK SCENARIO")

    print(f"\n  Current FX Rate:   {scenario.current_fx_rate:.4f} MYR/USD")
    print(f"  Shocked FX Rate:   {scenario.shocked_fx_rate:.4f} MYR/USD")
    print(f"  Rate Shock:        {scenario.interest_rate_shock} bps")

    # ── PHASE 3: Risk Metrics ─────────────────────────────────
    print_header("PHASE 3 — RISK METRICS")

    print_metrics(metrics.to_dict())
    print(f"\n    Unhedged P&L trend: {classify_pnl(metrics.unhedged_pnl)}")
    print(f"    Risk level:         {risk_badge(metrics.total_pnl)}")

    # ── PHASE 4: VaR Grid ─────────────────────────────────────
    print_header("PHASE 4 — VALUE AT RISK GRID")

    print("\n" + results["var_grid"].to_string(float_format=lambda x: f"{x:,.2f}"))

    # ── PHASE 5: Sensitivity ──────────────────────────────────
    print_header("PHASE 5 — P&L SENSITIVITY (USD MILLIONS)")

    sensitivity = results["sensitivity"]
    sampled = sensitivity.iloc[:: max(1, SENSITIVITY_STEPS // 10)]
    print("\n" + sampled.to_string(index=False, float_format=lambda x: f"{x:.4f}"))

    # ── PHASE 6: Loss Distribution ────────────────────────────
    print_header("PHASE 6 — ILLUSTRATIVE LOSS DISTRIBUTION")

    print("\n" + loss_distribution().to_string(index=False))

    # ── Results Summary Table ─────────────────────────────────
    print_header("RISK SUMMARY")

    summary = pd.DataFrame({
        "Metric": [
            "Value at Risk (95%)",
            "Unhedged P&L",
            "Hedge Cost",
            "Optimal Hedge %",
            "Hedged P&L",
        ],
        "Value": [
            f"${metrics.value_at_risk / 1_000_000:,.2f}M",
            f"${metrics.unhedged_pnl / 1_000_000:,.2f}M",
            f"${abs(metrics.hedge_cost) / 1_000_000:,.2f}M",
            f"{metrics.optimal_hedge_ratio * 100:.1f}%",
            f"${metrics.hedged_pnl / 1_000_000:,.2f}M",
        ],
    })
    print("\n" + summary.to_string(index=False))

    print("\n" + "╔" + "═" * 58 + "╗")
    print("║   RISK ENGINE EXECUTION COMPLETE                        ║")
    print("╚" + "═" * 58 + "╝\n")


if __name__ == "__main__":
    main()
