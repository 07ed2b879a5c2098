"""
Risk Engine Aggregator
======================
Evaluates a trade book under one risk scenario and returns a complete
``RiskMetrics`` snapshot.

Execution Flow:
    1. Total exposure (sum of notionals)
    2. Unhedged P&L at the scenario's shocked rate
    3. Forward rate over a fixed 3-month average maturity
    4. Full-notional hedge cost
    5. Optimal hedge ratio
    6. Hedged P&L
    7. 1-day 95% Parametric VaR
"""

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Sequence

from fx_risk.hedging import (
    calculate_hedge_cost,
    calculate_hedged_pnl,
    calculate_optimal_hedge_ratio,
)
from fx_risk.pnl import calculate_unhedged_pnl
from fx_risk.rates import calculate_shocked_fx_rate
from fx_risk.risk_metrics import calculate_var
from fx_risk.scenario import RiskScenario
from fx_risk.trades import Trade, total_exposure

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────────────────────
# Book-wide maturity assumption for hedge pricing; individual trade
# maturities are not used.
AVERAGE_MATURITY_YEARS: float = 0.25


@dataclass(frozen=True)
class RiskMetrics:
    """Output snapshot of one evaluation."""

    total_exposure_usd: float
    total_pnl: float
    unhedged_pnl: float
    hedged_pnl: float
    optimal_hedge_ratio: float
    hedge_cost: float
    value_at_risk: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def calculate_risk_metrics(
    trades: Sequence[Trade],
    scenario: RiskScenario,
) -> RiskMetrics:
    """
    Run the full risk pipeline for one scenario.

    Parameters
    ----------
    trades : sequence of Trade
        Trade book. An empty book yields zero exposure, P&L and VaR.
    scenario : RiskScenario
        Market state to evaluate.

    Returns
    -------
    RiskMetrics
        All metrics for the scenario; ``total_pnl`` equals
        ``unhedged_pnl``.
    """
    exposure = total_exposure(trades)

    unhedged_pnl = calculate_unhedged_pnl(
        trades, scenario.current_fx_rate, scenario.shocked_fx_rate
    )

    forward_rate = calculate_shocked_fx_rate(
        scenario.current_fx_rate,
        scenario.interest_rate_shock,
        AVERAGE_MATURITY_YEARS,
    )

    hedge_cost = calculate_hedge_cost(exposure, forward_rate, scenario.current_fx_rate)

    optimal_hedge_ratio = calculate_optimal_hedge_ratio(
        exposure, scenario.volatility, hedge_cost
    )

    hedged_pnl = calculate_hedged_pnl(unhedged_pnl, hedge_cost, optimal_hedge_ratio)

    value_at_risk = calculate_var(exposure, scenario.volatility)

    logger.debug(
        "Evaluated %d trades: exposure=%.2f unhedged=%.2f hedge_ratio=%.4f var=%.2f",
        len(trades), exposure, unhedged_pnl, optimal_hedge_ratio, value_at_risk,
    )

    return RiskMetrics(
        total_exposure_usd=exposure,
        total_pnl=unhedged_pnl,
        unhedged_pnl=unhedged_pnl,
        hedged_pnl=hedged_pnl,
        optimal_hedge_ratio=optimal_hedge_ratio,
        hedge_cost=hedge_cost,
        value_at_risk=value_at_risk,
    )
