"""
Hedging Module
==============
Forward hedge cost, the cost/benefit optimal hedge ratio, and the
blended hedged P&L.

Mathematical Foundation:
    Hedge cost:       C = N · h · (F - S)
    Cost penalty:     p = |C| / E
    Vol benefit:      b = σ · λ
    Optimal ratio:    h* = clip(b / (b + p), 0, 1)
    Hedged P&L:       P&L_h = P&L_u · (1 - h*) - C · h*

The ratio is a heuristic, not a mean-variance optimization: it rises
with volatility σ and risk aversion λ and falls with relative hedge cost.
"""

import numpy as np

from fx_risk.rates import calculate_forward_points


# ─────────────────────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────────────────────
DEFAULT_HEDGE_RATIO: float = 1.0
DEFAULT_RISK_AVERSION: float = 0.5


def calculate_hedge_cost(
    notional_usd: float,
    forward_rate: float,
    spot_rate: float,
    hedge_ratio: float = DEFAULT_HEDGE_RATIO,
) -> float:
    """
    Compute the cost of locking in the forward rate on the hedged notional.

    Parameters
    ----------
    notional_usd : float
        Notional to hedge.
    forward_rate : float
        Forward rate.
    spot_rate : float
        Spot rate.
    hedge_ratio : float
        Fraction of notional hedged (default: 1.0).

    Returns
    -------
    float
        Forward premium cost (negative = benefit).
    """
    return notional_usd * hedge_ratio * calculate_forward_points(forward_rate, spot_rate)


def calculate_optimal_hedge_ratio(
    total_exposure: float,
    expected_volatility: float,
    hedge_cost: float,
    risk_aversion: float = DEFAULT_RISK_AVERSION,
) -> float:
    """
    Balance volatility benefit against relative hedge cost.

    Parameters
    ----------
    total_exposure : float
        Gross book exposure in USD. A zero exposure carries no cost
        pressure, so the ratio is driven by volatility alone.
    expected_volatility : float
        Annualized volatility.
    hedge_cost : float
        Full-notional hedge cost (sign ignored).
    risk_aversion : float
        Risk aversion weight (default: 0.5).

    Returns
    -------
    float
        Hedge ratio in [0, 1]. Zero when benefit and penalty sum to zero,
        including the 0/0 case of no volatility and no hedge cost. An
        overflowing benefit resolves to 1.0 when positive, else 0.0.
    """
    cost_penalty = abs(hedge_cost) / total_exposure if total_exposure != 0 else 0.0
    volatility_benefit = expected_volatility * risk_aversion

    denominator = volatility_benefit + cost_penalty
    if denominator == 0:
        return 0.0

    raw = volatility_benefit / denominator
    # inf/inf when the benefit overflows
    if np.isnan(raw):
        return 1.0 if volatility_benefit == np.inf else 0.0

    return float(np.clip(raw, 0.0, 1.0))


def calculate_hedged_pnl(
    unhedged_pnl: float,
    hedge_cost: float,
    hedge_ratio: float,
) -> float:
    """Blend unhedged P&L with the cost of hedging ``hedge_ratio`` of the book."""
    return unhedged_pnl * (1 - hedge_ratio) - hedge_cost * hedge_ratio
