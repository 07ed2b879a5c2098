"""
P&L Module
==========
Aggregates signed exposure deltas across the trade book under an FX
rate move.

Mathematical Definition:
    ΔS = S_shocked - S_current
    P&L_i = sign_i · N_i · ΔS          sign = +1 long, -1 short
    P&L = Σ_i P&L_i
"""

from typing import Sequence

import numpy as np
import pandas as pd

from fx_risk.trades import Trade


def _signed_notionals(trades: Sequence[Trade]) -> np.ndarray:
    return np.array([t.sign * t.notional_usd for t in trades], dtype=float)


def calculate_unhedged_pnl(
    trades: Sequence[Trade],
    current_rate: float,
    shocked_rate: float,
) -> float:
    """
    Compute aggregate P&L of the unhedged book under a rate move.

    Long positions gain when the rate rises, shorts gain when it falls.

    Parameters
    ----------
    trades : sequence of Trade
        Trade book.
    current_rate : float
        Base FX rate.
    shocked_rate : float
        Comparison FX rate.

    Returns
    -------
    float
        Total P&L in USD (negative = loss). Zero for an empty book.
    """
    rate_delta = shocked_rate - current_rate
    return float(np.sum(_signed_notionals(trades) * rate_delta))


def trade_pnl_contributions(
    trades: Sequence[Trade],
    current_rate: float,
    shocked_rate: float,
) -> pd.Series:
    """
    Per-trade P&L contributions, indexed by trade id.

    The contributions sum to ``calculate_unhedged_pnl`` for the same
    inputs.
    """
    rate_delta = shocked_rate - current_rate
    return pd.Series(
        _signed_notionals(trades) * rate_delta,
        index=pd.Index([t.id for t in trades], name="id"),
        name="pnl",
        dtype=float,
    )
