"""
Sensitivity Module
==================
Sweeps the FX rate symmetrically around a base rate and re-prices the
unhedged book at each point to produce a plottable P&L curve.

Grid:
    S_i = S_0 - R + 2R · i / n,      i = 0 … n
    P&L_i = P&L(book, S_0, S_i) / 1,000,000
    P&L_i^hedged = 0.3 · P&L_i
"""

from typing import Sequence

import numpy as np
import pandas as pd

from fx_risk.pnl import calculate_unhedged_pnl
from fx_risk.trades import Trade


# ─────────────────────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────────────────────
DEFAULT_SHOCK_RANGE: float = 0.5
DEFAULT_STEPS: int = 50
PNL_SCALE: float = 1_000_000.0

# Fixed illustrative 70% hedge, independent of the optimizer's ratio.
SENSITIVITY_RESIDUAL_EXPOSURE: float = 0.3


def generate_pnl_sensitivity(
    trades: Sequence[Trade],
    base_rate: float,
    shock_range: float = DEFAULT_SHOCK_RANGE,
    steps: int = DEFAULT_STEPS,
) -> pd.DataFrame:
    """
    Generate the P&L sensitivity curve.

    Parameters
    ----------
    trades : sequence of Trade
        Trade book.
    base_rate : float
        Centre of the sweep and the P&L reference rate.
    shock_range : float
        Half-width of the sweep in rate units (default: 0.5).
    steps : int
        Number of intervals; the curve has ``steps + 1`` points
        (default: 50).

    Returns
    -------
    pd.DataFrame
        Columns: fx_rate, pnl, hedged_pnl (P&L in USD millions),
        ordered by increasing fx_rate.

    Raises
    ------
    ValueError
        If ``steps`` is not a positive integer or ``shock_range`` is
        not positive.
    """
    if isinstance(steps, bool) or not isinstance(steps, (int, np.integer)) or steps <= 0:
        raise ValueError(f"steps must be a positive integer, got {steps!r}")
    if not shock_range > 0:
        raise ValueError(f"shock_range must be positive, got {shock_range!r}")

    rows = []
    for i in range(steps + 1):
        rate = base_rate - shock_range + (2 * shock_range * i) / steps
        pnl = calculate_unhedged_pnl(trades, base_rate, rate)
        hedged_pnl = pnl * SENSITIVITY_RESIDUAL_EXPOSURE

        rows.append({
            "fx_rate": rate,
            "pnl": pnl / PNL_SCALE,
            "hedged_pnl": hedged_pnl / PNL_SCALE,
        })

    return pd.DataFrame(rows, columns=["fx_rate", "pnl", "hedged_pnl"])
