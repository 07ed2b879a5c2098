"""
Risk Metrics Module
====================
Implements Parametric (Variance-Covariance) VaR for the FX book.

Mathematical Foundation:
    Scaled vol:   σ_h = σ_annual · √(h / 252)
    VaR:          VaR = E · σ_h · z

The z-score is a two-bucket lookup: exactly 0.95 maps to 1.645, any
other confidence level maps to the 99% value 2.33.
"""

import math
from typing import Dict, Sequence

import pandas as pd


# ─────────────────────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────────────────────
Z_SCORE_95: float = 1.645
Z_SCORE_99: float = 2.33
TRADING_DAYS_PER_YEAR: int = 252

DEFAULT_CONFIDENCE: float = 0.95
DEFAULT_HORIZON_DAYS: float = 1


def get_z_score(confidence_level: float) -> float:
    """Return 1.645 for 0.95, else 2.33."""
    return Z_SCORE_95 if confidence_level == 0.95 else Z_SCORE_99


def calculate_var(
    total_exposure: float,
    volatility: float,
    confidence_level: float = DEFAULT_CONFIDENCE,
    time_horizon_days: float = DEFAULT_HORIZON_DAYS,
) -> float:
    """
    Compute Parametric VaR for a gross exposure.

    Parameters
    ----------
    total_exposure : float
        Gross exposure in USD.
    volatility : float
        Annualized volatility.
    confidence_level : float
        Confidence level (default: 0.95).
    time_horizon_days : float
        Horizon in trading days (default: 1).

    Returns
    -------
    float
        VaR in USD (positive = loss magnitude).

    Raises
    ------
    ValueError
        If ``time_horizon_days`` is negative.
    """
    if time_horizon_days < 0:
        raise ValueError(
            f"time_horizon_days must be non-negative, got {time_horizon_days!r}"
        )

    z_score = get_z_score(confidence_level)
    scaled_volatility = volatility * math.sqrt(time_horizon_days / TRADING_DAYS_PER_YEAR)
    return total_exposure * scaled_volatility * z_score


def var_report(
    total_exposure: float,
    volatility: float,
    confidence_levels: Sequence[float] = (0.95, 0.99),
    horizons: Sequence[float] = (1, 10),
) -> pd.DataFrame:
    """
    Compute a VaR grid across confidence levels and horizons.

    Parameters
    ----------
    total_exposure : float
        Gross exposure in USD.
    volatility : float
        Annualized volatility.
    confidence_levels : sequence of float
        Row labels.
    horizons : sequence of float
        Column labels, in days.

    Returns
    -------
    pd.DataFrame
        VaR values indexed by confidence level, one column per horizon.
    """
    grid: Dict[float, Dict[float, float]] = {
        conf: {
            h: calculate_var(total_exposure, volatility, conf, h)
            for h in horizons
        }
        for conf in confidence_levels
    }
    report = pd.DataFrame.from_dict(grid, orient="index", columns=list(horizons))
    report.index.name = "confidence_level"
    report.columns.name = "horizon_days"
    return report
