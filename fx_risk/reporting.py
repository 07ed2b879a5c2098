"""
Reporting Module
================
Risk-level classification thresholds and the illustrative loss
distribution table shown alongside the engine's metrics.
"""

from typing import List, Tuple

import pandas as pd


# ─────────────────────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────────────────────
SEVERE_LOSS_THRESHOLD: float = -10_000_000.0
HIGH_RISK_THRESHOLD: float = -5_000_000.0

# (scenario, probability, loss in USD millions). Illustrative only,
# not derived from the trade book.
LOSS_DISTRIBUTION: List[Tuple[str, float, float]] = [
    ("Best Case", 0.05, 0.0),
    ("Favorable", 0.25, -2.0),
    ("Expected", 0.40, -5.0),
    ("Adverse", 0.25, -10.0),
    ("Worst Case", 0.05, -20.0),
]


def classify_pnl(pnl: float) -> str:
    """
    Classify a P&L figure for display.

    Returns
    -------
    str
        "positive" for a gain, "negative" for a loss beyond $10M,
        otherwise "neutral".
    """
    if pnl > 0:
        return "positive"
    if pnl < SEVERE_LOSS_THRESHOLD:
        return "negative"
    return "neutral"


def risk_badge(total_pnl: float) -> str:
    return "High Risk" if total_pnl < HIGH_RISK_THRESHOLD else "Moderate Risk"


def loss_distribution() -> pd.DataFrame:
    """Five-bucket loss distribution with columns scenario, probability, loss."""
    return pd.DataFrame(LOSS_DISTRIBUTION, columns=["scenario", "probability", "loss"])
