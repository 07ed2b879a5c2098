"""
Rate Shock Model
================
Maps a spot USD/MYR rate and an interest-rate shock to a shocked
forward-equivalent rate.

Mathematical Definition:
    F = S · (1 + (Δr_bps / 10,000) · T)

A first-order linear interest-rate-parity adjustment; the USD rate leg
is not modelled.
"""

# ─────────────────────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────────────────────
BPS_PER_UNIT: float = 10_000.0


def calculate_shocked_fx_rate(
    current_rate: float,
    interest_rate_shock_bps: float,
    time_to_maturity: float = 1.0,
) -> float:
    """
    Compute the FX rate after an interest-rate shock.

    Parameters
    ----------
    current_rate : float
        Spot rate (MYR per USD).
    interest_rate_shock_bps : float
        Rate shock in basis points; negative shocks move the rate down.
    time_to_maturity : float
        Time fraction in years (default: 1.0). Zero returns the spot.

    Returns
    -------
    float
        Shocked rate.
    """
    shock_decimal = interest_rate_shock_bps / BPS_PER_UNIT
    return current_rate * (1 + shock_decimal * time_to_maturity)


def calculate_forward_points(forward_rate: float, spot_rate: float) -> float:
    """Forward points: forward minus spot, in MYR per USD."""
    return forward_rate - spot_rate
